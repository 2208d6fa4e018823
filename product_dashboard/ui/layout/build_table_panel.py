from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from product_dashboard.ui.ids import IDs


def build_table_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardBody(
                dcc.Loading(
                    id="product-table-loading",
                    type="default",
                    children=html.Div(id=IDs.Control.TABLE_CONTAINER),
                ),
                className="p-0",
            ),
            dbc.CardFooter(
                html.Div(
                    [
                        html.Small(id=IDs.Control.PAGE_INFO, className="text-muted"),
                        html.Div(
                            [
                                dbc.Button("Previous", id=IDs.Control.PREV_PAGE, size="sm",
                                           color="secondary", outline=True, className="me-2"),
                                html.Div(id=IDs.Control.PAGE_BUTTONS, className="d-inline-flex me-1"),
                                dbc.Button("Next", id=IDs.Control.NEXT_PAGE, size="sm",
                                           color="secondary", outline=True),
                            ],
                            className="ms-auto d-flex align-items-center",
                        ),
                    ],
                    className="d-flex align-items-center",
                )
            ),
        ],
        className="mt-3 pd-table-card",
    )
