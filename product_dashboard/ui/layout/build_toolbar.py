from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from product_dashboard.config.model import DashboardSettings
from product_dashboard.core.view_state import ViewState
from product_dashboard.ui.ids import IDs


def build_toolbar(settings: DashboardSettings, view: ViewState) -> dbc.Card:
    # Seeded from the live store so a rebuilt page shows the filter in effect
    sizes = sorted(set(settings.page_size_options) | {view.page_size})
    return dbc.Card(
        dbc.CardBody(
            dbc.Row(
                [
                    dbc.Col(
                        dbc.Input(
                            id=IDs.Control.SEARCH_INPUT,
                            type="search",
                            placeholder="Search title, description or category...",
                            debounce=False,
                            value=view.search_term,
                        ),
                        md=5,
                    ),
                    dbc.Col(
                        dbc.InputGroup(
                            [
                                dbc.InputGroupText("Rows"),
                                dbc.Select(
                                    id=IDs.Control.PAGE_SIZE_SELECT,
                                    options=[
                                        {"label": str(n), "value": str(n)}
                                        for n in sizes
                                    ],
                                    value=str(view.page_size),
                                ),
                            ],
                            size="sm",
                        ),
                        md=2,
                    ),
                    dbc.Col(
                        [
                            dbc.Button("New product", id=IDs.Control.CREATE_BTN, color="primary",
                                       size="sm", className="me-2"),
                            dbc.Button("Export all (CSV)", id=IDs.Control.EXPORT_ALL_BTN, color="secondary",
                                       size="sm", outline=True, className="me-2"),
                            dbc.Button("Export page (CSV)", id=IDs.Control.EXPORT_PAGE_BTN, color="secondary",
                                       size="sm", outline=True),
                            dcc.Download(id=IDs.Control.DOWNLOAD_CSV),
                        ],
                        md=5,
                        className="d-flex justify-content-end align-items-center",
                    ),
                ],
                className="g-2 align-items-center",
            )
        ),
        className="mt-3 pd-toolbar",
    )
