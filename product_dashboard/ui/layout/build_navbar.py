from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from product_dashboard.config.model import DashboardSettings
from product_dashboard.ui.ids import IDs


def build_navbar(settings: DashboardSettings) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                # Left: title
                html.Div(
                    [
                        html.H2(settings.ui_title, className="mb-0"),
                        html.Small(settings.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),

                # Right: count + refresh
                html.Div(
                    [
                        html.Span(
                            [
                                html.Strong("0", id=IDs.Control.PRODUCT_COUNT),
                                " products",
                            ],
                            className="me-3",
                        ),
                        dbc.Button(
                            "Refresh",
                            id=IDs.Control.REFRESH_BTN,
                            color="secondary",
                            outline=True,
                            size="sm",
                        ),
                    ],
                    className="ms-auto d-flex align-items-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm pd-navbar",
    )
