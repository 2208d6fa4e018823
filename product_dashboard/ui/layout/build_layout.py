from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from product_dashboard.ui.ids import IDs
from product_dashboard.ui.layout.build_modals import build_modals
from product_dashboard.ui.layout.build_navbar import build_navbar
from product_dashboard.ui.layout.build_table_panel import build_table_panel
from product_dashboard.ui.layout.build_toolbar import build_toolbar

if TYPE_CHECKING:
    from product_dashboard.ui.config import AppConfig


def build_load_error() -> dbc.Alert:
    return dbc.Alert(
        [
            html.H5("Error Loading Data", className="alert-heading"),
            html.P(id=IDs.Control.LOAD_ERROR_TEXT, className="mb-2"),
            dbc.Button("Reload", id=IDs.Control.RELOAD_BTN, color="danger", outline=True, size="sm"),
        ],
        id=IDs.Control.LOAD_ERROR,
        color="danger",
        is_open=False,
        className="mt-3",
    )


def build_layout(ctx: "AppConfig"):
    return dbc.Container(
        fluid=True,
        className="pd-root",
        children=[
            build_navbar(ctx.settings),

            # App-level stores
            dcc.Store(id=IDs.Store.VIEW_REVISION, data=0),
            dcc.Store(id=IDs.Store.EDIT_TARGET),
            dcc.Store(id=IDs.Store.DELETE_TARGET),
            dcc.Store(id=IDs.Store.VIEW_STATE, storage_type="session"),

            build_load_error(),
            html.Div(id=IDs.Control.STATUS_BANNER, className="mt-3"),
            build_toolbar(ctx.settings, ctx.store.snapshot()),
            build_table_panel(),
            *build_modals(),
        ],
    )
