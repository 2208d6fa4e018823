from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, dcc, exceptions

from product_dashboard.services.export_service import SCOPE_ALL, SCOPE_PAGE
from product_dashboard.ui.callbacks.callbacks_utils import was_clicked
from product_dashboard.ui.ids import IDs

if TYPE_CHECKING:
    from product_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)


def export_scope_for(trigger_id) -> str:
    return SCOPE_PAGE if trigger_id == IDs.Control.EXPORT_PAGE_BTN else SCOPE_ALL


def register_export_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # CSV export: whole filtered view or the visible page
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_CSV, "data"),
        Input(IDs.Control.EXPORT_ALL_BTN, "n_clicks"),
        Input(IDs.Control.EXPORT_PAGE_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def download_csv(_all_clicks, _page_clicks):
        if not was_clicked() or not ctx.store.loaded:
            raise exceptions.PreventUpdate

        scope = export_scope_for(dash.ctx.triggered_id)
        filename, text = ctx.export_service.export(ctx.store, scope)
        return dcc.send_string(text, filename)
