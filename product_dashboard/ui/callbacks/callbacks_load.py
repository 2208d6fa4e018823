from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional

import dash
from dash import Input, Output, State

from product_dashboard.core.exceptions import ProductApiError
from product_dashboard.core.view_state import ViewState
from product_dashboard.ui.helpers import status_alert
from product_dashboard.ui.ids import IDs

if TYPE_CHECKING:
    from product_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load products from API. Please check your connection."
CONNECT_FAILED_MESSAGE = "Cannot connect to API. Please check your internet connection and try again."


def saved_view_state(ctx: AppConfig, data: Optional[Mapping[str, Any]]) -> ViewState:
    """ViewState kept in the browser session, or the configured defaults for a new tab."""
    if not data:
        return ViewState(page_size=ctx.settings.page_size)
    return ViewState.from_dict(dict(data))


def load_products(ctx: AppConfig, view: Optional[ViewState] = None) -> tuple:
    """
    Fetch the whole collection into the store, then apply `view` if given.

    The connectivity check only runs while nothing has been loaded yet.

    :return: (revision, show_load_error, load_error_text, banner)
    """
    if not ctx.store.loaded and not ctx.api.ping():
        logger.error("API connectivity check failed", extra={"api_url": ctx.settings.api_url})
        return dash.no_update, True, CONNECT_FAILED_MESSAGE, None

    error: Optional[ProductApiError] = None
    try:
        products = ctx.coordinator.load()
    except ProductApiError as e:
        logger.error("Product load failed: %s", e)
        error = e

    # Restored after the fetch so the page cursor is clamped against real data
    if view is not None:
        ctx.store.restore(view)

    if error is not None:
        if not ctx.store.loaded:
            # Nothing to show yet: terminal error panel with a manual reload
            return dash.no_update, True, f"{LOAD_FAILED_MESSAGE} ({error})", None
        banner = status_alert(f"Refresh failed: {error}", "danger")
        revision = ctx.store.revision if view is not None else dash.no_update
        return revision, False, dash.no_update, banner

    logger.info("Products loaded", extra={"n_products": len(products)})
    return ctx.store.revision, False, "", None


def register_load_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Initial load (fires on page load) + refresh / reload buttons
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_REVISION, "data"),
        Output(IDs.Control.LOAD_ERROR, "is_open"),
        Output(IDs.Control.LOAD_ERROR_TEXT, "children"),
        Output(IDs.Control.STATUS_BANNER, "children"),
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Output(IDs.Control.PAGE_SIZE_SELECT, "value"),
        Output(IDs.Store.VIEW_STATE, "data"),
        Input(IDs.Control.REFRESH_BTN, "n_clicks"),
        Input(IDs.Control.RELOAD_BTN, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        running=[
            (Output(IDs.Control.REFRESH_BTN, "disabled"), True, False),
            (Output(IDs.Control.RELOAD_BTN, "disabled"), True, False),
        ],
    )
    def load_or_refresh(_refresh_clicks, _reload_clicks, saved_view):
        # No trigger: fresh page load, so bring back this tab's view
        page_load = dash.ctx.triggered_id is None
        view = saved_view_state(ctx, saved_view) if page_load else None

        result = load_products(ctx, view)

        if not page_load:
            return (*result, dash.no_update, dash.no_update, dash.no_update)
        current = ctx.store.snapshot()
        return (*result, current.search_term, str(current.page_size), current.to_dict())
