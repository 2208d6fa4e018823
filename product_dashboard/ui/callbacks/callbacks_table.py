from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional

import dash
from dash import ALL, Input, Output, exceptions, html

from product_dashboard.core.view_state import coerce_int
from product_dashboard.ui.callbacks.callbacks_utils import triggered_value
from product_dashboard.ui.helpers import page_buttons, page_info_text, product_table
from product_dashboard.ui.ids import IDs

if TYPE_CHECKING:
    from product_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)


def apply_view_control(
    ctx: AppConfig,
    triggered_id: Any,
    clicked: Any,
    search_value: Optional[str],
    page_size_value: Any,
) -> bool:
    """
    Translate one UI event into a DataStore transition.

    :return: True if the store changed and the table needs a repaint
    """
    store = ctx.store
    revision = store.revision

    # Widgets set to what the store already holds (page load, restore) are no-ops
    if triggered_id == IDs.Control.SEARCH_INPUT:
        if str(search_value or "").lower() != store.search_term:
            store.set_search_term(search_value)
    elif triggered_id == IDs.Control.PAGE_SIZE_SELECT:
        if coerce_int(page_size_value, store.page_size) != store.page_size:
            store.set_page_size(page_size_value)
    elif triggered_id == IDs.Control.PREV_PAGE:
        if clicked:
            store.previous_page()
    elif triggered_id == IDs.Control.NEXT_PAGE:
        if clicked:
            store.next_page()
    elif isinstance(triggered_id, Mapping):
        kind = triggered_id.get("type")
        if not clicked:
            return False
        if kind == IDs.Pattern.SORT_HEADER:
            store.set_sort(triggered_id.get("column"))
        elif kind == IDs.Pattern.PAGE_BUTTON:
            store.set_page(triggered_id.get("index"))

    return store.revision != revision


def render_view(ctx: AppConfig) -> tuple:
    """
    :return: (table, page_info, page_buttons, prev_disabled, next_disabled, product_count)
    """
    store = ctx.store
    if not store.loaded:
        placeholder = html.Div("Loading products...", className="text-center text-muted py-4")
        return placeholder, "", [], True, True, "0"

    projection = store.projection()
    view = store.snapshot()
    return (
        product_table(projection, view, ctx.status_policy),
        page_info_text(projection),
        page_buttons(projection),
        not projection.has_previous,
        not projection.has_next,
        str(projection.total_items),
    )


def register_table_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Search / sort / paging controls -> DataStore
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_REVISION, "data", allow_duplicate=True),
        Output(IDs.Store.VIEW_STATE, "data", allow_duplicate=True),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.PAGE_SIZE_SELECT, "value"),
        Input({"type": IDs.Pattern.SORT_HEADER, "column": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.PAGE_BUTTON, "index": ALL}, "n_clicks"),
        Input(IDs.Control.PREV_PAGE, "n_clicks"),
        Input(IDs.Control.NEXT_PAGE, "n_clicks"),
        prevent_initial_call=True,
    )
    def update_view_state(search_value, page_size_value, _sort_clicks, _page_clicks, _prev, _next):
        changed = apply_view_control(
            ctx,
            dash.ctx.triggered_id,
            triggered_value(),
            search_value,
            page_size_value,
        )
        if not changed:
            raise exceptions.PreventUpdate
        return ctx.store.revision, ctx.store.snapshot().to_dict()

    # ---------------------------------------------------------
    # Repaint: revision -> table + pagination
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_CONTAINER, "children"),
        Output(IDs.Control.PAGE_INFO, "children"),
        Output(IDs.Control.PAGE_BUTTONS, "children"),
        Output(IDs.Control.PREV_PAGE, "disabled"),
        Output(IDs.Control.NEXT_PAGE, "disabled"),
        Output(IDs.Control.PRODUCT_COUNT, "children"),
        Input(IDs.Store.VIEW_REVISION, "data"),
    )
    def repaint(_revision):
        try:
            return render_view(ctx)
        except Exception:
            logger.exception("Error rendering product table")
            message = html.Div(
                "Something went wrong while rendering the table.",
                className="text-center text-danger py-4",
            )
            return message, "", [], True, True, dash.no_update
