from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

import dash
from dash import ALL, Input, Output, State, exceptions, html

from product_dashboard.core.exceptions import ProductApiError, ProductNotFoundError
from product_dashboard.ui.callbacks.callbacks_utils import was_clicked
from product_dashboard.ui.helpers import form_values, product_detail, status_alert
from product_dashboard.ui.ids import Action, IDs
from product_dashboard.validation.errors import ValidationError

if TYPE_CHECKING:
    from product_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)

NO_UPDATE = dash.no_update


def _row_action(action: str) -> dict:
    return {"type": IDs.Pattern.ROW_ACTION, "action": action, "index": ALL}


def _not_found_alert(e: ProductNotFoundError) -> Any:
    return status_alert(
        f"Product {e.product_id} no longer exists. The list may be out of date; try Refresh.",
        "warning",
    )


# -----------------------------------------------------------------------------
# Pure handlers (unit-tested without a running Dash server)
# -----------------------------------------------------------------------------
def open_detail(ctx: AppConfig, product_id: Any) -> tuple:
    """:return: (is_open, body, banner)"""
    try:
        product = ctx.store.get_product(product_id)
    except ProductNotFoundError as e:
        return False, NO_UPDATE, _not_found_alert(e)
    return True, product_detail(product, ctx.status_policy), NO_UPDATE


def open_form(ctx: AppConfig, product_id: Optional[Any]) -> tuple:
    """
    :return: (is_open, header, title, price, description, category, images, errors, edit_target, banner)
    """
    if product_id is None:
        return (True, "New product", *form_values(None), None, None, NO_UPDATE)

    try:
        product = ctx.store.get_product(product_id)
    except ProductNotFoundError as e:
        return (False,) + (NO_UPDATE,) * 8 + (_not_found_alert(e),)

    return (True, f"Edit product #{product.id}", *form_values(product), None, str(product.id), NO_UPDATE)


def submit_form(ctx: AppConfig, edit_target: Optional[str], form: Dict[str, Any]) -> tuple:
    """
    Create or update, then reconcile.

    :return: (form_open, form_errors, revision, banner)
    """
    try:
        if edit_target is None:
            result = ctx.coordinator.create(form)
        else:
            result = ctx.coordinator.update(edit_target, form)
    except ValidationError as e:
        errors = [html.Li(issue.message) for issue in e.issues]
        return NO_UPDATE, status_alert(html.Ul(errors, className="mb-0"), "danger"), NO_UPDATE, NO_UPDATE
    except ProductNotFoundError as e:
        return False, None, NO_UPDATE, _not_found_alert(e)
    except ProductApiError as e:
        logger.error("Save failed: %s", e)
        return NO_UPDATE, status_alert(f"Save failed: {e}", "danger"), NO_UPDATE, NO_UPDATE

    return False, None, ctx.store.revision, status_alert(result.message, "success")


def open_delete(ctx: AppConfig, product_id: Any) -> tuple:
    """:return: (is_open, body, delete_target, banner)"""
    try:
        product = ctx.store.get_product(product_id)
    except ProductNotFoundError as e:
        return False, NO_UPDATE, None, _not_found_alert(e)
    body = html.P(["Delete ", html.Strong(product.title), f" (#{product.id})? This cannot be undone."])
    return True, body, str(product.id), NO_UPDATE


def confirm_delete(ctx: AppConfig, delete_target: Optional[str]) -> tuple:
    """:return: (is_open, revision, banner)"""
    if delete_target is None:
        return False, NO_UPDATE, NO_UPDATE
    try:
        result = ctx.coordinator.delete(delete_target)
    except ProductNotFoundError as e:
        return False, NO_UPDATE, _not_found_alert(e)
    except ProductApiError as e:
        logger.error("Delete failed: %s", e)
        return False, NO_UPDATE, status_alert(f"Delete failed: {e}", "danger")
    return False, ctx.store.revision, status_alert(result.message, "success")


def register_product_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # 1. Detail modal
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DETAIL_MODAL, "is_open"),
        Output(IDs.Control.DETAIL_BODY, "children"),
        Output(IDs.Control.STATUS_BANNER, "children", allow_duplicate=True),
        Input(_row_action(Action.VIEW), "n_clicks"),
        Input(IDs.Control.DETAIL_CLOSE, "n_clicks"),
        prevent_initial_call=True,
    )
    def toggle_detail(_view_clicks, _close_clicks):
        trigger = dash.ctx.triggered_id
        if trigger == IDs.Control.DETAIL_CLOSE:
            return False, NO_UPDATE, NO_UPDATE
        if not was_clicked():
            raise exceptions.PreventUpdate
        return open_detail(ctx, trigger["index"])

    # ---------------------------------------------------------
    # 2. Create / edit modal (open + cancel)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.FORM_MODAL, "is_open"),
        Output(IDs.Control.FORM_HEADER, "children"),
        Output(IDs.Control.FORM_TITLE, "value"),
        Output(IDs.Control.FORM_PRICE, "value"),
        Output(IDs.Control.FORM_DESCRIPTION, "value"),
        Output(IDs.Control.FORM_CATEGORY, "value"),
        Output(IDs.Control.FORM_IMAGES, "value"),
        Output(IDs.Control.FORM_ERRORS, "children"),
        Output(IDs.Store.EDIT_TARGET, "data"),
        Output(IDs.Control.STATUS_BANNER, "children", allow_duplicate=True),
        Input(IDs.Control.CREATE_BTN, "n_clicks"),
        Input(_row_action(Action.EDIT), "n_clicks"),
        Input(IDs.Control.FORM_CANCEL, "n_clicks"),
        prevent_initial_call=True,
    )
    def toggle_form(_create_clicks, _edit_clicks, _cancel_clicks):
        trigger = dash.ctx.triggered_id
        if trigger == IDs.Control.FORM_CANCEL:
            return (False,) + (NO_UPDATE,) * 6 + (None, None, NO_UPDATE)
        if not was_clicked():
            raise exceptions.PreventUpdate
        if trigger == IDs.Control.CREATE_BTN:
            return open_form(ctx, None)
        return open_form(ctx, trigger["index"])

    # ---------------------------------------------------------
    # 3. Create / edit submit (button disabled while in flight)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.FORM_MODAL, "is_open", allow_duplicate=True),
        Output(IDs.Control.FORM_ERRORS, "children", allow_duplicate=True),
        Output(IDs.Store.VIEW_REVISION, "data", allow_duplicate=True),
        Output(IDs.Control.STATUS_BANNER, "children", allow_duplicate=True),
        Input(IDs.Control.FORM_SUBMIT, "n_clicks"),
        State(IDs.Control.FORM_TITLE, "value"),
        State(IDs.Control.FORM_PRICE, "value"),
        State(IDs.Control.FORM_DESCRIPTION, "value"),
        State(IDs.Control.FORM_CATEGORY, "value"),
        State(IDs.Control.FORM_IMAGES, "value"),
        State(IDs.Store.EDIT_TARGET, "data"),
        running=[(Output(IDs.Control.FORM_SUBMIT, "disabled"), True, False)],
        prevent_initial_call=True,
    )
    def save_product(n_clicks, title, price, description, category_id, images, edit_target):
        if not n_clicks:
            raise exceptions.PreventUpdate
        form = {
            "title": title,
            "price": price,
            "description": description,
            "category_id": category_id,
            "images": images,
        }
        return submit_form(ctx, edit_target, form)

    # ---------------------------------------------------------
    # 4. Delete confirmation (open + cancel)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DELETE_MODAL, "is_open"),
        Output(IDs.Control.DELETE_BODY, "children"),
        Output(IDs.Store.DELETE_TARGET, "data"),
        Output(IDs.Control.STATUS_BANNER, "children", allow_duplicate=True),
        Input(_row_action(Action.DELETE), "n_clicks"),
        Input(IDs.Control.DELETE_CANCEL, "n_clicks"),
        prevent_initial_call=True,
    )
    def toggle_delete(_delete_clicks, _cancel_clicks):
        trigger = dash.ctx.triggered_id
        if trigger == IDs.Control.DELETE_CANCEL:
            return False, NO_UPDATE, None, NO_UPDATE
        if not was_clicked():
            raise exceptions.PreventUpdate
        return open_delete(ctx, trigger["index"])

    # ---------------------------------------------------------
    # 5. Delete confirm (button disabled while in flight)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DELETE_MODAL, "is_open", allow_duplicate=True),
        Output(IDs.Store.VIEW_REVISION, "data", allow_duplicate=True),
        Output(IDs.Control.STATUS_BANNER, "children", allow_duplicate=True),
        Input(IDs.Control.DELETE_CONFIRM, "n_clicks"),
        State(IDs.Store.DELETE_TARGET, "data"),
        running=[(Output(IDs.Control.DELETE_CONFIRM, "disabled"), True, False)],
        prevent_initial_call=True,
    )
    def delete_product(n_clicks, delete_target):
        if not n_clicks:
            raise exceptions.PreventUpdate
        return confirm_delete(ctx, delete_target)
