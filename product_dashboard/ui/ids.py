from __future__ import annotations

__all__ = ["IDs", "sort_header_id", "page_button_id", "row_action_id"]


class IDs:
    class Store:
        VIEW_REVISION = "view-revision"
        EDIT_TARGET = "edit-target"
        DELETE_TARGET = "delete-target"
        VIEW_STATE = "view-state"

    class Control:
        # Navbar
        PRODUCT_COUNT = "product-count"
        REFRESH_BTN = "refresh-btn"

        # Toolbar
        SEARCH_INPUT = "search-input"
        PAGE_SIZE_SELECT = "page-size-select"
        CREATE_BTN = "create-btn"
        EXPORT_ALL_BTN = "export-all-btn"
        EXPORT_PAGE_BTN = "export-page-btn"
        DOWNLOAD_CSV = "download-csv"

        # Table + pagination
        TABLE_CONTAINER = "product-table-container"
        PAGE_INFO = "page-info"
        PREV_PAGE = "prev-page"
        NEXT_PAGE = "next-page"
        PAGE_BUTTONS = "page-buttons"

        # Messages
        STATUS_BANNER = "status-banner"
        LOAD_ERROR = "load-error"
        LOAD_ERROR_TEXT = "load-error-text"
        RELOAD_BTN = "reload-btn"

        # Detail modal
        DETAIL_MODAL = "detail-modal"
        DETAIL_BODY = "detail-body"
        DETAIL_CLOSE = "detail-close"

        # Create / edit modal
        FORM_MODAL = "form-modal"
        FORM_HEADER = "form-header"
        FORM_TITLE = "form-title"
        FORM_PRICE = "form-price"
        FORM_DESCRIPTION = "form-description"
        FORM_CATEGORY = "form-category"
        FORM_IMAGES = "form-images"
        FORM_ERRORS = "form-errors"
        FORM_SUBMIT = "form-submit"
        FORM_CANCEL = "form-cancel"

        # Delete confirmation modal
        DELETE_MODAL = "delete-modal"
        DELETE_BODY = "delete-body"
        DELETE_CONFIRM = "delete-confirm"
        DELETE_CANCEL = "delete-cancel"

    class Pattern:
        # pattern-matching "type" strings
        SORT_HEADER = "sort-header"
        PAGE_BUTTON = "page-button"
        ROW_ACTION = "row-action"


class Action:
    VIEW = "view"
    EDIT = "edit"
    DELETE = "delete"


def sort_header_id(column: str) -> dict:
    return {"type": IDs.Pattern.SORT_HEADER, "column": column}


def page_button_id(page: int) -> dict:
    return {"type": IDs.Pattern.PAGE_BUTTON, "index": page}


def row_action_id(action: str, product_id) -> dict:
    return {"type": IDs.Pattern.ROW_ACTION, "action": action, "index": str(product_id)}
