from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import html

from product_dashboard.ui.ids import IDs


def build_detail_modal() -> dbc.Modal:
    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle("Product details")),
            dbc.ModalBody(id=IDs.Control.DETAIL_BODY),
            dbc.ModalFooter(
                dbc.Button("Close", id=IDs.Control.DETAIL_CLOSE, color="secondary")
            ),
        ],
        id=IDs.Control.DETAIL_MODAL,
        is_open=False,
        size="lg",
    )


def _field(label: str, control) -> html.Div:
    return html.Div([dbc.Label(label), control], className="mb-3")


def build_form_modal() -> dbc.Modal:
    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle("New product", id=IDs.Control.FORM_HEADER)),
            dbc.ModalBody(
                [
                    html.Div(id=IDs.Control.FORM_ERRORS),
                    _field("Title", dbc.Input(id=IDs.Control.FORM_TITLE, type="text")),
                    _field("Price", dbc.Input(id=IDs.Control.FORM_PRICE, type="number", min=0, step="any")),
                    _field("Category ID", dbc.Input(id=IDs.Control.FORM_CATEGORY, type="number", min=1, step=1)),
                    _field("Description", dbc.Textarea(id=IDs.Control.FORM_DESCRIPTION, rows=3)),
                    _field(
                        "Image URLs (one per line)",
                        dbc.Textarea(id=IDs.Control.FORM_IMAGES, rows=3),
                    ),
                ]
            ),
            dbc.ModalFooter(
                [
                    dbc.Button("Cancel", id=IDs.Control.FORM_CANCEL, color="secondary", outline=True),
                    dbc.Button("Save", id=IDs.Control.FORM_SUBMIT, color="primary"),
                ]
            ),
        ],
        id=IDs.Control.FORM_MODAL,
        is_open=False,
        backdrop="static",
    )


def build_delete_modal() -> dbc.Modal:
    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle("Delete product")),
            dbc.ModalBody(id=IDs.Control.DELETE_BODY),
            dbc.ModalFooter(
                [
                    dbc.Button("Cancel", id=IDs.Control.DELETE_CANCEL, color="secondary", outline=True),
                    dbc.Button("Delete", id=IDs.Control.DELETE_CONFIRM, color="danger"),
                ]
            ),
        ],
        id=IDs.Control.DELETE_MODAL,
        is_open=False,
    )


def build_modals() -> List[dbc.Modal]:
    return [build_detail_modal(), build_form_modal(), build_delete_modal()]
