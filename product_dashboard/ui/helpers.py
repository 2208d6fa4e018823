from __future__ import annotations

from typing import List, Optional

import dash_bootstrap_components as dbc
from dash import html

from product_dashboard.core.product import Product
from product_dashboard.core.projection import PageProjection, page_window
from product_dashboard.core.status import StatusPolicy
from product_dashboard.core.view_state import ASCENDING, ViewState
from product_dashboard.ui.ids import Action, page_button_id, row_action_id, sort_header_id

PLACEHOLDER_IMAGE = "https://placehold.co/100x100?text=No+Image"
UNCATEGORIZED = "Uncategorized"

# (column key, header label); None key = not sortable
TABLE_COLUMNS = [
    ("id", "ID"),
    ("title", "Product"),
    ("price", "Price"),
    ("category", "Category"),
    (None, "Images"),
    (None, "Status"),
    (None, "Actions"),
]


def format_price(price) -> str:
    return f"${price}"


def status_alert(message: str, color: str = "success") -> dbc.Alert:
    return dbc.Alert(message, color=color, dismissable=True, className="mb-2")


def _sort_icon(column: str, view: ViewState) -> str:
    if view.sort_key != column:
        return "⇅"
    return "▲" if view.sort_direction == ASCENDING else "▼"


def table_header(view: ViewState) -> html.Thead:
    cells = []
    for key, label in TABLE_COLUMNS:
        if key is None:
            cells.append(html.Th(label))
            continue
        active = view.sort_key == key
        cells.append(
            html.Th(
                html.Button(
                    [label, html.Span(_sort_icon(key, view), className="ms-1 sort-icon")],
                    id=sort_header_id(key),
                    n_clicks=0,
                    className="btn btn-link p-0 pd-sort-btn" + (" text-primary" if active else " text-reset"),
                )
            )
        )
    return html.Thead(html.Tr(cells))


def product_row(product: Product, policy: StatusPolicy) -> html.Tr:
    images = product.images
    thumbs = [
        html.Img(src=src, className="img-thumbnail me-1", width=50, height=50, alt="Product image")
        for src in images[:2]
    ]
    if len(images) > 2:
        thumbs.append(dbc.Badge(f"+{len(images) - 2}", color="secondary", className="align-self-center"))

    return html.Tr(
        [
            html.Td(str(product.id), className="fw-bold"),
            html.Td(
                html.Div(
                    [
                        html.Img(
                            src=product.first_image or PLACEHOLDER_IMAGE,
                            alt=product.title,
                            className="img-thumbnail me-2",
                            width=50,
                            height=50,
                        ),
                        html.Div(
                            [
                                html.Div(product.title, className="fw-medium"),
                                html.Small(product.slug or "", className="text-muted"),
                            ]
                        ),
                    ],
                    className="d-flex align-items-center",
                )
            ),
            html.Td(dbc.Badge(format_price(product.price), color="success", className="fs-6")),
            html.Td(dbc.Badge(product.category_name or UNCATEGORIZED, color="info")),
            html.Td(html.Div(thumbs, className="d-flex")),
            html.Td(dbc.Badge(policy.label_for(product), color=policy.badge_color(product))),
            html.Td(
                [
                    dbc.Button("View", id=row_action_id(Action.VIEW, product.id), n_clicks=0,
                               size="sm", outline=True, color="primary", className="me-1"),
                    dbc.Button("Edit", id=row_action_id(Action.EDIT, product.id), n_clicks=0,
                               size="sm", outline=True, color="warning", className="me-1"),
                    dbc.Button("Delete", id=row_action_id(Action.DELETE, product.id), n_clicks=0,
                               size="sm", outline=True, color="danger"),
                ],
                className="text-nowrap",
            ),
        ],
        title=product.description or "No description available",
    )


def empty_row() -> html.Tr:
    return html.Tr(
        html.Td(
            [
                html.P("No products found", className="mb-0"),
                html.Small("Try adjusting your search or filters", className="text-muted"),
            ],
            colSpan=len(TABLE_COLUMNS),
            className="text-center py-4",
        )
    )


def product_table(projection: PageProjection, view: ViewState, policy: StatusPolicy) -> dbc.Table:
    rows = [product_row(p, policy) for p in projection.visible_rows] or [empty_row()]
    return dbc.Table(
        [table_header(view), html.Tbody(rows)],
        hover=True,
        responsive=True,
        className="align-middle mb-0 pd-table",
    )


def page_info_text(projection: PageProjection) -> str:
    return f"Showing {projection.start_index}–{projection.end_index} of {projection.total_items}"


def page_buttons(projection: PageProjection) -> List[dbc.Button]:
    if projection.total_items == 0:
        return []
    return [
        dbc.Button(
            str(n),
            id=page_button_id(n),
            n_clicks=0,
            size="sm",
            color="primary",
            outline=n != projection.page,
            className="me-1",
        )
        for n in page_window(projection.page, projection.total_pages)
    ]


def product_detail(product: Product, policy: StatusPolicy) -> html.Div:
    def item(label: str, value: Optional[str]) -> html.Div:
        return html.Div([html.Strong(f"{label}: "), value or "—"], className="mb-1")

    return html.Div(
        [
            html.Div(
                [
                    html.Img(src=src, className="img-thumbnail me-2 mb-2", width=120, height=120)
                    for src in product.images
                ]
                or [html.Img(src=PLACEHOLDER_IMAGE, className="img-thumbnail mb-2", width=120, height=120)],
                className="d-flex flex-wrap",
            ),
            item("ID", str(product.id)),
            item("Title", product.title),
            item("Price", format_price(product.price)),
            item("Category", product.category_name or UNCATEGORIZED),
            item("Slug", product.slug),
            item("Status", policy.label_for(product)),
            item("Created", product.creation_at.isoformat() if product.creation_at else None),
            item("Updated", product.updated_at.isoformat() if product.updated_at else None),
            html.Hr(),
            html.P(product.description or "No description available", className="mb-0"),
        ]
    )


def form_values(product: Optional[Product]) -> tuple:
    """(title, price, description, category_id, images_text) for the edit form."""
    if product is None:
        return "", None, "", None, ""
    return (
        product.title,
        product.price,
        product.description or "",
        product.category_id,
        "\n".join(product.images),
    )
