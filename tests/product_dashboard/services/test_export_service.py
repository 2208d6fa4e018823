from __future__ import annotations

from datetime import datetime, timezone

from product_dashboard.core.data_store import DataStore
from product_dashboard.core.product import Category, Product
from product_dashboard.services.export_service import (
    SCOPE_ALL,
    SCOPE_PAGE,
    ExportService,
    export_filename,
    export_header,
    to_csv,
)

HEADER = "ID,Title,Price,Description,Category,Category ID,Slug,Image Count,First Image,Created At,Updated At"


def test_header_has_eleven_fixed_columns():
    assert len(export_header()) == 11
    assert to_csv([]) == HEADER


def test_special_characters_are_quoted_and_quotes_doubled():
    product = Product(id=1, title='a,b"c', price=10, description="line one\nline two")

    lines = to_csv([product]).split("\n", 1)

    assert lines[0] == HEADER
    assert lines[1].startswith('1,"a,b""c",10,"line one\nline two",')


def test_plain_fields_pass_through_and_missing_fields_are_empty():
    product = Product(id=2, title="Shirt", price=49.99)

    row = to_csv([product]).split("\n")[1]

    assert row == "2,Shirt,49.99,,,,,0,,,"


def test_full_row_renders_category_images_and_timestamps(sample_rows):
    product = Product.from_dict(sample_rows[0])

    row = to_csv([product]).split("\n")[1]

    assert row == (
        "1,Shoe,600,Leather running shoe,Footwear,4,shoe,2,https://img.example/shoe-1.png,"
        "2024-01-05T10:00:00+00:00,2024-01-06T11:30:00+00:00"
    )


def test_integer_columns_stay_integers_next_to_missing_values():
    products = [
        Product(id=1, title="A", price=5, category=Category(id=3, name="X")),
        Product(id=2, title="B", price=6),
    ]

    rows = to_csv(products).split("\n")[1:]

    assert rows[0].split(",")[5] == "3"
    assert rows[1].split(",")[5] == ""


def test_export_filename_pattern():
    when = datetime(2025, 3, 4, 5, 6, 7, tzinfo=timezone.utc)

    assert export_filename(SCOPE_ALL, when=when) == "products-export-all-20250304-050607.csv"
    assert export_filename(SCOPE_PAGE, page=3, when=when) == "products-export-page-3-20250304-050607.csv"


def test_export_scopes_follow_filtered_view_and_visible_page():
    store = DataStore(page_size=2)
    store.set_products([Product(id=i, title=f"Item {i}", price=i) for i in range(1, 6)])
    store.set_search_term("item")
    store.set_page(2)
    service = ExportService()

    all_name, all_text = service.export(store, SCOPE_ALL)
    page_name, page_text = service.export(store, SCOPE_PAGE)

    assert all_name.startswith("products-export-all-")
    assert len(all_text.split("\n")) == 1 + 5
    assert page_name.startswith("products-export-page-2-")
    assert [line.split(",")[0] for line in page_text.split("\n")[1:]] == ["3", "4"]
