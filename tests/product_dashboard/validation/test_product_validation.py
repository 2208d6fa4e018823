from __future__ import annotations

import pytest

from product_dashboard.validation.errors import ValidationError
from product_dashboard.validation.product_validation import parse_images, validate_product_form


def test_valid_form_builds_payload(valid_form):
    payload = validate_product_form(valid_form)

    assert payload.title == "Hat"
    assert payload.price == 25
    assert payload.category_id == 1
    assert payload.images == ["https://img.example/hat.png"]
    assert payload.description == "Wool hat"


def test_every_issue_is_reported_at_once():
    with pytest.raises(ValidationError) as exc:
        validate_product_form({"title": "  ", "price": "abc", "category_id": None, "images": ""})

    assert exc.value.codes == ["PRODUCT_TITLE", "PRODUCT_PRICE", "PRODUCT_CATEGORY", "PRODUCT_IMAGES"]


def test_negative_price_rejected(valid_form):
    valid_form["price"] = -1

    with pytest.raises(ValidationError) as exc:
        validate_product_form(valid_form)

    assert exc.value.codes == ["PRODUCT_PRICE_NEGATIVE"]


def test_zero_price_allowed(valid_form):
    valid_form["price"] = 0

    assert validate_product_form(valid_form).price == 0


def test_non_url_image_rejected(valid_form):
    valid_form["images"] = "https://ok.example/a.png\nnot-a-url"

    with pytest.raises(ValidationError) as exc:
        validate_product_form(valid_form)

    assert exc.value.codes == ["PRODUCT_IMAGE_URL"]


def test_blank_description_becomes_none(valid_form):
    valid_form["description"] = "   "

    assert validate_product_form(valid_form).description is None


def test_parse_images_accepts_lines_commas_and_lists():
    assert parse_images("https://a/1.png\n\nhttps://a/2.png, https://a/3.png") == [
        "https://a/1.png",
        "https://a/2.png",
        "https://a/3.png",
    ]
    assert parse_images([" https://a/1.png ", None, ""]) == ["https://a/1.png"]
    assert parse_images(None) == []
