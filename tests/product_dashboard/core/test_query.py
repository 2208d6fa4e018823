from __future__ import annotations

from product_dashboard.core.product import Category, Product
from product_dashboard.core.query import filter_products, sort_products
from product_dashboard.core.view_state import ASCENDING, DESCENDING


def _p(pid, title, price=10, description=None, category=None, **kwargs) -> Product:
    cat = Category(id=pid, name=category) if category is not None else None
    return Product(id=pid, title=title, price=price, description=description, category=cat, **kwargs)


def _catalog():
    return [
        _p(1, "Shoe", 600, category="Footwear"),
        _p(2, "Shirt", 50, category="Apparel"),
        _p(3, "Mug", 12, description="Ceramic SHOE-shaped mug"),
        _p(4, "Lamp", 50),
        _p(5, "Scarf", 30, category="Apparel"),
    ]


def _ids(products):
    return [p.id for p in products]


def test_filter_matches_title_description_and_category_case_insensitively():
    products = _catalog()

    assert _ids(filter_products(products, "sho")) == [1, 3]
    assert _ids(filter_products(products, "APPAREL")) == [2, 5]
    assert _ids(filter_products(products, "ceramic")) == [3]


def test_filter_excludes_every_non_matching_product():
    products = _catalog()
    term = "sh"

    result = filter_products(products, term)

    for p in products:
        haystack = " ".join(
            s.lower() for s in (p.title, p.description or "", p.category_name or "")
        )
        assert (p in result) == (term in haystack)


def test_filter_never_searches_id_price_or_images():
    products = [_p(600, "Thing", 600, images=["https://x/600.png"])]

    assert filter_products(products, "600") == []


def test_empty_or_blank_term_returns_copy_in_original_order():
    products = _catalog()

    for term in ("", "   ", None):
        result = filter_products(products, term)
        assert result == products
        assert result is not products


def test_padded_term_keeps_its_spaces_when_matching():
    products = [_p(1, "Shoe"), _p(2, "Running shoe")]

    assert _ids(filter_products(products, " shoe")) == [2]
    assert _ids(filter_products(products, "shoe ")) == []


def test_sort_by_price_ascending_and_descending():
    products = _catalog()

    assert _ids(sort_products(products, "price", ASCENDING)) == [3, 5, 2, 4, 1]
    # ties (2 and 4 at 50) keep their original relative order in both directions
    assert _ids(sort_products(products, "price", DESCENDING)) == [1, 2, 4, 5, 3]


def test_sort_by_category_treats_missing_as_empty_and_first():
    products = _catalog()

    result = sort_products(products, "category", ASCENDING)

    assert _ids(result) == [3, 4, 2, 5, 1]


def test_missing_values_sort_before_defined_ones():
    products = [_p(1, "a", slug="b"), _p(2, "b"), _p(3, "c", slug="a")]

    assert _ids(sort_products(products, "slug", ASCENDING)) == [2, 3, 1]


def test_sort_is_idempotent():
    products = _catalog()

    once = sort_products(products, "price", DESCENDING)
    twice = sort_products(once, "price", DESCENDING)

    assert once == twice


def test_flipping_direction_reverses_distinct_keys_and_keeps_ties_stable():
    products = _catalog()

    asc = sort_products(products, "price", ASCENDING)
    desc = sort_products(products, "price", DESCENDING)

    distinct_asc = [p.price for p in asc]
    distinct_desc = [p.price for p in desc]
    assert distinct_desc == sorted(distinct_asc, reverse=True)

    tie_asc = [p.id for p in asc if p.price == 50]
    tie_desc = [p.id for p in desc if p.price == 50]
    assert tie_asc == tie_desc == [2, 4]


def test_no_sort_key_keeps_insertion_order():
    products = _catalog()

    assert sort_products(products, None, ASCENDING) == products


def test_sort_does_not_mutate_input():
    products = _catalog()
    before = list(products)

    sort_products(products, "title", ASCENDING)

    assert products == before
