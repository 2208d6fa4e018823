from __future__ import annotations

import pytest

from product_dashboard.core.data_store import DataStore
from product_dashboard.core.exceptions import ProductNotFoundError
from product_dashboard.core.product import Category, Product
from product_dashboard.core.view_state import ASCENDING, DESCENDING, ViewState


def _scenario_products():
    return [
        Product(id=1, title="Shoe", price=600, category=Category(name="Footwear")),
        Product(id=2, title="Shirt", price=50, category=Category(name="Apparel")),
    ]


def _many(n: int):
    return [Product(id=i, title=f"Item {i}", price=i) for i in range(1, n + 1)]


def _ids(products):
    return [p.id for p in products]


def test_end_to_end_scenario():
    store = DataStore(page_size=10)
    store.set_products(_scenario_products())

    store.set_search_term("sho")
    assert _ids(store.filtered_view) == [1]

    store.set_search_term("")
    store.set_sort("price")
    assert _ids(store.filtered_view) == [2, 1]

    store = DataStore(page_size=1)
    store.set_products(_scenario_products())
    store.set_page(2)
    projection = store.projection()
    assert _ids(projection.visible_rows) == [1]
    assert projection.total_pages == 2


def test_search_term_is_lowercased_and_resets_page():
    store = DataStore(page_size=2)
    store.set_products(_many(10))
    store.set_page(3)

    store.set_search_term("ITEM 1")

    assert store.search_term == "item 1"
    assert store.page == 1
    assert _ids(store.filtered_view) == [1, 10]


def test_set_sort_toggles_direction_on_same_key():
    store = DataStore()
    store.set_products(_many(3))

    store.set_sort("price")
    assert (store.sort_key, store.sort_direction) == ("price", ASCENDING)

    store.set_sort("price")
    assert store.sort_direction == DESCENDING
    assert _ids(store.filtered_view) == [3, 2, 1]

    store.set_sort("title")
    assert (store.sort_key, store.sort_direction) == ("title", ASCENDING)


def test_set_sort_keeps_page():
    store = DataStore(page_size=2)
    store.set_products(_many(6))
    store.set_page(2)

    store.set_sort("price")

    assert store.page == 2


@pytest.mark.parametrize("requested,expected", [(0, 1), (-5, 1), (99, 3), ("2", 2), ("abc", 1), (None, 1)])
def test_set_page_clamps_into_range(requested, expected):
    store = DataStore(page_size=4)
    store.set_products(_many(10))

    store.set_page(requested)

    assert store.page == expected


def test_set_page_same_page_is_noop_without_notification():
    store = DataStore()
    store.set_products(_many(3))
    seen = []
    store.subscribe(lambda s: seen.append(s.page))

    changed = store.set_page(1)

    assert changed is False
    assert seen == []


def test_next_and_previous_page_stop_at_bounds():
    store = DataStore(page_size=5)
    store.set_products(_many(10))

    assert store.next_page() is True
    assert store.next_page() is False
    assert store.page == 2
    assert store.previous_page() is True
    assert store.previous_page() is False
    assert store.page == 1


@pytest.mark.parametrize("size,expected", [(5, 5), (0, 1), (-2, 1), ("20", 20)])
def test_set_page_size_normalises_and_resets_page(size, expected):
    store = DataStore(page_size=2)
    store.set_products(_many(10))
    store.set_page(4)

    store.set_page_size(size)

    assert store.page_size == expected
    assert store.page == 1


def test_set_products_recomputes_with_current_query_and_clamps_page():
    store = DataStore(page_size=2)
    store.set_products(_many(10))
    store.set_sort("price")
    store.set_sort("price")  # descending
    store.set_page(5)

    store.set_products(_many(3))

    assert _ids(store.filtered_view) == [3, 2, 1]
    assert store.page == 2


def test_filtered_view_never_holds_orphans_after_replace():
    store = DataStore()
    store.set_products(_many(5))
    store.set_search_term("item")

    store.set_products(_many(2))

    product_ids = {p.id for p in store.products}
    assert all(p.id in product_ids for p in store.filtered_view)


def test_subscribers_notified_once_per_change_and_can_unsubscribe():
    store = DataStore()
    calls = []
    unsubscribe = store.subscribe(lambda s: calls.append(s.revision))

    store.set_products(_many(3))
    store.set_search_term("1")
    unsubscribe()
    store.set_sort("title")

    assert calls == [1, 2]
    assert store.revision == 3


def test_get_product_matches_string_ids_and_raises_when_missing():
    store = DataStore()
    store.set_products(_many(3))

    assert store.get_product("2").id == 2
    with pytest.raises(ProductNotFoundError):
        store.get_product(42)


def test_restore_applies_view_state_in_one_transition():
    store = DataStore()
    store.set_products(_many(30))
    revision = store.revision

    store.restore(ViewState(search_term="ITEM", sort_key="price", sort_direction=DESCENDING, page=9, page_size=10))

    assert store.revision == revision + 1
    assert store.search_term == "item"
    assert store.page == 3
    assert store.filtered_view[0].id == 30
