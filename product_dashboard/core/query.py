"""
Search predicate and sort comparator applied to the canonical product list.

Both functions are pure: they never mutate their input and always return a
new list.
"""

from __future__ import annotations

import functools
from typing import Any, Iterable, List, Optional

from .product import Product
from .view_state import DESCENDING


def matches(product: Product, term: str) -> bool:
    """Case-insensitive substring match on title, description and category name."""
    needle = term.lower()
    haystacks = (product.title, product.description, product.category_name)
    return any(h is not None and needle in str(h).lower() for h in haystacks)


def filter_products(products: Iterable[Product], search_term: Optional[str]) -> List[Product]:
    """
    Keep the products matching search_term.

    An empty or whitespace-only term returns a copy of the full list.
    id, price and images are never searched.
    """
    term = (search_term or "").lower()
    if not term.strip():
        return list(products)
    return [p for p in products if matches(p, term)]


def _sort_value(product: Product, key: str) -> Any:
    value = product.field_value(key)
    if key == "category" and value is None:
        return ""
    return value


def _compare(a: Any, b: Any) -> int:
    # Missing values sort before defined ones.
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    try:
        if a < b:
            return -1
        if a > b:
            return 1
        return 0
    except TypeError:
        # Mixed types (e.g. int vs str ids): fall back to string ordering
        sa, sb = str(a), str(b)
        return (sa > sb) - (sa < sb)


def sort_products(
    products: Iterable[Product],
    key: Optional[str],
    direction: str,
) -> List[Product]:
    """
    Stable sort by key. Descending negates the comparison rather than
    reversing the result, so ties keep their relative order.
    """
    items = list(products)
    if not key:
        return items

    sign = -1 if direction == DESCENDING else 1

    def cmp(a: Product, b: Product) -> int:
        return sign * _compare(_sort_value(a, key), _sort_value(b, key))

    return sorted(items, key=functools.cmp_to_key(cmp))


def apply_query(
    products: Iterable[Product],
    search_term: Optional[str],
    sort_key: Optional[str],
    direction: str,
) -> List[Product]:
    return sort_products(filter_products(products, search_term), sort_key, direction)
