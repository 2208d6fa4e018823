from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from .product import Product

PAGE_WINDOW_SIZE = 5


@dataclass(frozen=True)
class PageProjection:
    """
    What the table and pagination bar should show for one page.

    start_index/end_index are 1-based inclusive display bounds; both are 0
    for an empty view. total_pages is never below 1.
    """

    visible_rows: List[Product]
    start_index: int
    end_index: int
    total_pages: int
    total_items: int
    page: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.total_items > 0 and self.page < self.total_pages


def total_pages(total_items: int, page_size: int) -> int:
    return max(1, math.ceil(total_items / max(1, page_size)))


def clamp_page(page: int, total_items: int, page_size: int) -> int:
    return min(max(1, page), total_pages(total_items, page_size))


def project(filtered_view: Sequence[Product], page: int, page_size: int) -> PageProjection:
    page_size = max(1, page_size)
    total_items = len(filtered_view)
    page = clamp_page(page, total_items, page_size)

    offset = (page - 1) * page_size
    visible = list(filtered_view[offset:offset + page_size])

    if total_items == 0:
        start, end = 0, 0
    else:
        start = min(offset + 1, total_items)
        end = min(page * page_size, total_items)

    return PageProjection(
        visible_rows=visible,
        start_index=start,
        end_index=end,
        total_pages=total_pages(total_items, page_size),
        total_items=total_items,
        page=page,
    )


def page_window(page: int, n_pages: int, size: int = PAGE_WINDOW_SIZE) -> List[int]:
    """
    Up to `size` contiguous page numbers centred on `page`, slid back inside
    [1, n_pages] when near either end.
    """
    n_pages = max(1, n_pages)
    size = max(1, min(size, n_pages))
    page = min(max(1, page), n_pages)

    first = page - size // 2
    first = max(1, min(first, n_pages - size + 1))
    return list(range(first, first + size))
