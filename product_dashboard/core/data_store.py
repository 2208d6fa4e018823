from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional

from .exceptions import ProductNotFoundError
from .product import Product, ProductId, same_id
from .projection import PageProjection, clamp_page, project
from .query import apply_query
from .view_state import ASCENDING, DEFAULT_PAGE_SIZE, DESCENDING, ViewState, coerce_int

logger = logging.getLogger(__name__)

Listener = Callable[["DataStore"], None]


class DataStore:
    """
    Single owner of the canonical product list and everything derived from it.

    Purpose:
    - Holds `products` (source of truth, replaced wholesale) and `filtered_view`
      (always recomputed from `products` + search/sort, never edited in place)
    - Owns the pagination cursor and sort parameters
    - Notifies subscribers once per effective state change so a presentation
      layer can repaint

    Design Notes:
    - Setters never raise on bad input: values are clamped/normalised instead
    - Not thread-shared; every method runs to completion before the next UI event
    - The Dash layer does not subscribe: it cannot push from a listener, so it
      reads `revision` after each callback and writes it to a dcc.Store whose
      change drives the repaint. `subscribe` serves in-process observers
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self._products: List[Product] = []
        self._filtered: List[Product] = []
        self._search_term: str = ""
        self._sort_key: Optional[str] = None
        self._sort_direction: str = ASCENDING
        self._page: int = 1
        self._page_size: int = max(1, coerce_int(page_size, DEFAULT_PAGE_SIZE))
        self._listeners: List[Listener] = []
        self.revision: int = 0
        self.loaded: bool = False

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def products(self) -> List[Product]:
        return list(self._products)

    @property
    def filtered_view(self) -> List[Product]:
        return list(self._filtered)

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def sort_key(self) -> Optional[str]:
        return self._sort_key

    @property
    def sort_direction(self) -> str:
        return self._sort_direction

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    def snapshot(self) -> ViewState:
        return ViewState(
            search_term=self._search_term,
            sort_key=self._sort_key,
            sort_direction=self._sort_direction,
            page=self._page,
            page_size=self._page_size,
        )

    def projection(self) -> PageProjection:
        return project(self._filtered, self._page, self._page_size)

    def get_product(self, product_id: ProductId) -> Product:
        for product in self._products:
            if same_id(product.id, product_id):
                return product
        raise ProductNotFoundError(product_id)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        self.revision += 1
        for listener in list(self._listeners):
            listener(self)

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------
    def set_products(self, products: Iterable[Product]) -> None:
        self._products = list(products)
        self.loaded = True
        self._recompute()
        self._page = clamp_page(self._page, len(self._filtered), self._page_size)
        logger.info(
            "products_replaced",
            extra={"n_products": len(self._products), "n_visible": len(self._filtered)},
        )
        self._notify()

    def set_search_term(self, term: Any) -> None:
        self._search_term = str(term or "").lower()
        self._recompute()
        self._page = 1
        self._notify()

    def set_sort(self, key: Optional[str]) -> None:
        if not key:
            return
        if key == self._sort_key:
            self._sort_direction = DESCENDING if self._sort_direction == ASCENDING else ASCENDING
        else:
            self._sort_key = key
            self._sort_direction = ASCENDING
        self._recompute()
        self._page = clamp_page(self._page, len(self._filtered), self._page_size)
        self._notify()

    def set_page(self, page: Any) -> bool:
        """
        Move the cursor, clamped into [1, total_pages].
        :return: True if the page actually changed (and listeners were notified)
        """
        target = clamp_page(coerce_int(page, 1), len(self._filtered), self._page_size)
        if target == self._page:
            return False
        self._page = target
        self._notify()
        return True

    def next_page(self) -> bool:
        return self.set_page(self._page + 1)

    def previous_page(self) -> bool:
        return self.set_page(self._page - 1)

    def set_page_size(self, page_size: Any) -> None:
        self._page_size = max(1, coerce_int(page_size, self._page_size))
        self._page = 1
        self._notify()

    def restore(self, state: ViewState) -> None:
        """Apply a full ViewState in one transition (single notification)."""
        self._search_term = state.search_term.lower()
        self._sort_key = state.sort_key
        self._sort_direction = state.sort_direction
        self._page_size = max(1, state.page_size)
        self._recompute()
        self._page = clamp_page(state.page, len(self._filtered), self._page_size)
        self._notify()

    def _recompute(self) -> None:
        self._filtered = apply_query(
            self._products, self._search_term, self._sort_key, self._sort_direction
        )
