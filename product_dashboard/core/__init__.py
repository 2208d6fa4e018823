"""
Core domain layer: product model, view state, query engine, view projector
and the data store
"""

from .data_store import DataStore
from .product import Category, Product, ProductPayload
from .projection import PageProjection, page_window, project
from .query import filter_products, sort_products
from .view_state import ViewState

__all__ = [
    "Category",
    "DataStore",
    "PageProjection",
    "Product",
    "ProductPayload",
    "ViewState",
    "filter_products",
    "page_window",
    "project",
    "sort_products",
]
