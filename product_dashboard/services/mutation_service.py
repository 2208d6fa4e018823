from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from product_dashboard.core.data_store import DataStore
from product_dashboard.core.product import Product, ProductId
from product_dashboard.services.product_api import ProductApi
from product_dashboard.validation.product_validation import validate_product_form

logger = logging.getLogger(__name__)

CREATE = "create"
UPDATE = "update"
DELETE = "delete"


@dataclass(frozen=True)
class MutationResult:
    action: str
    product_id: Optional[ProductId]
    message: str
    product: Optional[Product] = None


class MutationCoordinator:
    """
    Runs writes against the remote collection and reconciles the DataStore.

    Every successful write is followed by a full re-fetch; the written record
    is never spliced into the local list. Any failure (validation, not-found,
    transport, HTTP status) propagates to the caller with the store untouched.
    """

    def __init__(self, api: ProductApi, store: DataStore) -> None:
        self.api = api
        self.store = store

    def load(self) -> List[Product]:
        """Initial fetch and explicit refresh."""
        products = self.api.list_products()
        self.store.set_products(products)
        return products

    def create(self, form: Mapping[str, Any]) -> MutationResult:
        payload = validate_product_form(form)
        created = self.api.create_product(payload)
        logger.info("product_created", extra={"product_id": created.id, "title": created.title})
        self.load()
        return MutationResult(CREATE, created.id, f"Created '{created.title}'.", created)

    def update(self, product_id: ProductId, form: Mapping[str, Any]) -> MutationResult:
        # Not-found is checked first so a stale edit never reaches the API.
        self.store.get_product(product_id)
        payload = validate_product_form(form)
        updated = self.api.update_product(product_id, payload)
        logger.info("product_updated", extra={"product_id": product_id})
        self.load()
        return MutationResult(UPDATE, product_id, f"Updated '{updated.title}'.", updated)

    def delete(self, product_id: ProductId) -> MutationResult:
        existing = self.store.get_product(product_id)
        self.api.delete_product(existing.id)
        logger.info("product_deleted", extra={"product_id": existing.id})
        self.load()
        return MutationResult(DELETE, existing.id, f"Deleted '{existing.title}'.")
