from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from product_dashboard.core.exceptions import ApiStatusError
from product_dashboard.core.product import Product, ProductPayload


class FakeProductApi:
    """
    In-memory stand-in for ProductApi. Rows are stored as API-shaped dicts so
    every list_products() call hands out fresh Product instances, like the
    real re-fetch does.
    """

    base_url = "http://fake-api/products"

    def __init__(self, rows: Optional[List[Dict[str, Any]]] = None) -> None:
        self.rows: List[Dict[str, Any]] = [dict(r) for r in (rows or [])]
        self.calls: List[tuple] = []
        self.failures: Dict[str, Exception] = {}
        self.reachable = True

    def _check(self, op: str) -> None:
        error = self.failures.get(op)
        if error is not None:
            raise error

    def ping(self) -> bool:
        return self.reachable

    def list_products(self) -> List[Product]:
        self.calls.append(("list",))
        self._check("list")
        return [Product.from_dict(r) for r in self.rows]

    def create_product(self, payload: ProductPayload) -> Product:
        self.calls.append(("create", payload))
        self._check("create")
        new_id = max((r["id"] for r in self.rows), default=0) + 1
        row = {
            "id": new_id,
            "title": payload.title,
            "price": payload.price,
            "description": payload.description,
            "category": {"id": payload.category_id, "name": f"Category {payload.category_id}"},
            "images": list(payload.images),
        }
        self.rows.append(row)
        return Product.from_dict(row)

    def update_product(self, product_id, payload: ProductPayload) -> Product:
        self.calls.append(("update", product_id, payload))
        self._check("update")
        for row in self.rows:
            if str(row["id"]) == str(product_id):
                row.update(
                    title=payload.title,
                    price=payload.price,
                    description=payload.description,
                    images=list(payload.images),
                )
                return Product.from_dict(row)
        raise ApiStatusError(404, "Not Found")

    def delete_product(self, product_id) -> None:
        self.calls.append(("delete", product_id))
        self._check("delete")
        self.rows = [r for r in self.rows if str(r["id"]) != str(product_id)]


SAMPLE_ROWS = [
    {
        "id": 1,
        "title": "Shoe",
        "price": 600,
        "description": "Leather running shoe",
        "category": {"id": 4, "name": "Footwear"},
        "images": ["https://img.example/shoe-1.png", "https://img.example/shoe-2.png"],
        "slug": "shoe",
        "creationAt": "2024-01-05T10:00:00.000Z",
        "updatedAt": "2024-01-06T11:30:00.000Z",
    },
    {
        "id": 2,
        "title": "Shirt",
        "price": 50,
        "description": None,
        "category": {"id": 1, "name": "Apparel"},
        "images": ["https://img.example/shirt.png"],
        "slug": "shirt",
    },
]


@pytest.fixture
def sample_rows() -> List[Dict[str, Any]]:
    return [dict(r) for r in SAMPLE_ROWS]


@pytest.fixture
def fake_api(sample_rows) -> FakeProductApi:
    return FakeProductApi(sample_rows)


@pytest.fixture
def valid_form() -> Dict[str, Any]:
    return {
        "title": "Hat",
        "price": "25",
        "description": "Wool hat",
        "category_id": "1",
        "images": "https://img.example/hat.png",
    }
