from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

ProductId = Union[int, str]


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp as returned by the API (e.g. '2024-01-05T10:00:00.000Z').
    Returns None for missing or unparseable values.
    """
    if isinstance(value, datetime):
        return value
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.warning("Unparseable timestamp %r", value)
        return None


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()


@dataclass(frozen=True)
class Category:
    id: Optional[ProductId] = None
    name: Optional[str] = None
    image: Optional[str] = None
    slug: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional[Category]:
        if not isinstance(data, dict):
            return None
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            image=data.get("image"),
            slug=data.get("slug"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "image": self.image, "slug": self.slug}


@dataclass(frozen=True)
class Product:
    """
    A single catalog entry as served by the remote product collection.

    Products are immutable: after every successful write the whole collection
    is fetched again and the DataStore receives fresh instances.

    Fields:

    - id: unique, stable identifier (int from the public API, str tolerated)
    - title / price: always present
    - description, category, slug, creation_at, updated_at: optional
    - images: ordered image URLs, may be empty
    """

    id: ProductId
    title: str
    price: float
    description: Optional[str] = None
    category: Optional[Category] = None
    images: List[str] = field(default_factory=list)
    slug: Optional[str] = None
    creation_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def category_name(self) -> Optional[str]:
        return self.category.name if self.category is not None else None

    @property
    def category_id(self) -> Optional[ProductId]:
        return self.category.id if self.category is not None else None

    @property
    def first_image(self) -> Optional[str]:
        return self.images[0] if self.images else None

    def field_value(self, key: str) -> Any:
        """
        Resolve a sortable field by its API name ('creationAt') or attribute name.
        'category' resolves to the category name.
        """
        if key == "category":
            return self.category_name
        attr = _API_TO_ATTR.get(key, key)
        return getattr(self, attr, None)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Product:
        images = data.get("images") or []
        return cls(
            id=data.get("id"),
            title=data.get("title") or "",
            price=data.get("price", 0),
            description=data.get("description"),
            category=Category.from_dict(data.get("category")),
            images=[str(i) for i in images if i],
            slug=data.get("slug"),
            creation_at=parse_timestamp(data.get("creationAt")),
            updated_at=parse_timestamp(data.get("updatedAt")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "category": self.category.to_dict() if self.category is not None else None,
            "images": list(self.images),
            "slug": self.slug,
            "creationAt": format_timestamp(self.creation_at),
            "updatedAt": format_timestamp(self.updated_at),
        }


_API_TO_ATTR = {
    "creationAt": "creation_at",
    "updatedAt": "updated_at",
}


@dataclass(frozen=True)
class ProductPayload:
    """Validated create/update body."""

    title: str
    price: float
    category_id: ProductId
    images: List[str]
    description: Optional[str] = None

    def to_api(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "title": self.title,
            "price": self.price,
            "categoryId": self.category_id,
            "images": list(self.images),
        }
        if self.description is not None:
            body["description"] = self.description
        return body


def same_id(a: ProductId, b: ProductId) -> bool:
    """Ids arrive as ints from the API and as strings from the DOM."""
    return str(a) == str(b)
