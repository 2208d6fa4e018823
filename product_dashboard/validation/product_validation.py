from __future__ import annotations

import math
import re
from typing import Any, List, Mapping, Optional
from urllib.parse import urlparse

from product_dashboard.core.product import ProductPayload
from product_dashboard.validation.errors import ValidationIssue, ValidationError

_IMAGE_SPLIT = re.compile(r"[\n,]+")


def parse_images(raw: Any) -> List[str]:
    """
    Accept a list of URLs or the textarea form (one per line, or comma separated).
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        parts = _IMAGE_SPLIT.split(raw)
    else:
        parts = [str(p) for p in raw if p is not None]
    return [p.strip() for p in parts if p and p.strip()]


def _is_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def _parse_price(raw: Any) -> Optional[float]:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str) and not raw.strip():
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return int(value) if value.is_integer() else value


def _parse_category_id(raw: Any) -> Optional[int]:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


def validate_product_form(form: Mapping[str, Any]) -> ProductPayload:
    """
    Validate the create/edit form BEFORE any request goes out.
    Collects every problem so the form can show them all at once.
    """
    issues: list[ValidationIssue] = []

    title = str(form.get("title") or "").strip()
    if not title:
        issues.append(ValidationIssue("PRODUCT_TITLE", "Title is required."))

    price = _parse_price(form.get("price"))
    if price is None:
        issues.append(ValidationIssue("PRODUCT_PRICE", "Price must be a number."))
    elif price < 0:
        issues.append(ValidationIssue("PRODUCT_PRICE_NEGATIVE", "Price cannot be negative."))

    category_id = _parse_category_id(form.get("category_id"))
    if category_id is None:
        issues.append(ValidationIssue("PRODUCT_CATEGORY", "A category id is required."))

    images = parse_images(form.get("images"))
    if not images:
        issues.append(ValidationIssue("PRODUCT_IMAGES", "At least one image URL is required."))
    for url in images:
        if not _is_url(url):
            issues.append(ValidationIssue("PRODUCT_IMAGE_URL", f"'{url}' is not a valid http(s) URL."))

    if issues:
        raise ValidationError(issues)

    description = form.get("description")
    description = str(description).strip() if description is not None else None

    return ProductPayload(
        title=title,
        price=price,
        category_id=category_id,
        images=images,
        description=description or None,
    )
