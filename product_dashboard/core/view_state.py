from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

ASCENDING = "asc"
DESCENDING = "desc"

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class ViewState:
    """
    Snapshot of the user-controlled view parameters.

    Fields:

    - search_term: lower-cased substring filter ('' means no filter)
    - sort_key: field identifier or None for insertion order
    - sort_direction: 'asc' or 'desc'
    - page: 1-based pagination cursor
    - page_size: rows per page, always >= 1
    """

    search_term: str = ""
    sort_key: Optional[str] = None
    sort_direction: str = ASCENDING
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> ViewState:
        data = data or {}
        direction = data.get("sort_direction", ASCENDING)
        return cls(
            search_term=str(data.get("search_term") or "").lower(),
            sort_key=data.get("sort_key") or None,
            sort_direction=DESCENDING if direction == DESCENDING else ASCENDING,
            page=coerce_int(data.get("page"), 1),
            page_size=max(1, coerce_int(data.get("page_size"), DEFAULT_PAGE_SIZE)),
        )


def coerce_int(value: Any, default: int) -> int:
    """Best-effort int conversion for values coming from UI widgets."""
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
