from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

import pandas as pd

from product_dashboard.core.data_store import DataStore
from product_dashboard.core.product import Product, format_timestamp

logger = logging.getLogger(__name__)

SCOPE_ALL = "all"
SCOPE_PAGE = "page"

# (header, extractor) in fixed output order
EXPORT_COLUMNS: List[Tuple[str, Any]] = [
    ("ID", lambda p: p.id),
    ("Title", lambda p: p.title),
    ("Price", lambda p: p.price),
    ("Description", lambda p: p.description),
    ("Category", lambda p: p.category_name),
    ("Category ID", lambda p: p.category_id),
    ("Slug", lambda p: p.slug),
    ("Image Count", lambda p: len(p.images)),
    ("First Image", lambda p: p.first_image),
    ("Created At", lambda p: format_timestamp(p.creation_at)),
    ("Updated At", lambda p: format_timestamp(p.updated_at)),
]


def export_header() -> List[str]:
    return [name for name, _ in EXPORT_COLUMNS]


def _row(product: Product) -> Dict[str, Any]:
    return {name: getter(product) for name, getter in EXPORT_COLUMNS}


def to_csv(products: Iterable[Product]) -> str:
    """
    Render products as CSV text.

    Fields containing a comma, double quote or newline are quoted with inner
    quotes doubled; everything else is written as-is. Missing values are ''.
    Rows are joined by a single '\\n' with no trailing newline.
    """
    # object dtype keeps ints as ints when a column also holds None
    df = pd.DataFrame(
        [_row(p) for p in products],
        columns=export_header(),
        dtype=object,
    )
    text = df.to_csv(index=False, na_rep="", lineterminator="\n")
    return text[:-1] if text.endswith("\n") else text


def export_filename(scope: str, page: Optional[int] = None, when: Optional[datetime] = None) -> str:
    when = when or datetime.now(timezone.utc)
    label = SCOPE_ALL if scope == SCOPE_ALL else f"page-{page or 1}"
    return f"products-export-{label}-{when.strftime('%Y%m%d-%H%M%S')}.csv"


class ExportService:
    """
    Picks the subset to export (whole filtered view or the visible page) and
    renders it. The formatter itself does not care which subset it gets.
    """

    def export(self, store: DataStore, scope: str = SCOPE_ALL) -> Tuple[str, str]:
        """
        :return: (filename, csv_text)
        """
        if scope == SCOPE_PAGE:
            projection = store.projection()
            rows = projection.visible_rows
            filename = export_filename(SCOPE_PAGE, page=projection.page)
        else:
            rows = store.filtered_view
            filename = export_filename(SCOPE_ALL)

        logger.info("csv_export", extra={"scope": scope, "n_rows": len(rows), "csv_filename": filename})
        return filename, to_csv(rows)
