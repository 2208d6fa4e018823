from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from product_dashboard.core.view_state import DEFAULT_PAGE_SIZE
from product_dashboard.services.product_api import DEFAULT_API_URL, DEFAULT_TIMEOUT


@dataclass
class DashboardSettings:
    ui_title: str = "Product Dashboard"
    subtitle: str = "Catalog administration"
    api_url: str = DEFAULT_API_URL
    request_timeout: float = DEFAULT_TIMEOUT
    page_size: int = DEFAULT_PAGE_SIZE
    page_size_options: List[int] = field(default_factory=lambda: [5, 10, 20, 50])
    premium_threshold: float = 500.0
