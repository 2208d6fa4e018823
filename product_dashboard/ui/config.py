from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from product_dashboard.config.model import DashboardSettings
from product_dashboard.core.data_store import DataStore
from product_dashboard.core.status import StatusPolicy
from product_dashboard.services.export_service import ExportService
from product_dashboard.services.mutation_service import MutationCoordinator
from product_dashboard.services.product_api import ProductApi


@dataclass
class AppConfig:
    """
    Holds shared state for the Dash app: settings, the DataStore and the
    services that act on it. Passed into layout + callback registration
    functions instead of using module-level globals.
    """
    config_root: Path
    settings: DashboardSettings
    store: DataStore
    api: Optional[ProductApi] = None
    coordinator: Optional[MutationCoordinator] = None
    export_service: Optional[ExportService] = None
    status_policy: StatusPolicy = field(default_factory=StatusPolicy)

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.coordinator is None:
            raise RuntimeError("AppConfig.coordinator must be initialized.")
        if self.export_service is None:
            raise RuntimeError("AppConfig.export_service must be initialized.")
