from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from product_dashboard.config.loader import load_settings
from product_dashboard.core.data_store import DataStore
from product_dashboard.core.status import StatusPolicy
from product_dashboard.services.export_service import ExportService
from product_dashboard.services.mutation_service import MutationCoordinator
from product_dashboard.services.product_api import ProductApi
from product_dashboard.ui.callbacks.callbacks_export import register_export_callbacks
from product_dashboard.ui.callbacks.callbacks_load import register_load_callbacks
from product_dashboard.ui.callbacks.callbacks_products import register_product_callbacks
from product_dashboard.ui.callbacks.callbacks_table import register_table_callbacks
from product_dashboard.ui.config import AppConfig
from product_dashboard.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def build_app_context(
    config_root: Path | str = Path("config"),
    api: Optional[ProductApi] = None,
) -> AppConfig:
    config_root = Path(config_root)

    # 1) Load Config
    settings = load_settings(config_root)

    # 2) Initialize State + Service Layer
    store = DataStore(page_size=settings.page_size)
    api = api or ProductApi(settings.api_url, timeout=settings.request_timeout)

    ctx = AppConfig(
        config_root=config_root,
        settings=settings,
        store=store,
        api=api,
        coordinator=MutationCoordinator(api, store),
        export_service=ExportService(),
        status_policy=StatusPolicy(premium_threshold=settings.premium_threshold),
    )
    ctx.validate()
    return ctx


def create_dash_app(
    config_root: Path | str = Path("config"),
    api: Optional[ProductApi] = None,
    ctx: Optional[AppConfig] = None,
) -> Dash:
    # No network traffic here: the first fetch happens in the load callback
    ctx = ctx or build_app_context(config_root, api)

    logger.info(
        "Creating dashboard",
        extra={"api_url": ctx.settings.api_url, "page_size": ctx.settings.page_size},
    )

    # Resolve the assets folder relative to this file so styles.css is found
    # regardless of the working directory.
    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
        suppress_callback_exceptions=True,
    )
    app.title = ctx.settings.ui_title

    # Built per page request so widgets reflect the current store
    app.layout = lambda: build_layout(ctx)

    # Register callbacks
    register_load_callbacks(app, ctx)
    register_table_callbacks(app, ctx)
    register_product_callbacks(app, ctx)
    register_export_callbacks(app, ctx)

    return app
