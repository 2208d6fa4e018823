from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from product_dashboard.config.model import DashboardSettings
from product_dashboard.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_API_URL = "PRODUCT_API_URL"
ENV_API_TIMEOUT = "PRODUCT_API_TIMEOUT"
ENV_PAGE_SIZE = "PRODUCT_DASHBOARD_PAGE_SIZE"


def load_settings(root: Path | str, environ: Optional[Mapping[str, str]] = None) -> DashboardSettings:
    """
    Load dashboard settings from a config directory.

    Expected structure:

        root/
            global.json

    Keys (all optional): ui_title, subtitle, api_url, request_timeout,
    page_size, page_size_options, premium_threshold.

    A missing global.json means defaults. Environment variables
    PRODUCT_API_URL, PRODUCT_API_TIMEOUT and PRODUCT_DASHBOARD_PAGE_SIZE
    override the file.

    :param root: directory containing 'global.json'
    :param environ: mapping used for overrides, defaults to os.environ
    :raises ConfigError: if the file is not valid JSON or a value has the wrong type
    """
    root = Path(root)
    environ = os.environ if environ is None else environ

    logger.info("Loading dashboard settings", extra={"config_root": str(root)})

    raw: Dict[str, Any] = {}
    global_path = root / "global.json"
    if global_path.is_file():
        try:
            with global_path.open() as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{global_path} is not valid JSON: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{global_path} must contain a JSON object")
    else:
        logger.warning("No global.json under %s, using defaults", root)

    if environ.get(ENV_API_URL):
        raw["api_url"] = environ[ENV_API_URL]
    if environ.get(ENV_API_TIMEOUT):
        raw["request_timeout"] = environ[ENV_API_TIMEOUT]
    if environ.get(ENV_PAGE_SIZE):
        raw["page_size"] = environ[ENV_PAGE_SIZE]

    defaults = DashboardSettings()
    settings = DashboardSettings(
        ui_title=str(raw.get("ui_title", defaults.ui_title)),
        subtitle=str(raw.get("subtitle", defaults.subtitle)),
        api_url=str(raw.get("api_url", defaults.api_url)),
        request_timeout=_positive_number(raw, "request_timeout", defaults.request_timeout),
        page_size=int(_positive_number(raw, "page_size", defaults.page_size)),
        page_size_options=_page_size_options(raw.get("page_size_options", defaults.page_size_options)),
        premium_threshold=_number(raw, "premium_threshold", defaults.premium_threshold),
    )

    if settings.page_size not in settings.page_size_options:
        settings.page_size_options = sorted(set(settings.page_size_options) | {settings.page_size})

    return settings


def _number(raw: Dict[str, Any], key: str, default: float) -> float:
    value = raw.get(key, default)
    if isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"'{key}' must be a number, got {value!r}")


def _positive_number(raw: Dict[str, Any], key: str, default: float) -> float:
    value = _number(raw, key, default)
    if value <= 0:
        raise ConfigError(f"'{key}' must be positive, got {value!r}")
    return value


def _page_size_options(value: Any) -> list[int]:
    if not isinstance(value, list) or not value:
        raise ConfigError("'page_size_options' must be a non-empty list of integers")
    try:
        options = sorted({int(v) for v in value})
    except (TypeError, ValueError):
        raise ConfigError(f"'page_size_options' must contain integers, got {value!r}")
    if options[0] < 1:
        raise ConfigError("'page_size_options' entries must be >= 1")
    return options
