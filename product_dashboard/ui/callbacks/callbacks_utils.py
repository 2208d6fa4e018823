from __future__ import annotations

import logging
from typing import Any

import dash

logger = logging.getLogger(__name__)


def triggered_value() -> Any:
    """
    Value of the property that fired the current callback.

    Pattern-matched buttons that were just (re)rendered fire with n_clicks
    None/0; callers treat a falsy value as "not actually clicked".
    """
    triggered = dash.ctx.triggered
    if not triggered:
        return None
    return triggered[0].get("value")


def was_clicked() -> bool:
    return bool(triggered_value())
