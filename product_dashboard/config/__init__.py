"""
Configuration loading: global.json plus environment overrides.
"""

from .loader import load_settings
from .model import DashboardSettings

__all__ = ["DashboardSettings", "load_settings"]
