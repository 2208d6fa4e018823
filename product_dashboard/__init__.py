"""
Top-level package for the product admin dashboard.

This package exposes the core architecture (domain, services, UI adapters).
Most code should import from submodules such as:
    product_dashboard.core
    product_dashboard.services
    product_dashboard.ui
"""

__all__: list[str] = []
