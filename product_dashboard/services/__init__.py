"""
Service layer: remote API client, write coordination and CSV export.
"""

from .export_service import ExportService
from .mutation_service import MutationCoordinator, MutationResult
from .product_api import ProductApi

__all__ = ["ExportService", "MutationCoordinator", "MutationResult", "ProductApi"]
