from __future__ import annotations

from dataclasses import dataclass

from .product import Product

PREMIUM = "Premium"
STANDARD = "Standard"


@dataclass(frozen=True)
class StatusPolicy:
    """
    Display-only status badge derived from price.

    The threshold is a placeholder business rule and comes from config
    ('premium_threshold'); there is no backing field on the product.
    """

    premium_threshold: float = 500.0

    def label_for(self, product: Product) -> str:
        try:
            price = float(product.price)
        except (TypeError, ValueError):
            return STANDARD
        return PREMIUM if price > self.premium_threshold else STANDARD

    def badge_color(self, product: Product) -> str:
        return "warning" if self.label_for(product) == PREMIUM else "success"
