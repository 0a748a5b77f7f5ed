"""
Domain models and value objects.

Contains fundamental domain entities like Product, Discount, LineItem, CartTotals.
"""

from ecom_utils.core.domain.discount import Discount, DiscountType
from ecom_utils.core.domain.line_item import LineItem
from ecom_utils.core.domain.product import (
    PURCHASABLE_STATUSES,
    Currency,
    Product,
    ProductStatus,
)
from ecom_utils.core.domain.totals import CartTotals

__all__ = [
    # Product model
    "Currency",
    "Product",
    "ProductStatus",
    "PURCHASABLE_STATUSES",
    # Discount model
    "Discount",
    "DiscountType",
    # Cart records
    "LineItem",
    "CartTotals",
]
