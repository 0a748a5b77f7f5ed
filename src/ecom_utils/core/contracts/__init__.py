"""
Contract Validation Module

Модуль для валидации JSON контрактов ecom-utils (товар, скидка, итоги корзины).
"""

from .validators import (
    CartTotalsValidator,
    ContractValidator,
    DiscountValidator,
    ProductValidator,
    SchemaLoader,
    validate_cart_totals,
    validate_discount,
    validate_product,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ProductValidator",
    "DiscountValidator",
    "CartTotalsValidator",
    # Functions
    "validate_product",
    "validate_discount",
    "validate_cart_totals",
]
