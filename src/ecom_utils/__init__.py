"""
ecom-utils — утилиты e-commerce: корзина, скидки, доставка, валюты, НДС.

Содержит:
- ecom_utils.core       : доменные модели, денежная арифметика, JSON контракты
- ecom_utils.cart       : корзина и конвейер расчёта итогов
- ecom_utils.rates      : справочники НДС, курсов валют и зон доставки
"""

from ecom_utils.cart import Cart, CartConfig
from ecom_utils.core.domain import (
    CartTotals,
    Currency,
    Discount,
    DiscountType,
    LineItem,
    Product,
    ProductStatus,
)

__version__ = "1.0.0"

__all__ = [
    "Cart",
    "CartConfig",
    "CartTotals",
    "Currency",
    "Discount",
    "DiscountType",
    "LineItem",
    "Product",
    "ProductStatus",
]
