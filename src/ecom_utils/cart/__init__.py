"""Cart — корзина и конвейер расчёта итогов.

Конвейер (фиксированный порядок):
- Подытог → Скидка → Подытог после скидки → Доставка → НДС → Итог
"""

from .cart import Cart
from .config import (
    DEFAULT_CART_TAX_RATE_PCT,
    DEFAULT_FREE_SHIPPING_THRESHOLD,
    DEFAULT_SHIPPING_COST,
    CartConfig,
)
from .pricing import PricingBreakdown, compute_breakdown, compute_totals
from .summary import render_summary

__all__ = [
    "Cart",
    "CartConfig",
    "DEFAULT_CART_TAX_RATE_PCT",
    "DEFAULT_FREE_SHIPPING_THRESHOLD",
    "DEFAULT_SHIPPING_COST",
    "PricingBreakdown",
    "compute_breakdown",
    "compute_totals",
    "render_summary",
]
