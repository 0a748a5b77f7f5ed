"""Pricing — конвейер расчёта итогов корзины

Шесть шагов в строго фиксированном порядке, чистая функция от состояния:
1. Подытог = Σ price × quantity (без округления)
2. Скидка: percentage / fixed_amount (не больше подытога) / free_shipping (0),
   ограничение потолком max_discount_amount, округление до центов
3. Подытог после скидки = неокруглённый подытог − округлённая скидка
4. Доставка: 0 при скидке free_shipping; 0 если подытог после скидки
   >= порога; иначе фиксированная стоимость из конфигурации
5. НДС = round(taxable × tax_rate / 100), taxable = подытог после скидки + доставка
   (НДС начисляется и на доставку)
6. Итог = round(taxable + НДС)

Промежуточные значения не округляются, чтобы ошибка округления не накапливалась.
"""

from dataclasses import dataclass
from typing import Iterable

from ecom_utils.core.domain.discount import Discount, DiscountType
from ecom_utils.core.domain.line_item import LineItem
from ecom_utils.core.domain.totals import CartTotals
from ecom_utils.core.math.money import clamp, percent_of, round_money

from .config import CartConfig


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class PricingBreakdown:
    """Результат конвейера: итоги и неокруглённые промежуточные значения."""

    raw_subtotal: float
    discount_amount: float
    subtotal_after_discount: float
    shipping: float
    taxable_amount: float
    tax_amount: float
    total: float

    totals: CartTotals


# =============================================================================
# STEPS
# =============================================================================


def calculate_subtotal(items: Iterable[LineItem]) -> float:
    """Шаг 1: сумма строк без округления."""
    return sum((item.line_total for item in items), 0.0)


def calculate_discount_amount(subtotal: float, discount: Discount | None) -> float:
    """Шаг 2: сумма скидки, округлённая до центов.

    fixed_amount никогда не превышает подытог (итог не бывает отрицательным).
    free_shipping здесь даёт 0, его эффект — на шаге доставки.
    """
    if discount is None:
        return 0.0

    if discount.kind == DiscountType.PERCENTAGE:
        amount = percent_of(subtotal, discount.value)
    elif discount.kind == DiscountType.FIXED_AMOUNT:
        amount = min(discount.value, subtotal)
    else:
        amount = 0.0

    amount = clamp(amount, max_value=discount.max_discount_amount)

    # Округление вверх не должно выводить скидку за округлённый подытог
    return min(round_money(amount), round_money(subtotal))


def calculate_shipping_cost(
    subtotal_after_discount: float,
    discount: Discount | None,
    config: CartConfig,
) -> float:
    """Шаг 4: стоимость доставки.

    Скидка free_shipping и порог — независимые условия, достаточно любого.
    """
    if discount is not None and discount.kind == DiscountType.FREE_SHIPPING:
        return 0.0

    if subtotal_after_discount >= config.free_shipping_threshold:
        return 0.0

    return config.shipping_cost


def calculate_tax_amount(taxable_amount: float, tax_rate: float) -> float:
    """Шаг 5: НДС на облагаемую сумму, округлён до центов."""
    return round_money(percent_of(taxable_amount, tax_rate))


# =============================================================================
# PIPELINE
# =============================================================================


def compute_breakdown(
    items: Iterable[LineItem],
    discount: Discount | None,
    config: CartConfig,
) -> PricingBreakdown:
    """Полный прогон конвейера.

    Args:
        items: строки корзины
        discount: активная скидка (или None)
        config: конфигурация корзины

    Returns:
        PricingBreakdown с CartTotals и промежуточными значениями
    """
    items = list(items)

    # 1-3. Подытог и скидка
    raw_subtotal = calculate_subtotal(items)
    discount_amount = calculate_discount_amount(raw_subtotal, discount)
    subtotal_after_discount = max(raw_subtotal - discount_amount, 0.0)

    # 4. Доставка: порог оценивается по сумме со скидкой
    shipping = calculate_shipping_cost(subtotal_after_discount, discount, config)

    # 5. НДС на товары и доставку
    taxable_amount = subtotal_after_discount + shipping
    tax_amount = calculate_tax_amount(taxable_amount, config.tax_rate)

    # 6. Итог
    total = round_money(taxable_amount + tax_amount)

    totals = CartTotals(
        subtotal=round_money(raw_subtotal),
        discount_amount=discount_amount,
        shipping=shipping,
        tax_amount=tax_amount,
        total=total,
        item_count=sum(item.quantity for item in items),
        currency=config.currency,
    )

    return PricingBreakdown(
        raw_subtotal=raw_subtotal,
        discount_amount=discount_amount,
        subtotal_after_discount=subtotal_after_discount,
        shipping=shipping,
        taxable_amount=taxable_amount,
        tax_amount=tax_amount,
        total=total,
        totals=totals,
    )


def compute_totals(
    items: Iterable[LineItem],
    discount: Discount | None,
    config: CartConfig,
) -> CartTotals:
    """Итоги корзины (см. compute_breakdown)."""
    return compute_breakdown(items, discount, config).totals
