"""
Money — денежная арифметика и проверки

Модуль обеспечивает единые правила округления для всех денежных сумм:
- Округление до центов (2 знака) по правилу round half away from zero
- Процент от суммы без промежуточного округления
- Ограничение значения диапазоном (clamp)
- Валидация неотрицательных значений и диапазонов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Округление выполняется через Decimal от кратчайшего repr float,
   поэтому 0.125 → 0.13 и 1.005 → 1.01 (а не 1.0 как у round())
2. Промежуточные значения не округляются, округляются только
   итоговые суммы, которые видит пользователь
3. NaN/Inf никогда не принимаются валидаторами
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество знаков после запятой для денежных сумм
MONEY_DECIMAL_PLACES: Final[int] = 2


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_money(value: float, places: int = MONEY_DECIMAL_PLACES) -> float:
    """
    Округление денежной суммы до заданного количества знаков.

    Использует ROUND_HALF_UP над Decimal, что для Decimal эквивалентно
    "round half away from zero" (знак сохраняется, модуль округляется вверх).

    Args:
        value: Сумма для округления
        places: Количество знаков после запятой (default: 2)

    Returns:
        Округлённая сумма

    Raises:
        ValueError: Если value NaN/Inf или places < 0

    Examples:
        >>> round_money(11.960000000000001)
        11.96
        >>> round_money(0.125)
        0.13
        >>> round_money(-0.125)
        -0.13
    """
    if not is_valid_amount(value):
        raise ValueError(f"Cannot round a non-finite amount: {value}")

    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def percent_of(amount: float, percent: float) -> float:
    """
    Процент от суммы (без округления).

    Args:
        amount: Базовая сумма
        percent: Процент (20 означает 20%)

    Returns:
        amount * percent / 100
    """
    return amount * (percent / 100.0)


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(15.0, 0.0, 10.0)
        10.0
        >>> clamp(15.0, max_value=None)
        15.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_amount(value: float) -> bool:
    """Проверка, что сумма является конечным числом (не NaN/Inf)."""
    return not (math.isnan(value) or math.isinf(value))


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_amount(value):
        raise ValueError(f"{name} must be a valid number (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_amount(value):
        raise ValueError(f"{name} must be a valid number (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
