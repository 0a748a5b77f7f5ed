"""Конфигурация корзины.

Неизменяемая конфигурация, задаётся при создании корзины и переживает clear():
- currency: валюта корзины (обязательно)
- tax_rate: ставка НДС в процентах (default 20)
- free_shipping_threshold: порог бесплатной доставки (default 50)
- shipping_cost: фиксированная стоимость доставки ниже порога (default 4.90)
"""

from dataclasses import dataclass
from typing import Final

from ecom_utils.core.domain.product import Currency
from ecom_utils.core.math.money import validate_in_range, validate_non_negative
from ecom_utils.rates.tax import TaxRateLookup


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_CART_TAX_RATE_PCT: Final[float] = 20.0
DEFAULT_FREE_SHIPPING_THRESHOLD: Final[float] = 50.0
DEFAULT_SHIPPING_COST: Final[float] = 4.90


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CartConfig:
    """Конфигурация корзины.

    Некорректные значения вызывают ValueError при создании.
    """

    currency: Currency
    tax_rate: float = DEFAULT_CART_TAX_RATE_PCT
    free_shipping_threshold: float = DEFAULT_FREE_SHIPPING_THRESHOLD
    shipping_cost: float = DEFAULT_SHIPPING_COST

    def __post_init__(self):
        # Строковый код валюты приводится к enum (ValueError для неизвестных)
        object.__setattr__(self, "currency", Currency(self.currency))

        validate_in_range(self.tax_rate, "tax_rate", min_value=0.0, max_value=100.0)
        validate_non_negative(self.free_shipping_threshold, "free_shipping_threshold")
        validate_non_negative(self.shipping_cost, "shipping_cost")

    @classmethod
    def for_country(
        cls,
        currency: Currency,
        country_code: str,
        category: str | None = None,
        tax_lookup: TaxRateLookup | None = None,
        **overrides: float,
    ) -> "CartConfig":
        """Конфигурация со ставкой НДС страны назначения.

        Args:
            currency: валюта корзины
            country_code: код страны для поиска ставки НДС
            category: категория для пониженной ставки (опционально)
            tax_lookup: справочник ставок (по умолчанию — таблица по умолчанию)
            **overrides: free_shipping_threshold / shipping_cost

        Returns:
            CartConfig с tax_rate из справочника
        """
        lookup = tax_lookup or TaxRateLookup()
        return cls(
            currency=currency,
            tax_rate=lookup.rate(country_code, category),
            **overrides,
        )
