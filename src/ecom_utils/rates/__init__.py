"""Rates — статические справочники ставок: НДС, курсы валют, доставка.

Все справочники — классы поверх неизменяемых таблиц, передаваемых явно;
модульные функции используют таблицы по умолчанию.
"""

from .currency import (
    CURRENCY_SYMBOLS,
    DEFAULT_EXCHANGE_RATES,
    REFERENCE_CURRENCY,
    CurrencyConverter,
    convert_currency,
    get_currency_symbol,
    get_supported_currencies,
)
from .shipping import (
    DEFAULT_FREE_SHIPPING_THRESHOLD,
    DEFAULT_SHIPPING_ZONES,
    WILDCARD_COUNTRY,
    DeliveryWindow,
    ShippingCalculation,
    ShippingCalculator,
    ShippingRate,
    ShippingZone,
    calculate_shipping,
    format_delivery_time,
    get_shippable_countries,
    is_country_shippable,
)
from .tax import (
    DEFAULT_TAX_RATE_PCT,
    DEFAULT_TAX_TABLE,
    CountryTaxConfig,
    ReducedRate,
    TaxCalculation,
    TaxRateLookup,
    calculate_tax,
    get_country_name,
    get_price_excluding_tax,
    get_supported_countries,
    get_tax_rate,
)

__all__ = [
    # Tax
    "DEFAULT_TAX_RATE_PCT",
    "DEFAULT_TAX_TABLE",
    "CountryTaxConfig",
    "ReducedRate",
    "TaxCalculation",
    "TaxRateLookup",
    "calculate_tax",
    "get_country_name",
    "get_price_excluding_tax",
    "get_supported_countries",
    "get_tax_rate",
    # Currency
    "CURRENCY_SYMBOLS",
    "DEFAULT_EXCHANGE_RATES",
    "REFERENCE_CURRENCY",
    "CurrencyConverter",
    "convert_currency",
    "get_currency_symbol",
    "get_supported_currencies",
    # Shipping
    "DEFAULT_FREE_SHIPPING_THRESHOLD",
    "DEFAULT_SHIPPING_ZONES",
    "WILDCARD_COUNTRY",
    "DeliveryWindow",
    "ShippingCalculation",
    "ShippingCalculator",
    "ShippingRate",
    "ShippingZone",
    "calculate_shipping",
    "format_delivery_time",
    "get_shippable_countries",
    "is_country_shippable",
]
