"""
Currency — конвертация валют по статическим курсам

Курсы заданы как множители относительно опорной валюты (EUR = 1).
Конвертация между двумя не-опорными валютами идёт через опорную:
    amount_ref = amount / rate[from]
    converted  = amount_ref * rate[to]
Результат округляется до центов. Одинаковые валюты → сумма без изменений.
"""

from types import MappingProxyType
from typing import Final, Mapping

from ecom_utils.core.domain.product import Currency
from ecom_utils.core.math.money import round_money


# =============================================================================
# ТАБЛИЦЫ
# =============================================================================

# Опорная валюта таблицы курсов
REFERENCE_CURRENCY: Final[Currency] = Currency.EUR

# Курсы относительно EUR
DEFAULT_EXCHANGE_RATES: Final[Mapping[Currency, float]] = MappingProxyType(
    {
        Currency.EUR: 1.0,
        Currency.USD: 1.08,
        Currency.GBP: 0.86,
        Currency.CHF: 0.95,
        Currency.CAD: 1.47,
    }
)

# Символы валют (для отладочного вывода, не локализация)
CURRENCY_SYMBOLS: Final[Mapping[Currency, str]] = MappingProxyType(
    {
        Currency.EUR: "€",
        Currency.USD: "$",
        Currency.GBP: "£",
        Currency.CHF: "CHF",
        Currency.CAD: "CA$",
    }
)


# =============================================================================
# CONVERTER
# =============================================================================


class CurrencyConverter:
    """Конвертер валют поверх неизменяемой таблицы курсов."""

    def __init__(
        self,
        rates: Mapping[Currency, float] = DEFAULT_EXCHANGE_RATES,
        symbols: Mapping[Currency, str] = CURRENCY_SYMBOLS,
    ):
        for currency, rate in rates.items():
            if rate <= 0:
                raise ValueError(f"Exchange rate for {currency} must be positive, got {rate}")

        self._rates = MappingProxyType(dict(rates))
        self._symbols = MappingProxyType(dict(symbols))

    def _rate(self, currency: Currency) -> float:
        try:
            return self._rates[Currency(currency)]
        except (KeyError, ValueError) as e:
            raise ValueError(f"Unsupported currency: {currency}") from e

    def convert(self, amount: float, from_currency: Currency, to_currency: Currency) -> float:
        """
        Конвертация суммы из одной валюты в другую.

        Args:
            amount: Сумма в from_currency
            from_currency: Исходная валюта
            to_currency: Целевая валюта

        Returns:
            Сумма в to_currency, округлённая до центов
            (без изменений, если валюты совпадают)

        Raises:
            ValueError: Если валюты нет в таблице курсов

        Examples:
            >>> CurrencyConverter().convert(100.0, Currency.EUR, Currency.USD)
            108.0
            >>> CurrencyConverter().convert(100.0, Currency.USD, Currency.EUR)
            92.59
        """
        if Currency(from_currency) == Currency(to_currency):
            return amount

        amount_in_reference = amount / self._rate(from_currency)
        return round_money(amount_in_reference * self._rate(to_currency))

    def symbol(self, currency: Currency) -> str:
        """Символ валюты; код валюты, если символ не задан."""
        currency = Currency(currency)
        return self._symbols.get(currency, currency.value)

    def supported_currencies(self) -> list[Currency]:
        return list(self._rates.keys())


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_DEFAULT_CONVERTER = CurrencyConverter()


def convert_currency(amount: float, from_currency: Currency, to_currency: Currency) -> float:
    """Конвертация по таблице курсов по умолчанию."""
    return _DEFAULT_CONVERTER.convert(amount, from_currency, to_currency)


def get_currency_symbol(currency: Currency) -> str:
    return _DEFAULT_CONVERTER.symbol(currency)


def get_supported_currencies() -> list[Currency]:
    return _DEFAULT_CONVERTER.supported_currencies()
