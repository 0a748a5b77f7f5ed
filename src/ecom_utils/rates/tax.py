"""
Tax — ставки НДС по странам

Статическая таблица стандартных и пониженных ставок НДС.
Таблица неизменяема (MappingProxyType + frozen dataclasses) и передаётся
в TaxRateLookup явно, поэтому тесты могут подставить собственную таблицу.

Правила поиска:
- Код страны нечувствителен к регистру
- Неизвестная страна → DEFAULT_TAX_RATE_PCT (с предупреждением в лог), не 0
- Категория нечувствительна к регистру; нет пониженной ставки → стандартная
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping

from ecom_utils.core.math.money import percent_of, round_money

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Ставка для неизвестных стран (%)
DEFAULT_TAX_RATE_PCT: Final[float] = 20.0

# Название для неизвестных стран
UNKNOWN_COUNTRY_NAME: Final[str] = "Unknown"


# =============================================================================
# ТАБЛИЦА СТАВОК
# =============================================================================


@dataclass(frozen=True)
class ReducedRate:
    """Пониженная ставка для категории товаров."""

    category: str
    rate: float


@dataclass(frozen=True)
class CountryTaxConfig:
    """Ставки НДС одной страны."""

    country_code: str
    country_name: str
    standard_rate: float
    reduced_rates: tuple[ReducedRate, ...] = ()

    def reduced_rate_for(self, category: str) -> float | None:
        """Пониженная ставка для категории (без учёта регистра) или None."""
        wanted = category.lower()
        for reduced in self.reduced_rates:
            if reduced.category.lower() == wanted:
                return reduced.rate
        return None


def _table(*configs: CountryTaxConfig) -> Mapping[str, CountryTaxConfig]:
    return MappingProxyType({c.country_code.upper(): c for c in configs})


DEFAULT_TAX_TABLE: Final[Mapping[str, CountryTaxConfig]] = _table(
    CountryTaxConfig(
        "FR",
        "France",
        20.0,
        (
            ReducedRate("food", 5.5),
            ReducedRate("books", 5.5),
            ReducedRate("medicine", 2.1),
        ),
    ),
    CountryTaxConfig(
        "DE", "Germany", 19.0, (ReducedRate("food", 7.0), ReducedRate("books", 7.0))
    ),
    CountryTaxConfig("BE", "Belgium", 21.0, (ReducedRate("food", 6.0),)),
    CountryTaxConfig("ES", "Spain", 21.0, (ReducedRate("food", 10.0),)),
    CountryTaxConfig(
        "IT", "Italy", 22.0, (ReducedRate("food", 10.0), ReducedRate("books", 4.0))
    ),
    CountryTaxConfig(
        "GB",
        "United Kingdom",
        20.0,
        (ReducedRate("food", 0.0), ReducedRate("books", 0.0)),
    ),
    CountryTaxConfig("CH", "Switzerland", 8.1, (ReducedRate("food", 2.6),)),
    CountryTaxConfig("PT", "Portugal", 23.0),
    CountryTaxConfig("NL", "Netherlands", 21.0, (ReducedRate("food", 9.0),)),
    CountryTaxConfig("LU", "Luxembourg", 17.0, (ReducedRate("food", 3.0),)),
)


# =============================================================================
# РЕЗУЛЬТАТ
# =============================================================================


@dataclass(frozen=True)
class TaxCalculation:
    """Результат расчёта НДС на сумму."""

    subtotal: float
    tax_rate: float
    tax_amount: float
    total: float
    country_code: str
    country_name: str


# =============================================================================
# LOOKUP
# =============================================================================


class TaxRateLookup:
    """
    Поиск ставок НДС по стране и категории.

    Stateless: вся информация в неизменяемой таблице, переданной при создании.
    """

    def __init__(
        self,
        table: Mapping[str, CountryTaxConfig] = DEFAULT_TAX_TABLE,
        default_rate: float = DEFAULT_TAX_RATE_PCT,
    ):
        """
        Args:
            table: Таблица ставок (ключ — код страны в верхнем регистре)
            default_rate: Ставка для неизвестных стран (%)
        """
        self._table = MappingProxyType({k.upper(): v for k, v in table.items()})
        self.default_rate = default_rate

    def _config(self, country_code: str) -> CountryTaxConfig | None:
        return self._table.get(country_code.upper())

    def rate(self, country_code: str, category: str | None = None) -> float:
        """
        Ставка НДС для страны (и категории).

        Args:
            country_code: Код страны ISO 3166-1 alpha-2 (регистр не важен)
            category: Категория товара (опционально, регистр не важен)

        Returns:
            Ставка в процентах (20.0 означает 20%)

        Examples:
            >>> TaxRateLookup().rate("FR")
            20.0
            >>> TaxRateLookup().rate("fr", "FOOD")
            5.5
        """
        config = self._config(country_code)

        if config is None:
            logger.warning(
                "Unknown country %r, falling back to default tax rate %s%%",
                country_code,
                self.default_rate,
            )
            return self.default_rate

        if category:
            reduced = config.reduced_rate_for(category)
            if reduced is not None:
                return reduced

        return config.standard_rate

    def calculate(
        self,
        subtotal: float,
        country_code: str,
        category: str | None = None,
    ) -> TaxCalculation:
        """
        Расчёт НДС на сумму.

        Args:
            subtotal: Сумма без НДС
            country_code: Код страны
            category: Категория товара (опционально)

        Returns:
            TaxCalculation (tax_amount и total округлены до центов)
        """
        tax_rate = self.rate(country_code, category)
        tax_amount = round_money(percent_of(subtotal, tax_rate))
        total = round_money(subtotal + tax_amount)

        return TaxCalculation(
            subtotal=subtotal,
            tax_rate=tax_rate,
            tax_amount=tax_amount,
            total=total,
            country_code=country_code.upper(),
            country_name=self.country_name(country_code),
        )

    def price_excluding_tax(
        self,
        gross_amount: float,
        country_code: str,
        category: str | None = None,
    ) -> float:
        """
        Сумма без НДС из суммы с НДС.

        Examples:
            >>> TaxRateLookup().price_excluding_tax(120.0, "FR")
            100.0
        """
        tax_rate = self.rate(country_code, category)
        return round_money(gross_amount / (1.0 + tax_rate / 100.0))

    def supported_countries(self) -> list[str]:
        """Коды стран из таблицы (в порядке таблицы)."""
        return list(self._table.keys())

    def country_name(self, country_code: str) -> str:
        """Название страны или "Unknown"."""
        config = self._config(country_code)
        return config.country_name if config is not None else UNKNOWN_COUNTRY_NAME


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_DEFAULT_LOOKUP = TaxRateLookup()


def get_tax_rate(country_code: str, category: str | None = None) -> float:
    """Ставка НДС по таблице по умолчанию."""
    return _DEFAULT_LOOKUP.rate(country_code, category)


def calculate_tax(
    subtotal: float, country_code: str, category: str | None = None
) -> TaxCalculation:
    """Расчёт НДС по таблице по умолчанию."""
    return _DEFAULT_LOOKUP.calculate(subtotal, country_code, category)


def get_price_excluding_tax(
    gross_amount: float, country_code: str, category: str | None = None
) -> float:
    """Сумма без НДС по таблице по умолчанию."""
    return _DEFAULT_LOOKUP.price_excluding_tax(gross_amount, country_code, category)


def get_supported_countries() -> list[str]:
    return _DEFAULT_LOOKUP.supported_countries()


def get_country_name(country_code: str) -> str:
    return _DEFAULT_LOOKUP.country_name(country_code)
