"""
Shipping — зоны и тарифы доставки

Зона доставки — именованная группа кодов стран с общим набором тарифов.
Поиск зоны:
1. Зона, явно содержащая код страны (первая по порядку)
2. Иначе wildcard-зона "*" (остальной мир), если она есть
3. Иначе доставка недоступна

Бесплатная доставка (order_amount >= free_shipping_threshold) обнуляет
только ОДИН самый дешёвый тариф зоны; при равных ценах — первый по порядку.
"""

import logging
from dataclasses import dataclass, replace
from typing import Final

from ecom_utils.core.math.money import round_money

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Код страны, означающий "все остальные страны"
WILDCARD_COUNTRY: Final[str] = "*"

# Порог бесплатной доставки по умолчанию
DEFAULT_FREE_SHIPPING_THRESHOLD: Final[float] = 50.0

# Название зоны, когда доставка недоступна
UNKNOWN_ZONE_NAME: Final[str] = "Unknown"


# =============================================================================
# ТАБЛИЦА ЗОН
# =============================================================================


@dataclass(frozen=True)
class DeliveryWindow:
    """Ожидаемый срок доставки в рабочих днях."""

    min_days: int
    max_days: int

    def __post_init__(self):
        if self.min_days < 0 or self.max_days < self.min_days:
            raise ValueError(
                f"Invalid delivery window: min_days={self.min_days}, max_days={self.max_days}"
            )


@dataclass(frozen=True)
class ShippingRate:
    """Тариф доставки."""

    id: str
    name: str
    price: float
    estimated_days: DeliveryWindow


@dataclass(frozen=True)
class ShippingZone:
    """Зона доставки: набор стран и их тарифы."""

    id: str
    name: str
    countries: tuple[str, ...]
    rates: tuple[ShippingRate, ...]

    @property
    def is_wildcard(self) -> bool:
        return WILDCARD_COUNTRY in self.countries

    def covers(self, country_code: str) -> bool:
        return country_code.upper() in self.countries


DEFAULT_SHIPPING_ZONES: Final[tuple[ShippingZone, ...]] = (
    ShippingZone(
        id="france",
        name="Metropolitan France",
        countries=("FR",),
        rates=(
            ShippingRate("standard-fr", "Standard delivery", 4.90, DeliveryWindow(3, 5)),
            ShippingRate("express-fr", "Express delivery", 9.90, DeliveryWindow(1, 2)),
            ShippingRate("relay-fr", "Pickup point", 3.90, DeliveryWindow(3, 5)),
        ),
    ),
    ShippingZone(
        id="europe",
        name="Europe",
        countries=("DE", "BE", "ES", "IT", "NL", "PT", "AT", "LU", "CH", "GB"),
        rates=(
            ShippingRate("standard-eu", "Standard delivery", 9.90, DeliveryWindow(5, 10)),
            ShippingRate("express-eu", "Express delivery", 19.90, DeliveryWindow(2, 4)),
        ),
    ),
    ShippingZone(
        id="world",
        name="International",
        countries=(WILDCARD_COUNTRY,),
        rates=(
            ShippingRate(
                "standard-world", "International delivery", 19.90, DeliveryWindow(10, 20)
            ),
            ShippingRate(
                "express-world", "International express", 39.90, DeliveryWindow(5, 10)
            ),
        ),
    ),
)


# =============================================================================
# РЕЗУЛЬТАТ
# =============================================================================


@dataclass(frozen=True)
class ShippingCalculation:
    """Результат расчёта вариантов доставки."""

    available: bool
    zone_name: str
    rates: tuple[ShippingRate, ...]
    cheapest_rate: ShippingRate | None
    fastest_rate: ShippingRate | None
    free_shipping_eligible: bool
    amount_for_free_shipping: float


# =============================================================================
# CALCULATOR
# =============================================================================


class ShippingCalculator:
    """
    Расчёт вариантов доставки по таблице зон.

    Порядок:
    1. Поиск зоны (точная страна → wildcard → недоступно)
    2. Проверка порога бесплатной доставки
    3. Обнуление самого дешёвого тарифа (если порог достигнут)
    4. Выбор cheapest (минимальная цена) и fastest (минимальный min_days)
    """

    def __init__(self, zones: tuple[ShippingZone, ...] = DEFAULT_SHIPPING_ZONES):
        self.zones = tuple(zones)

    def find_zone(self, country_code: str) -> ShippingZone | None:
        """
        Зона доставки для страны.

        Returns:
            Зона с точным совпадением, иначе wildcard-зона, иначе None
        """
        for zone in self.zones:
            if zone.covers(country_code):
                return zone

        for zone in self.zones:
            if zone.is_wildcard:
                return zone

        return None

    def calculate(
        self,
        country_code: str,
        order_amount: float,
        free_shipping_threshold: float = DEFAULT_FREE_SHIPPING_THRESHOLD,
    ) -> ShippingCalculation:
        """
        Варианты доставки для заказа.

        Args:
            country_code: Код страны доставки
            order_amount: Сумма заказа (для проверки порога)
            free_shipping_threshold: Порог бесплатной доставки

        Returns:
            ShippingCalculation; available=False если зона не найдена
        """
        zone = self.find_zone(country_code)

        if zone is None:
            logger.warning("No shipping zone covers country %r", country_code)
            return ShippingCalculation(
                available=False,
                zone_name=UNKNOWN_ZONE_NAME,
                rates=(),
                cheapest_rate=None,
                fastest_rate=None,
                free_shipping_eligible=False,
                amount_for_free_shipping=0.0,
            )

        free_shipping_eligible = order_amount >= free_shipping_threshold
        rates = list(zone.rates)

        if free_shipping_eligible and rates:
            # Строгое "<" сохраняет первый тариф при равных ценах
            cheapest_index = 0
            for index, rate in enumerate(rates):
                if rate.price < rates[cheapest_index].price:
                    cheapest_index = index
            rates[cheapest_index] = replace(rates[cheapest_index], price=0.0)

        # sorted() стабилен: при равенстве побеждает первый по порядку зоны
        by_price = sorted(rates, key=lambda r: r.price)
        by_speed = sorted(rates, key=lambda r: r.estimated_days.min_days)

        return ShippingCalculation(
            available=True,
            zone_name=zone.name,
            rates=tuple(rates),
            cheapest_rate=by_price[0] if by_price else None,
            fastest_rate=by_speed[0] if by_speed else None,
            free_shipping_eligible=free_shipping_eligible,
            amount_for_free_shipping=(
                0.0
                if free_shipping_eligible
                else round_money(free_shipping_threshold - order_amount)
            ),
        )

    def is_shippable(self, country_code: str) -> bool:
        return self.find_zone(country_code) is not None

    def shippable_countries(self) -> list[str]:
        """Явно перечисленные страны всех зон (без wildcard и дубликатов)."""
        countries: list[str] = []
        for zone in self.zones:
            if zone.is_wildcard:
                continue
            for country in zone.countries:
                if country not in countries:
                    countries.append(country)
        return countries


def format_delivery_time(window: DeliveryWindow) -> str:
    """
    Текстовое описание срока доставки.

    Examples:
        >>> format_delivery_time(DeliveryWindow(3, 5))
        '3-5 business days'
        >>> format_delivery_time(DeliveryWindow(1, 1))
        '1 business day'
    """
    if window.min_days == window.max_days:
        suffix = "day" if window.min_days == 1 else "days"
        return f"{window.min_days} business {suffix}"

    return f"{window.min_days}-{window.max_days} business days"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_DEFAULT_CALCULATOR = ShippingCalculator()


def calculate_shipping(
    country_code: str,
    order_amount: float,
    free_shipping_threshold: float = DEFAULT_FREE_SHIPPING_THRESHOLD,
) -> ShippingCalculation:
    """Варианты доставки по таблице зон по умолчанию."""
    return _DEFAULT_CALCULATOR.calculate(country_code, order_amount, free_shipping_threshold)


def is_country_shippable(country_code: str) -> bool:
    return _DEFAULT_CALCULATOR.is_shippable(country_code)


def get_shippable_countries() -> list[str]:
    return _DEFAULT_CALCULATOR.shippable_countries()
