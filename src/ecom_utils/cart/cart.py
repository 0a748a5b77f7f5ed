"""Cart — корзина покупателя и её итоги.

Корзина владеет упорядоченным списком строк (одна строка на товар,
порядок вставки) и не более чем одной активной скидкой.

Отклонённые операции (некорректное количество, нехватка запаса, недоступный
товар, неизвестный товар, неприменимая скидка) НЕ бросают исключения:
возвращают None/False, оставляют состояние без изменений и пишут причину в лог.

Итоги не кэшируются: get_totals() каждый раз прогоняет конвейер pricing.

Корзина рассчитана на одного писателя (одна корзина на сессию с
последовательными запросами); при конкурентном доступе нужна внешняя
синхронизация вокруг мутаций.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Callable, TextIO

from ecom_utils.core.domain.discount import Discount
from ecom_utils.core.domain.line_item import LineItem
from ecom_utils.core.domain.product import Product
from ecom_utils.core.domain.totals import CartTotals
from ecom_utils.rates.shipping import ShippingCalculation, ShippingCalculator

from .config import CartConfig
from .pricing import PricingBreakdown, calculate_subtotal, compute_breakdown
from .summary import render_summary

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Часы по умолчанию (timezone-aware UTC)."""
    return datetime.now(timezone.utc)


class Cart:
    """Корзина с управлением строками, скидкой и расчётом итогов.

    Example:
        >>> cart = Cart(CartConfig(currency=Currency.EUR, tax_rate=20))
        >>> cart.add_item(product, 2)
        >>> cart.apply_discount(discount)
        >>> totals = cart.get_totals()
    """

    def __init__(
        self,
        config: CartConfig,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Инициализация корзины.

        Args:
            config: неизменяемая конфигурация (валюта, НДС, доставка)
            clock: источник текущего момента (для added_at и срока скидок)
        """
        self._config = config
        self._clock = clock
        self._items: list[LineItem] = []
        self._discount: Discount | None = None

    # =========================================================================
    # GETTERS
    # =========================================================================

    @property
    def config(self) -> CartConfig:
        return self._config

    @property
    def discount(self) -> Discount | None:
        """Активная скидка или None."""
        return self._discount

    def get_items(self) -> list[LineItem]:
        """Копия списка строк (изменение копии не влияет на корзину)."""
        return list(self._items)

    def get_item(self, product_id: str) -> LineItem | None:
        index = self._find_index(product_id)
        return self._items[index] if index is not None else None

    def get_item_count(self) -> int:
        """Суммарное количество единиц во всех строках."""
        return sum(item.quantity for item in self._items)

    def is_empty(self) -> bool:
        return not self._items

    def _find_index(self, product_id: str) -> int | None:
        for index, item in enumerate(self._items):
            if item.product_id == product_id:
                return index
        return None

    # =========================================================================
    # ITEMS
    # =========================================================================

    def add_item(self, product: Product, quantity: int = 1) -> LineItem | None:
        """Добавление товара в корзину.

        Повторное добавление того же товара увеличивает количество
        существующей строки.

        Args:
            product: товар
            quantity: количество (default 1)

        Returns:
            Новая или обновлённая строка; None если операция отклонена
        """
        if quantity <= 0:
            logger.warning("Rejected add of %r: quantity must be > 0, got %s", product.id, quantity)
            return None

        if product.stock < quantity:
            logger.warning(
                "Rejected add of %r: insufficient stock (requested %s, available %s)",
                product.id,
                quantity,
                product.stock,
            )
            return None

        if not product.is_purchasable:
            logger.warning(
                "Rejected add of %r: product status is %s", product.id, product.status.value
            )
            return None

        index = self._find_index(product.id)

        if index is not None:
            new_quantity = self._items[index].quantity + quantity

            if new_quantity > product.stock:
                logger.warning(
                    "Rejected add of %r: resulting quantity %s exceeds stock %s",
                    product.id,
                    new_quantity,
                    product.stock,
                )
                return None

            self._warn_currency_mismatch(product)
            updated = self._items[index].with_quantity(new_quantity)
            self._items[index] = updated
            logger.debug("Increased %r to quantity %s", product.id, new_quantity)
            return updated

        self._warn_currency_mismatch(product)
        item = LineItem(product=product, quantity=quantity, added_at=self._clock())
        self._items.append(item)
        logger.debug("Added %r with quantity %s", product.id, quantity)
        return item

    def _warn_currency_mismatch(self, product: Product) -> None:
        # Валюта товара не проверяется: итоги считаются в валюте корзины
        if product.currency != self._config.currency:
            logger.warning(
                "Product %r is priced in %s but cart currency is %s",
                product.id,
                product.currency.value,
                self._config.currency.value,
                extra={"product_id": product.id, "cart_currency": self._config.currency.value},
            )

    def update_quantity(self, product_id: str, quantity: int) -> bool:
        """Установка количества строки.

        quantity <= 0 удаляет строку.

        Returns:
            True при успехе; False если товара нет в корзине или не хватает запаса
        """
        index = self._find_index(product_id)

        if index is None:
            logger.warning("Rejected update of %r: item not in cart", product_id)
            return False

        if quantity <= 0:
            return self.remove_item(product_id)

        item = self._items[index]
        if quantity > item.product.stock:
            logger.warning(
                "Rejected update of %r: quantity %s exceeds stock %s",
                product_id,
                quantity,
                item.product.stock,
            )
            return False

        self._items[index] = item.with_quantity(quantity)
        return True

    def remove_item(self, product_id: str) -> bool:
        """Удаление строки.

        Returns:
            True если строка удалена; False если товара нет в корзине
        """
        index = self._find_index(product_id)

        if index is None:
            logger.warning("Rejected removal of %r: item not in cart", product_id)
            return False

        del self._items[index]
        return True

    def clear(self) -> None:
        """Очистка строк и скидки. Конфигурация сохраняется."""
        self._items = []
        self._discount = None

    # =========================================================================
    # DISCOUNT
    # =========================================================================

    def apply_discount(self, discount: Discount) -> bool:
        """Применение скидки (заменяет предыдущую, скидки не суммируются).

        Порядок проверок:
        1. Скидка активна
        2. Срок действия не истёк
        3. Подытог (до скидки) не меньше min_order_amount

        Returns:
            True если скидка применена; False — предыдущая скидка сохраняется
        """
        if not discount.is_active:
            logger.warning(
                "Rejected discount %r: not active",
                discount.code,
                extra={"discount_code": discount.code},
            )
            return False

        if discount.is_expired(self._clock()):
            logger.warning(
                "Rejected discount %r: expired at %s",
                discount.code,
                discount.end_date,
                extra={"discount_code": discount.code},
            )
            return False

        subtotal = calculate_subtotal(self._items)
        if discount.min_order_amount is not None and subtotal < discount.min_order_amount:
            logger.warning(
                "Rejected discount %r: subtotal %.2f below minimum %.2f",
                discount.code,
                subtotal,
                discount.min_order_amount,
                extra={"discount_code": discount.code},
            )
            return False

        self._discount = discount
        return True

    def remove_discount(self) -> None:
        self._discount = None

    # =========================================================================
    # TOTALS
    # =========================================================================

    def get_breakdown(self) -> PricingBreakdown:
        """Итоги с неокруглёнными промежуточными значениями."""
        return compute_breakdown(self._items, self._discount, self._config)

    def get_totals(self) -> CartTotals:
        """Итоги корзины, пересчитанные из текущего состояния."""
        return self.get_breakdown().totals

    def shipping_options(
        self,
        country_code: str,
        calculator: ShippingCalculator | None = None,
    ) -> ShippingCalculation:
        """Варианты доставки для текущего содержимого корзины.

        Порог бесплатной доставки оценивается по подытогу после скидки
        с порогом из конфигурации корзины.

        Args:
            country_code: страна доставки
            calculator: справочник зон (по умолчанию — зоны по умолчанию)
        """
        calculator = calculator or ShippingCalculator()
        return calculator.calculate(
            country_code,
            self.get_breakdown().subtotal_after_discount,
            self._config.free_shipping_threshold,
        )

    # =========================================================================
    # SUMMARY
    # =========================================================================

    def display_summary(self, stream: TextIO | None = None) -> None:
        """Печать текстовой сводки корзины (для отладки)."""
        print(render_summary(self), file=stream or sys.stdout)
