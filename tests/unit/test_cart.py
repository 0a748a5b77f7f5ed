"""Unit тесты для Cart: управление строками и скидками.

Coverage:
- add_item: новые строки, накопление количества, отклонения
- update_quantity / remove_item / clear
- Защитная копия get_items()
- apply_discount: активность, срок действия, минимальная сумма, замена
- Логирование отклонённых операций
"""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from ecom_utils.cart import Cart, CartConfig
from ecom_utils.core.domain import (
    Currency,
    Discount,
    DiscountType,
    LineItem,
    Product,
    ProductStatus,
)

NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def cart() -> Cart:
    """Корзина EUR, НДС 20%, часы зафиксированы."""
    return Cart(CartConfig(currency=Currency.EUR, tax_rate=20), clock=lambda: NOW)


@pytest.fixture
def tshirt() -> Product:
    return Product(id="1", name="Premium T-shirt", price=29.90, currency=Currency.EUR, stock=10)


@pytest.fixture
def jeans() -> Product:
    return Product(id="2", name="Slim Jeans", price=59.90, currency=Currency.EUR, stock=5)


def snapshot(cart: Cart) -> tuple:
    """Состояние корзины для проверки отсутствия изменений."""
    return (tuple(cart.get_items()), cart.discount)


# =============================================================================
# ADD ITEM
# =============================================================================


class TestAddItem:
    def test_add_new_product(self, cart: Cart, tshirt: Product) -> None:
        item = cart.add_item(tshirt, 2)

        assert isinstance(item, LineItem)
        assert item.quantity == 2
        assert item.added_at == NOW
        assert cart.get_item_count() == 2
        assert len(cart.get_items()) == 1
        assert not cart.is_empty()

    def test_default_quantity_is_one(self, cart: Cart, tshirt: Product) -> None:
        assert cart.add_item(tshirt).quantity == 1

    def test_same_product_accumulates(self, cart: Cart, tshirt: Product) -> None:
        """Повторное добавление увеличивает количество одной строки."""
        cart.add_item(tshirt, 1)
        item = cart.add_item(tshirt, 2)

        assert item.quantity == 3
        assert cart.get_item_count() == 3
        assert len(cart.get_items()) == 1
        assert cart.get_item("1") == item

    def test_accumulation_keeps_added_at(self, tshirt: Product) -> None:
        moments = iter([NOW, NOW + timedelta(hours=1)])
        cart = Cart(CartConfig(currency=Currency.EUR), clock=lambda: next(moments))

        cart.add_item(tshirt, 1)
        item = cart.add_item(tshirt, 1)

        assert item.added_at == NOW

    def test_insertion_order_preserved(self, cart: Cart, tshirt: Product, jeans: Product) -> None:
        cart.add_item(jeans, 1)
        cart.add_item(tshirt, 1)
        cart.add_item(jeans, 1)

        assert [i.product_id for i in cart.get_items()] == ["2", "1"]

    @pytest.mark.parametrize("quantity", [0, -1, -10])
    def test_non_positive_quantity_rejected(
        self, cart: Cart, tshirt: Product, quantity: int
    ) -> None:
        assert cart.add_item(tshirt, quantity) is None
        assert cart.is_empty()

    def test_insufficient_stock_rejected(self, cart: Cart, tshirt: Product) -> None:
        assert cart.add_item(tshirt, 11) is None
        assert cart.is_empty()

    def test_quantity_equal_to_stock_allowed(self, cart: Cart, tshirt: Product) -> None:
        assert cart.add_item(tshirt, 10).quantity == 10

    def test_accumulation_beyond_stock_rejected(self, cart: Cart, jeans: Product) -> None:
        cart.add_item(jeans, 3)
        before = snapshot(cart)

        assert cart.add_item(jeans, 3) is None
        assert snapshot(cart) == before
        assert cart.get_item_count() == 3

    @pytest.mark.parametrize(
        "status", [ProductStatus.OUT_OF_STOCK, ProductStatus.DISCONTINUED]
    )
    def test_unavailable_status_rejected(
        self, cart: Cart, tshirt: Product, status: ProductStatus
    ) -> None:
        product = tshirt.model_copy(update={"status": status})
        assert cart.add_item(product, 1) is None
        assert cart.is_empty()

    def test_preorder_accepted(self, cart: Cart, tshirt: Product) -> None:
        product = tshirt.model_copy(update={"status": ProductStatus.PREORDER})
        assert cart.add_item(product, 1) is not None

    def test_currency_mismatch_accepted_with_warning(
        self, cart: Cart, tshirt: Product, caplog
    ) -> None:
        usd_product = tshirt.model_copy(update={"id": "usd", "currency": Currency.USD})

        with caplog.at_level(logging.WARNING, logger="ecom_utils.cart.cart"):
            assert cart.add_item(usd_product, 1) is not None

        assert "priced in USD but cart currency is EUR" in caplog.text

    def test_currency_mismatch_not_logged_for_rejected_add(
        self, cart: Cart, tshirt: Product, caplog
    ) -> None:
        usd_product = tshirt.model_copy(update={"id": "usd", "currency": Currency.USD})
        cart.add_item(usd_product, 8)
        caplog.clear()

        with caplog.at_level(logging.WARNING, logger="ecom_utils.cart.cart"):
            assert cart.add_item(usd_product, 5) is None

        assert "exceeds stock" in caplog.text
        assert "priced in USD" not in caplog.text
        assert cart.get_item("usd").quantity == 8

    def test_rejection_logged(self, cart: Cart, tshirt: Product, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="ecom_utils.cart.cart"):
            cart.add_item(tshirt, 100)

        assert "insufficient stock" in caplog.text


# =============================================================================
# UPDATE / REMOVE / CLEAR
# =============================================================================


class TestUpdateQuantity:
    def test_update(self, cart: Cart, tshirt: Product) -> None:
        cart.add_item(tshirt, 1)

        assert cart.update_quantity("1", 5) is True
        assert cart.get_item("1").quantity == 5

    def test_unknown_product(self, cart: Cart) -> None:
        assert cart.update_quantity("missing", 1) is False

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_non_positive_removes(self, cart: Cart, tshirt: Product, quantity: int) -> None:
        cart.add_item(tshirt, 2)

        assert cart.update_quantity("1", quantity) is True
        assert cart.is_empty()

    def test_beyond_stock_rejected(self, cart: Cart, tshirt: Product) -> None:
        cart.add_item(tshirt, 2)
        before = snapshot(cart)

        assert cart.update_quantity("1", 11) is False
        assert snapshot(cart) == before

    def test_update_replaces_record(self, cart: Cart, tshirt: Product) -> None:
        original = cart.add_item(tshirt, 1)
        cart.update_quantity("1", 4)

        assert original.quantity == 1
        assert cart.get_item("1").quantity == 4


class TestRemoveAndClear:
    def test_remove(self, cart: Cart, tshirt: Product, jeans: Product) -> None:
        cart.add_item(tshirt, 1)
        cart.add_item(jeans, 1)

        assert cart.remove_item("1") is True
        assert [i.product_id for i in cart.get_items()] == ["2"]

    def test_remove_unknown(self, cart: Cart, tshirt: Product) -> None:
        cart.add_item(tshirt, 1)

        assert cart.remove_item("missing") is False
        assert cart.get_item_count() == 1

    def test_clear_resets_items_and_discount(self, cart: Cart, tshirt: Product) -> None:
        cart.add_item(tshirt, 2)
        cart.apply_discount(Discount(code="SALE", kind=DiscountType.PERCENTAGE, value=10))

        cart.clear()

        assert cart.is_empty()
        assert cart.discount is None
        assert cart.get_item_count() == 0
        assert cart.config.currency == Currency.EUR

    def test_clear_empty_cart(self, cart: Cart) -> None:
        cart.clear()
        assert cart.is_empty()
        assert cart.discount is None

    def test_get_items_is_defensive_copy(self, cart: Cart, tshirt: Product, jeans: Product) -> None:
        cart.add_item(tshirt, 1)

        items = cart.get_items()
        items.clear()
        items.append(LineItem(product=jeans, quantity=1, added_at=NOW))

        assert [i.product_id for i in cart.get_items()] == ["1"]


# =============================================================================
# DISCOUNTS
# =============================================================================


class TestApplyDiscount:
    def test_apply_valid(self, cart: Cart, tshirt: Product) -> None:
        cart.add_item(tshirt, 2)
        discount = Discount(code="SALE10", kind=DiscountType.PERCENTAGE, value=10)

        assert cart.apply_discount(discount) is True
        assert cart.discount == discount

    def test_inactive_rejected(self, cart: Cart, tshirt: Product) -> None:
        cart.add_item(tshirt, 2)
        discount = Discount(code="OFF", kind=DiscountType.PERCENTAGE, value=10, is_active=False)

        assert cart.apply_discount(discount) is False
        assert cart.discount is None

    def test_expired_rejected(self, cart: Cart, tshirt: Product) -> None:
        cart.add_item(tshirt, 2)
        discount = Discount(
            code="OLD",
            kind=DiscountType.PERCENTAGE,
            value=10,
            end_date=NOW - timedelta(days=1),
        )

        assert cart.apply_discount(discount) is False

    def test_future_end_date_accepted(self, cart: Cart, tshirt: Product) -> None:
        cart.add_item(tshirt, 2)
        discount = Discount(
            code="NEW",
            kind=DiscountType.PERCENTAGE,
            value=10,
            end_date=NOW + timedelta(days=1),
        )

        assert cart.apply_discount(discount) is True

    def test_min_order_not_met(self, cart: Cart, tshirt: Product) -> None:
        """min_order_amount 1000 на подытоге 29.90 → отклонено."""
        cart.add_item(tshirt, 1)
        discount = Discount(
            code="BIG", kind=DiscountType.FIXED_AMOUNT, value=50, min_order_amount=1000
        )

        assert cart.apply_discount(discount) is False
        assert cart.discount is None

    def test_min_order_exactly_met(self, cart: Cart, tshirt: Product) -> None:
        cart.add_item(tshirt, 1)
        discount = Discount(
            code="EXACT", kind=DiscountType.FIXED_AMOUNT, value=5, min_order_amount=29.90
        )

        assert cart.apply_discount(discount) is True

    def test_replaces_previous_discount(self, cart: Cart, tshirt: Product) -> None:
        cart.add_item(tshirt, 2)
        first = Discount(code="A", kind=DiscountType.PERCENTAGE, value=10)
        second = Discount(code="B", kind=DiscountType.FREE_SHIPPING)

        cart.apply_discount(first)
        cart.apply_discount(second)

        assert cart.discount == second

    def test_rejection_keeps_previous_discount(self, cart: Cart, tshirt: Product) -> None:
        cart.add_item(tshirt, 2)
        active = Discount(code="A", kind=DiscountType.PERCENTAGE, value=10)
        cart.apply_discount(active)

        for invalid in (
            Discount(code="OFF", kind=DiscountType.PERCENTAGE, value=50, is_active=False),
            Discount(
                code="OLD",
                kind=DiscountType.PERCENTAGE,
                value=50,
                end_date=NOW - timedelta(seconds=1),
            ),
            Discount(code="MIN", kind=DiscountType.PERCENTAGE, value=50, min_order_amount=500),
        ):
            assert cart.apply_discount(invalid) is False
            assert cart.discount == active

    def test_remove_discount(self, cart: Cart, tshirt: Product) -> None:
        cart.add_item(tshirt, 2)
        cart.apply_discount(Discount(code="A", kind=DiscountType.PERCENTAGE, value=10))

        cart.remove_discount()

        assert cart.discount is None

    def test_eligibility_not_rechecked(self, cart: Cart, tshirt: Product) -> None:
        """Минимальная сумма проверяется только при применении."""
        cart.add_item(tshirt, 2)
        discount = Discount(
            code="MIN50", kind=DiscountType.FIXED_AMOUNT, value=5, min_order_amount=50
        )
        cart.apply_discount(discount)

        cart.update_quantity("1", 1)

        assert cart.discount == discount
        assert cart.get_totals().discount_amount == 5.0

    def test_rejection_logged(self, cart: Cart, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="ecom_utils.cart.cart"):
            cart.apply_discount(
                Discount(code="OFF", kind=DiscountType.PERCENTAGE, value=5, is_active=False)
            )

        assert "Rejected discount 'OFF': not active" in caplog.text
