"""Демонстрация ecom-utils: python -m ecom_utils.demo"""

import json
import logging

from ecom_utils.cart import Cart, CartConfig
from ecom_utils.core.contracts import validate_cart_totals
from ecom_utils.core.domain import Currency, Discount, DiscountType, Product
from ecom_utils.logging_config import setup_logging
from ecom_utils.rates import calculate_tax, convert_currency, format_delivery_time

logger = logging.getLogger(__name__)


def build_demo_cart() -> Cart:
    """Корзина: 2 футболки, джинсы, кроссовки; порог бесплатной доставки 100."""
    tshirt = Product(id="1", name="Premium T-shirt", price=29.90, currency=Currency.EUR, stock=100)
    jeans = Product(id="2", name="Slim Jeans", price=59.90, currency=Currency.EUR, stock=50)
    sneakers = Product(id="3", name="White Sneakers", price=89.90, currency=Currency.EUR, stock=30)

    cart = Cart(
        CartConfig(
            currency=Currency.EUR,
            tax_rate=20,
            free_shipping_threshold=100,
            shipping_cost=4.90,
        )
    )
    cart.add_item(tshirt, 2)
    cart.add_item(jeans, 1)
    cart.add_item(sneakers, 1)
    return cart


def describe_shipping(cart: Cart, country_code: str) -> str:
    """Самый дешёвый вариант доставки для корзины (порог по подытогу после скидки)."""
    shipping = cart.shipping_options(country_code)
    if shipping.cheapest_rate is None:
        return f"SHIPPING to {country_code}: unavailable"

    line = (
        f"SHIPPING to {country_code} ({shipping.zone_name}): cheapest {shipping.cheapest_rate.name}"
        f" {shipping.cheapest_rate.price:.2f},"
        f" {format_delivery_time(shipping.cheapest_rate.estimated_days)}"
    )
    if not shipping.free_shipping_eligible:
        line += f" ({shipping.amount_for_free_shipping:.2f} more for free shipping)"
    return line


def main() -> None:
    setup_logging("INFO", json_format=False)

    cart = build_demo_cart()

    print("CART WITHOUT DISCOUNT:")
    cart.display_summary()

    promo = Discount(code="SALE20", kind=DiscountType.PERCENTAGE, value=20)
    if not cart.apply_discount(promo):
        logger.error("Demo discount %s was rejected", promo.code)

    print("\nCART WITH DISCOUNT:")
    cart.display_summary()

    payload = cart.get_totals().to_payload()
    validate_cart_totals(payload)
    print("\nAPI PAYLOAD:")
    print(json.dumps(payload, indent=2))

    print("\nTAX (FR, books, 100.00):", calculate_tax(100.0, "FR", "books"))
    print("CONVERT 100 EUR -> USD:", convert_currency(100.0, Currency.EUR, Currency.USD))

    print(describe_shipping(cart, "DE"))


if __name__ == "__main__":
    main()
