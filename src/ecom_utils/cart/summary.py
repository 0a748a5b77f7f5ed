"""Текстовая сводка корзины для отладки и CLI (не стабильный формат)."""

from typing import TYPE_CHECKING

from ecom_utils.rates.currency import get_currency_symbol

if TYPE_CHECKING:
    from .cart import Cart

SUMMARY_WIDTH = 50


def _money(amount: float, symbol: str) -> str:
    return f"{amount:.2f}{symbol}"


def render_summary(cart: "Cart") -> str:
    """Сводка: строки заказа, подытог, скидка, доставка, НДС, итог."""
    totals = cart.get_totals()
    symbol = get_currency_symbol(totals.currency)

    lines = ["CART SUMMARY", "=" * SUMMARY_WIDTH]

    for item in cart.get_items():
        lines.append(item.product.name)
        lines.append(
            f"  {item.quantity} x {_money(item.product.price, symbol)}"
            f" = {_money(item.line_total, symbol)}"
        )

    lines.append("-" * SUMMARY_WIDTH)
    lines.append(f"Subtotal:          {_money(totals.subtotal, symbol)}")

    if totals.discount_amount > 0 and cart.discount is not None:
        lines.append(
            f"Discount:         -{_money(totals.discount_amount, symbol)} ({cart.discount.code})"
        )

    shipping = "FREE" if totals.shipping == 0 else _money(totals.shipping, symbol)
    lines.append(f"Shipping:          {shipping}")
    lines.append(f"Tax ({cart.config.tax_rate:g}%):         {_money(totals.tax_amount, symbol)}")
    lines.append("=" * SUMMARY_WIDTH)
    lines.append(f"TOTAL:             {_money(totals.total, symbol)}")

    return "\n".join(lines)
