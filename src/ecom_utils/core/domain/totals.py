"""
CartTotals — Итоги корзины

Производная запись (не хранится в корзине), пересчитывается при каждом запросе.
Сериализуется в JSON-совместимый dict по схеме contracts/schema/cart_totals.json.
"""

from typing import Any

from pydantic import BaseModel, Field

from .product import Currency


class CartTotals(BaseModel):
    """Итоги корзины: подытог, скидка, доставка, НДС, итог."""

    subtotal: float = Field(..., ge=0, description="Подытог до скидки (округлён)")
    discount_amount: float = Field(..., ge=0, description="Сумма скидки (округлена)")
    shipping: float = Field(..., ge=0, description="Стоимость доставки")
    tax_amount: float = Field(..., ge=0, description="Сумма НДС (округлена)")
    total: float = Field(..., ge=0, description="Итог к оплате (округлён)")
    item_count: int = Field(..., ge=0, description="Суммарное количество единиц")
    currency: Currency = Field(..., description="Валюта корзины")

    model_config = {"frozen": True}

    def to_payload(self) -> dict[str, Any]:
        """JSON-совместимое представление для ответа API."""
        return self.model_dump(mode="json")
