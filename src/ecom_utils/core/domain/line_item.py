"""
LineItem — Строка корзины

Immutable Pydantic модель: (товар, количество, момент добавления).
Изменение количества создаёт новый экземпляр через with_quantity().
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from .product import Product


class LineItem(BaseModel):
    """
    Строка корзины.

    Инвариант quantity <= product.stock проверяется корзиной при вставке
    и изменении количества, а не моделью: запас — снимок, а не живое ограничение.
    """

    product: Product = Field(..., description="Товар")
    quantity: int = Field(..., ge=1, description="Количество (>= 1)")
    added_at: datetime = Field(..., description="Момент добавления в корзину")

    model_config = {"frozen": True}

    @field_validator("added_at")
    @classmethod
    def validate_added_at_tz(cls, v: datetime) -> datetime:
        """Момент добавления должен быть timezone-aware."""
        if v.tzinfo is None:
            raise ValueError("added_at must be timezone-aware")
        return v

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> float:
        """Сумма строки без округления (price * quantity)."""
        return self.product.price * self.quantity

    def with_quantity(self, quantity: int) -> "LineItem":
        """
        Копия строки с новым количеством.

        Args:
            quantity: Новое количество (>= 1)

        Returns:
            Новый LineItem с тем же товаром и моментом добавления
        """
        return LineItem(product=self.product, quantity=quantity, added_at=self.added_at)
