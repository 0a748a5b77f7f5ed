"""
Discount — Модель промокода / скидки

Immutable Pydantic модель скидки. Код скидки не проверяется по реестру,
он нужен только для отображения. Условия применимости (активность, срок
действия, минимальная сумма заказа) проверяются корзиной в момент применения
и повторно не перепроверяются.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class DiscountType(str, Enum):
    """Тип скидки"""

    PERCENTAGE = "percentage"
    FIXED_AMOUNT = "fixed_amount"
    FREE_SHIPPING = "free_shipping"


# =============================================================================
# DISCOUNT MODEL
# =============================================================================


class Discount(BaseModel):
    """
    Модель скидки.

    value трактуется в зависимости от kind:
    - PERCENTAGE: процент от подытога (0-100)
    - FIXED_AMOUNT: фиксированная сумма в валюте корзины
    - FREE_SHIPPING: не используется (эффект — бесплатная доставка)
    """

    code: str = Field(..., min_length=1, description="Промокод (только для отображения)")
    kind: DiscountType = Field(..., description="Тип скидки")
    value: float = Field(default=0.0, ge=0, description="Процент или сумма скидки")
    min_order_amount: float | None = Field(
        default=None, ge=0, description="Минимальный подытог для применения"
    )
    max_discount_amount: float | None = Field(
        default=None, ge=0, description="Потолок суммы скидки"
    )
    end_date: datetime | None = Field(default=None, description="Момент истечения (UTC)")
    is_active: bool = Field(default=True, description="Флаг активности")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_percentage_range(cls, v: float, info) -> float:
        """Процентная скидка не может превышать 100%."""
        kind = info.data.get("kind")
        if kind == DiscountType.PERCENTAGE and v > 100:
            raise ValueError(f"percentage discount value {v} exceeds 100")
        return v

    @field_validator("end_date")
    @classmethod
    def validate_end_date_tz(cls, v: datetime | None) -> datetime | None:
        """Naive datetime интерпретируется как UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    def is_expired(self, now: datetime) -> bool:
        """
        Истёк ли срок действия скидки.

        Args:
            now: Текущий момент (aware datetime)

        Returns:
            True если end_date задан и уже в прошлом
        """
        return self.end_date is not None and now > self.end_date
