"""
Product — Модель товара каталога

Immutable Pydantic модель товара, на который ссылается корзина.
Корзина хранит экземпляр, переданный при добавлении, и никогда его не изменяет.
Соответствует схеме contracts/schema/product.json.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class Currency(str, Enum):
    """Поддерживаемые валюты"""

    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"
    CHF = "CHF"
    CAD = "CAD"


class ProductStatus(str, Enum):
    """Статус доступности товара"""

    AVAILABLE = "available"
    OUT_OF_STOCK = "out_of_stock"
    PREORDER = "preorder"
    DISCONTINUED = "discontinued"


# Статусы, с которыми товар можно положить в корзину
PURCHASABLE_STATUSES = frozenset({ProductStatus.AVAILABLE, ProductStatus.PREORDER})


# =============================================================================
# PRODUCT MODEL
# =============================================================================


class Product(BaseModel):
    """
    Модель товара.

    Immutable модель (frozen=True): запас (stock) фиксируется в момент
    добавления в корзину и проверяется только при вставке/изменении количества.
    """

    id: str = Field(..., min_length=1, description="Уникальный идентификатор товара")
    name: str = Field(..., min_length=1, description="Отображаемое название")
    price: float = Field(..., ge=0, description="Цена за единицу")
    currency: Currency = Field(..., description="Валюта цены")
    status: ProductStatus = Field(
        default=ProductStatus.AVAILABLE, description="Статус доступности"
    )
    stock: int = Field(..., ge=0, description="Количество на складе")
    category: str | None = Field(
        default=None, description="Категория (используется для пониженных ставок НДС)"
    )

    model_config = {"frozen": True}

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: str | None) -> str | None:
        """Пустая категория эквивалентна отсутствию категории."""
        if v is not None and not v.strip():
            return None
        return v

    @property
    def is_purchasable(self) -> bool:
        """Можно ли добавить товар в корзину (available или preorder)."""
        return self.status in PURCHASABLE_STATUSES
