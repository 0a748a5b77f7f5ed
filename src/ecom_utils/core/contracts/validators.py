"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (поставляются внутри пакета, contracts/schema/):
- product.json — товар, приходящий из каталога
- discount.json — промокод, приходящий из внешнего источника
- cart_totals.json — итоги корзины, отдаваемые в ответе API
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# Каталог схем рядом с модулем
SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из каталога schema/ внутри пакета.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'cart_totals')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema

    def available_schemas(self) -> list[str]:
        """Имена всех схем в каталоге (отсортированы)."""
        return sorted(p.stem for p in self._schema_dir.glob("*.json"))


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class ProductValidator(ContractValidator):
    """Валидатор для product контракта."""

    def __init__(self):
        super().__init__("product")


class DiscountValidator(ContractValidator):
    """Валидатор для discount контракта."""

    def __init__(self):
        super().__init__("discount")


class CartTotalsValidator(ContractValidator):
    """Валидатор для cart_totals контракта."""

    def __init__(self):
        super().__init__("cart_totals")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_product(data: Dict[str, Any]) -> None:
    """
    Валидация product данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ProductValidator().validate(data)


def validate_discount(data: Dict[str, Any]) -> None:
    """
    Валидация discount данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DiscountValidator().validate(data)


def validate_cart_totals(data: Dict[str, Any]) -> None:
    """
    Валидация cart_totals данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CartTotalsValidator().validate(data)
