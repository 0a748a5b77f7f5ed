"""
logging_config — настройка логирования для приложений, использующих ecom-utils.

Библиотека сама обработчики не устанавливает: каждый модуль пишет в
logging.getLogger(__name__), а приложение (или demo) вызывает setup_logging().

JSON формат (json_format=True), поля:
    - timestamp: ISO 8601, UTC
    - level: уровень (INFO, WARNING, ...)
    - logger: имя модуля (например, "ecom_utils.cart.cart")
    - message: текст сообщения
    - exception: stack trace (только если есть exc_info)
    - дополнительные поля из extra=..., перечисленные в EXTRA_FIELDS
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Final, TextIO

# Корневой логгер библиотеки
LIBRARY_LOGGER_NAME: Final[str] = "ecom_utils"

# Поля из extra=..., которые переносятся в JSON
EXTRA_FIELDS: Final[tuple[str, ...]] = ("cart_currency", "product_id", "discount_code")

PLAIN_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """Formatter, выводящий записи лога как JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_logging(
    level: str = "INFO",
    json_format: bool = True,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Настройка логгера библиотеки.

    Повторный вызов заменяет ранее установленные обработчики.

    Args:
        level: Уровень логирования ("DEBUG", "INFO", ...)
        json_format: JSON (True) или текстовый формат (False)
        stream: Поток вывода (default: sys.stdout)

    Returns:
        Настроенный логгер "ecom_utils"
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(PLAIN_FORMAT))

    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    for existing in logger.handlers[:]:
        logger.removeHandler(existing)

    logger.setLevel(level.upper())
    logger.addHandler(handler)
    return logger
