"""
Настройка логирования.

Движок не настраивает обработчики сам: модули получают логгер через
get_logger(__name__) и пишут DEBUG-трассировку (ветка деления,
множитель нормализации, коррекция знака). Приложение включает вывод
через setup_logging.
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
) -> None:
    """
    Настройка корневого логгера.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR)
        format_string: Формат записи (по умолчанию DEFAULT_FORMAT)

    Raises:
        ValueError: Если level не является именем уровня logging
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown logging level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format=format_string or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """
    Логгер модуля.

    Args:
        name: Имя логгера (обычно __name__)
    """
    return logging.getLogger(name)
