"""
ArithmeticConfig — конфигурация BigInt engine

Immutable Pydantic модель + активная конфигурация уровня модуля.

Параметры:
- digit_search: стратегия выбора цифры частного/корня
    LINEAR — пробный множитель от 1 с шагом increment (элементарный вариант)
    BINARY — бисекция по диапазону 0..9 (те же результаты, меньше умножений)
- max_digits: лимит длины буфера цифр (None = без лимита)

Операторы принимают необязательный аргумент config; если он не передан,
используется get_config(). На время вызова divide/integer_sqrt переданный
config становится активным (use_config), поэтому max_digits ограничивает
и промежуточные, и итоговые буферы.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Iterator

from pydantic import BaseModel, Field, PositiveInt


# =============================================================================
# ENUMS
# =============================================================================


class DigitSearch(str, Enum):
    """Стратегия поиска наибольшей подходящей десятичной цифры"""

    LINEAR = "linear"
    BINARY = "binary"


# =============================================================================
# CONFIG MODEL
# =============================================================================


class ArithmeticConfig(BaseModel):
    """
    Конфигурация арифметики.

    Immutable модель (frozen=True): изменение настроек только через
    создание нового экземпляра и set_config().
    """

    digit_search: DigitSearch = Field(
        default=DigitSearch.LINEAR,
        description="Стратегия выбора цифры в division и integer_sqrt",
    )
    max_digits: PositiveInt | None = Field(
        default=None,
        description="Максимальная длина буфера цифр (None = без лимита)",
    )

    model_config = {"frozen": True}  # Immutable


# Активная конфигурация
_ACTIVE_CONFIG: ArithmeticConfig = ArithmeticConfig()


def get_config() -> ArithmeticConfig:
    """Текущая активная конфигурация."""
    return _ACTIVE_CONFIG


def set_config(config: ArithmeticConfig) -> None:
    """
    Установка активной конфигурации.

    Raises:
        TypeError: Если config не является ArithmeticConfig
    """
    global _ACTIVE_CONFIG
    if not isinstance(config, ArithmeticConfig):
        raise TypeError(f"Expected ArithmeticConfig, got {type(config).__name__}")
    _ACTIVE_CONFIG = config


def reset_config() -> None:
    """Возврат к конфигурации по умолчанию."""
    set_config(ArithmeticConfig())


def resolve_config(config: ArithmeticConfig | None) -> ArithmeticConfig:
    """config если передан, иначе активная конфигурация."""
    return config if config is not None else get_config()


@contextmanager
def use_config(config: ArithmeticConfig) -> Iterator[ArithmeticConfig]:
    """
    Временная активная конфигурация.

    Предыдущая конфигурация восстанавливается при выходе, в том числе
    при исключении.

    Examples:
        >>> with use_config(ArithmeticConfig(max_digits=3)):
        ...     get_config().max_digits
        3
    """
    previous = get_config()
    set_config(config)
    try:
        yield config
    finally:
        set_config(previous)
