"""
Contract Validation Module

Модуль для валидации JSON контракта сериализованных чисел.
"""

from .validators import (
    BIG_INTEGER_SCHEMA,
    SCHEMA_DIR,
    BigIntegerValidator,
    check_record_model,
    decode_big_integer,
    encode_big_integer,
    get_validator,
    load_schema,
    validate_big_integer,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "BIG_INTEGER_SCHEMA",
    # Classes
    "BigIntegerValidator",
    # Functions
    "load_schema",
    "check_record_model",
    "get_validator",
    "validate_big_integer",
    "encode_big_integer",
    "decode_big_integer",
]
