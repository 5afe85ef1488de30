"""
BigInteger Contract — валидация сериализованных чисел

Контракт big_integer.json описывает BigInt на границе системы:

    {"schema_version": "1", "negative": false, "digits": "12345"}

BigIntegerValidator принимает BigInt, BigIntRecord или уже разобранный
JSON-объект и проверяет его по схеме (jsonschema, Draft 2020-12).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Схема проходит meta-validation до первого использования
2. Поля схемы и поля BigIntRecord совпадают (имена, required, pattern
   digits, версия) — расхождение обнаруживается при создании валидатора
3. decode_big_integer возвращает BigInt только для валидного payload
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.bigint import BigInt
from src.core.domain.record import SCHEMA_VERSION, BigIntRecord

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"
BIG_INTEGER_SCHEMA: Final[str] = "big_integer"


# =============================================================================
# ЗАГРУЗКА СХЕМЫ
# =============================================================================


def load_schema(schema_name: str, schema_dir: Path | None = None) -> Dict[str, Any]:
    """
    Чтение и meta-validation JSON Schema.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-validation
    """
    schema_path = (schema_dir or SCHEMA_DIR) / f"{schema_name}.json"
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e
    return schema


def check_record_model(schema: Dict[str, Any]) -> None:
    """
    Сверка схемы с моделью BigIntRecord.

    Raises:
        ValueError: Если схема и модель описывают разные записи
    """
    problems: list[str] = []

    schema_fields = set(schema.get("properties", {}))
    model_fields = set(BigIntRecord.model_fields)
    if schema_fields != model_fields:
        problems.append(f"fields {sorted(schema_fields)} != {sorted(model_fields)}")

    required = set(schema.get("required", []))
    if required != model_fields:
        problems.append(f"required {sorted(required)} != {sorted(model_fields)}")

    version = schema.get("properties", {}).get("schema_version", {}).get("const")
    if version != SCHEMA_VERSION:
        problems.append(f"schema_version {version!r} != {SCHEMA_VERSION!r}")

    schema_pattern = schema.get("properties", {}).get("digits", {}).get("pattern")
    model_pattern = BigIntRecord.model_json_schema()["properties"]["digits"].get("pattern")
    if schema_pattern != model_pattern:
        problems.append(f"digits pattern {schema_pattern!r} != {model_pattern!r}")

    if problems:
        raise ValueError("BigIntRecord does not match big_integer schema: " + "; ".join(problems))


# =============================================================================
# VALIDATOR
# =============================================================================


class BigIntegerValidator:
    """
    Валидатор big_integer контракта.

    Attributes:
        schema: Загруженная схема
    """

    def __init__(self, schema_dir: Path | None = None):
        self.schema = load_schema(BIG_INTEGER_SCHEMA, schema_dir)
        check_record_model(self.schema)
        self._validator = Draft202012Validator(self.schema)

    @staticmethod
    def to_payload(value: BigInt | BigIntRecord | Mapping) -> Dict[str, Any]:
        """
        JSON-представление значения.

        Raises:
            TypeError: Если тип значения не поддерживается
        """
        if isinstance(value, BigInt):
            value = BigIntRecord.from_bigint(value)
        if isinstance(value, BigIntRecord):
            return value.model_dump(mode="json")
        if isinstance(value, Mapping):
            return dict(value)
        raise TypeError(f"Cannot validate {type(value).__name__} as big_integer")

    def validate(self, value: BigInt | BigIntRecord | Mapping) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме
        """
        self._validator.validate(self.to_payload(value))

    def is_valid(self, value: BigInt | BigIntRecord | Mapping) -> bool:
        return self._validator.is_valid(self.to_payload(value))

    def errors(self, value: BigInt | BigIntRecord | Mapping) -> list[str]:
        """Все нарушения в виде "путь: сообщение", отсортированные по пути."""
        messages = []
        for error in self._validator.iter_errors(self.to_payload(value)):
            path = "/".join(str(part) for part in error.absolute_path) or "<root>"
            messages.append(f"{path}: {error.message}")
        return sorted(messages)

    def encode(self, number: BigInt) -> Dict[str, Any]:
        """BigInt → проверенный JSON-объект."""
        payload = self.to_payload(number)
        self._validator.validate(payload)
        return payload

    def decode(self, payload: Mapping) -> BigInt:
        """
        Проверенный JSON-объект → BigInt.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме
        """
        data = self.to_payload(payload)
        self._validator.validate(data)
        return BigIntRecord.model_validate(data).to_bigint()


# Валидатор по умолчанию (создаётся при первом обращении)
_DEFAULT_VALIDATOR: BigIntegerValidator | None = None


def get_validator() -> BigIntegerValidator:
    """Общий валидатор для схемы из пакета."""
    global _DEFAULT_VALIDATOR
    if _DEFAULT_VALIDATOR is None:
        _DEFAULT_VALIDATOR = BigIntegerValidator()
    return _DEFAULT_VALIDATOR


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_integer(value: BigInt | BigIntRecord | Mapping) -> None:
    """
    Валидация BigInt, BigIntRecord или JSON-объекта.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator().validate(value)


def encode_big_integer(number: BigInt) -> Dict[str, Any]:
    return get_validator().encode(number)


def decode_big_integer(payload: Mapping) -> BigInt:
    return get_validator().decode(payload)
