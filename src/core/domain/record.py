"""
BigIntRecord — сериализуемый контракт числа

Immutable Pydantic модель, соответствующая схеме
src/core/contracts/schema/big_integer.json.

Формат:
    {"schema_version": "1", "negative": false, "digits": "12345"}

Ноль записывается как digits="0", negative=false.
"""

from typing import Final, Literal

from pydantic import BaseModel, Field, model_validator

from src.core.domain.bigint import BigInt

SCHEMA_VERSION: Final[str] = "1"


class BigIntRecord(BaseModel):
    """
    Модель сериализованного BigInt.

    Immutable модель (frozen=True).
    """

    schema_version: Literal["1"] = Field(
        default=SCHEMA_VERSION, description="Версия схемы контракта"
    )
    negative: bool = Field(default=False, description="Знак (true = отрицательное)")
    digits: str = Field(
        ...,
        min_length=1,
        pattern=r"^(0|[1-9][0-9]*)$",
        description="Магнитуда: десятичные цифры без ведущих нулей",
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_zero_sign(self) -> "BigIntRecord":
        """Ноль не может быть отрицательным."""
        if self.digits == "0" and self.negative:
            raise ValueError("zero must not be negative")
        return self

    @classmethod
    def from_bigint(cls, number: BigInt) -> "BigIntRecord":
        magnitude = number.magnitude().to_decimal_text()
        return cls(negative=number.negative and not number.is_zero(), digits=magnitude)

    def to_bigint(self) -> BigInt:
        return BigInt.from_decimal_text(self.to_decimal_text())

    def to_decimal_text(self) -> str:
        return "-" + self.digits if self.negative else self.digits
