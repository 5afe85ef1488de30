"""
Тесты для ArithmeticConfig

Проверяет:
1. Значения по умолчанию и валидацию полей
2. Активную конфигурацию (get/set/reset)
3. Лимит max_digits → DigitCapacityExceeded
"""

import pytest
from pydantic import ValidationError

from src.core.config import (
    ArithmeticConfig,
    DigitSearch,
    get_config,
    reset_config,
    resolve_config,
    set_config,
    use_config,
)
from src.core.domain import BigInt
from src.core.errors import DigitCapacityExceeded
from src.core.math import divide, integer_sqrt, modulo, multiply


@pytest.fixture(autouse=True)
def restore_config():
    """Каждый тест начинается и заканчивается конфигурацией по умолчанию."""
    reset_config()
    yield
    reset_config()


class TestArithmeticConfig:
    """Тесты модели конфигурации"""

    def test_defaults(self) -> None:
        config = ArithmeticConfig()
        assert config.digit_search is DigitSearch.LINEAR
        assert config.max_digits is None

    def test_digit_search_from_string(self) -> None:
        assert ArithmeticConfig(digit_search="binary").digit_search is DigitSearch.BINARY

    @pytest.mark.parametrize("max_digits", [0, -5])
    def test_max_digits_must_be_positive(self, max_digits: int) -> None:
        with pytest.raises(ValidationError):
            ArithmeticConfig(max_digits=max_digits)

    def test_unknown_strategy_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ArithmeticConfig(digit_search="ternary")

    def test_immutable(self) -> None:
        config = ArithmeticConfig()
        with pytest.raises(ValidationError):
            config.max_digits = 10


class TestActiveConfig:
    """Тесты активной конфигурации"""

    def test_set_and_reset(self) -> None:
        custom = ArithmeticConfig(digit_search=DigitSearch.BINARY)
        set_config(custom)
        assert get_config() is custom
        reset_config()
        assert get_config().digit_search is DigitSearch.LINEAR

    def test_set_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            set_config({"digit_search": "binary"})  # type: ignore[arg-type]

    def test_resolve_prefers_explicit(self) -> None:
        explicit = ArithmeticConfig(max_digits=3)
        assert resolve_config(explicit) is explicit
        assert resolve_config(None) is get_config()

    def test_active_config_used_by_operators(self) -> None:
        set_config(ArithmeticConfig(digit_search=DigitSearch.BINARY))
        result = divide(BigInt.from_decimal_text("1000"), BigInt.from_decimal_text("7"))
        assert str(result.quotient) == "142"


class TestMaxDigits:
    """Тесты лимита длины буфера"""

    def test_within_limit(self) -> None:
        set_config(ArithmeticConfig(max_digits=5))
        number = BigInt.from_decimal_text("12345")
        assert number.capacity <= 5

    def test_parse_over_limit(self) -> None:
        set_config(ArithmeticConfig(max_digits=5))
        with pytest.raises(DigitCapacityExceeded) as exc_info:
            BigInt.from_decimal_text("123456")
        assert exc_info.value.requested == 6
        assert exc_info.value.limit == 5

    def test_doubling_capped_by_limit(self) -> None:
        set_config(ArithmeticConfig(max_digits=6))
        number = BigInt()
        for digit in range(1, 7):
            number.append_digit(digit)
        assert number.capacity == 6
        with pytest.raises(DigitCapacityExceeded):
            number.append_digit(7)

    def test_operator_result_over_limit(self) -> None:
        a = BigInt.from_decimal_text("9999")
        set_config(ArithmeticConfig(max_digits=6))
        with pytest.raises(DigitCapacityExceeded):
            multiply(a, a)

    def test_is_memory_error(self) -> None:
        set_config(ArithmeticConfig(max_digits=1))
        with pytest.raises(MemoryError):
            BigInt.from_decimal_text("10")


class TestExplicitConfig:
    """Тесты config, переданного напрямую в divide/integer_sqrt"""

    def test_use_config_restores_previous(self) -> None:
        scoped = ArithmeticConfig(max_digits=3)
        with use_config(scoped):
            assert get_config() is scoped
        assert get_config().max_digits is None

    def test_use_config_restores_after_error(self) -> None:
        with pytest.raises(DigitCapacityExceeded):
            with use_config(ArithmeticConfig(max_digits=2)):
                BigInt.from_decimal_text("123")
        assert get_config().max_digits is None

    def test_divide_honours_explicit_limit(self) -> None:
        dividend = BigInt.from_decimal_text("123456789")
        divisor = BigInt.from_decimal_text("7")
        with pytest.raises(DigitCapacityExceeded):
            divide(dividend, divisor, ArithmeticConfig(max_digits=3))
        assert get_config().max_digits is None

    def test_modulo_honours_explicit_limit(self) -> None:
        dividend = BigInt.from_decimal_text("123456789")
        divisor = BigInt.from_decimal_text("7")
        with pytest.raises(DigitCapacityExceeded):
            modulo(dividend, divisor, ArithmeticConfig(max_digits=3))

    def test_integer_sqrt_honours_explicit_limit(self) -> None:
        n = BigInt.from_decimal_text("15241578750190521")
        with pytest.raises(DigitCapacityExceeded):
            integer_sqrt(n, ArithmeticConfig(max_digits=3, digit_search="binary"))
        assert get_config().max_digits is None

    def test_explicit_config_overrides_active(self) -> None:
        dividend = BigInt.from_decimal_text("999")
        divisor = BigInt.from_decimal_text("1000")
        set_config(ArithmeticConfig(max_digits=3))
        result = divide(dividend, divisor, ArithmeticConfig())
        assert str(result.quotient) == "0"
        assert str(result.remainder) == "999"
        assert get_config().max_digits == 3

    def test_explicit_limit_large_enough(self) -> None:
        result = divide(
            BigInt.from_decimal_text("123456789"),
            BigInt.from_decimal_text("7"),
            ArithmeticConfig(max_digits=16),
        )
        assert str(result.quotient) == "17636684"
        assert str(result.remainder) == "1"
