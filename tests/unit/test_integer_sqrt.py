"""
Тесты для Integer Square Root

Проверяет:
1. Точные квадраты и округление вниз
2. Чётную/нечётную длину (дополнение ведущим нулём)
3. Ноль и отрицательные значения
4. Совпадение LINEAR и BINARY стратегий
"""

import math

import pytest

from src.core.config import ArithmeticConfig, DigitSearch
from src.core.domain import BigInt
from src.core.errors import NegativeSquareRoot
from src.core.math import integer_sqrt


def big(text: str) -> BigInt:
    return BigInt.from_decimal_text(text)


class TestIntegerSqrt:
    """Тесты integer_sqrt"""

    def test_large_perfect_square(self) -> None:
        """sqrt(15241578750190521) = 123456789"""
        assert str(integer_sqrt(big("15241578750190521"))) == "123456789"

    @pytest.mark.parametrize(
        "n, expected",
        [
            ("1", "1"),
            ("4", "2"),
            ("5", "2"),
            ("8", "2"),
            ("9", "3"),
            ("10", "3"),
            ("99", "9"),
            ("100", "10"),
            ("101", "10"),
            ("121", "11"),
            ("144", "12"),
            ("10000", "100"),
            ("1000000", "1000"),
            ("2147483647", "46340"),
        ],
    )
    def test_small_values(self, n: str, expected: str) -> None:
        assert str(integer_sqrt(big(n))) == expected

    def test_zero(self) -> None:
        assert str(integer_sqrt(big("0"))) == "0"
        assert integer_sqrt(BigInt()).is_zero()

    def test_result_is_normalized(self) -> None:
        root = integer_sqrt(big("3"))
        assert root.digits == (1,)
        assert root.negative is False

    def test_matches_math_isqrt(self) -> None:
        for value in [2, 3, 17, 288, 12345678, 10**40 + 12345, 2**200 - 1]:
            root = integer_sqrt(BigInt.from_native_integer(value))
            assert int(root) == math.isqrt(value), value

    def test_negative_raises(self) -> None:
        with pytest.raises(NegativeSquareRoot):
            integer_sqrt(big("-4"))

    def test_negative_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            integer_sqrt(big("-1"))

    def test_operand_unchanged(self) -> None:
        n = big("12345")
        integer_sqrt(n)
        assert str(n) == "12345"

    @pytest.mark.parametrize("value", [0, 1, 99, 123456789, 10**30 + 7])
    def test_binary_matches_linear(self, value: int) -> None:
        n = BigInt.from_native_integer(value)
        linear = integer_sqrt(n, ArithmeticConfig(digit_search=DigitSearch.LINEAR))
        binary = integer_sqrt(n, ArithmeticConfig(digit_search=DigitSearch.BINARY))
        assert linear == binary
        assert int(binary) == math.isqrt(value)
