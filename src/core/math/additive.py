"""
Additive operators — add, subtract, increment, decrement

add и subtract — чистые функции: возвращают новый BigInt, операнды не меняются.
Смешанные знаки делегируются взаимной рекурсией (глубина ≤ 2):

    (+a) + (-b) = a - |b|
    (-a) + (+b) = -(|a| - b)
    a - (-b)    = a + |b|          (a ≥ 0)
    (-a) - b    = -(|a| + b)       (b ≥ 0)
    a - b       = -(b - a)         (одинаковые знаки, |a| < |b|)

Ядро работает только с |a| ≥ |b|: поразрядное вычитание с заёмом.

increment/decrement изменяют операнд на месте через add/subtract
с единицей (шаговые примитивы для division и integer_sqrt).
"""

from typing import Final

from src.core.domain.bigint import BASE, BigInt
from src.core.math.comparator import Ordering, compare_magnitude

# Единица для increment/decrement
_UNIT_DIGITS: Final[tuple[int, ...]] = (1,)


def _unit() -> BigInt:
    return BigInt.from_digits(_UNIT_DIGITS)


def _is_negative(n: BigInt) -> bool:
    return n.negative and not n.is_zero()


# =============================================================================
# ПОРАЗРЯДНЫЕ ЯДРА (только магнитуды)
# =============================================================================


def _add_magnitudes(a: BigInt, b: BigInt) -> BigInt:
    """|a| + |b|: сложение столбиком от младшей цифры."""
    columns: list[int] = []
    carry = 0
    index = 0
    while True:
        da = a.digit_from_end(index)
        db = b.digit_from_end(index)
        if da is None and db is None:
            break
        total = (da or 0) + (db or 0) + carry
        carry, digit = divmod(total, BASE)
        columns.append(digit)
        index += 1

    result = BigInt()
    if carry:
        result.append_digit(carry)
    result.append_digits(reversed(columns))
    return result


def _subtract_magnitudes(a: BigInt, b: BigInt) -> BigInt:
    """|a| - |b| при |a| ≥ |b|: вычитание столбиком с заёмом."""
    columns: list[int] = []
    borrow = 0
    index = 0
    while True:
        da = a.digit_from_end(index)
        db = b.digit_from_end(index)
        if da is None and db is None:
            break
        difference = (da or 0) - (db or 0) - borrow
        borrow = 0
        if difference < 0:
            difference += BASE
            borrow = 1
        columns.append(difference)
        index += 1

    result = BigInt()
    result.append_digits(reversed(columns))
    result.trim_leading_zeros()
    return result


# =============================================================================
# ADD / SUBTRACT
# =============================================================================


def add(a: BigInt, b: BigInt) -> BigInt:
    """
    Сумма a + b.

    Examples:
        >>> str(add(BigInt.from_decimal_text("999"), BigInt.from_decimal_text("1")))
        '1000'
    """
    a_negative = _is_negative(a)
    b_negative = _is_negative(b)

    if a_negative and not b_negative:
        # (-a) + b = -(|a| - b)
        result = subtract(a.magnitude(), b)
        result.negate()
        return result

    if b_negative and not a_negative:
        # a + (-b) = a - |b|
        return subtract(a, b.magnitude())

    result = _add_magnitudes(a, b)
    result.negative = a_negative
    result.normalize()
    return result


def subtract(a: BigInt, b: BigInt) -> BigInt:
    """
    Разность a - b.

    Examples:
        >>> str(subtract(BigInt.from_decimal_text("100"), BigInt.from_decimal_text("101")))
        '-1'
    """
    a_negative = _is_negative(a)
    b_negative = _is_negative(b)

    if b_negative and not a_negative:
        # a - (-b) = a + |b|
        return add(a, b.magnitude())

    if a_negative and not b_negative:
        # (-a) - b = -(|a| + b)
        result = add(a.magnitude(), b)
        result.negate()
        return result

    if compare_magnitude(a, b) is Ordering.LESS:
        # a - b = -(b - a)
        result = subtract(b, a)
        result.negate()
        return result

    result = _subtract_magnitudes(a, b)
    # -a - (-b) = -(|a| - |b|)
    result.negative = a_negative
    result.normalize()
    return result


# =============================================================================
# INCREMENT / DECREMENT
# =============================================================================


def increment(n: BigInt) -> BigInt:
    """n ← n + 1 на месте. Возвращает n."""
    n.assign(add(n, _unit()))
    return n


def decrement(n: BigInt) -> BigInt:
    """n ← n - 1 на месте. Возвращает n."""
    n.assign(subtract(n, _unit()))
    return n


# =============================================================================
# NATIVE-INT ВАРИАНТЫ
# =============================================================================


def add_int(a: BigInt, value: int) -> BigInt:
    """a + value для нативного int."""
    return add(a, BigInt.from_native_integer(value))


def subtract_int(a: BigInt, value: int) -> BigInt:
    """a - value для нативного int."""
    return subtract(a, BigInt.from_native_integer(value))
