"""
Comparator — полный порядок над знаковыми BigInt

Правила:
- Разные знаки: отрицательное < неотрицательного
- Магнитуды: ноль меньше любого ненулевого; затем длина (длиннее → больше);
  затем лексикографически от старшей цифры
- Оба отрицательных: порядок магнитуд инвертируется (-5 < -3)

Корректно только для нормализованных значений (без ведущих нулей).
Ноль равен нулю при любом представлении (пусто или '0').
"""

from enum import Enum

from src.core.domain.bigint import BigInt


class Ordering(Enum):
    """Результат сравнения"""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reversed(self) -> "Ordering":
        return Ordering(-self.value)


def compare_magnitude(a: BigInt, b: BigInt) -> Ordering:
    """
    Сравнение |a| и |b| без учёта знака.

    Examples:
        >>> compare_magnitude(BigInt.from_native_integer(-7), BigInt.from_native_integer(5))
        <Ordering.GREATER: 1>
    """
    a_zero = a.is_zero()
    b_zero = b.is_zero()
    if a_zero or b_zero:
        if a_zero and b_zero:
            return Ordering.EQUAL
        return Ordering.LESS if a_zero else Ordering.GREATER

    if len(a) != len(b):
        return Ordering.GREATER if len(a) > len(b) else Ordering.LESS

    # Одинаковая длина: первая различающаяся цифра решает
    for index in range(len(a)):
        da = a.digit_at(index)
        db = b.digit_at(index)
        if da != db:
            return Ordering.GREATER if da > db else Ordering.LESS

    return Ordering.EQUAL


def compare(a: BigInt, b: BigInt) -> Ordering:
    """
    Числовое сравнение a и b.

    Returns:
        Ordering.LESS если a < b, EQUAL если a == b, GREATER если a > b
    """
    a_negative = a.negative and not a.is_zero()
    b_negative = b.negative and not b.is_zero()

    if a_negative != b_negative:
        return Ordering.LESS if a_negative else Ordering.GREATER

    ordering = compare_magnitude(a, b)
    return ordering.reversed() if a_negative else ordering
