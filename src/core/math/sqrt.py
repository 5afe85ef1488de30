"""
Integer Square Root — извлечение корня по парам цифр

Результат r: r² ≤ n < (r + 1)².

Алгоритм (столбиком, как при ручном извлечении):
1. Цифры n группируются в пары от старшей (ведущий 0 при нечётной длине)
2. p = 0 (корень), remainder = 0
3. Для каждой пары: remainder ← remainder * 100 + пара (дописыванием цифр)
4. x — наибольшая цифра 0..9 с x * (20p + x) ≤ remainder
   (20p + x строится как 2p с дописанной цифрой x)
5. remainder ← remainder - x * (20p + x), x дописывается к p
"""

import logging
from typing import Callable

from src.core.config import ArithmeticConfig, DigitSearch, resolve_config, use_config
from src.core.domain.bigint import BigInt
from src.core.errors import NegativeSquareRoot
from src.core.math.additive import subtract
from src.core.math.comparator import Ordering, compare_magnitude
from src.core.math.multiplicative import multiply, multiply_int

logger = logging.getLogger(__name__)


def _candidate(root: BigInt, x: int) -> BigInt:
    """x * (20p + x)."""
    twenty_p_plus_x = multiply_int(root, 2)
    twenty_p_plus_x.append_digit(x)
    twenty_p_plus_x.trim_leading_zeros()
    return multiply_int(twenty_p_plus_x, x)


def _root_digit_linear(root: BigInt, remainder: BigInt) -> int:
    x = 1
    while x <= 9 and compare_magnitude(_candidate(root, x), remainder) is not Ordering.GREATER:
        x += 1
    return x - 1


def _root_digit_binary(root: BigInt, remainder: BigInt) -> int:
    low, high = 0, 9
    while low < high:
        middle = (low + high + 1) // 2
        if compare_magnitude(_candidate(root, middle), remainder) is Ordering.GREATER:
            high = middle - 1
        else:
            low = middle
    return low


def _digit_pairs(n: BigInt) -> list[tuple[int, int]]:
    digits = list(n.digits)
    if len(digits) % 2:
        digits.insert(0, 0)
    return [(digits[i], digits[i + 1]) for i in range(0, len(digits), 2)]


def integer_sqrt(n: BigInt, config: ArithmeticConfig | None = None) -> BigInt:
    """
    Целочисленный квадратный корень.

    Args:
        n: Неотрицательное число
        config: Конфигурация (default: активная конфигурация)

    Returns:
        r такой, что r² ≤ n < (r + 1)²

    Raises:
        NegativeSquareRoot: Если n отрицательное

    Examples:
        >>> str(integer_sqrt(BigInt.from_decimal_text("15241578750190521")))
        '123456789'
    """
    if n.negative and not n.is_zero():
        raise NegativeSquareRoot(f"Square root of negative number {n}")

    cfg = resolve_config(config)
    if cfg.digit_search is DigitSearch.BINARY:
        select_digit = _root_digit_binary
    else:
        select_digit = _root_digit_linear

    with use_config(cfg):
        return _extract_root(n, select_digit)


def _extract_root(n: BigInt, select_digit: Callable[[BigInt, BigInt], int]) -> BigInt:
    root = BigInt()
    remainder = BigInt()

    for high, low in _digit_pairs(n):
        remainder.append_digits((high, low))
        remainder.trim_leading_zeros()

        x = select_digit(root, remainder)
        remainder = subtract(remainder, _candidate(root, x))

        root.append_digit(x)
        root.trim_leading_zeros()
        logger.debug("integer_sqrt: pair=%d%d digit=%d root=%s", high, low, x, root)

    root.normalize()
    return root
