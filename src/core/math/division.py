"""
Division & Modulo — деление столбиком с остатком

Алгоритм (над магнитудами):
1. В current сносятся следующие старшие цифры делимого, пока
   current < |divisor| и цифры не закончились
2. Если снесено больше одной цифры и частное непустое, в частное
   добавляется 0 за каждую лишнюю цифру (выравнивание позиций)
3. Выбирается наибольшая цифра d: d * |divisor| ≤ current
   (LINEAR: пробный множитель от 1 через increment до превышения, затем шаг назад;
    BINARY: бисекция по 0..9; результаты совпадают)
4. d добавляется в частное, current ← current - d * |divisor|
5. Повтор, пока цифры делимого не закончатся

Знаки (усечение к нулю):
- частное отрицательное, если знаки операндов различаются и частное ненулевое
- остаток принимает знак делимого
- нулевые результаты неотрицательны

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. divisor == 0 → DivisionByZero до любых вычислений
2. quotient * divisor + remainder == dividend
3. |remainder| < |divisor|
"""

import logging
from dataclasses import dataclass
from typing import Callable

from src.core.config import ArithmeticConfig, DigitSearch, resolve_config, use_config
from src.core.domain.bigint import BigInt
from src.core.errors import DivisionByZero
from src.core.math.additive import decrement, increment, subtract
from src.core.math.comparator import Ordering, compare_magnitude
from src.core.math.multiplicative import multiply

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DivisionResult:
    """Результат деления: частное и остаток (остаток всегда материализован)."""

    quotient: BigInt
    remainder: BigInt


# =============================================================================
# ВЫБОР ЦИФРЫ ЧАСТНОГО
# =============================================================================


def _quotient_digit_linear(current: BigInt, divisor: BigInt) -> int:
    trial = BigInt.from_digits([1])
    while compare_magnitude(multiply(trial, divisor), current) is not Ordering.GREATER:
        increment(trial)
    decrement(trial)
    return trial.digit_at(0) or 0


def _quotient_digit_binary(current: BigInt, divisor: BigInt) -> int:
    low, high = 0, 9
    while low < high:
        middle = (low + high + 1) // 2
        product = multiply(BigInt.from_digits([middle]), divisor)
        if compare_magnitude(product, current) is Ordering.GREATER:
            high = middle - 1
        else:
            low = middle
    return low


# =============================================================================
# DIVIDE / MODULO
# =============================================================================


def divide(
    dividend: BigInt,
    divisor: BigInt,
    config: ArithmeticConfig | None = None,
) -> DivisionResult:
    """
    Деление с остатком (усечение к нулю).

    Args:
        dividend: Делимое
        divisor: Делитель (ненулевой)
        config: Конфигурация (default: активная конфигурация)

    Returns:
        DivisionResult(quotient, remainder)

    Raises:
        DivisionByZero: Если divisor равен нулю

    Examples:
        >>> result = divide(BigInt.from_decimal_text("1000"), BigInt.from_decimal_text("7"))
        >>> str(result.quotient), str(result.remainder)
        ('142', '6')
    """
    if divisor.is_zero():
        raise DivisionByZero(f"Division of {dividend} by zero")

    cfg = resolve_config(config)
    if cfg.digit_search is DigitSearch.BINARY:
        select_digit = _quotient_digit_binary
    else:
        select_digit = _quotient_digit_linear

    with use_config(cfg):
        return _long_divide(dividend, divisor, select_digit)


def _long_divide(
    dividend: BigInt,
    divisor: BigInt,
    select_digit: Callable[[BigInt, BigInt], int],
) -> DivisionResult:
    divisor_abs = divisor.magnitude()
    quotient = BigInt()
    current = BigInt()
    position = 0
    dividend_len = len(dividend)

    while position < dividend_len:
        # Шаг 1: сносим цифры делимого, пока current < |divisor|
        brought = 0
        while compare_magnitude(current, divisor_abs) is Ordering.LESS:
            if position == dividend_len:
                break
            current.append_digit(dividend.digit_at(position))
            current.trim_leading_zeros()
            position += 1
            brought += 1

        if brought > 1 and len(quotient) > 0:
            quotient.append_digits([0] * (brought - 1))

        # Шаг 2: наибольшая цифра d с d * |divisor| ≤ current
        digit = select_digit(current, divisor_abs)
        quotient.append_digit(digit)
        logger.debug("divide: current=%s digit=%d", current, digit)

        # Шаг 3: current ← current - d * |divisor|
        current = subtract(current, multiply(BigInt.from_digits([digit]), divisor_abs))

    if len(current) == 0:
        current.append_digit(0)

    quotient.negative = dividend.negative != divisor.negative
    quotient.normalize()
    current.negative = dividend.negative
    current.normalize()
    return DivisionResult(quotient=quotient, remainder=current)


def modulo(
    dividend: BigInt,
    divisor: BigInt,
    config: ArithmeticConfig | None = None,
) -> BigInt:
    """
    Остаток от деления (знак делимого).

    Raises:
        DivisionByZero: Если divisor равен нулю
    """
    return divide(dividend, divisor, config).remainder
