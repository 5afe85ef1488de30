"""
Multiplicative operators — multiply (schoolbook)

Алгоритм O(len(a) * len(b)):
1. Результат заранее размером len(a) + len(b) - 1 цифр (нули)
2. Для каждой цифры b (от младшей) и каждой цифры a (от младшей):
   столбец += da * db + carry, carry переносится в следующий столбец
3. Остаток переноса после прохода записывается в следующий старший столбец
   либо становится новой старшей цифрой (prepend)

Столбцы индексируются от младшей цифры: столбец i + j для da[i] * db[j].
Знак: отрицательный, если ровно один операнд отрицательный.
"""

from src.core.domain.bigint import BASE, BigInt


def multiply(a: BigInt, b: BigInt) -> BigInt:
    """
    Произведение a * b.

    Если любой операнд равен нулю, возвращается ноль без выполнения циклов.

    Examples:
        >>> str(multiply(BigInt.from_decimal_text("123"), BigInt.from_decimal_text("456")))
        '56088'
    """
    result = BigInt()
    if a.is_zero() or b.is_zero():
        return result

    a_len = len(a)
    b_len = len(b)
    result.resize_pad(a_len + b_len - 1)

    for j in range(b_len):
        db = b.digit_from_end(j)
        carry = 0
        for i in range(a_len):
            column = i + j
            total = result.digit_from_end(column) + a.digit_from_end(i) * db + carry
            carry, digit = divmod(total, BASE)
            result.set_digit_from_end(column, digit)

        if not carry:
            continue
        # Столбец a_len + j ещё не записан ни одним проходом
        head = a_len + j
        if head < len(result):
            result.set_digit_from_end(head, carry)
        else:
            result.prepend_digit(carry)

    result.negative = a.negative != b.negative
    result.normalize()
    return result


def multiply_int(a: BigInt, value: int) -> BigInt:
    """a * value для нативного int."""
    return multiply(a, BigInt.from_native_integer(value))


def multiply_text(a: BigInt, text: str) -> BigInt:
    """a * число из десятичной строки."""
    return multiply(a, BigInt.from_decimal_text(text))
