"""
BigInt — знаковое целое произвольной точности (magnitude store)

Представление:
- digits: десятичные цифры [0, 9], старшая цифра первая (index 0)
- negative: знак, ортогонален магнитуде
- capacity: длина выделенного буфера, len(digits) <= capacity

Рост буфера — амортизированное удвоение:
- пустой буфер (capacity 0) → capacity = запрошенный размер
- иначе → capacity = max(2 * capacity, запрошенный размер)
Это даёт амортизированное O(1) для append_digit.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. В буфере хранятся только цифры [0, 9]; "отсутствующая" позиция
   возвращается как None и никогда не записывается
2. После публичной операции ведущие нули обрезаны; ноль допустим как
   пустая последовательность или одиночный 0 (оба равны и is_zero)
3. Ноль всегда неотрицательный (negative=False)
4. BigInt владеет своим буфером: copy() — глубокая копия,
   два живых BigInt никогда не разделяют один буфер
"""

import logging
import re
from typing import Final, Iterable

from src.core.config import get_config
from src.core.errors import DigitCapacityExceeded, InvalidDigitText

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

BASE: Final[int] = 10

# Смещение ASCII: цифра хранится как ord(ch) - ASCII_ZERO
ASCII_ZERO: Final[int] = ord("0")

_DECIMAL_TEXT_RE: Final = re.compile(r"-?[0-9]+")


def _check_digit(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < BASE:
        raise ValueError(f"digit must be an int in [0, 9], got {value!r}")
    return value


# =============================================================================
# BIGINT
# =============================================================================


class BigInt:
    """
    Знаковое целое произвольной точности в десятичной системе.

    Создаётся пустым (ноль, capacity 0), заполняется через append_digit,
    from_decimal_text, from_native_integer или как результат операции
    из src.core.math.

    Операторы //, % и divmod() не определены: divide и modulo из
    src.core.math усекают частное к нулю, а не к минус бесконечности.

    Изменяемый объект, поэтому не хешируется.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        # Буфер длины capacity; значимы только первые _size элементов
        self._buffer: list[int] = []
        self._size: int = 0
        self.negative: bool = False

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_decimal_text(cls, text: str) -> "BigInt":
        """
        Разбор десятичной строки.

        Формат: необязательный ведущий '-', затем одна или более ASCII цифр.
        Ведущие нули обрезаются, "-0" даёт неотрицательный ноль.

        Args:
            text: Десятичная строка (например, '-12345')

        Returns:
            Новый BigInt

        Raises:
            TypeError: Если text не str
            InvalidDigitText: Если строка не соответствует формату

        Examples:
            >>> str(BigInt.from_decimal_text("-007"))
            '-7'
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        if _DECIMAL_TEXT_RE.fullmatch(text) is None:
            body = text[1:] if text.startswith("-") else text
            if not body:
                raise InvalidDigitText(text, "empty digit sequence")
            position = next(i for i, ch in enumerate(body) if ch not in "0123456789")
            raise InvalidDigitText(
                text, f"unexpected character {body[position]!r} at digit {position}"
            )

        number = cls()
        negative = text.startswith("-")
        body = text[1:] if negative else text
        number.append_digits(ord(ch) - ASCII_ZERO for ch in body)
        number.negative = negative
        number.normalize()
        return number

    @classmethod
    def from_native_integer(cls, value: int) -> "BigInt":
        """
        Десятичное разложение abs(value); знак сохраняется отдельно.

        Raises:
            TypeError: Если value не int (bool не принимается)
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected int, got {type(value).__name__}")

        magnitude = abs(value)
        reversed_digits: list[int] = []
        while magnitude:
            magnitude, digit = divmod(magnitude, BASE)
            reversed_digits.append(digit)

        number = cls()
        number.append_digits(reversed(reversed_digits) if reversed_digits else [0])
        number.negative = value < 0
        return number

    @classmethod
    def from_digits(cls, digits: Iterable[int], negative: bool = False) -> "BigInt":
        """Построение из цифр (старшая первая) и знака; результат нормализован."""
        number = cls()
        number.append_digits(digits)
        number.negative = negative
        number.normalize()
        return number

    # -------------------------------------------------------------------------
    # Состояние
    # -------------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    @property
    def digits(self) -> tuple[int, ...]:
        """Снимок цифр (старшая первая)."""
        return tuple(self._buffer[: self._size])

    def __len__(self) -> int:
        return self._size

    def is_zero(self) -> bool:
        """True для пустой последовательности и для любых нулевых цифр."""
        return not any(self._buffer[: self._size])

    # -------------------------------------------------------------------------
    # Управление буфером
    # -------------------------------------------------------------------------

    def reserve(self, capacity: int) -> None:
        """
        Гарантирует capacity >= запрошенного размера.

        Raises:
            DigitCapacityExceeded: Если размер превышает ArithmeticConfig.max_digits
        """
        current = len(self._buffer)
        if current >= capacity:
            return

        limit = get_config().max_digits
        if limit is not None and capacity > limit:
            raise DigitCapacityExceeded(capacity, limit)

        new_capacity = capacity if current == 0 else max(current * 2, capacity)
        if limit is not None:
            new_capacity = min(new_capacity, limit)

        self._buffer.extend([0] * (new_capacity - current))

    def resize_pad(self, length: int) -> None:
        """
        Рост до length цифр; новые младшие позиции заполняются нулём.

        Используется как предварительный размер результата умножения.
        Уменьшение не выполняется.
        """
        if length <= self._size:
            return
        self.reserve(length)
        self._buffer[self._size : length] = [0] * (length - self._size)
        self._size = length

    def append_digit(self, value: int) -> None:
        """
        Новая младшая цифра. Амортизированное O(1).

        Ведущие нули не обрезаются: append_digit(5) к [0] даёт [0, 5], и
        compare_magnitude считает такое число длиннее, чем 6. После серии
        append_digit вызывайте normalize(); для готовой последовательности
        цифр используйте from_digits().
        """
        _check_digit(value)
        self.reserve(self._size + 1)
        self._buffer[self._size] = value
        self._size += 1

    def append_digits(self, values: Iterable[int]) -> None:
        """Добавление нескольких младших цифр (старшая первая)."""
        chunk = [_check_digit(v) for v in values]
        if not chunk:
            return
        end = self._size + len(chunk)
        self.reserve(end)
        self._buffer[self._size : end] = chunk
        self._size = end

    def prepend_digit(self, value: int) -> None:
        """Новая старшая цифра. O(length) из-за сдвига."""
        _check_digit(value)
        self.reserve(self._size + 1)
        self._buffer[1 : self._size + 1] = self._buffer[0 : self._size]
        self._buffer[0] = value
        self._size += 1

    # -------------------------------------------------------------------------
    # Доступ к цифрам
    # -------------------------------------------------------------------------

    def digit_at(self, index: int) -> int | None:
        """Цифра по индексу от старшей; None если позиция отсутствует."""
        if 0 <= index < self._size:
            return self._buffer[index]
        return None

    def digit_from_end(self, index: int) -> int | None:
        """Цифра по индексу от младшей; None если позиция отсутствует."""
        if 0 <= index < self._size:
            return self._buffer[self._size - 1 - index]
        return None

    def set_digit(self, index: int, value: int) -> None:
        """Перезапись существующей позиции (индекс от старшей)."""
        if not 0 <= index < self._size:
            raise IndexError(f"digit index {index} out of range for {self._size} digits")
        self._buffer[index] = _check_digit(value)

    def set_digit_from_end(self, index: int, value: int) -> None:
        """Перезапись существующей позиции (индекс от младшей)."""
        if not 0 <= index < self._size:
            raise IndexError(f"digit index {index} out of range for {self._size} digits")
        self._buffer[self._size - 1 - index] = _check_digit(value)

    # -------------------------------------------------------------------------
    # Нормализация
    # -------------------------------------------------------------------------

    def trim_leading_zeros(self) -> None:
        """Удаление ведущих нулей на месте. Последний ноль не удаляется."""
        zeros = 0
        while zeros < self._size - 1 and self._buffer[zeros] == 0:
            zeros += 1
        if not zeros:
            return
        remaining = self._size - zeros
        self._buffer[0:remaining] = self._buffer[zeros : self._size]
        self._size = remaining

    def normalize(self) -> None:
        """Обрезка ведущих нулей и канонический (неотрицательный) ноль."""
        self.trim_leading_zeros()
        if self.is_zero():
            self.negative = False

    # -------------------------------------------------------------------------
    # Владение и знак
    # -------------------------------------------------------------------------

    def copy(self) -> "BigInt":
        """Глубокая копия с независимым буфером."""
        duplicate = BigInt()
        duplicate._buffer = list(self._buffer)
        duplicate._size = self._size
        duplicate.negative = self.negative
        return duplicate

    def assign(self, other: "BigInt") -> None:
        """Замена значения на копию other (буфер other не разделяется)."""
        self._buffer = list(other._buffer)
        self._size = other._size
        self.negative = other.negative

    def clear(self) -> None:
        """Сброс цифр и знака; выделенная память сохраняется."""
        self._size = 0
        self.negative = False

    def release(self) -> None:
        """Освобождение буфера: пустое состояние, capacity 0."""
        self._buffer = []
        self._size = 0
        self.negative = False

    def negate(self) -> None:
        """Смена знака на месте. Ноль остаётся неотрицательным."""
        self.negative = not self.negative and not self.is_zero()

    def negated(self) -> "BigInt":
        duplicate = self.copy()
        duplicate.negate()
        return duplicate

    def magnitude(self) -> "BigInt":
        """Копия с отброшенным знаком (|self|)."""
        duplicate = self.copy()
        duplicate.negative = False
        return duplicate

    # -------------------------------------------------------------------------
    # Текстовое представление
    # -------------------------------------------------------------------------

    def to_decimal_text(self) -> str:
        """
        Десятичная строка: '-' только для отрицательных, ноль → '0'.

        Examples:
            >>> BigInt.from_native_integer(-1200).to_decimal_text()
            '-1200'
        """
        if self.is_zero():
            return "0"
        digits = self._buffer[: self._size]
        start = 0
        while digits[start] == 0:
            start += 1
        body = "".join(chr(d + ASCII_ZERO) for d in digits[start:])
        return "-" + body if self.negative else body

    def dump(self) -> str:
        """
        Диагностический листинг сырых цифр (формат нестабилен).

        Пишется в лог на уровне DEBUG.
        """
        listing = " ".join(f"{d:04d}" for d in self._buffer[: self._size])
        logger.debug(
            "BigInt dump: negative=%s size=%d capacity=%d digits=[%s]",
            self.negative,
            self._size,
            len(self._buffer),
            listing,
        )
        return listing

    def __str__(self) -> str:
        return self.to_decimal_text()

    def __repr__(self) -> str:
        return f"BigInt('{self.to_decimal_text()}')"

    def __int__(self) -> int:
        return int(self.to_decimal_text())

    # -------------------------------------------------------------------------
    # Операторы Python
    # -------------------------------------------------------------------------

    @staticmethod
    def _coerce(other: object, allow_text: bool = True) -> "BigInt | None":
        """
        BigInt как есть; int (и десятичная str при allow_text) конвертируются.

        Для неподдерживаемых типов возвращает None.
        Сравнения используют allow_text=False.
        """
        if isinstance(other, BigInt):
            return other
        if isinstance(other, bool):
            return None
        if isinstance(other, int):
            return BigInt.from_native_integer(other)
        if allow_text and isinstance(other, str):
            return BigInt.from_decimal_text(other)
        return None

    def _compare_with(self, other: object):
        from src.core.math.comparator import compare

        operand = self._coerce(other, allow_text=False)
        if operand is None:
            return None
        return compare(self, operand)

    def __eq__(self, other: object) -> bool:
        from src.core.math.comparator import Ordering

        ordering = self._compare_with(other)
        if ordering is None:
            return NotImplemented
        return ordering is Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        from src.core.math.comparator import Ordering

        ordering = self._compare_with(other)
        if ordering is None:
            return NotImplemented
        return ordering is Ordering.LESS

    def __le__(self, other: object) -> bool:
        from src.core.math.comparator import Ordering

        ordering = self._compare_with(other)
        if ordering is None:
            return NotImplemented
        return ordering is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        from src.core.math.comparator import Ordering

        ordering = self._compare_with(other)
        if ordering is None:
            return NotImplemented
        return ordering is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        from src.core.math.comparator import Ordering

        ordering = self._compare_with(other)
        if ordering is None:
            return NotImplemented
        return ordering is not Ordering.LESS

    def __neg__(self) -> "BigInt":
        return self.negated()

    def __abs__(self) -> "BigInt":
        return self.magnitude()

    def __add__(self, other: object) -> "BigInt":
        from src.core.math.additive import add

        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return add(self, operand)

    def __radd__(self, other: object) -> "BigInt":
        return self.__add__(other)

    def __sub__(self, other: object) -> "BigInt":
        from src.core.math.additive import subtract

        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return subtract(self, operand)

    def __rsub__(self, other: object) -> "BigInt":
        from src.core.math.additive import subtract

        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return subtract(operand, self)

    def __mul__(self, other: object) -> "BigInt":
        from src.core.math.multiplicative import multiply

        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return multiply(self, operand)

    def __rmul__(self, other: object) -> "BigInt":
        return self.__mul__(other)

    def __copy__(self) -> "BigInt":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigInt":
        return self.copy()
