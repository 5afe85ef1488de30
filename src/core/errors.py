"""
Иерархия исключений для BigInt engine

Все ошибки поднимаются синхронно в месте вызова, который их вызвал.
Ничего не повторяется и не подавляется внутри движка.

Иерархия:
    BigIntError (база)
    ├── InvalidDigitText       (ValueError)
    ├── DivisionByZero         (ZeroDivisionError)
    ├── NegativeSquareRoot     (ValueError)
    └── DigitCapacityExceeded  (MemoryError)

Встроенные базовые классы добавлены, чтобы вызывающий код мог ловить
привычные исключения Python (например, ZeroDivisionError).
"""


class BigIntError(Exception):
    """Базовое исключение для всех ошибок BigInt engine."""

    pass


class InvalidDigitText(BigIntError, ValueError):
    """
    Некорректная десятичная строка.

    Допустимо: необязательный ведущий '-', затем одна или более ASCII цифр.
    Недопустимо: пустая строка цифр, '+', пробелы, разделители, не-ASCII цифры.
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid decimal text {text!r}: {reason}")


class DivisionByZero(BigIntError, ZeroDivisionError):
    """
    Делитель равен нулю в divide/modulo.

    Поднимается до любых вычислений: quotient/remainder не создаются.
    """

    pass


class NegativeSquareRoot(BigIntError, ValueError):
    """integer_sqrt вызван для отрицательного числа."""

    pass


class DigitCapacityExceeded(BigIntError, MemoryError):
    """
    Рост буфера цифр превышает лимит ArithmeticConfig.max_digits.

    Исчерпание ресурса сообщается вызывающему коду, а не завершает процесс.
    """

    def __init__(self, requested: int, limit: int):
        self.requested = requested
        self.limit = limit
        super().__init__(
            f"Digit buffer of {requested} digits exceeds max_digits={limit}"
        )
