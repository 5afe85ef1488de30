"""
Core math modules — арифметика BigInt

Элементарные (schoolbook) алгоритмы над десятичными цифрами.
"""

# Comparator
from src.core.math.comparator import (
    Ordering,
    compare,
    compare_magnitude,
)

# Additive operators
from src.core.math.additive import (
    add,
    add_int,
    decrement,
    increment,
    subtract,
    subtract_int,
)

# Multiplicative operators
from src.core.math.multiplicative import (
    multiply,
    multiply_int,
    multiply_text,
)

# Division & Modulo
from src.core.math.division import (
    DivisionResult,
    divide,
    modulo,
)

# Integer Square Root
from src.core.math.sqrt import integer_sqrt

__all__ = [
    # Comparator
    "Ordering",
    "compare",
    "compare_magnitude",
    # Additive
    "add",
    "add_int",
    "decrement",
    "increment",
    "subtract",
    "subtract_int",
    # Multiplicative
    "multiply",
    "multiply_int",
    "multiply_text",
    # Division — Types
    "DivisionResult",
    # Division — Functions
    "divide",
    "modulo",
    # Square root
    "integer_sqrt",
]
