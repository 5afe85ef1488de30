"""
Domain models and value objects.

Contains the BigInt magnitude store and its serialized record contract.
"""

from src.core.domain.bigint import ASCII_ZERO, BASE, BigInt
from src.core.domain.record import SCHEMA_VERSION, BigIntRecord

__all__ = [
    # Magnitude store
    "ASCII_ZERO",
    "BASE",
    "BigInt",
    # Record contract
    "SCHEMA_VERSION",
    "BigIntRecord",
]
