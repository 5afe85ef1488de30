"""
Core domain models, arithmetic primitives, and invariants.

This module contains the decimal big-integer engine: the digit store,
the schoolbook operators built on it, and the serialized number contract.
"""
