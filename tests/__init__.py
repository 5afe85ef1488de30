"""
Test suite for decimal-bigint

Contains:
- tests/unit/          : Unit tests for the digit store, operators and contracts
"""
