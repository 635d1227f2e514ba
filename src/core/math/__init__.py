"""
Core math modules

Арифметика сумм активов с гарантией отсутствия молчаливого переполнения.
"""

from src.core.math.numerical_safeguards import (
    AMOUNT_BITS,
    UINT128_MAX,
    checked_add,
    checked_sub,
    is_valid_amount,
    saturating_add,
    validate_amount,
)

__all__ = [
    # Range
    "AMOUNT_BITS",
    "UINT128_MAX",
    # Validation
    "is_valid_amount",
    "validate_amount",
    # Arithmetic
    "checked_add",
    "checked_sub",
    "saturating_add",
]
