"""
Domain models and value objects.

Contains the BigNum value object and the Ordering returned by comparisons.
"""

from src.bignum.domain.value import (
    ONE_DIGITS,
    ZERO_DIGITS,
    BigNum,
    BigNumLike,
    InvalidDigitString,
    Ordering,
    to_bignum,
    validate_digit_string,
)

__all__ = [
    # Constants
    "ZERO_DIGITS",
    "ONE_DIGITS",
    # Exceptions
    "InvalidDigitString",
    # Types
    "BigNum",
    "BigNumLike",
    "Ordering",
    # Functions
    "to_bignum",
    "validate_digit_string",
]
