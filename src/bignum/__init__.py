"""
bignum: unsigned arbitrary-precision integer arithmetic.

Values are immutable decimal digit strings. Every entry point accepts either a
BigNum or raw digit text.
"""

from src.bignum.domain import BigNum, BigNumLike, InvalidDigitString, Ordering, to_bignum
from src.bignum.engine import Operation, OperationResult, evaluate
from src.bignum.math import (
    DEFAULT_LIMITS,
    DEFAULT_SIGNIFICANT_FIGURES,
    ArithmeticLimits,
    ResourceExhausted,
    add,
    compare,
    decrement,
    factorial,
    format_scientific,
    multiply,
    power,
)

__all__ = [
    # Domain
    "BigNum",
    "BigNumLike",
    "InvalidDigitString",
    "Ordering",
    "to_bignum",
    # Arithmetic
    "add",
    "compare",
    "decrement",
    "multiply",
    "power",
    "factorial",
    "format_scientific",
    # Config
    "ArithmeticLimits",
    "DEFAULT_LIMITS",
    "DEFAULT_SIGNIFICANT_FIGURES",
    # Errors
    "ResourceExhausted",
    # Engine
    "Operation",
    "OperationResult",
    "evaluate",
]
