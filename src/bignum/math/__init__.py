"""
Core math modules для bignum

Арифметика произвольной точности над десятичными строками цифр.
"""

# Arithmetic primitives
from src.bignum.math.arithmetic import (
    add,
    compare,
    decrement,
    multiply,
)

# Powers
from src.bignum.math.powers import (
    DEFAULT_LIMITS,
    ArithmeticLimits,
    ResourceExhausted,
    factorial,
    power,
)

# Scientific notation
from src.bignum.math.scientific_notation import (
    DEFAULT_SIGNIFICANT_FIGURES,
    format_scientific,
)

__all__ = [
    # Arithmetic — Primitives
    "add",
    "compare",
    "decrement",
    "multiply",
    # Powers — Config
    "ArithmeticLimits",
    "DEFAULT_LIMITS",
    # Powers — Exceptions
    "ResourceExhausted",
    # Powers — Functions
    "factorial",
    "power",
    # Scientific notation
    "DEFAULT_SIGNIFICANT_FIGURES",
    "format_scientific",
]
