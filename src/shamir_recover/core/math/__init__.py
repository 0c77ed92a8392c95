"""
Core math modules для shamir-recover

Точная арифметика: декодер произвольного основания, рациональные дроби,
интерполяция Лагранжа в нуле.
"""

# Base decoding
from shamir_recover.core.math.base_decoding import (
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    coerce_base,
    decode,
    encode,
    format_decimal,
    validate_base,
)

# Exact rationals
from shamir_recover.core.math.fraction import ZERO, Fraction

# Interpolation
from shamir_recover.core.math.lagrange import interpolate_at_zero

__all__ = [
    # Base decoding — Constants
    "DIGIT_ALPHABET",
    "MAX_BASE",
    "MIN_BASE",
    # Base decoding — Functions
    "coerce_base",
    "decode",
    "encode",
    "format_decimal",
    "validate_base",
    # Fraction
    "Fraction",
    "ZERO",
    # Interpolation
    "interpolate_at_zero",
]
