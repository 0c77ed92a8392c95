"""
shamir-recover — exact Shamir secret reconstruction.

Lagrange interpolation at x = 0 over the rationals, with share values
encoded in arbitrary bases 2..36.
"""

from shamir_recover.core.errors import (
    DivisionByZero,
    InsufficientPoints,
    InvalidBase,
    InvalidDigit,
    MalformedInput,
    ReconstructionError,
)
from shamir_recover.core.math import Fraction, decode, interpolate_at_zero
from shamir_recover.extraction import extract
from shamir_recover.reconstruction import ReconstructionResult, reconstruct

__version__ = "0.1.0"

__all__ = [
    "DivisionByZero",
    "InsufficientPoints",
    "InvalidBase",
    "InvalidDigit",
    "MalformedInput",
    "ReconstructionError",
    "Fraction",
    "decode",
    "interpolate_at_zero",
    "extract",
    "ReconstructionResult",
    "reconstruct",
]
