"""Exact arbitrary-precision rational numbers."""

import logging

from .errors import (
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidFormatError,
    InvalidOperationError,
    InvalidStateError,
    RationalError,
)
from .rational import (
    DEFAULT_DECIMAL_SCALE,
    DEFAULT_ROUNDING,
    MINUS_ONE,
    MINUS_ONE_HALF,
    MINUS_TEN,
    MINUS_TWO,
    ONE,
    ONE_HALF,
    TEN,
    TWO,
    ZERO,
    Rational,
    rationalize,
)
from .parsing import parse_rational
from .continued import convergents, from_continued_fraction, to_continued_fraction
from .arrays import as_rational_array, to_float_array, zeros, zeros_like

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Rational",
    "rationalize",
    "parse_rational",
    "to_continued_fraction",
    "from_continued_fraction",
    "convergents",
    "as_rational_array",
    "to_float_array",
    "zeros",
    "zeros_like",
    "DEFAULT_DECIMAL_SCALE",
    "DEFAULT_ROUNDING",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "ONE_HALF",
    "MINUS_ONE_HALF",
    "TWO",
    "MINUS_TWO",
    "TEN",
    "MINUS_TEN",
    "RationalError",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "InvalidFormatError",
    "InvalidStateError",
]
