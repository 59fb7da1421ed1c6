"""Exception hierarchy for :mod:`bigratio`.

Every error is a :class:`RationalError` and also derives from the closest
built-in exception, so ``except ZeroDivisionError`` keeps working.
"""


class RationalError(ArithmeticError):
    """Base class for all errors raised by :mod:`bigratio`."""


class DivisionByZeroError(RationalError, ZeroDivisionError):
    """Division by, or reciprocal of, a zero-valued Rational."""


class InvalidArgumentError(RationalError, ValueError):
    """An argument is outside the domain of the operation."""


class InvalidOperationError(RationalError):
    """The operation is undefined for its operands (``0 ** 0``)."""


class InvalidFormatError(RationalError, ValueError):
    """Malformed textual representation of a Rational."""


class InvalidStateError(RationalError, RuntimeError):
    """A Rational violates a canonical-form invariant."""


__all__ = [
    "RationalError",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "InvalidFormatError",
    "InvalidStateError",
]
