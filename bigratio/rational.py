"""Immutable arbitrary-precision rational numbers with NumPy interoperability."""
from __future__ import annotations

import logging
import math
import numbers
import operator
import random as _random
import sys
import threading
from decimal import ROUND_DOWN, Decimal, localcontext
from fractions import Fraction
from typing import Any, Callable, Iterator, List, Tuple, Union

import numpy as np

from .digits import int_to_str
from .errors import (
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidOperationError,
    InvalidStateError,
)

logger = logging.getLogger(__name__)

NumberLike = Union["Rational", Fraction, numbers.Real]

DEFAULT_DECIMAL_SCALE = 100
DEFAULT_ROUNDING = ROUND_DOWN

# Python's numeric hash is computed modulo this prime.
_PyHASH_MODULUS = sys.hash_info.modulus
_PyHASH_INF = sys.hash_info.inf

_thread_state = threading.local()
_THREAD_SOURCE = object()


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _divide_truncated(dividend: int, divisor: int) -> int:
    """Integer quotient rounded toward zero."""
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


def _wrap(value: int, bits: int) -> int:
    """Reduce *value* to a signed two's-complement integer of *bits* bits."""
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _default_source() -> _random.Random:
    source = getattr(_thread_state, "random", None)
    if source is None:
        source = _thread_state.random = _random.Random()
    return source


class Rational:
    """Immutable rational number, always stored in lowest terms.

    ``Rational(8, 6)`` produces 4/3. The denominator is always positive, so
    the sign lives in the numerator only, and zero is always ``0/1``. The
    numerator defaults to 0 and the denominator to 1, so ``Rational(3) == 3``
    and ``Rational() == 0``.

    Frequently used values (0, 1, -1, 1/2, -1/2, 2, -2, 10, -10) are shared
    instances, available as ``Rational.ZERO``, ``Rational.ONE`` and so on.
    """

    __slots__ = ("_numerator", "_denominator", "_signum", "_is_integer", "_is_one")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    ZERO: "Rational"
    ONE: "Rational"
    MINUS_ONE: "Rational"
    ONE_HALF: "Rational"
    MINUS_ONE_HALF: "Rational"
    TWO: "Rational"
    MINUS_TWO: "Rational"
    TEN: "Rational"
    MINUS_TEN: "Rational"

    # We're immutable, so use __new__ not __init__
    def __new__(cls, numerator: Union[int, numbers.Integral] = 0,
                denominator: Union[int, numbers.Integral] = 1) -> "Rational":
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        return cls._normalized(num, den)

    @classmethod
    def _normalized(cls, num: int, den: int) -> "Rational":
        if den == 0:
            raise InvalidArgumentError("denominator must be non-zero")
        if num == 0:
            return ZERO
        if den < 0:
            num, den = -num, -den
        gcd = math.gcd(num, den)
        if gcd != 1:
            num //= gcd
            den //= gcd
        return _coprime(num, den)

    @classmethod
    def _trusted(
        cls,
        numerator: int,
        denominator: int,
        signum: int,
        is_integer: bool,
        is_one: bool,
    ) -> "Rational":
        # No validation: callers guarantee the pair is already canonical.
        self = object.__new__(cls)
        self._numerator = numerator
        self._denominator = denominator
        self._signum = signum
        self._is_integer = is_integer
        self._is_one = is_one
        return self

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def of(cls, numerator: Any, denominator: Any = None) -> "Rational":
        """Return the Rational ``numerator / denominator``.

        With a single argument, integers, Rationals and strings (see
        :meth:`parse`) are accepted.
        """
        if denominator is None:
            if isinstance(numerator, Rational):
                return numerator
            if isinstance(numerator, str):
                return cls.parse(numerator)
            return cls(numerator)
        return cls(numerator, denominator)

    @classmethod
    def of_reciprocal(cls, denominator: Union[int, numbers.Integral]) -> "Rational":
        """Return ``1 / denominator``."""
        return cls(1, denominator)

    @classmethod
    def of_continued_fraction(cls, *terms: int) -> "Rational":
        """Evaluate the continued fraction ``[a0; a1, ..., an]``."""
        from .continued import from_continued_fraction

        return from_continued_fraction(terms)

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """Parse an integer, fraction, decimal or repeating decimal literal."""
        from .parsing import parse_rational

        return parse_rational(text)

    @classmethod
    def random(cls, bits: int, source: Any = _THREAD_SOURCE) -> "Rational":
        """Return a uniformly distributed value from ``{k / 2**bits : 0 <= k < 2**bits}``.

        *source* must provide ``getrandbits(k)`` (for example
        :class:`random.Random`). Without a source a per-thread generator is
        used.
        """
        if isinstance(bits, bool) or not isinstance(bits, numbers.Integral) or bits <= 0:
            raise InvalidArgumentError(f"bits must be a positive integer, got {bits!r}")
        if source is None:
            raise InvalidArgumentError("source of randomness must not be None")
        if source is _THREAD_SOURCE:
            source = _default_source()
        bits = int(bits)
        numerator = source.getrandbits(bits)
        logger.debug("drew %d random bits", bits)
        return cls._normalized(numerator, 1 << bits)

    @classmethod
    def from_float(cls, value: float) -> "Rational":
        """Return the exact value of the binary float *value*."""
        if isinstance(value, bool):  # bool is a subclass of int; treat explicitly.
            return _integer(int(value))
        value = float(value)
        if math.isnan(value) or math.isinf(value):
            raise InvalidArgumentError("cannot convert NaN or infinity to Rational")
        num, den = value.as_integer_ratio()
        return cls._normalized(num, den)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        return cls._normalized(value.numerator, value.denominator)

    @classmethod
    def rationalize(cls, value: Any) -> "Rational":
        """Coerce a numeric-like value (or a literal string) into :class:`Rational`."""
        if isinstance(value, Rational):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise InvalidArgumentError("cannot convert NaN or infinity to Rational")
            return cls._normalized(*value.as_integer_ratio())
        if isinstance(value, Fraction):
            return cls.from_fraction(value)
        if isinstance(value, numbers.Integral):
            return _integer(int(value))
        if isinstance(value, np.generic):
            return cls.rationalize(value.item())
        if isinstance(value, numbers.Real):
            return cls.from_float(float(value))
        raise TypeError(f"Cannot convert {type(value)!r} to Rational")

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def signum(self) -> int:
        """-1, 0 or 1 according to the sign of this value."""
        return self._signum

    def is_integer(self) -> bool:
        return self._is_integer

    def is_zero(self) -> bool:
        return self._signum == 0

    def is_one(self) -> bool:
        return self._is_one

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._numerator, self._denominator)

    def as_integer_ratio(self) -> Tuple[int, int]:
        return self._numerator, self._denominator

    def limit_denominator(self, max_denominator: int = 10**6) -> "Rational":
        """Return the closest Rational whose denominator is at most *max_denominator*."""
        if max_denominator < 1:
            raise InvalidArgumentError("max_denominator must be >= 1")
        if self._denominator <= max_denominator:
            return self
        fraction = self.as_fraction().limit_denominator(max_denominator)
        return _coprime(fraction.numerator, fraction.denominator)

    def check_consistency(self) -> None:
        """Verify the canonical-form invariants, raising :class:`InvalidStateError`."""
        num, den = self._numerator, self._denominator
        if den <= 0:
            problem = "denominator must be positive"
        elif num == 0 and den != 1:
            problem = "zero must be represented as 0/1"
        elif math.gcd(num, den) != 1:
            problem = "numerator and denominator must be coprime"
        elif self._signum != (num > 0) - (num < 0):
            problem = "signum must match the sign of the numerator"
        elif self._is_integer != (den == 1):
            problem = "is_integer must hold iff the denominator is 1"
        elif self._is_one != (den == 1 and num == 1):
            problem = "is_one must hold iff the value is 1"
        else:
            return
        text = f"{int_to_str(num)}/{int_to_str(den)}"
        logger.debug("inconsistent Rational %s: %s", text, problem)
        raise InvalidStateError(f"{text}: {problem}")

    # ------------------------------------------------------------------
    # Arithmetic
    def add(self, other: NumberLike) -> "Rational":
        """Return ``self + other``."""
        other = self._coerce_scalar(other)
        if self._signum == 0:
            return other
        if other._signum == 0:
            return self
        if self._is_integer and other._is_integer:
            return _integer(self._numerator + other._numerator)
        if self._denominator == other._denominator and self._numerator == -other._numerator:
            return ZERO
        return Rational._normalized(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def subtract(self, other: NumberLike) -> "Rational":
        """Return ``self - other``."""
        other = self._coerce_scalar(other)
        if self._numerator == other._numerator and self._denominator == other._denominator:
            return ZERO
        if other._signum == 0:
            return self
        if self._signum == 0:
            return other.negate()
        if self._is_integer and other._is_integer:
            return _integer(self._numerator - other._numerator)
        return Rational._normalized(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def multiply(self, other: NumberLike) -> "Rational":
        """Return ``self * other``."""
        other = self._coerce_scalar(other)
        if self._signum == 0 or other._signum == 0:
            return ZERO
        if self._is_one:
            return other
        if other._is_one:
            return self
        if other is TWO:
            return self.redouble()
        if self is TWO:
            return other.redouble()
        if self._numerator == other._denominator and self._denominator == other._numerator:
            return ONE
        # Cancel across the operands so the product is already coprime.
        g1 = math.gcd(self._numerator, other._denominator)
        g2 = math.gcd(other._numerator, self._denominator)
        return _coprime(
            (self._numerator // g1) * (other._numerator // g2),
            (self._denominator // g2) * (other._denominator // g1),
        )

    def divide(self, other: NumberLike) -> "Rational":
        """Return ``self / other``."""
        other = self._coerce_scalar(other)
        if other._signum == 0:
            raise DivisionByZeroError("division by zero")
        if self._signum == 0:
            return ZERO
        if other._is_one:
            return self
        if self._numerator == other._numerator and self._denominator == other._denominator:
            return ONE
        if other is TWO:
            return self.halve()
        g1 = math.gcd(self._numerator, other._numerator)
        g2 = math.gcd(self._denominator, other._denominator)
        num = (self._numerator // g1) * (other._denominator // g2)
        den = (self._denominator // g2) * (other._numerator // g1)
        if den < 0:
            num, den = -num, -den
        return _coprime(num, den)

    def divide_integer(self, other: NumberLike) -> int:
        """Return the quotient ``self / other`` truncated toward zero."""
        other = self._coerce_scalar(other)
        if other._signum == 0:
            raise DivisionByZeroError("division by zero")
        if self._signum == 0:
            return 0
        if self._numerator == other._numerator and self._denominator == other._denominator:
            return 1
        if self._is_integer:
            if other._is_one:
                return self._numerator
            if other._is_integer:
                return _divide_truncated(self._numerator, other._numerator)
            return _divide_truncated(self._numerator * other._denominator, other._numerator)
        if other._is_integer:
            return _divide_truncated(self._numerator, other._numerator * self._denominator)
        return _divide_truncated(
            self._numerator * other._denominator,
            other._numerator * self._denominator,
        )

    def divide_integer_and_remainder(self, other: NumberLike) -> Tuple[int, "Rational"]:
        """Return ``(q, r)`` with ``q`` truncated toward zero and ``r = self - q * other``."""
        other = self._coerce_scalar(other)
        if other._signum == 0:
            raise DivisionByZeroError("division by zero")
        if self._signum == 0:
            return 0, ZERO
        if self._numerator == other._numerator and self._denominator == other._denominator:
            return 1, ZERO
        if self._is_integer and other._is_integer:
            quotient = _divide_truncated(self._numerator, other._numerator)
            return quotient, _integer(self._numerator - quotient * other._numerator)
        dividend = self._numerator * other._denominator
        divisor = other._numerator * self._denominator
        quotient = _divide_truncated(dividend, divisor)
        if quotient == 0:
            return 0, self
        return quotient, Rational._normalized(
            dividend - quotient * divisor,
            self._denominator * other._denominator,
        )

    def mod(self, other: NumberLike) -> "Rational":
        """Return ``self - floor(self / other) * other``.

        The result has the sign of *other* and a magnitude below ``|other|``:
        ``Rational(-19, 7).mod(Rational(5, 29)) == Rational(9, 203)``.
        """
        other = self._coerce_scalar(other)
        if other._signum == 0:
            raise DivisionByZeroError("modulo by zero")
        if self._signum == 0:
            return ZERO
        if self._numerator == other._numerator and self._denominator == other._denominator:
            return ZERO
        dividend = self._numerator * other._denominator
        divisor = other._numerator * self._denominator
        quotient = _divide_truncated(dividend, divisor)
        if (dividend < 0) != (divisor < 0) and quotient * divisor != dividend:
            quotient -= 1
        return Rational._normalized(
            dividend - quotient * divisor,
            self._denominator * other._denominator,
        )

    def pow(self, exponent: int) -> "Rational":
        """Return ``self ** exponent`` for an integer *exponent*."""
        n = _ensure_int(exponent, name="exponent")
        if n == 0:
            if self._signum == 0:
                raise InvalidOperationError("0 ** 0 is undefined")
            return ONE
        if self._signum == 0:
            if n < 0:
                raise DivisionByZeroError("zero cannot be raised to a negative power")
            return ZERO
        if self._is_one or (self is MINUS_ONE and n % 2 == 0):
            return ONE
        if n == 1:
            return self
        if n == 2:
            return self.square()
        if n == 3:
            return self.square().multiply(self)
        if n == 4:
            return self.square().square()
        if n == -1:
            return self.reciprocal()
        if n == -2:
            return self.reciprocal().square()
        if n < 0:
            num, den = self._denominator ** -n, self._numerator ** -n
            if den < 0:
                num, den = -num, -den
            return _coprime(num, den)
        return _coprime(self._numerator ** n, self._denominator ** n)

    def gcd(self, other: NumberLike) -> "Rational":
        """Return the greatest Rational ``g`` such that both operands are integer multiples of ``g``.

        ``gcd(a/b, c/d) == gcd(a, c) / lcm(b, d)``; the result is non-negative
        and zero only if both operands are zero.
        """
        other = self._coerce_scalar(other)
        if self._numerator == other._numerator and self._denominator == other._denominator:
            return self.abs()
        if self._signum == 0:
            return other.abs()
        if other._signum == 0:
            return self.abs()
        if self._is_one:
            return _coprime(1, other._denominator)
        if other._is_one:
            return _coprime(1, self._denominator)
        # gcd(a, c) shares no factor with either denominator.
        num = math.gcd(self._numerator, other._numerator)
        shared = math.gcd(self._denominator, other._denominator)
        return _coprime(num, (self._denominator // shared) * other._denominator)

    def lcm(self, other: NumberLike) -> "Rational":
        """Return the least non-negative common integer multiple of both operands."""
        other = self._coerce_scalar(other)
        if self._signum == 0 or other._signum == 0:
            return ZERO
        if self._numerator == other._numerator and self._denominator == other._denominator:
            return self.abs()
        return self.reciprocal().gcd(other.reciprocal()).reciprocal()

    def reciprocal(self) -> "Rational":
        if self._signum == 0:
            raise DivisionByZeroError("reciprocal of zero")
        if self._is_one:
            return ONE
        if self._signum < 0:
            return _coprime(-self._denominator, -self._numerator)
        return _coprime(self._denominator, self._numerator)

    def negate(self) -> "Rational":
        if self._signum == 0:
            return self
        return _coprime(-self._numerator, self._denominator)

    def abs(self) -> "Rational":
        if self._signum >= 0:
            return self
        return self.negate()

    def square(self) -> "Rational":
        if self._signum == 0:
            return ZERO
        if self._is_one or self is MINUS_ONE:
            return ONE
        if self is TWO or self is MINUS_TWO:
            return _integer(4)
        return _coprime(self._numerator * self._numerator, self._denominator * self._denominator)

    def redouble(self) -> "Rational":
        """Return ``2 * self``."""
        if self._signum == 0:
            return ZERO
        if self._is_one:
            return TWO
        if self._denominator & 1:
            return _coprime(self._numerator << 1, self._denominator)
        return _coprime(self._numerator, self._denominator >> 1)

    def halve(self) -> "Rational":
        """Return ``self / 2``."""
        if self._signum == 0:
            return ZERO
        if self is TWO:
            return ONE
        if self._numerator & 1:
            return _coprime(self._numerator, self._denominator << 1)
        return _coprime(self._numerator >> 1, self._denominator)

    def min(self, other: NumberLike) -> "Rational":
        other = self._coerce_scalar(other)
        return self if self.compare(other) < 0 else other

    def max(self, other: NumberLike) -> "Rational":
        other = self._coerce_scalar(other)
        return other if self.compare(other) < 0 else self

    # ------------------------------------------------------------------
    # Continued fractions
    def to_continued_fraction(self) -> List[int]:
        """Return the terms ``[a0, a1, ..., an]`` with ``a1..an`` positive."""
        from .continued import to_continued_fraction

        return to_continued_fraction(self)

    def convergents(self) -> Iterator["Rational"]:
        """Yield the successive convergents of the continued fraction of this value."""
        from .continued import convergents

        return convergents(self.to_continued_fraction())

    # ------------------------------------------------------------------
    # Rounding and conversion
    def floor(self) -> "Rational":
        if self._is_integer:
            return self
        return _integer(self._numerator // self._denominator)

    def ceil(self) -> "Rational":
        if self._is_integer:
            return self
        return _integer(-(-self._numerator // self._denominator))

    def truncate(self) -> "Rational":
        if self._is_integer:
            return self
        return _integer(self.to_integer())

    def round(self, ndigits: Union[int, None] = None) -> "Rational":
        """Round to the nearest integer, or to *ndigits* decimal places.

        Exact halves go toward +inf for positive values and toward -inf for
        negative values.
        """
        if ndigits is not None:
            scale = _integer(10 ** abs(ndigits))
            if ndigits >= 0:
                return self.multiply(scale).round().divide(scale)
            return self.divide(scale).round().multiply(scale)
        if self._is_integer:
            return self
        quotient, remainder = divmod(abs(self._numerator), self._denominator)
        if 2 * remainder >= self._denominator:
            quotient += 1
        return _integer(quotient if self._signum > 0 else -quotient)

    def to_integer(self) -> int:
        """Return this value truncated toward zero."""
        if self._is_integer:
            return self._numerator
        return _divide_truncated(self._numerator, self._denominator)

    def to_int32(self) -> np.int32:
        """Truncate toward zero and wrap into a 32-bit signed integer."""
        return np.int32(_wrap(self.to_integer(), 32))

    def to_int64(self) -> np.int64:
        """Truncate toward zero and wrap into a 64-bit signed integer."""
        return np.int64(_wrap(self.to_integer(), 64))

    def to_decimal(self, scale: Union[int, None] = None, rounding: Union[str, None] = None) -> Decimal:
        """Return a :class:`~decimal.Decimal` with *scale* fractional digits.

        *rounding* is one of the :mod:`decimal` rounding modes. Defaults are
        :data:`DEFAULT_DECIMAL_SCALE` and :data:`DEFAULT_ROUNDING`. Integers
        are returned without a fractional part.
        """
        if scale is None:
            scale = DEFAULT_DECIMAL_SCALE
        if rounding is None:
            rounding = DEFAULT_ROUNDING
        if scale < 0:
            raise InvalidArgumentError("scale must be non-negative")
        if self._is_integer:
            return Decimal(self._numerator)
        quotient, remainder = divmod(abs(self._numerator) * 10 ** scale, self._denominator)
        # One guard digit carries everything the rounding modes look at.
        if remainder == 0:
            guard = 0
        elif 2 * remainder < self._denominator:
            guard = 1
        elif 2 * remainder == self._denominator:
            guard = 5
        else:
            guard = 9
        digits = tuple(int(digit) for digit in int_to_str(quotient * 10 + guard))
        value = Decimal((1 if self._signum < 0 else 0, digits, -(scale + 1)))
        with localcontext() as ctx:
            ctx.prec = len(digits) + 1
            result = value.quantize(Decimal((0, (1,), -scale)), rounding=rounding)
        # A negative value that rounds to zero yields 0, never -0.
        return result if result else result.copy_abs()

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:  # pragma: no cover - trivial mapping
        return self._numerator / self._denominator

    def __int__(self) -> int:
        return self.to_integer()

    def __trunc__(self) -> int:
        return self.to_integer()

    def __floor__(self) -> int:
        return self._numerator // self._denominator

    def __ceil__(self) -> int:
        return -(-self._numerator // self._denominator)

    def __round__(self, ndigits: Union[int, None] = None) -> Any:
        if ndigits is None:
            return self.round()._numerator
        return self.round(ndigits)

    def __bool__(self) -> bool:  # pragma: no cover - trivial mapping
        return self._signum != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({int_to_str(self._numerator)}, {int_to_str(self._denominator)})"

    def __str__(self) -> str:
        if self._is_integer:
            return int_to_str(self._numerator)
        return f"{int_to_str(self._numerator)}/{int_to_str(self._denominator)}"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        try:
            return format(float(self), format_spec)
        except (ValueError, TypeError):
            return format(str(self), format_spec)

    def __reduce__(self):
        return (self.__class__, (self._numerator, self._denominator))

    def __copy__(self) -> "Rational":
        return self

    def __deepcopy__(self, memo: Any) -> "Rational":
        return self

    # ------------------------------------------------------------------
    # Internal helpers
    def _coerce_scalar(self, value: Any) -> "Rational":
        if isinstance(value, Rational):
            return value
        if isinstance(value, Fraction):
            return Rational.from_fraction(value)
        if isinstance(value, numbers.Integral):
            return _integer(int(value))
        if isinstance(value, np.generic):  # NumPy scalars
            return self._coerce_scalar(value.item())
        if isinstance(value, numbers.Real):
            return Rational.from_float(float(value))
        raise TypeError(f"Cannot interpret {type(value)!r} as Rational")

    def _binary_operation(self, other: Any, op: Callable, reflected: bool = False) -> Any:
        if reflected:
            def apply(value: Any) -> Any:
                return op(self._coerce_scalar(value), self)
        else:
            def apply(value: Any) -> Any:
                return op(self, self._coerce_scalar(value))

        if isinstance(other, np.ndarray):
            return np.vectorize(apply, otypes=[object])(other)
        if isinstance(other, (list, tuple)):
            return np.array([apply(item) for item in other], dtype=object)
        try:
            other_rat = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        if reflected:
            return op(other_rat, self)
        return op(self, other_rat)

    def _coerce_power(self, value: Any) -> int:
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, Rational):
            if not value._is_integer:
                raise InvalidArgumentError("exponent must be an integer")
            return value._numerator
        if isinstance(value, np.generic):
            return self._coerce_power(value.item())
        if isinstance(value, numbers.Real):
            if not float(value).is_integer():
                raise InvalidArgumentError("exponent must be an integer")
            return int(value)
        raise TypeError("Unsupported exponent type")

    @staticmethod
    def _floor_divide(a: "Rational", b: "Rational") -> int:
        if b._signum == 0:
            raise DivisionByZeroError("division by zero")
        return (a._numerator * b._denominator) // (b._numerator * a._denominator)

    @staticmethod
    def _divmod(a: "Rational", b: "Rational") -> Tuple[int, "Rational"]:
        return Rational._floor_divide(a, b), a.mod(b)

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.add)

    def __radd__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.add, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.subtract)

    def __rsub__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.subtract, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.multiply)

    def __rmul__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.multiply, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.divide)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.divide, reflected=True)

    def __floordiv__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._floor_divide)

    def __rfloordiv__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._floor_divide, reflected=True)

    def __mod__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.mod)

    def __rmod__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.mod, reflected=True)

    def __divmod__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._divmod)

    def __rdivmod__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._divmod, reflected=True)

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, np.ndarray):
            vectorised = np.vectorize(lambda x: self.__pow__(x), otypes=[object])
            return vectorised(exponent)
        return self.pow(self._coerce_power(exponent))

    def __rpow__(self, base: Any) -> Any:
        if not self._is_integer:
            raise InvalidArgumentError("exponent must be an integer")
        return self._binary_operation(
            base, lambda b, e: b.pow(e._numerator), reflected=True
        )

    def __neg__(self) -> "Rational":
        return self.negate()

    def __pos__(self) -> "Rational":  # pragma: no cover - trivial
        return self

    def __abs__(self) -> "Rational":
        return self.abs()

    # ------------------------------------------------------------------
    # Comparisons
    def compare(self, other: NumberLike) -> int:
        """Return -1, 0 or 1 as ``self`` is less than, equal to or greater than *other*."""
        other = self._coerce_scalar(other)
        if self._signum != other._signum:
            return -1 if self._signum < other._signum else 1
        if self._signum == 0:
            return 0
        if self._denominator == other._denominator:
            lhs, rhs = self._numerator, other._numerator
        else:
            lhs = self._numerator * other._denominator
            rhs = other._numerator * self._denominator
        return (lhs > rhs) - (lhs < rhs)

    def _compare(self, other: Any, op) -> bool:
        if isinstance(other, float) and not math.isfinite(other):
            # Any finite value orders against inf and nan the way 0.0 does.
            return op(0.0, other)
        try:
            other_rat = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return op(self.compare(other_rat), 0)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, float) and not math.isfinite(other):
            return False
        try:
            other_rat = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return (
            self._numerator == other_rat._numerator
            and self._denominator == other_rat._denominator
        )

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        # Same value as hash(Fraction(n, d)), so hash(Rational(n)) == hash(n).
        try:
            dinv = pow(self._denominator, -1, _PyHASH_MODULUS)
        except ValueError:
            hash_ = _PyHASH_INF
        else:
            hash_ = hash(hash(abs(self._numerator)) * dinv)
        result = hash_ if self._numerator >= 0 else -hash_
        return -2 if result == -1 else result

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.floor_divide: operator.floordiv,
        np.remainder: operator.mod,
        np.negative: operator.neg,
        np.positive: operator.pos,
        np.absolute: operator.abs,
        np.power: operator.pow,
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, Rational):
                coerced.append(value)
            elif isinstance(value, np.ndarray):
                vectorised = np.vectorize(lambda x: self._coerce_scalar(x), otypes=[object])
                coerced.append(vectorised(value))
                has_array = True
            else:
                coerced.append(self._coerce_scalar(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


def _coprime(numerator: int, denominator: int) -> Rational:
    """Wrap a coprime pair with positive denominator without checking it."""
    pooled = _POOL.get((numerator, denominator))
    if pooled is not None:
        return pooled
    return Rational._trusted(
        numerator, denominator, 1 if numerator > 0 else -1, denominator == 1, False
    )


def _integer(value: int) -> Rational:
    return _coprime(value, 1)


def _constant(numerator: int, denominator: int) -> Rational:
    signum = (numerator > 0) - (numerator < 0)
    is_integer = denominator == 1
    return Rational._trusted(
        numerator, denominator, signum, is_integer, is_integer and numerator == 1
    )


ZERO = _constant(0, 1)
ONE = _constant(1, 1)
MINUS_ONE = _constant(-1, 1)
ONE_HALF = _constant(1, 2)
MINUS_ONE_HALF = _constant(-1, 2)
TWO = _constant(2, 1)
MINUS_TWO = _constant(-2, 1)
TEN = _constant(10, 1)
MINUS_TEN = _constant(-10, 1)

_POOL = {
    (constant._numerator, constant._denominator): constant
    for constant in (ZERO, ONE, MINUS_ONE, ONE_HALF, MINUS_ONE_HALF, TWO, MINUS_TWO, TEN, MINUS_TEN)
}

Rational.ZERO = ZERO
Rational.ONE = ONE
Rational.MINUS_ONE = MINUS_ONE
Rational.ONE_HALF = ONE_HALF
Rational.MINUS_ONE_HALF = MINUS_ONE_HALF
Rational.TWO = TWO
Rational.MINUS_TWO = MINUS_TWO
Rational.TEN = TEN
Rational.MINUS_TEN = MINUS_TEN


def rationalize(value: Any) -> Rational:
    """Public helper to convert *value* into :class:`Rational`."""

    return Rational.rationalize(value)


__all__ = [
    "Rational",
    "rationalize",
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
]
