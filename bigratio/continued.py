"""
Continued-fraction expansion of Rationals.

A Rational ``x`` is written as ``a0 + 1/(a1 + 1/(a2 + ... + 1/an))`` where
``a0`` may be negative or zero and ``a1..an`` are positive. The expansion of
every Rational is finite.
"""
from typing import Iterable, Iterator, List

from .errors import InvalidArgumentError
from .rational import Rational


def to_continued_fraction(value: Rational) -> List[int]:
    """
    Expands *value* in its continued fraction.

    Args:
        value (Rational): The number to expand.

    Returns:
        list of int: The terms ``[a0, a1, ..., an]``. The first term is
        ``floor(value)``, so it is negative for negative non-integers.
    """
    num, den = value.numerator, value.denominator
    if den == 1:
        return [num]

    terms = []
    while den != 0:
        # Floor division keeps every term after the first positive.
        quotient, remainder = divmod(num, den)
        terms.append(quotient)
        num, den = den, remainder
    return terms


def from_continued_fraction(terms: Iterable[int]) -> Rational:
    """
    Obtains the Rational from the terms ``[a0, a1, ..., an]`` of a continued fraction.

    Evaluates right to left: starting with ``x = an``, each step computes
    ``x = ai + 1/x``.

    Raises:
        InvalidArgumentError: If *terms* is empty.
        DivisionByZeroError: If an intermediate value is zero.
    """
    terms = list(terms)
    if not terms:
        raise InvalidArgumentError("continued fraction needs at least one term")

    value = Rational(terms[-1])
    for term in reversed(terms[:-1]):
        value = value.reciprocal().add(Rational(term))
    return value


def convergents(terms: Iterable[int]) -> Iterator[Rational]:
    """
    Yields the convergents ``h_i / k_i`` of the continued fraction *terms*.

    Uses the relation of the Gaussian bracket
    ``h_i = a_i h_(i-1) + h_(i-2)``, ``k_i = a_i k_(i-1) + k_(i-2)``.
    A zero term after the first makes ``k_i`` zero; that infinite
    convergent is skipped.
    """
    h_prev, h = 0, 1
    k_prev, k = 1, 0
    for term in terms:
        h_prev, h = h, term * h + h_prev
        k_prev, k = k, term * k + k_prev
        if k == 0:
            continue
        yield Rational(h, k)


__all__ = ["to_continued_fraction", "from_continued_fraction", "convergents"]
