"""Parsing of textual Rational literals.

Accepted forms (ASCII digits, no surrounding whitespace)::

    -123            integer
    41/152          fraction, either side may carry a leading '-'
    123.456         decimal, the fractional part may be empty ("12.")
    123.456_789     decimal with repeating tail 789 (123.456789789...)
"""
import logging
import re

from .digits import str_to_int
from .errors import DivisionByZeroError, InvalidFormatError
from .rational import Rational

logger = logging.getLogger(__name__)

ALLOWED_CHARS = set("0123456789-/._")

_RATIONAL_FORMAT = re.compile(r"""
    \A(?P<sign>-?)                    # an optional sign, then
    (?P<int>[0-9]+)                   # the integer part or numerator
    (?:                               # followed by
       /(?P<denom>-?[0-9]+)           # a denominator
    |                                 # or
       \.(?P<fixed>[0-9]*)            # a fractional part (possibly empty)
       (?:_(?P<repeat>[0-9]*))?       # and an optional repeating part
    )?
    \Z
""", re.VERBOSE | re.ASCII)


def _describe(text: str) -> str:
    bad = sorted(set(c for c in text if c not in ALLOWED_CHARS))
    if bad:
        return f"illegal character(s) {bad} in {text!r}"
    if not text:
        return "empty string"
    if text.count("/") > 1:
        return f"more than one '/' in {text!r}"
    return f"malformed rational literal {text!r}"


def parse_rational(text: str) -> Rational:
    """Return the Rational denoted by *text*."""
    if not isinstance(text, str):
        raise InvalidFormatError(f"expected a string, got {type(text)!r}")
    match = _RATIONAL_FORMAT.match(text)
    if match is None:
        raise InvalidFormatError(_describe(text))

    negative = match.group("sign") == "-"
    integer_part = str_to_int(match.group("int"))
    denom = match.group("denom")
    fixed = match.group("fixed")

    if denom is not None:
        denominator = str_to_int(denom.lstrip("-"))
        if denom.startswith("-"):
            denominator = -denominator
        if denominator == 0:
            raise DivisionByZeroError(f"zero denominator in {text!r}")
        value = Rational(-integer_part if negative else integer_part, denominator)
    elif fixed is None:
        value = Rational(-integer_part if negative else integer_part)
    else:
        value = _parse_decimal(negative, integer_part, fixed, match.group("repeat") or "")

    logger.debug("parsed %r as %s", text, value)
    return value


def _parse_decimal(negative: bool, integer_part: int, fixed: str, repeat: str) -> Rational:
    digits = fixed.rstrip("0")
    scale = 10 ** len(digits)
    numerator = integer_part * scale + str_to_int(digits or "0")
    value = Rational(-numerator if negative else numerator, scale)
    if not repeat:
        return value

    # The repeating block starts after all digits of the fixed part,
    # including any trailing zeros stripped above.
    tail = Rational(str_to_int(repeat), (10 ** len(repeat) - 1) * 10 ** len(fixed))
    if negative:
        return value.subtract(tail)
    return value.add(tail)


__all__ = ["parse_rational", "ALLOWED_CHARS"]
