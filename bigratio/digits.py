"""Decimal digit conversion for integers of any length.

``int(str)`` and ``str(int)`` refuse more digits than
``sys.get_int_max_str_digits()`` allows. These helpers split long values so
every single conversion stays below the smallest limit CPython accepts.
"""

# CPython rejects limits below 640 digits, so chunks this size always convert.
_CHUNK = 512
# 2**1600 has 482 decimal digits.
_SHORT_BITS = 1600


def str_to_int(digits: str) -> int:
    """Return the non-negative integer spelled by the ASCII digit string *digits*."""
    if len(digits) <= _CHUNK:
        return int(digits)
    split = len(digits) // 2
    high, low = digits[:split], digits[split:]
    return str_to_int(high) * 10 ** len(low) + str_to_int(low)


def int_to_str(value: int) -> str:
    """Return the decimal representation of *value* without any length limit."""
    if value < 0:
        return "-" + int_to_str(-value)
    if value.bit_length() <= _SHORT_BITS:
        return str(value)
    # value >= 2**(bits - 1) >= 10**(2 * k), so the high part is never zero.
    k = (value.bit_length() - 1) * 30102 // 100000 // 2
    high, low = divmod(value, 10 ** k)
    return int_to_str(high) + int_to_str(low).zfill(k)


__all__ = ["str_to_int", "int_to_str"]
