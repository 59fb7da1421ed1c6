"""NumPy object-array helpers for :class:`~bigratio.rational.Rational`."""
from __future__ import annotations

from typing import Any, Tuple, Union

import numpy as np

from .rational import ZERO, Rational


def as_rational_array(values: Any, *, copy: bool = True) -> np.ndarray:
    """Return a ``numpy.ndarray`` of :class:`Rational` values.

    ``values`` can be any iterable containing numeric-like entries or literal
    strings, or an existing NumPy array. When ``copy`` is ``False`` and
    ``values`` is already an object array of Rationals, it is returned as is.
    """

    if isinstance(values, np.ndarray):
        if copy:
            array = values.copy()
        else:
            array = values
        if array.dtype != object:
            array = array.astype(object, copy=False)
        if all(isinstance(item, Rational) for item in array.flat):
            return array
        vectorised = np.vectorize(Rational.rationalize, otypes=[object])
        return vectorised(array)

    if isinstance(values, (list, tuple)):
        coerced = np.empty(len(values), dtype=object)
        for index, item in enumerate(values):
            coerced[index] = Rational.rationalize(item)
        return coerced

    return as_rational_array(list(values), copy=copy)


def zeros(shape: Union[int, Tuple[int, ...]]) -> np.ndarray:
    """Return an object array of the given shape filled with ``Rational(0)``."""

    if isinstance(shape, int) and shape < 0:
        raise ValueError("length must be non-negative")
    array = np.empty(shape, dtype=object)
    array.fill(ZERO)
    return array


def zeros_like(values: Any) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""

    return zeros(np.shape(values))


def to_float_array(values: Any) -> np.ndarray:
    """Return a ``float64`` array holding the correctly rounded values of ``values``."""

    array = as_rational_array(values, copy=False)
    return np.vectorize(float, otypes=[np.float64])(array)


__all__ = ["as_rational_array", "zeros", "zeros_like", "to_float_array"]
