"""
Closed-form conversion between Gregorian (year, month, day) triples and
proleptic ordinal day numbers (0001-01-01 is day 1, as in ``datetime``).

Every function accepts NumPy arrays wherever a scalar is accepted and
broadcasts its arguments.  Scalar input is computed on plain Python ints,
so it has no range limit; array input is computed in int64.
"""

from __future__ import annotations

import operator
from typing import Tuple, Union

import numpy as np

ArrayLike = Union[int, "np.ndarray"]

# Days in one 400-year Gregorian cycle.
DAYS_PER_ERA: int = 146_097

# Ordinal of 0000-03-01, the start of the era-aligned day count.
_MARCH_EPOCH_ORDINAL: int = -305

_MONTH_LENGTHS = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_NP_MONTH_LENGTHS = np.array(_MONTH_LENGTHS, dtype=np.int64)


def _is_scalar(*args) -> bool:
    return all(np.ndim(a) == 0 for a in args)


def _coerce(scalar: bool, *args):
    # Scalars become Python ints (arbitrary precision), arrays become int64.
    if scalar:
        return tuple(operator.index(a) for a in args)
    return tuple(np.asarray(a, dtype=np.int64) for a in args)


def _leap(y):
    return (y % 4 == 0) & ((y % 100 != 0) | (y % 400 == 0))


def is_leap_year(year: ArrayLike) -> Union[bool, np.ndarray]:
    scalar = _is_scalar(year)
    (y,) = _coerce(scalar, year)
    return bool(_leap(y)) if scalar else _leap(y)


def days_in_month(year: ArrayLike, month: ArrayLike) -> ArrayLike:
    scalar = _is_scalar(year, month)
    y, m = _coerce(scalar, year, month)
    if np.any((np.asarray(m) < 1) | (np.asarray(m) > 12)):
        raise ValueError("month must be in 1..12")
    if scalar:
        return _MONTH_LENGTHS[m] + int(m == 2 and _leap(y))
    return _NP_MONTH_LENGTHS[m] + ((m == 2) & _leap(y))


def to_ordinal(year: ArrayLike, month: ArrayLike, day: ArrayLike) -> ArrayLike:
    """Ordinal day number of each (year, month, day); inputs are not validated."""
    y, m, d = _coerce(_is_scalar(year, month, day), year, month, day)

    # Count years from March so the leap day is the last day of the year.
    y = y - (m <= 2)
    era = y // 400
    yoe = y - era * 400
    mp = (m + 9) % 12
    doy = (153 * mp + 2) // 5 + d - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * DAYS_PER_ERA + doe + _MARCH_EPOCH_ORDINAL


def from_ordinal(n: ArrayLike) -> Tuple[ArrayLike, ArrayLike, ArrayLike]:
    """Inverse of :func:`to_ordinal`; returns ``(year, month, day)``."""
    (z,) = _coerce(_is_scalar(n), n)
    z = z - _MARCH_EPOCH_ORDINAL

    era = z // DAYS_PER_ERA
    doe = z - era * DAYS_PER_ERA
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    d = doy - (153 * mp + 2) // 5 + 1
    m = mp + 3 - 12 * (mp >= 10)
    y = yoe + era * 400 + (m <= 2)
    return y, m, d
