"""
tests/calendar/test_ordinal.py

Covers:
  - Leap-year rule (4 / 100 / 400)
  - Month lengths
  - Scalar ordinal conversion against datetime.date
  - NumPy array inputs and broadcasting
  - Years outside datetime's 1..9999 range
"""

import datetime

import numpy as np
import pytest

from datecalc.calendar.ordinal import (
    days_in_month,
    from_ordinal,
    is_leap_year,
    to_ordinal,
)


# ── Leap years and month lengths ──────────────────────────────────────────────

class TestLeapYears:

    @pytest.mark.parametrize("year", [2024, 2000, 1600, 4, 0, -4, -400])
    def test_leap(self, year):
        assert is_leap_year(year) is True

    @pytest.mark.parametrize("year", [2023, 1900, 2100, 1700, 1, -100])
    def test_not_leap(self, year):
        assert is_leap_year(year) is False

    def test_array_input(self):
        result = is_leap_year(np.array([1900, 2000, 2023, 2024]))
        np.testing.assert_array_equal(result, [False, True, False, True])

    def test_february_length(self):
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2000, 2) == 29

    def test_all_month_lengths_non_leap(self):
        lengths = [days_in_month(2023, m) for m in range(1, 13)]
        assert lengths == [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

    def test_days_in_month_returns_int(self):
        assert isinstance(days_in_month(2024, 2), int)

    def test_days_in_month_array(self):
        result = days_in_month(np.array([2023, 2024]), 2)
        np.testing.assert_array_equal(result, [28, 29])

    @pytest.mark.parametrize("month", [0, 13])
    def test_bad_month_raises(self, month):
        with pytest.raises(ValueError):
            days_in_month(2024, month)


# ── Scalar conversion ─────────────────────────────────────────────────────────

class TestScalarOrdinal:

    def test_epoch_is_day_one(self):
        assert to_ordinal(1, 1, 1) == 1
        assert from_ordinal(1) == (1, 1, 1)

    def test_day_before_epoch(self):
        assert from_ordinal(0) == (0, 12, 31)

    def test_returns_python_ints(self):
        n = to_ordinal(2024, 3, 1)
        y, m, d = from_ordinal(n)
        assert all(type(v) is int for v in (n, y, m, d))

    @pytest.mark.parametrize(
        "d",
        [
            datetime.date(1970, 1, 1),
            datetime.date(2000, 2, 29),
            datetime.date(2024, 2, 29),
            datetime.date(2024, 3, 1),
            datetime.date(1900, 3, 1),
            datetime.date(9999, 12, 31),
        ],
    )
    def test_matches_datetime(self, d):
        assert to_ordinal(d.year, d.month, d.day) == d.toordinal()
        assert from_ordinal(d.toordinal()) == (d.year, d.month, d.day)

    def test_random_days_match_datetime(self):
        rng = np.random.default_rng(3)
        for n in rng.integers(1, datetime.date.max.toordinal(), size=500):
            d = datetime.date.fromordinal(int(n))
            assert from_ordinal(int(n)) == (d.year, d.month, d.day)
            assert to_ordinal(d.year, d.month, d.day) == int(n)

    def test_negative_years_round_trip(self):
        for n in (-1_000_000, -146_097, -306, -305, -1):
            assert to_ordinal(*from_ordinal(n)) == n

    def test_consecutive_days_across_leap_day(self):
        start = to_ordinal(2024, 2, 28)
        assert from_ordinal(start + 1) == (2024, 2, 29)
        assert from_ordinal(start + 2) == (2024, 3, 1)


# ── NumPy array inputs ────────────────────────────────────────────────────────

class TestNumPyInputs:

    def test_1d_array(self):
        years = np.array([1970, 2000, 2024])
        months = np.array([1, 2, 12])
        days = np.array([1, 29, 31])
        expected = [datetime.date(y, m, d).toordinal()
                    for y, m, d in zip(years, months, days)]
        np.testing.assert_array_equal(to_ordinal(years, months, days), expected)

    def test_broadcast_scalar_month_day(self):
        years = np.array([2023, 2024, 2025])
        result = to_ordinal(years, 1, 1)
        expected = [datetime.date(int(y), 1, 1).toordinal() for y in years]
        np.testing.assert_array_equal(result, expected)

    def test_shape_preserved(self):
        ords = np.full((3, 4), to_ordinal(2024, 1, 1))
        y, m, d = from_ordinal(ords)
        assert y.shape == m.shape == d.shape == (3, 4)

    def test_array_round_trip(self):
        ords = np.arange(-50_000, 800_000, 37)
        y, m, d = from_ordinal(ords)
        np.testing.assert_array_equal(to_ordinal(y, m, d), ords)

    def test_array_consistency_with_scalar(self):
        rng = np.random.default_rng(11)
        ords = rng.integers(1, 1_000_000, size=50)
        y, m, d = from_ordinal(ords)
        for i, n in enumerate(ords):
            assert from_ordinal(int(n)) == (int(y[i]), int(m[i]), int(d[i]))


# ── Arbitrary-precision scalar path ───────────────────────────────────────────

class TestBigScalars:

    def test_year_beyond_int64_round_trip(self):
        n = to_ordinal(10**25, 6, 15)
        assert type(n) is int
        assert from_ordinal(n) == (10**25, 6, 15)

    def test_ordinal_beyond_int64(self):
        n = 2**70
        assert to_ordinal(*from_ordinal(n)) == n

    def test_big_leap_years(self):
        assert is_leap_year(4 * 10**30) is True
        assert is_leap_year(10**30 + 100) is False
        assert days_in_month(10**30 + 100, 2) == 28
