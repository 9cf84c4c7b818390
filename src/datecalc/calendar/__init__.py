# src/datecalc/calendar/__init__.py
"""
datecalc.calendar
~~~~~~~~~~~~~~~~~

Gregorian calendar arithmetic on whole days.  Dates are immutable
CalendarDate values; all arithmetic goes through proleptic ordinal day
numbers, so every operation is O(1) regardless of the span involved.

Basic usage::

    from datecalc.calendar import CalendarDate, add_days, date_difference

    start = CalendarDate(2024, 1, 1)
    add_days(start, 280)                              # → 2024-10-07
    date_difference(start, CalendarDate(2025, 2, 4))  # years=1, months=13, ...

Month and year offsets clamp the day-of-month to the target month::

    add_months(CalendarDate(2024, 1, 31), 1)          # → 2024-02-29

The ordinal layer accepts NumPy arrays everywhere a scalar is::

    import numpy as np
    from datecalc.calendar import to_ordinal, from_ordinal

    ords = to_ordinal(np.array([2024, 2025]), 2, 28)
    years, months, days = from_ordinal(ords + 1)

Public API
----------
CalendarDate        Immutable (year, month, day) value.
DateDifference      Overlapping whole-unit counts between two dates.
AgeDuration         Non-overlapping years / months / days.
CalendarError       Base exception for all calendar-related errors.
"""

from __future__ import annotations

from datecalc.calendar._exceptions import (
    CalendarError,
    InvalidDateError,
    InvalidMethodError,
    InvalidOperationError,
    InvalidRangeError,
)
from datecalc.calendar.age import AgeDuration, age_breakdown
from datecalc.calendar.arithmetic import (
    DateDifference,
    Operation,
    add_days,
    add_months,
    add_years,
    date_difference,
    difference_in_days,
    difference_in_months,
    difference_in_weeks,
    difference_in_years,
    shift,
    subtract_days,
)
from datecalc.calendar.date import CalendarDate
from datecalc.calendar.ordinal import (
    days_in_month,
    from_ordinal,
    is_leap_year,
    to_ordinal,
)

__all__ = [
    "CalendarDate",
    "DateDifference",
    "AgeDuration",
    "Operation",
    "CalendarError",
    "InvalidDateError",
    "InvalidRangeError",
    "InvalidMethodError",
    "InvalidOperationError",
    "is_leap_year",
    "days_in_month",
    "to_ordinal",
    "from_ordinal",
    "add_days",
    "subtract_days",
    "shift",
    "add_months",
    "add_years",
    "difference_in_days",
    "difference_in_weeks",
    "difference_in_months",
    "difference_in_years",
    "date_difference",
    "age_breakdown",
]
