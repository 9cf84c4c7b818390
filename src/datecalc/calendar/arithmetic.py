from __future__ import annotations

import enum
import operator
from dataclasses import dataclass

from ._exceptions import InvalidOperationError
from .date import CalendarDate
from .ordinal import days_in_month


class Operation(str, enum.Enum):
    ADD = "add"
    SUBTRACT = "subtract"


@dataclass(frozen=True, slots=True)
class DateDifference:
    """
    Whole-unit distance between two dates, each field counted on its own.

    The fields overlap: a 400-day gap is days=400, weeks=57, months=13,
    years=1.
    """

    years: int
    months: int
    weeks: int
    days: int


# ── day offsets ──────────────────────────────────────────────────────────────

def add_days(date: CalendarDate, n: int) -> CalendarDate:
    return CalendarDate.from_ordinal(date.ordinal + operator.index(n))


def subtract_days(date: CalendarDate, n: int) -> CalendarDate:
    return add_days(date, -operator.index(n))


def shift(date: CalendarDate, days: int, operation: Operation | str) -> CalendarDate:
    """Apply an add/subtract selector as supplied by a form."""
    try:
        op = Operation(operation)
    except ValueError:
        raise InvalidOperationError(
            f"Unknown operation {operation!r}; expected one of "
            f"{[o.value for o in Operation]}."
        ) from None
    if op is Operation.ADD:
        return add_days(date, days)
    return subtract_days(date, days)


# ── month / year offsets (day-of-month clamped) ──────────────────────────────

def add_months(date: CalendarDate, n: int) -> CalendarDate:
    total = date.year * 12 + (date.month - 1) + operator.index(n)
    year, month0 = divmod(total, 12)
    month = month0 + 1
    day = min(date.day, days_in_month(year, month))
    return CalendarDate(year, month, day)


def add_years(date: CalendarDate, n: int) -> CalendarDate:
    return add_months(date, 12 * operator.index(n))


# ── differences (positive when b is after a) ─────────────────────────────────

def difference_in_days(a: CalendarDate, b: CalendarDate) -> int:
    return b.ordinal - a.ordinal


def difference_in_weeks(a: CalendarDate, b: CalendarDate) -> int:
    days = difference_in_days(a, b)
    weeks = abs(days) // 7
    return weeks if days >= 0 else -weeks


def difference_in_months(a: CalendarDate, b: CalendarDate) -> int:
    """
    Largest whole number of months k such that add_months(a, k) does not
    pass b.  Starts from the raw month distance and corrects at most once.
    """
    months = (b.year - a.year) * 12 + (b.month - a.month)
    if months == 0:
        return 0
    anniversary = add_months(a, months)
    if months > 0 and anniversary > b:
        months -= 1
    elif months < 0 and anniversary < b:
        months += 1
    return months


def difference_in_years(a: CalendarDate, b: CalendarDate) -> int:
    months = difference_in_months(a, b)
    years = abs(months) // 12
    return years if months >= 0 else -years


def date_difference(a: CalendarDate, b: CalendarDate) -> DateDifference:
    return DateDifference(
        years=difference_in_years(a, b),
        months=difference_in_months(a, b),
        weeks=difference_in_weeks(a, b),
        days=difference_in_days(a, b),
    )
