from __future__ import annotations

import logging
from dataclasses import dataclass

from ._exceptions import InvalidRangeError
from .arithmetic import (
    add_months,
    add_years,
    difference_in_days,
    difference_in_months,
    difference_in_years,
)
from .date import CalendarDate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AgeDuration:
    """
    Non-overlapping years / months / days.  Applying the years, then the
    months (both with day-of-month clamping), then the days to the birth
    date gives back the as-of date.
    """

    years: int
    months: int
    days: int


def age_breakdown(birth: CalendarDate, as_of: CalendarDate) -> AgeDuration:
    if as_of < birth:
        raise InvalidRangeError(
            f"as_of {as_of!r} precedes birth date {birth!r}."
        )

    years = difference_in_years(birth, as_of)
    after_years = add_years(birth, years)
    months = difference_in_months(after_years, as_of)
    after_months = add_months(after_years, months)
    days = difference_in_days(after_months, as_of)

    logger.debug(
        "age_breakdown(%r, %r) -> %d y, %d m, %d d",
        birth, as_of, years, months, days,
    )
    return AgeDuration(years=years, months=months, days=days)
