from __future__ import annotations

import datetime
import numbers
from dataclasses import dataclass

from ._exceptions import InvalidDateError
from .ordinal import days_in_month, from_ordinal, to_ordinal


@dataclass(frozen=True, slots=True, order=True)
class CalendarDate:
    """
    Gregorian calendar date with no time-of-day or timezone.

    Construction validates the day against the month length and never
    clamps.  Ordering is chronological.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        for name in ("year", "month", "day"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidDateError(
                    f"{name} must be an integer; got {value!r}."
                )
            object.__setattr__(self, name, int(value))

        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"Month must be in 1..12; got {self.month}.")
        last = days_in_month(self.year, self.month)
        if not 1 <= self.day <= last:
            raise InvalidDateError(
                f"Day {self.day} is out of range for "
                f"{self.year:04d}-{self.month:02d} (1..{last})."
            )

    # ── conversions ──────────────────────────────────────────────────────

    @property
    def ordinal(self) -> int:
        return to_ordinal(self.year, self.month, self.day)

    @classmethod
    def from_ordinal(cls, n: int) -> CalendarDate:
        return cls(*from_ordinal(n))

    @classmethod
    def from_date(cls, d: datetime.date) -> CalendarDate:
        return cls(d.year, d.month, d.day)

    def to_date(self) -> datetime.date:
        # datetime.date only covers years 1..9999 and raises ValueError outside.
        return datetime.date(self.year, self.month, self.day)

    def weekday(self) -> int:
        """Day of the week, Monday == 0 ... Sunday == 6."""
        return (self.ordinal + 6) % 7

    def __repr__(self) -> str:
        return f"CalendarDate({self.year:04d}-{self.month:02d}-{self.day:02d})"
