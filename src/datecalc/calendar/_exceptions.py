class CalendarError(ValueError):
    """Base exception for all calendar-related errors."""


class InvalidDateError(CalendarError):
    """A (year, month, day) triple that is not a valid Gregorian date."""


class InvalidRangeError(CalendarError):
    """An operation was called with dates in an order it does not accept."""


class InvalidMethodError(CalendarError):
    """Unrecognised pregnancy estimate method / embryo age combination."""


class InvalidOperationError(CalendarError):
    """Unrecognised add/subtract selector."""
