"""
Exceptions raised by calendar lookups and date construction.
"""


class CalendarError(ValueError):
    """Base class for calendar errors."""


class InvalidFieldError(CalendarError, IndexError):
    """
    A month or weekday index is outside the calendar's valid range.

    Raised by name lookups and by date construction (e.g. month 0, or
    month 13 in a calendar or year that has only 12 months).
    """


class InvalidDateError(CalendarError):
    """A day is outside 1..days_in_month for the given year and month."""
