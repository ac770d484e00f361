"""
Persian (Jalali) calendar dates.

The year starts at the March equinox. The first six months have 31 days,
the next five 30, and Esfand has 29 days, or 30 in a leap year. Leap years
have no simple rule: a year is leap when the next Farvardin 1 falls more
than 365 days later.
"""

from typing import Tuple

from almanac.core.calendar import (
    CalendarKind,
    CALENDAR_NAMES,
    EPOCHS,
    PERSIAN_MONTH_NAMES,
    PERSIAN_WEEKDAY_NAMES,
)
from almanac.core.converter import leap_persian
from almanac.dates.base import CalendarDate


class PersianDate(CalendarDate):
    """A Persian (Jalali) date. There is no year 0."""

    kind = CalendarKind.PERSIAN
    calendar_name = CALENDAR_NAMES[CalendarKind.PERSIAN]
    epoch = EPOCHS[CalendarKind.PERSIAN]
    month_names = PERSIAN_MONTH_NAMES
    weekday_names = PERSIAN_WEEKDAY_NAMES

    @classmethod
    def leap_year(cls, year: int) -> bool:
        return leap_persian(year)

    def days_per_month_in_year(self) -> Tuple[int, ...]:
        """Month lengths of this date's year."""
        return self.month_lengths(self.year)
