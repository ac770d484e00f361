"""
Islamic (Hijri) calendar dates.

The tabular Islamic calendar: odd-numbered months have 30 days, even
months 29, and in 11 years of every 30-year cycle the twelfth month gains
a day. It is arithmetic, not based on observation of the new moon.
"""

from almanac.core.calendar import (
    CalendarKind,
    CALENDAR_NAMES,
    EPOCHS,
    ISLAMIC_MONTH_NAMES,
    ISLAMIC_WEEKDAY_NAMES,
)
from almanac.core.converter import islamic_month_length, leap_islamic
from almanac.dates.base import CalendarDate


class IslamicDate(CalendarDate):
    """An Islamic (Hijri) date in the tabular calendar."""

    kind = CalendarKind.ISLAMIC
    calendar_name = CALENDAR_NAMES[CalendarKind.ISLAMIC]
    epoch = EPOCHS[CalendarKind.ISLAMIC]
    month_names = ISLAMIC_MONTH_NAMES
    weekday_names = ISLAMIC_WEEKDAY_NAMES

    @classmethod
    def leap_year(cls, year: int) -> bool:
        return leap_islamic(year)

    @staticmethod
    def common_month_length(month: int) -> int:
        """Month length ignoring the leap day: 30 for odd, 29 for even."""
        return islamic_month_length(month)
