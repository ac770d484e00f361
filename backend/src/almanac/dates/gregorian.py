"""
Gregorian calendar dates (proleptic, astronomical year numbering).
"""

from datetime import date

from almanac.core.calendar import (
    CalendarKind,
    CALENDAR_NAMES,
    EPOCHS,
    WESTERN_MONTH_NAMES,
    WESTERN_WEEKDAY_NAMES,
)
from almanac.core.converter import leap_gregorian
from almanac.dates.base import CalendarDate


class GregorianDate(CalendarDate):
    """
    A proleptic Gregorian date.

    Year 0 exists and is 1 BCE. Years divisible by 4 are leap, except
    centuries not divisible by 400.
    """

    kind = CalendarKind.GREGORIAN
    calendar_name = CALENDAR_NAMES[CalendarKind.GREGORIAN]
    epoch = EPOCHS[CalendarKind.GREGORIAN]
    month_names = WESTERN_MONTH_NAMES
    weekday_names = WESTERN_WEEKDAY_NAMES

    @classmethod
    def leap_year(cls, year: int) -> bool:
        return leap_gregorian(year)

    def to_date(self) -> date:
        """Standard library ``date`` (years 1..9999 only)."""
        return date(self.year, self.month, self.day)
