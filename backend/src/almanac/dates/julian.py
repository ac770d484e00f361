"""
Julian (old style) calendar dates.
"""

from almanac.core.calendar import (
    CalendarKind,
    CALENDAR_NAMES,
    EPOCHS,
    WESTERN_MONTH_NAMES,
    WESTERN_WEEKDAY_NAMES,
)
from almanac.core.converter import leap_julian
from almanac.dates.base import CalendarDate


class JulianDate(CalendarDate):
    """
    A date in the Julian calendar.

    Same months as the Gregorian calendar with a leap day every fourth
    year and no century exception, so it drifts from the Gregorian
    calendar by three days every four centuries.
    """

    kind = CalendarKind.JULIAN
    calendar_name = CALENDAR_NAMES[CalendarKind.JULIAN]
    epoch = EPOCHS[CalendarKind.JULIAN]
    month_names = WESTERN_MONTH_NAMES
    weekday_names = WESTERN_WEEKDAY_NAMES

    @classmethod
    def leap_year(cls, year: int) -> bool:
        return leap_julian(year)
