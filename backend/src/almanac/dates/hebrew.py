"""
Hebrew calendar dates.

Months are numbered from Nisan (1) to Elul (6), then Tishri (7) to Adar
(12) and, in leap years, Veadar (13). The year number changes at 1 Tishri,
so within one year Tishri..Adar come before Nisan..Elul.

Seven years of each 19-year cycle are leap and carry the 13th month. The
new year follows the molad of Tishri, postponed to avoid forbidden
weekdays and year lengths, which makes each year deficient, regular or
complete.
"""

from typing import Dict

from almanac.core.calendar import (
    CalendarKind,
    CALENDAR_NAMES,
    EPOCHS,
    HEBREW_MONTH_NAMES,
    HEBREW_WEEKDAY_NAMES,
)
from almanac.core.converter import hebrew_new_year, hebrew_year_length, leap_hebrew
from almanac.core.day_count import DayCount
from almanac.dates.base import CalendarDate

YEAR_TYPES: Dict[int, str] = {
    3: "deficient",
    4: "regular",
    5: "complete",
}


class HebrewDate(CalendarDate):
    """A Hebrew calendar date (months counted from Nisan)."""

    kind = CalendarKind.HEBREW
    calendar_name = CALENDAR_NAMES[CalendarKind.HEBREW]
    epoch = EPOCHS[CalendarKind.HEBREW]
    month_names = HEBREW_MONTH_NAMES
    weekday_names = HEBREW_WEEKDAY_NAMES

    @classmethod
    def leap_year(cls, year: int) -> bool:
        return leap_hebrew(year)

    @classmethod
    def new_year(cls, year: int) -> DayCount:
        """Day count of 1 Tishri (Rosh Hashanah) of ``year``."""
        return DayCount(hebrew_new_year(year))

    @classmethod
    def year_length(cls, year: int) -> int:
        """Days in ``year``: 353-355, or 383-385 in leap years."""
        return hebrew_year_length(year)

    @classmethod
    def year_type(cls, year: int) -> str:
        """'deficient', 'regular' or 'complete'."""
        return YEAR_TYPES[cls.year_length(year) % 10]
