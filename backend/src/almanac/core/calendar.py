"""
Calendar systems and their calendar-level constants.

Epochs, month and weekday name tables for the supported calendars.
Weekday tables are ordered to match ``DayCount.weekday_index`` (0 = Sunday).
"""

from enum import Enum
from typing import Dict, Tuple

from almanac.core.day_count import DayCount


class CalendarKind(str, Enum):
    """Supported calendar systems."""

    GREGORIAN = "gregorian"
    JULIAN = "julian"
    ISLAMIC = "islamic"
    PERSIAN = "persian"
    HEBREW = "hebrew"


# Julian Day of each calendar's era reference
GREGORIAN_EPOCH: float = 1721425.5
JULIAN_EPOCH: float = 1721423.5
ISLAMIC_EPOCH: float = 1948439.5
PERSIAN_EPOCH: float = 1948320.5
HEBREW_EPOCH: float = 347995.5

EPOCHS: Dict[CalendarKind, DayCount] = {
    CalendarKind.GREGORIAN: DayCount(GREGORIAN_EPOCH),
    CalendarKind.JULIAN: DayCount(JULIAN_EPOCH),
    CalendarKind.ISLAMIC: DayCount(ISLAMIC_EPOCH),
    CalendarKind.PERSIAN: DayCount(PERSIAN_EPOCH),
    CalendarKind.HEBREW: DayCount(HEBREW_EPOCH),
}

DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12

CALENDAR_NAMES: Dict[CalendarKind, str] = {
    CalendarKind.GREGORIAN: "Gregorian Calendar",
    CalendarKind.JULIAN: "Julian Calendar",
    CalendarKind.ISLAMIC: "Islamic Calendar",
    CalendarKind.PERSIAN: "Persian Calendar",
    CalendarKind.HEBREW: "Hebrew Calendar",
}


# ============================================================================
# Name tables
# ============================================================================

WESTERN_MONTH_NAMES: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

WESTERN_WEEKDAY_NAMES: Tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday",
    "Thursday", "Friday", "Saturday",
)

ISLAMIC_MONTH_NAMES: Tuple[str, ...] = (
    "Muharram", "Safar", "Rabi' al-awwal", "Rabi' al-thani",
    "Jumada al-awwal", "Jumada al-thani", "Rajab", "Sha'ban",
    "Ramadan", "Shawwal", "Dhu al-Qi'dah", "Dhu al-Hijjah",
)

ISLAMIC_WEEKDAY_NAMES: Tuple[str, ...] = (
    "al-'Ahad", "al-Ithnayn", "ath-Thulatha'", "al-Arba'a",
    "al-Khamis", "al-Jumu'ah", "as-Sabt",
)

PERSIAN_MONTH_NAMES: Tuple[str, ...] = (
    "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
    "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
)

PERSIAN_WEEKDAY_NAMES: Tuple[str, ...] = (
    "Yekshanbeh", "Doshanbeh", "Seshanbeh", "Chaharshanbeh",
    "Panjshanbeh", "Jomeh", "Shanbeh",
)

# Numbered from Nisan; the year number changes at Tishri (month 7)
HEBREW_MONTH_NAMES: Tuple[str, ...] = (
    "Nisan", "Iyyar", "Sivan", "Tammuz", "Av", "Elul",
    "Tishri", "Heshvan", "Kislev", "Teveth", "Shevat", "Adar", "Veadar",
)

HEBREW_WEEKDAY_NAMES: Tuple[str, ...] = (
    "Yom Rishon", "Yom Sheni", "Yom Shlishi", "Yom Revi'i",
    "Yom Chamishi", "Yom Shishi", "Shabbat",
)
