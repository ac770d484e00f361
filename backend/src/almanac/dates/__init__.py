"""Calendar date variants and the calendar registry."""

from typing import Dict, Type

from almanac.core.calendar import CalendarKind
from almanac.dates.base import CalendarDate
from almanac.dates.gregorian import GregorianDate
from almanac.dates.julian import JulianDate
from almanac.dates.islamic import IslamicDate
from almanac.dates.persian import PersianDate
from almanac.dates.hebrew import HebrewDate

CALENDAR_TYPES: Dict[CalendarKind, Type[CalendarDate]] = {
    CalendarKind.GREGORIAN: GregorianDate,
    CalendarKind.JULIAN: JulianDate,
    CalendarKind.ISLAMIC: IslamicDate,
    CalendarKind.PERSIAN: PersianDate,
    CalendarKind.HEBREW: HebrewDate,
}


def calendar_type(kind) -> Type[CalendarDate]:
    """
    Look up the date class for a calendar.

    Args:
        kind: CalendarKind or its string value (e.g. "hebrew")

    Raises:
        ValueError: If the calendar is not supported
    """
    return CALENDAR_TYPES[CalendarKind(kind)]


__all__ = [
    "CalendarDate",
    "GregorianDate",
    "JulianDate",
    "IslamicDate",
    "PersianDate",
    "HebrewDate",
    "CALENDAR_TYPES",
    "calendar_type",
]
