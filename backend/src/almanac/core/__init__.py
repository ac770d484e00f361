"""Core utilities: day counts, calendar constants and conversion algorithms."""

from almanac.core.day_count import DayCount
from almanac.core.calendar import CalendarKind, EPOCHS
from almanac.core.errors import CalendarError, InvalidFieldError, InvalidDateError
from almanac.core.converter import (
    ymd_to_jd,
    jd_to_ymd,
    to_day_count,
    from_day_count,
    convert,
    is_leap_year,
    days_in_month,
    months_in_year,
    month_lengths,
)

__all__ = [
    "DayCount",
    "CalendarKind",
    "EPOCHS",
    "CalendarError",
    "InvalidFieldError",
    "InvalidDateError",
    "ymd_to_jd",
    "jd_to_ymd",
    "to_day_count",
    "from_day_count",
    "convert",
    "is_leap_year",
    "days_in_month",
    "months_in_year",
    "month_lengths",
]
