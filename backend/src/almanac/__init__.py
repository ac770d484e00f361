"""
Almanac - Multi-calendar date conversion library.

Converts dates between the Gregorian, Julian, Islamic (tabular Hijri),
Persian (Jalali) and Hebrew calendars through a single pivot, the Julian
Day count:
- Exact round trips for every valid date in every calendar
- Hebrew new year from the molad with all four postponement rules
- Persian leap years derived from the calendar's own new-year dates
- Vectorized weekday and range helpers over numpy arrays

Example:
    >>> from almanac import GregorianDate, HebrewDate
    >>> HebrewDate.from_date(GregorianDate(1987, 3, 10))
    HebrewDate(year=5747, month=12, day=9)
    >>> str(HebrewDate(5747, 12, 9))
    '9 Adar, 5747'
"""

__version__ = "0.1.0"

# Core
from almanac.core.day_count import DayCount
from almanac.core.calendar import CalendarKind, EPOCHS
from almanac.core.errors import CalendarError, InvalidFieldError, InvalidDateError
from almanac.core.converter import (
    convert,
    to_day_count,
    from_day_count,
    is_leap_year,
    days_in_month,
    months_in_year,
)

# Calendar dates
from almanac.dates import (
    CalendarDate,
    GregorianDate,
    JulianDate,
    IslamicDate,
    PersianDate,
    HebrewDate,
    CALENDAR_TYPES,
    calendar_type,
)

# Batch helpers
from almanac.core.batch import (
    weekday_indices,
    at_midnight_many,
    day_count_range,
    sample_day_counts,
    to_day_count_array,
    from_day_count_array,
)

# Schema
from almanac.schema import (
    CalendarDateSpec,
    ConversionRequest,
    ConversionResult,
    ConvertedDate,
    convert_request,
    load_date_specs,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "DayCount",
    "CalendarKind",
    "EPOCHS",
    "CalendarError",
    "InvalidFieldError",
    "InvalidDateError",
    "convert",
    "to_day_count",
    "from_day_count",
    "is_leap_year",
    "days_in_month",
    "months_in_year",
    # Dates
    "CalendarDate",
    "GregorianDate",
    "JulianDate",
    "IslamicDate",
    "PersianDate",
    "HebrewDate",
    "CALENDAR_TYPES",
    "calendar_type",
    # Batch
    "weekday_indices",
    "at_midnight_many",
    "day_count_range",
    "sample_day_counts",
    "to_day_count_array",
    "from_day_count_array",
    # Schema
    "CalendarDateSpec",
    "ConversionRequest",
    "ConversionResult",
    "ConvertedDate",
    "convert_request",
    "load_date_specs",
]
