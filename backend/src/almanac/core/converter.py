"""
Calendar conversion algorithms.

Every calendar has one forward function ``<calendar>_to_jd(year, month, day)``
returning a Julian Day value and one inverse function ``jd_to_<calendar>(jd)``
returning a ``(year, month, day)`` triple. Conversions between two
calendars always pivot through the day count.

Supports: Gregorian (proleptic), Julian, Islamic (tabular), Persian
(2820-year arithmetic cycle) and Hebrew (molad with postponements).

Inverse functions truncate their argument to civil midnight first, so any
instant inside a day maps to that day.
"""

from functools import lru_cache
from typing import Callable, Dict, Iterator, Tuple, Type, TypeVar
import logging
import math

from almanac.core.calendar import (
    CalendarKind,
    GREGORIAN_EPOCH,
    JULIAN_EPOCH,
    ISLAMIC_EPOCH,
    PERSIAN_EPOCH,
    HEBREW_EPOCH,
    MONTHS_PER_YEAR,
)
from almanac.core.day_count import DayCount
from almanac.core.errors import InvalidDateError, InvalidFieldError

logger = logging.getLogger(__name__)

YMD = Tuple[int, int, int]
T = TypeVar("T")

_CACHE_SIZE: int = 4096


def _midnight(jd: float) -> float:
    """Civil midnight starting the day that contains ``jd``."""
    return math.floor(jd - 0.5) + 0.5


def _check_month(kind: CalendarKind, month: int, count: int) -> None:
    if not 1 <= month <= count:
        raise InvalidFieldError(
            f"month {month} out of range [1, {count}] for {kind.value} calendar"
        )


# ============================================================================
# Gregorian
# ============================================================================

_WESTERN_MONTH_LENGTHS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def leap_gregorian(year: int) -> bool:
    """Divisible by 4, except centuries not divisible by 400."""
    return year % 4 == 0 and not (year % 100 == 0 and year % 400 != 0)


def _western_day_of_year(month: int, day: int, leap: bool) -> int:
    """Day of year (1-based) for a Gregorian/Julian month and day."""
    if month <= 2:
        adjustment = 0
    else:
        adjustment = -1 if leap else -2
    return (367 * month - 362) // 12 + adjustment + day


def gregorian_to_jd(year: int, month: int, day: int) -> float:
    """
    Convert a proleptic Gregorian date to a Julian Day.

    Uses astronomical year numbering (year 0 is 1 BCE).

    Examples:
        >>> gregorian_to_jd(2000, 1, 1)
        2451544.5
    """
    y = year - 1
    elapsed = 365 * y + y // 4 - y // 100 + y // 400
    return (GREGORIAN_EPOCH - 1) + elapsed + _western_day_of_year(month, day, leap_gregorian(year))


def jd_to_gregorian(jd: float) -> YMD:
    """Convert a Julian Day to a proleptic Gregorian (year, month, day)."""
    wjd = _midnight(jd)
    depoch = int(wjd - GREGORIAN_EPOCH)

    quadricent, dqc = divmod(depoch, 146097)
    cent, dcent = divmod(dqc, 36524)
    quad, dquad = divmod(dcent, 1461)
    yindex = dquad // 365

    year = quadricent * 400 + cent * 100 + quad * 4 + yindex
    # Last day of a leap year stays in the year just counted
    if not (cent == 4 or yindex == 4):
        year += 1

    yearday = int(wjd - gregorian_to_jd(year, 1, 1))
    if wjd < gregorian_to_jd(year, 3, 1):
        leap_adjustment = 0
    else:
        leap_adjustment = 1 if leap_gregorian(year) else 2

    month = ((yearday + leap_adjustment) * 12 + 373) // 367
    day = int(wjd - gregorian_to_jd(year, month, 1)) + 1
    return year, month, day


def gregorian_month_lengths(year: int) -> Tuple[int, ...]:
    """Month lengths for a Gregorian year."""
    if leap_gregorian(year):
        return (31, 29) + _WESTERN_MONTH_LENGTHS[2:]
    return _WESTERN_MONTH_LENGTHS


# ============================================================================
# Julian (old style)
# ============================================================================

def leap_julian(year: int) -> bool:
    """Every fourth year, no century exception."""
    return year % 4 == 0


def julian_to_jd(year: int, month: int, day: int) -> float:
    """
    Convert a Julian calendar date to a Julian Day.

    Examples:
        >>> julian_to_jd(1582, 10, 5)
        2299160.5
    """
    y = year - 1
    elapsed = 365 * y + y // 4
    return (JULIAN_EPOCH - 1) + elapsed + _western_day_of_year(month, day, leap_julian(year))


def jd_to_julian(jd: float) -> YMD:
    """Convert a Julian Day to a Julian calendar (year, month, day)."""
    wjd = _midnight(jd)
    depoch = int(wjd - JULIAN_EPOCH)

    quad, dquad = divmod(depoch, 1461)
    yindex = dquad // 365

    year = quad * 4 + yindex
    if yindex != 4:
        year += 1

    yearday = int(wjd - julian_to_jd(year, 1, 1))
    if wjd < julian_to_jd(year, 3, 1):
        leap_adjustment = 0
    else:
        leap_adjustment = 1 if leap_julian(year) else 2

    month = ((yearday + leap_adjustment) * 12 + 373) // 367
    day = int(wjd - julian_to_jd(year, month, 1)) + 1
    return year, month, day


def julian_month_lengths(year: int) -> Tuple[int, ...]:
    """Month lengths for a Julian calendar year."""
    if leap_julian(year):
        return (31, 29) + _WESTERN_MONTH_LENGTHS[2:]
    return _WESTERN_MONTH_LENGTHS


# ============================================================================
# Islamic (tabular)
# ============================================================================

ISLAMIC_CYCLE_YEARS: int = 30
ISLAMIC_CYCLE_DAYS: int = 10631


def leap_islamic(year: int) -> bool:
    """11 leap years per 30-year cycle; the extra day goes to month 12."""
    return (year * 11 + 14) % ISLAMIC_CYCLE_YEARS < 11


def islamic_month_length(month: int) -> int:
    """Common-year month length: odd months 30 days, even months 29."""
    _check_month(CalendarKind.ISLAMIC, month, MONTHS_PER_YEAR)
    return 30 if month % 2 == 1 else 29


def islamic_to_jd(year: int, month: int, day: int) -> float:
    """
    Convert a tabular Islamic date to a Julian Day.

    Examples:
        >>> islamic_to_jd(1420, 9, 24)
        2451544.5
    """
    # ceil(29.5 * (month - 1)) days precede the month
    month_offset = (59 * (month - 1) + 1) // 2
    leap_days = (3 + 11 * year) // ISLAMIC_CYCLE_YEARS
    return day + month_offset + (year - 1) * 354 + leap_days + ISLAMIC_EPOCH - 1


def jd_to_islamic(jd: float) -> YMD:
    """Convert a Julian Day to a tabular Islamic (year, month, day)."""
    wjd = _midnight(jd)
    elapsed = int(wjd - ISLAMIC_EPOCH)
    year = (ISLAMIC_CYCLE_YEARS * elapsed + 10646) // ISLAMIC_CYCLE_DAYS

    if wjd < islamic_to_jd(year, 1, 1):
        year -= 1
    elif wjd >= islamic_to_jd(year + 1, 1, 1):
        year += 1

    yearday = int(wjd - islamic_to_jd(year, 1, 1))
    # Month 12 absorbs the leap day
    month = min(MONTHS_PER_YEAR, (2 * yearday) // 59 + 1)
    day = int(wjd - islamic_to_jd(year, month, 1)) + 1
    return year, month, day


def islamic_month_lengths(year: int) -> Tuple[int, ...]:
    """Month lengths for an Islamic year."""
    lengths = [30 if m % 2 == 1 else 29 for m in range(1, MONTHS_PER_YEAR + 1)]
    if leap_islamic(year):
        lengths[-1] += 1
    return tuple(lengths)


# ============================================================================
# Persian
# ============================================================================

PERSIAN_GRAND_CYCLE_YEARS: int = 2820
PERSIAN_GRAND_CYCLE_DAYS: int = 1029983


def _check_persian_year(year: int) -> None:
    if year == 0:
        raise InvalidDateError("year 0 does not exist in the persian calendar")


def persian_to_jd(year: int, month: int, day: int) -> float:
    """
    Convert a Persian date to a Julian Day (2820-year arithmetic cycle).

    There is no year 0; year -1 is followed by year 1.

    Raises:
        InvalidDateError: If ``year`` is 0

    Examples:
        >>> persian_to_jd(1378, 10, 11)
        2451544.5
    """
    _check_persian_year(year)
    epbase = year - (474 if year >= 0 else 473)
    epyear = 474 + epbase % PERSIAN_GRAND_CYCLE_YEARS

    if month <= 7:
        month_offset = (month - 1) * 31
    else:
        month_offset = (month - 1) * 30 + 6

    return (
        day
        + month_offset
        + (epyear * 682 - 110) // 2816
        + (epyear - 1) * 365
        + (epbase // PERSIAN_GRAND_CYCLE_YEARS) * PERSIAN_GRAND_CYCLE_DAYS
        + PERSIAN_EPOCH - 1
    )


def jd_to_persian(jd: float) -> YMD:
    """Convert a Julian Day to a Persian (year, month, day)."""
    wjd = _midnight(jd)
    depoch = int(wjd - persian_to_jd(475, 1, 1))

    cycle, cyear = divmod(depoch, PERSIAN_GRAND_CYCLE_DAYS)
    if cyear == PERSIAN_GRAND_CYCLE_DAYS - 1:
        ycycle = PERSIAN_GRAND_CYCLE_YEARS
    else:
        aux1, aux2 = divmod(cyear, 366)
        ycycle = (2134 * aux1 + 2816 * aux2 + 2815) // 1028522 + aux1 + 1

    year = ycycle + PERSIAN_GRAND_CYCLE_YEARS * cycle + 474
    if year <= 0:
        year -= 1

    yearday = int(wjd - persian_to_jd(year, 1, 1)) + 1
    if yearday <= 186:
        month = -(-yearday // 31)
    else:
        month = -(-(yearday - 6) // 30)
    day = int(wjd - persian_to_jd(year, month, 1)) + 1
    return year, month, day


def _next_persian_year(year: int) -> int:
    return 1 if year == -1 else year + 1


@lru_cache(maxsize=_CACHE_SIZE)
def leap_persian(year: int) -> bool:
    """
    Whether a Persian year is leap.

    Defined by the forward conversion itself: the year is leap when the
    following Farvardin 1 is more than 365 days after this one.

    Raises:
        InvalidDateError: If ``year`` is 0
    """
    _check_persian_year(year)
    start = persian_to_jd(year, 1, 1)
    following = persian_to_jd(_next_persian_year(year), 1, 1)
    return following - start > 365


def persian_month_length(year: int, month: int) -> int:
    """Months 1-6 have 31 days, 7-11 have 30, month 12 has 29 or 30."""
    _check_month(CalendarKind.PERSIAN, month, MONTHS_PER_YEAR)
    if month <= 6:
        return 31
    if month != 12:
        return 30
    return 30 if leap_persian(year) else 29


def persian_month_lengths(year: int) -> Tuple[int, ...]:
    """Month lengths for a Persian year."""
    return (31,) * 6 + (30,) * 5 + ((30 if leap_persian(year) else 29),)


# ============================================================================
# Hebrew
# ============================================================================

PARTS_PER_HOUR: int = 1080
PARTS_PER_DAY: int = 24 * PARTS_PER_HOUR
# Mean lunation: 29 days 12 hours 793 parts
LUNATION_PARTS: int = 29 * PARTS_PER_DAY + 12 * PARTS_PER_HOUR + 793
# Molad of Tishri AM 1 (5h 204p after 6 pm) plus 6 hours, so that a molad
# at or after noon lands on the following day (molad zaken)
MOLAD_EPOCH_PARTS: int = 5 * PARTS_PER_HOUR + 204 + 6 * PARTS_PER_HOUR

# Mean Hebrew year in days is 35975351 / 98496
_MEAN_YEAR_NUMERATOR: float = 35975351.0
_MEAN_YEAR_DENOMINATOR: float = 98496.0
# Candidate years searched around the estimate: estimate - 1 .. estimate + 2
HEBREW_SEARCH_BEFORE: int = 1
HEBREW_SEARCH_AFTER: int = 2

# (Heshvan, Kislev) lengths keyed on year length mod 10:
# 3 = deficient (353/383), 4 = regular (354/384), 5 = complete (355/385)
_HESHVAN_KISLEV: Dict[int, Tuple[int, int]] = {
    3: (29, 29),
    4: (29, 30),
    5: (30, 30),
}

TISHRI: int = 7


def leap_hebrew(year: int) -> bool:
    """Years 3, 6, 8, 11, 14, 17 and 19 of the Metonic cycle are leap."""
    return (7 * year + 1) % 19 < 7


def hebrew_months_in_year(year: int) -> int:
    """13 months in leap years, 12 otherwise."""
    return 13 if leap_hebrew(year) else 12


@lru_cache(maxsize=_CACHE_SIZE)
def _elapsed_days(year: int) -> int:
    """
    Days from the epoch to the molad of Tishri of ``year``.

    Applies molad zaken (through the 6 hour shift of the epoch molad) and
    lo ADU: Rosh Hashanah may not fall on Sunday, Wednesday or Friday.
    """
    months = (235 * year - 234) // 19
    day = (MOLAD_EPOCH_PARTS + months * LUNATION_PARTS) // PARTS_PER_DAY
    if (3 * (day + 1)) % 7 < 3:
        day += 1
    return day


def _year_length_correction(year: int) -> int:
    """Postponement that keeps adjacent years at legal lengths."""
    last = _elapsed_days(year - 1)
    present = _elapsed_days(year)
    following = _elapsed_days(year + 1)

    # GaTaRaD: this year would otherwise last 356 days
    if following - present == 356:
        return 2
    # BeTUTaKPaT: the preceding year would otherwise last 382 days
    if present - last == 382:
        return 1
    return 0


@lru_cache(maxsize=_CACHE_SIZE)
def hebrew_new_year(year: int) -> float:
    """Julian Day of 1 Tishri of ``year``."""
    return HEBREW_EPOCH + _elapsed_days(year) + _year_length_correction(year) + 2


def hebrew_year_length(year: int) -> int:
    """One of 353, 354, 355 (common) or 383, 384, 385 (leap)."""
    return int(hebrew_new_year(year + 1) - hebrew_new_year(year))


@lru_cache(maxsize=_CACHE_SIZE)
def hebrew_month_lengths(year: int) -> Tuple[int, ...]:
    """
    Month lengths of a Hebrew year, indexed from Nisan (month 1).

    Heshvan and Kislev follow from the year length; in leap years Adar
    (month 12) has 30 days and is followed by Veadar (month 13).
    """
    heshvan, kislev = _HESHVAN_KISLEV[hebrew_year_length(year) % 10]
    leap = leap_hebrew(year)

    lengths = [30, 29, 30, 29, 30, 29, 30, heshvan, kislev, 29, 30, 30 if leap else 29]
    if leap:
        lengths.append(29)
    return tuple(lengths)


def hebrew_month_length(year: int, month: int) -> int:
    """Number of days in a Hebrew month."""
    lengths = hebrew_month_lengths(year)
    _check_month(CalendarKind.HEBREW, month, len(lengths))
    return lengths[month - 1]


def hebrew_month_order(year: int) -> Iterator[int]:
    """Months in the order they occur in ``year``: Tishri first, Elul last."""
    yield from range(TISHRI, hebrew_months_in_year(year) + 1)
    yield from range(1, TISHRI)


def hebrew_to_jd(year: int, month: int, day: int) -> float:
    """
    Convert a Hebrew date to a Julian Day.

    Examples:
        >>> hebrew_to_jd(5747, 12, 9)
        2446864.5
    """
    lengths = hebrew_month_lengths(year)
    _check_month(CalendarKind.HEBREW, month, len(lengths))

    if month >= TISHRI:
        preceding = sum(lengths[TISHRI - 1:month - 1])
    else:
        preceding = sum(lengths[TISHRI - 1:]) + sum(lengths[:month - 1])

    return hebrew_new_year(year) + preceding + day - 1


def jd_to_hebrew(jd: float) -> YMD:
    """
    Convert a Julian Day to a Hebrew (year, month, day).

    The year has no closed-form inverse. It is located from an estimate
    based on the mean year length, then by checking the new year of the
    candidates ``estimate - 1`` through ``estimate + 2``; the year
    containing ``jd`` always falls inside that range.
    """
    wjd = _midnight(jd)
    estimate = math.floor((wjd - HEBREW_EPOCH) * _MEAN_YEAR_DENOMINATOR / _MEAN_YEAR_NUMERATOR)

    year = estimate - HEBREW_SEARCH_BEFORE - 1
    for candidate in range(estimate - HEBREW_SEARCH_BEFORE, estimate + HEBREW_SEARCH_AFTER + 1):
        if wjd < hebrew_new_year(candidate):
            break
        year = candidate
    logger.debug("Hebrew year for JD %s: estimate %d, found %d", wjd, estimate, year)

    remaining = int(wjd - hebrew_new_year(year))
    lengths = hebrew_month_lengths(year)
    for month in hebrew_month_order(year):
        length = lengths[month - 1]
        if remaining < length:
            break
        remaining -= length

    return year, month, remaining + 1


# ============================================================================
# Dispatch
# ============================================================================

_FORWARD: Dict[CalendarKind, Callable[[int, int, int], float]] = {
    CalendarKind.GREGORIAN: gregorian_to_jd,
    CalendarKind.JULIAN: julian_to_jd,
    CalendarKind.ISLAMIC: islamic_to_jd,
    CalendarKind.PERSIAN: persian_to_jd,
    CalendarKind.HEBREW: hebrew_to_jd,
}

_INVERSE: Dict[CalendarKind, Callable[[float], YMD]] = {
    CalendarKind.GREGORIAN: jd_to_gregorian,
    CalendarKind.JULIAN: jd_to_julian,
    CalendarKind.ISLAMIC: jd_to_islamic,
    CalendarKind.PERSIAN: jd_to_persian,
    CalendarKind.HEBREW: jd_to_hebrew,
}

_LEAP: Dict[CalendarKind, Callable[[int], bool]] = {
    CalendarKind.GREGORIAN: leap_gregorian,
    CalendarKind.JULIAN: leap_julian,
    CalendarKind.ISLAMIC: leap_islamic,
    CalendarKind.PERSIAN: leap_persian,
    CalendarKind.HEBREW: leap_hebrew,
}

_MONTH_LENGTHS: Dict[CalendarKind, Callable[[int], Tuple[int, ...]]] = {
    CalendarKind.GREGORIAN: gregorian_month_lengths,
    CalendarKind.JULIAN: julian_month_lengths,
    CalendarKind.ISLAMIC: islamic_month_lengths,
    CalendarKind.PERSIAN: persian_month_lengths,
    CalendarKind.HEBREW: hebrew_month_lengths,
}


def ymd_to_jd(kind: CalendarKind, year: int, month: int, day: int) -> float:
    """Forward conversion for any calendar."""
    return _FORWARD[CalendarKind(kind)](year, month, day)


def jd_to_ymd(kind: CalendarKind, jd: float) -> YMD:
    """Inverse conversion for any calendar."""
    return _INVERSE[CalendarKind(kind)](jd)


def is_leap_year(kind: CalendarKind, year: int) -> bool:
    """Leap-year predicate for any calendar."""
    return _LEAP[CalendarKind(kind)](year)


def month_lengths(kind: CalendarKind, year: int) -> Tuple[int, ...]:
    """All month lengths of a year, indexed by month - 1."""
    return _MONTH_LENGTHS[CalendarKind(kind)](year)


def months_in_year(kind: CalendarKind, year: int) -> int:
    """
    Number of months in a year.

    Always 12, except a Hebrew leap year which has 13 (Veadar). Callers
    that assume a fixed 12-month year must special-case Hebrew.
    """
    if CalendarKind(kind) == CalendarKind.HEBREW:
        return hebrew_months_in_year(year)
    return MONTHS_PER_YEAR


def days_in_month(kind: CalendarKind, year: int, month: int) -> int:
    """
    Month length for any calendar.

    Raises:
        InvalidFieldError: If ``month`` is outside 1..months_in_year
    """
    kind = CalendarKind(kind)
    lengths = month_lengths(kind, year)
    _check_month(kind, month, len(lengths))
    return lengths[month - 1]


def to_day_count(date) -> DayCount:
    """Day count at the midnight starting a calendar date."""
    return DayCount(ymd_to_jd(date.kind, date.year, date.month, date.day))


def from_day_count(day_count: DayCount, kind: CalendarKind) -> YMD:
    """(year, month, day) in ``kind`` for the day containing ``day_count``."""
    return jd_to_ymd(kind, float(day_count))


def convert(date, target: Type[T]) -> T:
    """
    Convert a calendar date into another calendar type.

    Always routes through the day count: source -> DayCount -> target.

    Args:
        date: Any calendar date (anything with kind/year/month/day)
        target: Target date class (must expose ``kind``)

    Returns:
        An instance of ``target``
    """
    return target(*from_day_count(to_day_count(date), target.kind))
