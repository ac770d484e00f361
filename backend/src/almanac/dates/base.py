"""
Base calendar date definition.

Defines the abstract CalendarDate shared by every calendar variant. All
arithmetic is delegated to ``almanac.core.converter``; variants only carry
their calendar-level constants and name tables.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from functools import total_ordering
from typing import Any, ClassVar, Dict, Tuple, Union

from almanac.core import converter
from almanac.core.calendar import CalendarKind, DAYS_PER_WEEK
from almanac.core.day_count import DayCount
from almanac.core.errors import InvalidDateError, InvalidFieldError


@total_ordering
@dataclass
class CalendarDate(ABC):
    """
    A (year, month, day) in one calendar system.

    Instances are validated on construction. Two dates are equal only when
    they belong to the same calendar and hold the same triple; ordering is
    chronological and also restricted to one calendar (convert first).

    Attributes:
        year: Calendar year
        month: Month number (1-based)
        day: Day of month (1-based)
    """

    year: int
    month: int
    day: int

    kind: ClassVar[CalendarKind]
    calendar_name: ClassVar[str]
    epoch: ClassVar[DayCount]
    month_names: ClassVar[Tuple[str, ...]]
    weekday_names: ClassVar[Tuple[str, ...]]

    def __post_init__(self) -> None:
        self.year = int(self.year)
        self.month = int(self.month)
        self.day = int(self.day)
        self.validate()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def today(cls) -> "CalendarDate":
        """Today's date (UTC) in this calendar."""
        return cls.from_day_count(DayCount.now())

    @classmethod
    def from_day_count(cls, day_count: DayCount) -> "CalendarDate":
        """Date containing ``day_count``. Never fails."""
        return cls(*converter.from_day_count(day_count, cls.kind))

    @classmethod
    def from_date(cls, other: "CalendarDate") -> "CalendarDate":
        """Same day expressed in this calendar."""
        return converter.convert(other, cls)

    @classmethod
    def from_datetime(cls, dt: Union[datetime, date]) -> "CalendarDate":
        """Date for a proleptic Gregorian ``datetime`` or ``date``."""
        return cls.from_day_count(DayCount.from_datetime(dt))

    # ------------------------------------------------------------------
    # Calendar-level rules
    # ------------------------------------------------------------------

    @classmethod
    @abstractmethod
    def leap_year(cls, year: int) -> bool:
        """Whether ``year`` is a leap year in this calendar."""
        pass

    @classmethod
    def month_lengths(cls, year: int) -> Tuple[int, ...]:
        """Lengths of every month of ``year``."""
        return converter.month_lengths(cls.kind, year)

    @classmethod
    def days_in_month_of(cls, year: int, month: int) -> int:
        """Length of ``month`` in ``year``."""
        return converter.days_in_month(cls.kind, year, month)

    @classmethod
    def months_in_year_of(cls, year: int) -> int:
        """Number of months in ``year``."""
        return converter.months_in_year(cls.kind, year)

    @classmethod
    def month_name_of(cls, month: int) -> str:
        """
        Name of a month.

        Raises:
            InvalidFieldError: If ``month`` is outside the name table
        """
        if not 1 <= month <= len(cls.month_names):
            raise InvalidFieldError(
                f"month {month} out of range [1, {len(cls.month_names)}] for {cls.kind.value} calendar"
            )
        return cls.month_names[month - 1]

    @classmethod
    def weekday_name_of(cls, index: int) -> str:
        """
        Name of a weekday (0 = Sunday).

        Raises:
            InvalidFieldError: If ``index`` is outside [0, 6]
        """
        if not 0 <= index < len(cls.weekday_names):
            raise InvalidFieldError(
                f"weekday {index} out of range [0, {len(cls.weekday_names) - 1}]"
            )
        return cls.weekday_names[index]

    # ------------------------------------------------------------------
    # Instance accessors
    # ------------------------------------------------------------------

    def validate(self) -> None:
        """
        Check the month and day against this calendar's rules.

        Raises:
            InvalidFieldError: If the month is out of range for the year
            InvalidDateError: If the day is out of range for the month
        """
        length = self.days_in_month_of(self.year, self.month)
        if not 1 <= self.day <= length:
            raise InvalidDateError(
                f"day {self.day} out of range [1, {length}] for "
                f"{self.kind.value} {self.year}-{self.month}"
            )

    def to_day_count(self) -> DayCount:
        """Day count at the midnight starting this date."""
        return converter.to_day_count(self)

    @property
    def month_name(self) -> str:
        return self.month_name_of(self.month)

    @property
    def weekday_number(self) -> int:
        """Weekday index (0 = Sunday)."""
        return self.to_day_count().weekday_index()

    @property
    def weekday_name(self) -> str:
        return self.weekday_name_of(self.weekday_number)

    @property
    def days_in_month(self) -> int:
        return self.days_in_month_of(self.year, self.month)

    @property
    def days_in_week(self) -> int:
        return DAYS_PER_WEEK

    @property
    def months_in_year(self) -> int:
        return self.months_in_year_of(self.year)

    @property
    def is_leap_year(self) -> bool:
        return self.leap_year(self.year)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def next_day(self) -> None:
        """Advance this date by one day in place."""
        day_count = self.to_day_count()
        day_count.advance_one_day()
        self.year, self.month, self.day = converter.from_day_count(day_count, self.kind)

    def set(self, other: "CalendarDate") -> None:
        """Reassign this date to the day held by ``other`` (any calendar)."""
        self.year, self.month, self.day = converter.from_day_count(
            other.to_day_count(), self.kind
        )

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def __lt__(self, other: "CalendarDate") -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.to_day_count() < other.to_day_count()

    def __str__(self) -> str:
        return f"{self.day} {self.month_name}, {self.year}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize date to dictionary."""
        return {
            "calendar": self.kind.value,
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "month_name": self.month_name,
            "weekday": self.weekday_name,
            "day_count": self.to_day_count().value,
        }
