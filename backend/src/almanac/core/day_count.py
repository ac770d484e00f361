"""
Continuous day count (Julian Day Number).

Day 0 is noon, 1 January 4713 BCE in the proleptic Julian calendar. The
fractional part carries the time of day; ``.5`` is civil midnight.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Union
import math

# Julian Day of 0001-01-01 00:00 (proleptic Gregorian)
_ORDINAL_ONE_JD: float = 1721425.5
SECONDS_PER_DAY: int = 86400


@dataclass(order=True)
class DayCount:
    """
    Days elapsed since the Julian Day epoch.

    Any real value is a valid day count. Arithmetic returns new instances;
    ``advance_one_day`` is the only in-place mutation.

    Attributes:
        value: Julian Day value (fraction = time of day, .5 = midnight)
    """

    value: float

    def __post_init__(self) -> None:
        self.value = float(self.value)

    @classmethod
    def from_value(cls, value: float) -> "DayCount":
        """Wrap an arbitrary day-count value."""
        return cls(value)

    @classmethod
    def from_datetime(cls, dt: Union[datetime, date]) -> "DayCount":
        """
        Build a day count from a proleptic Gregorian civil date/time.

        The result is ``whole days + fraction of day`` where midnight sits
        at the ``.5`` offset. Timezone information is ignored.

        Args:
            dt: A ``datetime`` (hour/minute/second used) or a ``date``

        Returns:
            DayCount for that instant
        """
        whole_days = _ORDINAL_ONE_JD + (dt.toordinal() - 1)
        if not isinstance(dt, datetime):
            return cls(whole_days)

        seconds = dt.hour * 3600 + dt.minute * 60 + dt.second + dt.microsecond / 1e6
        return cls(whole_days + seconds / SECONDS_PER_DAY)

    @classmethod
    def now(cls) -> "DayCount":
        """Day count of the current UTC instant."""
        return cls.from_datetime(datetime.now(timezone.utc))

    def to_datetime(self) -> datetime:
        """
        Convert back to a naive proleptic Gregorian ``datetime``.

        Only valid for day counts inside ``datetime``'s year range 1..9999.
        """
        midnight = self.at_midnight()
        ordinal = int(midnight.value - _ORDINAL_ONE_JD) + 1
        seconds = round((self.value - midnight.value) * SECONDS_PER_DAY)
        return datetime.fromordinal(ordinal) + timedelta(seconds=seconds)

    def weekday_index(self) -> int:
        """Weekday index in [0, 6] with 0 = Sunday."""
        return int(math.floor(self.value + 1.5)) % 7

    def at_midnight(self) -> "DayCount":
        """Truncate to the civil midnight that starts this day."""
        return DayCount(math.floor(self.value - 0.5) + 0.5)

    def advance_one_day(self) -> None:
        """Move this day count forward by exactly one day (in place)."""
        self.value += 1.0

    def __add__(self, days: float) -> "DayCount":
        return DayCount(self.value + days)

    def __radd__(self, days: float) -> "DayCount":
        return self.__add__(days)

    def __sub__(self, other):
        if isinstance(other, DayCount):
            return self.value - other.value
        return DayCount(self.value - other)

    def __float__(self) -> float:
        return self.value
