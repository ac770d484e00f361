"""
Pydantic schema for calendar date specifications.

Validates (calendar, year, month, day) records against the rules of their
calendar and converts them between calendars.
"""

from pathlib import Path
from typing import List, Optional, Union
import json

from pydantic import BaseModel, Field, model_validator

from almanac.core.calendar import CalendarKind
from almanac.core.errors import CalendarError
from almanac.dates import CalendarDate, calendar_type


# ============================================================================
# Date specifications
# ============================================================================

class CalendarDateSpec(BaseModel):
    """A date in a named calendar."""
    calendar: CalendarKind
    year: int
    month: int = Field(..., ge=1, le=13, description="Month number (1-based)")
    day: int = Field(..., ge=1, le=31, description="Day of month (1-based)")

    @model_validator(mode='after')
    def validate_against_calendar(self) -> 'CalendarDateSpec':
        """Validate month and day against the calendar's month lengths."""
        try:
            self.to_date()
        except CalendarError as e:
            raise ValueError(str(e)) from e
        return self

    @classmethod
    def from_date(cls, date: CalendarDate) -> 'CalendarDateSpec':
        """Build a spec from a calendar date."""
        return cls(calendar=date.kind, year=date.year, month=date.month, day=date.day)

    def to_date(self) -> CalendarDate:
        """Instantiate the calendar date this spec describes."""
        return calendar_type(self.calendar)(self.year, self.month, self.day)


class ConversionRequest(BaseModel):
    """Convert one date into one or more target calendars."""
    source: CalendarDateSpec
    targets: Optional[List[CalendarKind]] = Field(
        default=None,
        description="Target calendars (all calendars if omitted)"
    )


class ConvertedDate(BaseModel):
    """A converted date with display fields."""
    calendar: CalendarKind
    year: int
    month: int
    day: int
    month_name: str
    weekday: str
    display: str


class ConversionResult(BaseModel):
    """Result of converting one date."""
    day_count: float
    weekday_index: int = Field(..., ge=0, le=6)
    dates: List[ConvertedDate]


# ============================================================================
# Conversion and loading helpers
# ============================================================================

def describe_date(date: CalendarDate) -> ConvertedDate:
    """Display record for a calendar date."""
    return ConvertedDate(
        calendar=date.kind,
        year=date.year,
        month=date.month,
        day=date.day,
        month_name=date.month_name,
        weekday=date.weekday_name,
        display=str(date),
    )


def convert_request(request: ConversionRequest) -> ConversionResult:
    """
    Convert the source date of a request into every target calendar.

    Args:
        request: Validated conversion request

    Returns:
        ConversionResult with one entry per target calendar
    """
    source = request.source.to_date()
    day_count = source.to_day_count()
    targets = request.targets or list(CalendarKind)

    dates = [
        describe_date(calendar_type(kind).from_day_count(day_count))
        for kind in targets
    ]
    return ConversionResult(
        day_count=day_count.value,
        weekday_index=day_count.weekday_index(),
        dates=dates,
    )


def load_date_specs(path: Union[str, Path]) -> List[CalendarDateSpec]:
    """
    Load date specifications from a JSON file.

    The file holds either one object or a list of objects with
    ``calendar``, ``year``, ``month`` and ``day`` keys.

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If any record is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Date file not found: {path}")

    with open(path) as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = [data]
    return [CalendarDateSpec(**record) for record in data]
