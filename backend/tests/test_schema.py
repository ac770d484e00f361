"""Tests for Pydantic schema validation."""

import pytest
import json
from pathlib import Path

from pydantic import ValidationError

from almanac.core.calendar import CalendarKind
from almanac.dates import GregorianDate, HebrewDate
from almanac.schema import (
    CalendarDateSpec,
    ConversionRequest,
    convert_request,
    describe_date,
    load_date_specs,
)


class TestCalendarDateSpec:
    """Tests for CalendarDateSpec validation."""

    def test_valid_spec(self) -> None:
        """A valid date parses and instantiates its calendar."""
        spec = CalendarDateSpec(calendar="hebrew", year=5747, month=12, day=9)
        assert spec.calendar == CalendarKind.HEBREW
        assert spec.to_date() == HebrewDate(5747, 12, 9)

    def test_unknown_calendar(self) -> None:
        """Calendar must be one of the supported kinds."""
        with pytest.raises(ValidationError):
            CalendarDateSpec(calendar="mayan", year=1, month=1, day=1)

    def test_month_bounds(self) -> None:
        """Month outside 1..13 fails field validation."""
        with pytest.raises(ValidationError):
            CalendarDateSpec(calendar="gregorian", year=2000, month=14, day=1)

    def test_day_checked_against_calendar(self) -> None:
        """Day must exist in the given month."""
        with pytest.raises(ValidationError, match="day 29"):
            CalendarDateSpec(calendar="gregorian", year=2023, month=2, day=29)

    def test_veadar_requires_leap_year(self) -> None:
        """Month 13 is only valid in a leap Hebrew year."""
        CalendarDateSpec(calendar="hebrew", year=5784, month=13, day=29)
        with pytest.raises(ValidationError, match="month 13"):
            CalendarDateSpec(calendar="hebrew", year=5747, month=13, day=1)

    def test_persian_year_zero(self) -> None:
        """Persian year 0 is rejected."""
        with pytest.raises(ValidationError, match="year 0"):
            CalendarDateSpec(calendar="persian", year=0, month=1, day=1)

    def test_validation_error_is_value_error(self) -> None:
        """Schema errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            CalendarDateSpec(calendar="persian", year=1400, month=12, day=30)

    def test_from_date(self) -> None:
        """Specs round trip through calendar dates."""
        spec = CalendarDateSpec.from_date(GregorianDate(1987, 3, 10))
        assert spec.model_dump() == {
            "calendar": CalendarKind.GREGORIAN,
            "year": 1987,
            "month": 3,
            "day": 10,
        }


class TestConversion:
    """Tests for conversion requests."""

    def test_all_targets_by_default(self) -> None:
        """Omitting targets converts into every calendar."""
        request = ConversionRequest(
            source={"calendar": "gregorian", "year": 2000, "month": 1, "day": 1}
        )
        result = convert_request(request)
        assert result.day_count == 2451544.5
        assert result.weekday_index == 6
        assert [d.calendar for d in result.dates] == list(CalendarKind)

    def test_selected_targets(self) -> None:
        """Only the requested calendars are returned, in order."""
        request = ConversionRequest(
            source={"calendar": "gregorian", "year": 1987, "month": 3, "day": 10},
            targets=["hebrew", "julian"],
        )
        result = convert_request(request)
        hebrew, julian = result.dates
        assert (hebrew.year, hebrew.month, hebrew.day) == (5747, 12, 9)
        assert hebrew.display == "9 Adar, 5747"
        assert (julian.year, julian.month, julian.day) == (1987, 2, 25)

    def test_describe_date(self) -> None:
        """Display record carries names and the display string."""
        record = describe_date(HebrewDate(5760, 10, 23))
        assert record.month_name == "Teveth"
        assert record.weekday == "Shabbat"
        assert record.display == "23 Teveth, 5760"


class TestLoadDateSpecs:
    """Tests for loading date specs from JSON."""

    def test_load_list(self, tmp_path: Path) -> None:
        """A list of records loads in order."""
        path = tmp_path / "dates.json"
        path.write_text(json.dumps([
            {"calendar": "islamic", "year": 1420, "month": 9, "day": 24},
            {"calendar": "persian", "year": 1378, "month": 10, "day": 11},
        ]))
        specs = load_date_specs(path)
        assert [s.calendar for s in specs] == [CalendarKind.ISLAMIC, CalendarKind.PERSIAN]
        assert specs[0].to_date().to_day_count() == specs[1].to_date().to_day_count()

    def test_load_single_object(self, tmp_path: Path) -> None:
        """A single object loads as a one-element list."""
        path = tmp_path / "date.json"
        path.write_text(json.dumps({"calendar": "julian", "year": 1999, "month": 12, "day": 19}))
        specs = load_date_specs(str(path))
        assert len(specs) == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="not found"):
            load_date_specs(tmp_path / "missing.json")

    def test_invalid_record(self, tmp_path: Path) -> None:
        """Invalid records raise ValidationError."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"calendar": "islamic", "year": 1421, "month": 12, "day": 30}]))
        with pytest.raises(ValidationError):
            load_date_specs(path)
