#!/usr/bin/env python3
"""
Example: Convert a date into every supported calendar.

Usage:
    python examples/run_convert.py [YEAR MONTH DAY] [--calendar NAME] [--days N] [--verbose]
"""

import sys
from pathlib import Path
import argparse
import logging
import traceback

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from almanac.core.calendar import CalendarKind
from almanac.core.errors import CalendarError
from almanac.dates import CALENDAR_TYPES, calendar_type


def print_conversion_table(source) -> None:
    """Print the source date in every calendar."""
    day_count = source.to_day_count()
    print(f"      Julian Day: {day_count.value}")
    print(f"      Weekday index: {day_count.weekday_index()}")
    print()
    for cls in CALENDAR_TYPES.values():
        date = cls.from_day_count(day_count)
        print(f"      {cls.calendar_name:<20} {str(date):<28} {date.weekday_name}")


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Convert a date between Gregorian, Julian, Islamic, Persian and Hebrew calendars"
    )
    parser.add_argument(
        "ymd",
        type=int,
        nargs="*",
        help="Year, month and day (defaults to today)"
    )
    parser.add_argument(
        "--calendar", "-c",
        type=str,
        default=CalendarKind.GREGORIAN.value,
        choices=[k.value for k in CalendarKind],
        help="Calendar of the input date (default: gregorian)"
    )
    parser.add_argument(
        "--days", "-d",
        type=int,
        default=1,
        help="Number of consecutive days to print"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print detailed output"
    )

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    print("=" * 70)
    print("ALMANAC CALENDAR CONVERTER")
    print("=" * 70)

    try:
        cls = calendar_type(args.calendar)
        if not args.ymd:
            source = cls.today()
        elif len(args.ymd) == 3:
            source = cls(*args.ymd)
        else:
            parser.error("expected YEAR MONTH DAY")

        for i in range(args.days):
            print(f"\n[{i + 1}/{args.days}] {cls.calendar_name}: {source}")
            print_conversion_table(source)
            source.next_day()

        return 0

    except CalendarError as e:
        print(f"\nERROR: {e}")
        return 1

    except Exception as e:
        print(f"\nERROR: {type(e).__name__}: {e}")
        if args.verbose:
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
