"""
Shared pytest fixtures for almanac tests.

Provides reference dates, reproducible random day counts and calendar
parametrization.
"""

import pytest
import numpy as np
from typing import Dict, Type

from almanac.core.calendar import CalendarKind
from almanac.core.day_count import DayCount
from almanac.dates import (
    CalendarDate,
    CALENDAR_TYPES,
    GregorianDate,
    JulianDate,
    IslamicDate,
    PersianDate,
    HebrewDate,
)

# 2000-01-01 (Gregorian), a Saturday
MILLENNIUM_JD: float = 2451544.5
# Upper bound for random sampling: 2100-01-01
SAMPLE_END_JD: float = 2488069.5


@pytest.fixture
def millennium() -> DayCount:
    """Day count of 2000-01-01 at midnight."""
    return DayCount(MILLENNIUM_JD)


@pytest.fixture
def millennium_dates() -> Dict[CalendarKind, CalendarDate]:
    """2000-01-01 expressed in every calendar."""
    return {
        CalendarKind.GREGORIAN: GregorianDate(2000, 1, 1),
        CalendarKind.JULIAN: JulianDate(1999, 12, 19),
        CalendarKind.ISLAMIC: IslamicDate(1420, 9, 24),
        CalendarKind.PERSIAN: PersianDate(1378, 10, 11),
        CalendarKind.HEBREW: HebrewDate(5760, 10, 23),
    }


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator for reproducible sampling."""
    return np.random.default_rng(42)


# Parametrized fixtures for testing every calendar

@pytest.fixture(params=list(CALENDAR_TYPES.values()), ids=[k.value for k in CALENDAR_TYPES])
def calendar_cls(request) -> Type[CalendarDate]:
    """Parametrized calendar date classes."""
    return request.param
