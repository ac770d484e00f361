"""
Vectorized helpers over arrays of day counts.

Weekday and midnight arithmetic run as numpy operations; calendar
conversions are applied per element since the algorithms are integer
recurrences (Hebrew and Persian years are searched, not computed).
"""

from typing import Iterable, Optional, Sequence
import numpy as np
from numpy.random import Generator, default_rng

from almanac.core.calendar import CalendarKind
from almanac.core.day_count import DayCount
from almanac.core.converter import jd_to_ymd, ymd_to_jd


def _as_values(values) -> np.ndarray:
    """Coerce day counts / floats into a float64 array."""
    if isinstance(values, DayCount):
        values = [values]
    if not isinstance(values, np.ndarray):
        values = [float(v) for v in values]
    return np.asarray(values, dtype=np.float64)


def weekday_indices(values) -> np.ndarray:
    """
    Weekday index (0 = Sunday) for each day count.

    Same rule as ``DayCount.weekday_index``: floor(value + 1.5) mod 7.
    """
    jd = _as_values(values)
    return np.mod(np.floor(jd + 1.5), 7).astype(np.int64)


def at_midnight_many(values) -> np.ndarray:
    """Truncate each day count to the civil midnight starting its day."""
    jd = _as_values(values)
    return np.floor(jd - 0.5) + 0.5


def day_count_range(start: DayCount, num_days: int) -> np.ndarray:
    """
    Consecutive midnights beginning with the day containing ``start``.

    Args:
        start: First day (truncated to midnight)
        num_days: Number of days to generate

    Returns:
        Array [num_days] of day-count values
    """
    if num_days < 0:
        raise ValueError(f"num_days must be >= 0, got {num_days}")
    return start.at_midnight().value + np.arange(num_days, dtype=np.float64)


def sample_day_counts(
    low: float,
    high: float,
    size: int,
    rng: Optional[Generator] = None,
    seed: Optional[int] = None,
) -> np.ndarray:
    """
    Draw random whole days (at midnight) in [low, high).

    Args:
        low: Lower bound day count
        high: Upper bound day count
        size: Number of samples
        rng: Random generator (created from ``seed`` if omitted)
        seed: Seed for a new generator

    Returns:
        Array [size] of day-count values ending in .5
    """
    if high <= low:
        raise ValueError(f"high ({high}) must be greater than low ({low})")
    start = float(np.floor(low - 0.5) + 0.5)
    num_days = int(high - start)
    if num_days < 1:
        raise ValueError(
            f"high ({high}) must be greater than low ({low}) by at least one midnight"
        )
    rng = rng if rng is not None else default_rng(seed)
    offsets = rng.integers(0, num_days, size=size)
    return start + offsets.astype(np.float64)


def to_day_count_array(dates: Iterable) -> np.ndarray:
    """Day-count values for a sequence of calendar dates."""
    return np.array(
        [ymd_to_jd(d.kind, d.year, d.month, d.day) for d in dates],
        dtype=np.float64,
    )


def from_day_count_array(values, kind: CalendarKind) -> np.ndarray:
    """
    Convert day counts to (year, month, day) rows in one calendar.

    Returns:
        Integer array [n, 3] of (year, month, day)
    """
    jd = _as_values(values)
    rows: Sequence = [jd_to_ymd(kind, v) for v in jd.tolist()]
    return np.array(rows, dtype=np.int64).reshape(len(rows), 3)
