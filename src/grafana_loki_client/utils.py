"""
Timestamp utility functions for working with Loki's nanosecond timestamps.
"""

import re
import time
from typing import Iterable, Optional, Union

from .exceptions import InvalidDurationFormatError
from .models import Duration, LogStream, TimeBound, Timestamp, TimeRange


NANOSECONDS_PER_MILLISECOND = 1_000_000
NANOSECONDS_PER_SECOND = 1_000_000_000
NANOSECONDS_PER_MINUTE = NANOSECONDS_PER_SECOND * 60
NANOSECONDS_PER_HOUR = NANOSECONDS_PER_MINUTE * 60
NANOSECONDS_PER_DAY = NANOSECONDS_PER_HOUR * 24
NANOSECONDS_PER_WEEK = NANOSECONDS_PER_DAY * 7

DURATION_UNITS = {
    "ms": NANOSECONDS_PER_MILLISECOND,
    "s": NANOSECONDS_PER_SECOND,
    "m": NANOSECONDS_PER_MINUTE,
    "h": NANOSECONDS_PER_HOUR,
    "d": NANOSECONDS_PER_DAY,
    "w": NANOSECONDS_PER_WEEK,
}

_NUMERIC_RE = re.compile(r"^\d+$")
_DURATION_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*(ms|s|m|h|d|w)$")


def now_ns() -> int:
    """
    Get current time as Unix nanoseconds.

    Returns:
        Current timestamp in nanoseconds.
    """
    return time.time_ns()


def parse_duration_ns(expression: str) -> int:
    """
    Parse a duration string such as "15m" or "1.5h" into nanoseconds.

    Args:
        expression: Magnitude followed by one of ms, s, m, h, d, w.

    Returns:
        Length of the duration in nanoseconds.

    Raises:
        InvalidDurationFormatError: If the expression is not a duration.
    """
    match = _DURATION_RE.match(expression.strip()) if isinstance(expression, str) else None
    if match is None:
        raise InvalidDurationFormatError(expression)

    magnitude, unit = match.groups()
    if "." in magnitude:
        return round(float(magnitude) * DURATION_UNITS[unit])
    return int(magnitude) * DURATION_UNITS[unit]


def to_time_bound(value: Union[int, float, str, TimeBound]) -> TimeBound:
    """
    Normalize a caller supplied start/end value into a tagged time bound.

    Integers, integral floats (e.g. 1.7e18) and digit-only strings are
    absolute nanosecond timestamps, anything else must be a duration string.

    Raises:
        InvalidDurationFormatError: If the value is neither.
    """
    if isinstance(value, (Timestamp, Duration)):
        return value
    # bool is an int subclass but never a timestamp
    if isinstance(value, int) and not isinstance(value, bool):
        return Timestamp(nanoseconds=value)
    if isinstance(value, float) and value.is_integer():
        return Timestamp(nanoseconds=int(value))
    if isinstance(value, str):
        stripped = value.strip()
        if _NUMERIC_RE.match(stripped):
            return Timestamp(nanoseconds=int(stripped))
        if _DURATION_RE.match(stripped):
            return Duration(expression=stripped)
    raise InvalidDurationFormatError(value)


def resolve_time_bound(bound: TimeBound) -> str:
    """
    Render a time bound as the nanosecond epoch string Loki expects.

    Durations are resolved against the current wall clock.
    """
    if isinstance(bound, Timestamp):
        return str(bound.nanoseconds)
    return str(now_ns() - parse_duration_ns(bound.expression))


def duration_to_unix_timestamp(value: Union[int, float, str, TimeBound]) -> str:
    """
    Convert a timestamp or a relative duration into a nanosecond epoch string.

    Example:
        duration_to_unix_timestamp(1704067200000000000)  # "1704067200000000000"
        duration_to_unix_timestamp("2h")                 # now minus two hours

    Args:
        value: Nanosecond timestamp (int, integral float or digit string) or duration string.

    Returns:
        Timestamp in nanoseconds, as a string.

    Raises:
        InvalidDurationFormatError: If the value is neither.
    """
    return resolve_time_bound(to_time_bound(value))


def compute_time_range(streams: Iterable[LogStream]) -> Optional[TimeRange]:
    """
    Get the earliest and latest timestamps across all streams.

    Args:
        streams: Raw streams from a query range response.

    Returns:
        TimeRange covering every entry, or None if there are no entries.
    """
    timestamps = [entry.timestamp for stream in streams for entry in stream.entries]
    if not timestamps:
        return None

    return TimeRange(start=min(timestamps), end=max(timestamps))
