"""Duration helpers for timing samples."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

Duration = Union[int, float, timedelta]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# SI symbols; minute and hour use the non-SI "min" and "h".
_RESOLUTIONS = {
    NANOSECOND: "ns",
    MICROSECOND: "µs",
    MILLISECOND: "ms",
    SECOND: "s",
    MINUTE: "min",
    HOUR: "h",
}


def to_nanoseconds(duration: Duration) -> Union[int, float]:
    """
    Convert a duration to nanoseconds.

    Numbers are taken as nanoseconds already and returned unchanged, so
    fractional and non-finite values survive for the caller to check.

    Args:
        duration: Nanoseconds or a ``timedelta``

    Returns:
        Duration in nanoseconds
    """
    if isinstance(duration, timedelta):
        return (duration // timedelta(microseconds=1)) * MICROSECOND
    return duration


def resolution_unit(resolution: Duration) -> Optional[str]:
    """
    Look up the unit symbol for a duration resolution.

    Only the exact constants NANOSECOND through HOUR are recognized.

    Args:
        resolution: Nanoseconds or a ``timedelta``

    Returns:
        Unit symbol, or None if the resolution is not recognized
    """
    return _RESOLUTIONS.get(to_nanoseconds(resolution))


def timestamp_ns(value: Union[int, datetime]) -> Optional[int]:
    """
    Convert a point in time to integer nanoseconds since the epoch.

    Naive datetimes are taken as local time.

    Args:
        value: Nanoseconds since the epoch or a ``datetime``

    Returns:
        Nanoseconds since the epoch, or None if the value is not usable
    """
    if isinstance(value, datetime):
        delta = value.astimezone(timezone.utc) - _EPOCH
        return (delta // timedelta(microseconds=1)) * MICROSECOND
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return int(value)
