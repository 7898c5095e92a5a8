"""Utility functions for metricsampler."""

from metricsampler.utils.helpers import (
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    Duration,
    resolution_unit,
    timestamp_ns,
    to_nanoseconds,
)

__all__ = [
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "Duration",
    "resolution_unit",
    "timestamp_ns",
    "to_nanoseconds",
]
