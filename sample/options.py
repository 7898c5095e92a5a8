"""Option modifiers applied to a sample after construction."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Union

from metricsampler.sample.sample import Sample
from metricsampler.utils.helpers import Duration, resolution_unit, timestamp_ns

logger = logging.getLogger(__name__)


def is_valid_rate(rate: float) -> bool:
    return 0.0 < rate <= 1.0


class SampleOption:
    """Base class for modifiers. Subclasses mutate the sample in place."""

    def apply(self, sample: Sample) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class Unit(SampleOption):
    """Set the sample's unit name unconditionally."""

    name: str

    def apply(self, sample: Sample) -> None:
        sample.unit = self.name


@dataclass(frozen=True)
class SampleRate(SampleOption):
    """
    Set the rate at which a measurement was sampled.

    Rates outside (0, 1] leave the sample untouched.
    """

    rate: float

    def apply(self, sample: Sample) -> None:
        if is_valid_rate(self.rate):
            sample.sample_rate = self.rate
        else:
            logger.debug(
                f"Ignoring sample rate {self.rate!r} for '{sample.name}': "
                f"must be in (0, 1]"
            )


@dataclass(frozen=True)
class TimeUnit(SampleOption):
    """
    Set the unit to the symbol of a duration resolution.

    Resolutions other than NANOSECOND through HOUR leave the sample untouched.
    """

    resolution: Duration

    def apply(self, sample: Sample) -> None:
        unit = resolution_unit(self.resolution)
        if unit is None:
            logger.debug(
                f"Unrecognized time resolution {self.resolution!r} for "
                f"'{sample.name}', unit left unchanged"
            )
            return
        sample.unit = unit


@dataclass(frozen=True)
class Timestamp(SampleOption):
    """
    Set when the observation was made.

    Accepts nanoseconds since the epoch or a ``datetime``; anything else
    leaves the sample untouched.
    """

    value: Union[int, datetime]

    def apply(self, sample: Sample) -> None:
        ts = timestamp_ns(self.value)
        if ts is None:
            logger.debug(f"Ignoring timestamp {self.value!r} for '{sample.name}'")
            return
        sample.timestamp = ts


def with_unit(name: str) -> Unit:
    return Unit(name)


def with_sample_rate(rate: float) -> SampleRate:
    return SampleRate(rate)


def with_time_unit(resolution: Duration) -> TimeUnit:
    return TimeUnit(resolution)


def with_timestamp(value: Union[int, datetime]) -> Timestamp:
    return Timestamp(value)


def apply_options(sample: Sample, *options: SampleOption) -> Sample:
    """Apply modifiers in order; the last applicable one wins."""
    for option in options:
        option.apply(sample)
    return sample
