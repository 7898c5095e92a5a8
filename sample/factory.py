"""Constructors for metric samples."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Mapping, Optional

from metricsampler import runtime_config
from metricsampler.sample.options import SampleOption, TimeUnit, apply_options
from metricsampler.sample.sample import MetricKind, Sample
from metricsampler.utils.helpers import Duration, to_nanoseconds

logger = logging.getLogger(__name__)

Tags = Optional[Mapping[str, str]]


@dataclass(frozen=True)
class SampleConfig:
    """
    Settings applied to every sample a factory builds.

    ``name_prefix`` is prepended to each metric name as-is; no separator is
    added, so callers attach their own (e.g. ``"myapp."``).
    """

    name_prefix: str = ""


class SampleFactory:
    """
    Builds samples for each metric kind.

    Every constructor accepts trailing option modifiers (``Unit``,
    ``SampleRate``, ``TimeUnit``, ``Timestamp``), applied in order after the
    base sample is built.
    """

    def __init__(self, config: Optional[SampleConfig] = None) -> None:
        self.config = config or SampleConfig()

    def _create(
        self,
        kind: MetricKind,
        name: str,
        tags: Tags,
        options,
        value: float = 0.0,
        message: str = "",
    ) -> Sample:
        sample = Sample(
            kind=kind,
            name=self.config.name_prefix + name,
            value=value,
            message=message,
            tags=dict(tags) if tags else {},
            sample_rate=1.0,
        )
        return apply_options(sample, *options)

    def count(self, name: str, value: float, tags: Tags = None, *options: SampleOption) -> Sample:
        """Increment / decrement of a counter."""
        return self._create(MetricKind.COUNTER, name, tags, options, value=float(value))

    def gauge(self, name: str, value: float, tags: Tags = None, *options: SampleOption) -> Sample:
        """A gauge at a certain value."""
        return self._create(MetricKind.GAUGE, name, tags, options, value=float(value))

    def histogram(self, name: str, value: float, tags: Tags = None, *options: SampleOption) -> Sample:
        """A value on a histogram, like a timer or other range."""
        return self._create(MetricKind.HISTOGRAM, name, tags, options, value=float(value))

    def set(self, name: str, value: str, tags: Tags = None, *options: SampleOption) -> Sample:
        """A member of a set, for counting unique values within a time bound."""
        return self._create(MetricKind.SET, name, tags, options, message=value)

    def timing(
        self,
        name: str,
        duration: Duration,
        resolution: Duration,
        tags: Tags = None,
        *options: SampleOption,
    ) -> Sample:
        """
        A histogram sample holding ``duration`` expressed in ``resolution`` units.

        The unit is set only when ``resolution`` is one of NANOSECOND through
        HOUR; any other resolution yields an unlabeled value. A zero or
        non-finite operand records 0.0 with no unit.

        Args:
            name: Metric name (prefixed with the configured name prefix)
            duration: Elapsed time, nanoseconds or ``timedelta``
            resolution: Unit to express the duration in
            tags: Optional tag mapping
            options: Modifiers applied after the time unit
        """
        resolution_ns = to_nanoseconds(resolution)
        duration_ns = to_nanoseconds(duration)
        try:
            value = duration_ns / resolution_ns
            usable = math.isfinite(duration_ns) and math.isfinite(resolution_ns) and math.isfinite(value)
        except (ZeroDivisionError, OverflowError):
            usable = False
        if not usable:
            logger.warning(
                f"Timing '{name}' cannot divide {duration!r} by resolution "
                f"{resolution!r}, recording 0.0 without a unit"
            )
            return self.histogram(name, 0.0, tags, *options)
        sample = self.histogram(name, value, tags)
        TimeUnit(resolution_ns).apply(sample)
        return apply_options(sample, *options)


def default_factory() -> SampleFactory:
    """Factory bound to a snapshot of the current runtime settings."""
    return SampleFactory(runtime_config.get_sample_config())


def count(name: str, value: float, tags: Tags = None, *options: SampleOption) -> Sample:
    return default_factory().count(name, value, tags, *options)


def gauge(name: str, value: float, tags: Tags = None, *options: SampleOption) -> Sample:
    return default_factory().gauge(name, value, tags, *options)


def histogram(name: str, value: float, tags: Tags = None, *options: SampleOption) -> Sample:
    return default_factory().histogram(name, value, tags, *options)


def set_(name: str, value: str, tags: Tags = None, *options: SampleOption) -> Sample:
    return default_factory().set(name, value, tags, *options)


def timing(
    name: str,
    duration: Duration,
    resolution: Duration,
    tags: Tags = None,
    *options: SampleOption,
) -> Sample:
    return default_factory().timing(name, duration, resolution, tags, *options)
