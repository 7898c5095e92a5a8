"""Sample records, option modifiers and constructors."""

from metricsampler.sample.batch import Samples
from metricsampler.sample.factory import SampleConfig, SampleFactory, default_factory
from metricsampler.sample.options import (
    SampleOption,
    SampleRate,
    TimeUnit,
    Timestamp,
    Unit,
    apply_options,
    with_sample_rate,
    with_time_unit,
    with_timestamp,
    with_unit,
)
from metricsampler.sample.sample import MetricKind, Sample

__all__ = [
    "MetricKind",
    "Sample",
    "Samples",
    "SampleConfig",
    "SampleFactory",
    "default_factory",
    "SampleOption",
    "Unit",
    "SampleRate",
    "TimeUnit",
    "Timestamp",
    "with_unit",
    "with_sample_rate",
    "with_time_unit",
    "with_timestamp",
    "apply_options",
]
