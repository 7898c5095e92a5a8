"""metricsampler - build and probabilistically sample metric samples."""

from __future__ import annotations

import logging
from typing import Optional

from metricsampler import runtime_config
from metricsampler.config import MetricSamplerConfig, load_config
from metricsampler.errors import ConfigError, MetricSamplerError, ValidationError
from metricsampler.processors import (
    LoggingSampleProcessor,
    SampleProcessor,
    Sampler,
    SamplingResult,
    randomly_sample,
    run_processors,
)
from metricsampler.sample import (
    MetricKind,
    Sample,
    SampleConfig,
    SampleFactory,
    SampleOption,
    SampleRate,
    Samples,
    TimeUnit,
    Timestamp,
    Unit,
    apply_options,
    default_factory,
    with_sample_rate,
    with_time_unit,
    with_timestamp,
    with_unit,
)
from metricsampler.sample.factory import count, gauge, histogram, set_, timing
from metricsampler.utils.helpers import (
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
)

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Level the package logger had before debug raised it, None while not raised.
_level_before_debug: Optional[int] = None


def _configure_logging() -> None:
    """Raise the package logger to DEBUG while debug is on, restore it after."""
    global _level_before_debug
    if runtime_config.get_debug():
        if _level_before_debug is None:
            _level_before_debug = logger.level
        logger.setLevel(logging.DEBUG)
    elif _level_before_debug is not None:
        logger.setLevel(_level_before_debug)
        _level_before_debug = None


def init(
    config_file: Optional[str] = None,
    *,
    name_prefix: Optional[str] = None,
    sample_rate: Optional[float] = None,
    debug: Optional[bool] = None,
) -> MetricSamplerConfig:
    """
    Load configuration and install it as the process-wide defaults.

    Call once at startup, before samples are built from multiple threads.

    Args:
        config_file: TOML file; defaults to the first one found by
            ``config.find_config_file()``
        name_prefix: Prefix prepended to every metric name
        sample_rate: Default rate for ``Sampler()`` when none is given
        debug: Enable DEBUG logging for the ``metricsampler`` logger; turning
            it off again restores the level the logger had before

    Returns:
        The validated configuration

    Raises:
        ConfigError: If the configuration cannot be read or is invalid
    """
    cfg = load_config(
        config_file,
        overrides={"name_prefix": name_prefix, "sample_rate": sample_rate, "debug": debug},
    )
    runtime_config.set_name_prefix(cfg.samples.name_prefix)
    runtime_config.set_default_sample_rate(cfg.sampling.sample_rate)
    runtime_config.set_debug(cfg.logging.debug)
    _configure_logging()
    logger.debug(
        f"metricsampler initialized: name_prefix={cfg.samples.name_prefix!r} "
        f"sample_rate={cfg.sampling.sample_rate}"
    )
    return cfg


__all__ = [
    "__version__",
    "init",
    "MetricSamplerConfig",
    "MetricSamplerError",
    "ConfigError",
    "ValidationError",
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
    "count",
    "gauge",
    "histogram",
    "set_",
    "timing",
    "randomly_sample",
    "Sampler",
    "SamplingResult",
    "SampleProcessor",
    "LoggingSampleProcessor",
    "run_processors",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
]
