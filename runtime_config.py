"""Runtime configuration state management.

The process-wide defaults are held as one immutable snapshot. Writers swap
the snapshot under a lock; readers take the current reference, so a sample
is always built from a consistent set of settings.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from metricsampler.sample.factory import SampleConfig


@dataclass(frozen=True)
class RuntimeSettings:
    name_prefix: str = ""
    default_sample_rate: float = 1.0
    debug: bool = False


_settings = RuntimeSettings()
_lock = threading.Lock()


def _update(**changes) -> None:
    global _settings
    with _lock:
        _settings = replace(_settings, **changes)


def get_settings() -> RuntimeSettings:
    return _settings


def reset() -> None:
    global _settings
    with _lock:
        _settings = RuntimeSettings()


def set_name_prefix(value: str) -> None:
    _update(name_prefix=value or "")


def get_name_prefix() -> str:
    return _settings.name_prefix


def set_default_sample_rate(value: float) -> None:
    # Same rule as the SampleRate option: out-of-range values are ignored.
    if 0.0 < value <= 1.0:
        _update(default_sample_rate=value)


def get_default_sample_rate() -> float:
    return _settings.default_sample_rate


def set_debug(value: bool) -> None:
    _update(debug=bool(value))


def get_debug() -> bool:
    return _settings.debug


def get_sample_config() -> "SampleConfig":
    """Snapshot the settings the sample factory needs."""
    from metricsampler.sample.factory import SampleConfig

    return SampleConfig(name_prefix=_settings.name_prefix)
