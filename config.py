"""Configuration loading: TOML file, environment variables and explicit overrides.

Priority, lowest to highest:
- config file (``metricsampler.toml`` in the working directory, then
  ``~/.metricsampler.toml``)
- environment variables (``METRICSAMPLER_*``)
- explicit overrides passed to ``init()``
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from metricsampler.errors import ConfigError, ValidationError

CONFIG_FILE_NAME = "metricsampler.toml"
HOME_CONFIG_FILE_NAME = ".metricsampler.toml"

ENV_PREFIX = "METRICSAMPLER_"

# flat key -> (section, env var suffix, type)
_FIELDS = {
    "name_prefix": ("samples", "NAME_PREFIX", str),
    "sample_rate": ("sampling", "SAMPLE_RATE", float),
    "debug": ("logging", "DEBUG", bool),
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


class SamplesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name_prefix: str = ""


class SamplingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sample_rate: float = Field(default=1.0, gt=0.0, le=1.0)


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    debug: bool = False


class MetricSamplerConfig(BaseModel):
    """Validated configuration, one model per TOML section."""

    model_config = ConfigDict(extra="forbid")

    samples: SamplesConfig = Field(default_factory=SamplesConfig)
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def find_config_file() -> Optional[str]:
    """
    Locate a config file.

    Returns:
        Path of the first file found, or None
    """
    candidates = [
        Path.cwd() / CONFIG_FILE_NAME,
        Path.home() / HOME_CONFIG_FILE_NAME,
    ]
    for candidate in candidates:
        if candidate.is_file():
            return str(candidate)
    return None


def load_toml_config(path: str) -> Dict[str, Any]:
    """
    Load a TOML config file.

    Returns the nested section layout, or an empty dict if the file does
    not exist. Raises ConfigError if the file cannot be parsed.
    """
    config_path = Path(path)
    if not config_path.is_file():
        return {}
    try:
        with config_path.open("rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as e:
        raise ConfigError("Failed to load config file", {"path": str(path), "error": e}) from e


def _parse_env_value(raw: str, kind: type) -> Any:
    if kind is bool:
        return raw.strip().lower() in _TRUE_VALUES
    if kind is float:
        try:
            return float(raw)
        except ValueError as e:
            raise ConfigError("Invalid numeric environment value", {"value": raw}) from e
    return raw


def _nest(flat: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    nested: Dict[str, Dict[str, Any]] = {}
    for key, value in flat.items():
        if key not in _FIELDS:
            raise ConfigError("Unknown configuration key", {"key": key})
        nested.setdefault(_FIELDS[key][0], {})[key] = value
    return nested


def _flatten(nested: Dict[str, Any]) -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    for section, values in nested.items():
        if not isinstance(values, dict):
            raise ConfigError("Config section must be a table", {"section": section})
        for key, value in values.items():
            if key not in _FIELDS or _FIELDS[key][0] != section:
                raise ConfigError("Unknown configuration key", {"section": section, "key": key})
            flat[key] = value
    return flat


def load_config_from_env(flat: bool = False) -> Dict[str, Any]:
    """
    Read configuration from ``METRICSAMPLER_*`` environment variables.

    Args:
        flat: Return flat keys instead of the nested section layout

    Returns:
        Only the values whose variables are set
    """
    values: Dict[str, Any] = {}
    for key, (_, suffix, kind) in _FIELDS.items():
        raw = os.getenv(ENV_PREFIX + suffix)
        if raw is not None:
            values[key] = _parse_env_value(raw, kind)
    return values if flat else _nest(values)


def load_config_with_priority(
    config_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Merge file, environment and explicit overrides into a flat dict.

    ``None`` overrides are ignored so callers can pass through unset
    keyword arguments.
    """
    path = config_file or find_config_file()
    merged: Dict[str, Any] = _flatten(load_toml_config(path)) if path else {}
    merged.update(load_config_from_env(flat=True))
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})
    return merged


def validate_config(flat: Dict[str, Any]) -> MetricSamplerConfig:
    """Validate a flat config dict, raising ValidationError on bad values."""
    try:
        return MetricSamplerConfig.model_validate(_nest(flat))
    except PydanticValidationError as e:
        errors = {".".join(str(p) for p in err["loc"]): err["msg"] for err in e.errors()}
        raise ValidationError("Invalid configuration", errors) from e


def load_config(
    config_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> MetricSamplerConfig:
    return validate_config(load_config_with_priority(config_file, overrides))
