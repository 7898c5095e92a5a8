"""metricsampler error hierarchy and exceptions.

Sample construction and sampling never raise; these are used by the
configuration layer only.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


class MetricSamplerError(Exception):
    """
    Base exception for all metricsampler errors.

    ``details`` is copied, so later changes to the caller's mapping do not
    alter the error.
    """

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details) if details else {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        rendered = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({rendered})"


class ConfigError(MetricSamplerError):
    """Raised when configuration is invalid or cannot be read."""
    pass


class ValidationError(ConfigError):
    """Raised when a configuration value fails validation."""
    pass
