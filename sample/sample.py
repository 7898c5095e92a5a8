"""Sample record - one structured metric observation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class MetricKind(Enum):
    COUNTER = 0
    GAUGE = 1
    HISTOGRAM = 2
    SET = 3


@dataclass
class Sample:
    """
    A single metric observation ready for handoff to a transport.

    ``value`` carries the observation for counters, gauges and histograms;
    ``message`` carries the unique member for sets. ``sample_rate`` in (0, 1]
    means this record stands for ``1 / sample_rate`` original occurrences.
    """

    kind: MetricKind
    name: str
    value: float = 0.0
    message: str = ""
    tags: Dict[str, str] = field(default_factory=dict)
    unit: Optional[str] = None
    sample_rate: float = 1.0
    timestamp: int = 0  # ns since epoch, 0 = unset

    def copy(self) -> "Sample":
        """Return an independent copy, including its own tags dict."""
        return Sample(
            kind=self.kind,
            name=self.name,
            value=self.value,
            message=self.message,
            tags=dict(self.tags),
            unit=self.unit,
            sample_rate=self.sample_rate,
            timestamp=self.timestamp,
        )
