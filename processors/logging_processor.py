"""Sample processor that logs samples as they pass through."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from metricsampler.processors.base import SampleProcessor
from metricsampler.sample.sample import MetricKind, Sample


class LoggingSampleProcessor(SampleProcessor):
    """Logs a summary of each sample using the standard logging module."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("metricsampler.samples")

    def process(self, samples: Iterable[Sample]) -> List[Sample]:
        samples = list(samples)
        for sample in samples:
            observed = sample.message if sample.kind == MetricKind.SET else sample.value
            msg = (
                f"[sample] kind={sample.kind.name} name={sample.name} "
                f"value={observed} unit={sample.unit} "
                f"sample_rate={sample.sample_rate} tags={sample.tags}"
            )
            self.logger.info(msg)
        return samples
