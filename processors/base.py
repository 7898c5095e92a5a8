"""Sample processor interface and chain runner."""

from __future__ import annotations

import logging
from typing import Iterable, List

from metricsampler.sample.sample import Sample

logger = logging.getLogger(__name__)


class SampleProcessor:
    """
    Base sample processor interface.

    A processor receives a batch of samples and returns the samples to pass
    on to the next stage. It may drop samples or adjust them, but it must
    not synthesize samples absent from its input.
    """

    def process(self, samples: Iterable[Sample]) -> List[Sample]:
        """
        Process a batch of samples.

        Args:
            samples: Samples in submission order

        Returns:
            Samples to hand to the next processor
        """
        return list(samples)


def run_processors(samples: Iterable[Sample], processors: Iterable[SampleProcessor]) -> List[Sample]:
    """
    Feed samples through each processor in turn.

    A processor that raises is logged and skipped; its input is passed on
    unchanged so the pipeline never fails mid-way.
    """
    current = list(samples)
    for processor in processors:
        try:
            current = processor.process(current)
        except Exception:
            logger.exception(
                f"Sample processor {type(processor).__name__} failed, "
                f"passing {len(current)} samples through"
            )
    return current
