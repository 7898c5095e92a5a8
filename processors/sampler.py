"""Probabilistic thinning of samples with sample-rate composition."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

from metricsampler import runtime_config
from metricsampler.processors.base import SampleProcessor
from metricsampler.sample.options import is_valid_rate
from metricsampler.sample.sample import Sample

logger = logging.getLogger(__name__)


def randomly_sample(rate: float, samples: Iterable[Sample], rng=None) -> List[Sample]:
    """
    Return a new list of samples as if sampling had been performed.

    Each sample is kept when an independent uniform draw in [0, 1) is
    ``<= rate``. Each kept sample is copied and, when ``rate`` lies in
    (0, 1], its ``sample_rate`` becomes ``sample_rate * rate``. The input
    samples are never modified and survivors keep their relative order.

    Rates outside (0, 1] are not rejected: 0 or below drops (practically)
    everything, above 1 keeps everything, and neither adjusts sample_rate.

    Args:
        rate: Target sampling rate
        samples: Samples to thin
        rng: Object with a ``random()`` method; defaults to the ``random`` module

    Returns:
        Surviving samples
    """
    draw = (rng or random).random
    adjust = is_valid_rate(rate)
    if not adjust:
        logger.warning(
            f"Sampling rate {rate!r} is outside (0, 1]; "
            f"sample rates of kept samples are left unchanged"
        )

    result: List[Sample] = []
    for sample in samples:
        if draw() <= rate:
            kept = sample.copy()
            if adjust:
                kept.sample_rate = sample.sample_rate * rate
            result.append(kept)
    return result


@dataclass
class SamplingResult:
    sampled: bool


class Sampler(SampleProcessor):
    """Sampler using a fixed probability."""

    def __init__(self, sample_rate: Optional[float] = None, rng=None) -> None:
        if sample_rate is None:
            sample_rate = runtime_config.get_default_sample_rate()
        self.sample_rate = sample_rate
        self.rng = rng or random

    def should_sample(self) -> SamplingResult:
        return SamplingResult(sampled=self.rng.random() <= self.sample_rate)

    def sample(self, samples: Iterable[Sample]) -> List[Sample]:
        return randomly_sample(self.sample_rate, samples, rng=self.rng)

    def process(self, samples: Iterable[Sample]) -> List[Sample]:
        return self.sample(samples)
