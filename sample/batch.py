"""Unordered batch of samples awaiting submission."""

from __future__ import annotations

from typing import Iterator, List

from metricsampler.sample.sample import Sample


class Samples:
    """A batch of samples kept in insertion order."""

    def __init__(self, batch: List[Sample] = None) -> None:
        self.batch: List[Sample] = list(batch) if batch else []

    def add(self, *samples: Sample) -> None:
        """Append one or more samples to the batch."""
        self.batch.extend(samples)

    def sample(self, rate: float, rng=None) -> "Samples":
        """Return a new batch thinned by ``rate`` (see ``randomly_sample``)."""
        from metricsampler.processors.sampler import randomly_sample

        return Samples(randomly_sample(rate, self.batch, rng=rng))

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.batch)

    def __len__(self) -> int:
        return len(self.batch)
