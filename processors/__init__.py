"""Sample processors and supporting utilities."""

from metricsampler.processors.base import SampleProcessor, run_processors
from metricsampler.processors.logging_processor import LoggingSampleProcessor
from metricsampler.processors.sampler import Sampler, SamplingResult, randomly_sample

__all__ = [
    "SampleProcessor",
    "run_processors",
    "Sampler",
    "SamplingResult",
    "randomly_sample",
    "LoggingSampleProcessor",
]
