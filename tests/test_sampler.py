"""Tests for randomly_sample and the Sampler processor."""

import logging
import random

import pytest

from metricsampler import Sample, Sampler, Samples, count, gauge, randomly_sample
from metricsampler import set_ as set_sample
from metricsampler.sample.sample import MetricKind


class FixedRandom:
    """Returns the given draws in order, cycling."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


def make_samples(n, sample_rate=1.0):
    return [
        Sample(kind=MetricKind.COUNTER, name=f"s{i}", value=float(i), sample_rate=sample_rate)
        for i in range(n)
    ]


class TestRateComposition:
    """Survivors carry the product of their prior rate and the sampling rate."""

    @pytest.mark.parametrize("initial, rate", [(1.0, 0.5), (0.5, 0.3), (0.1, 0.9), (0.25, 1.0)])
    def test_survivor_rate_is_product(self, initial, rate):
        samples = make_samples(200, sample_rate=initial)
        result = randomly_sample(rate, samples, rng=random.Random(7))

        assert result
        for s in result:
            assert s.sample_rate == pytest.approx(initial * rate)

    def test_chained_passes_never_raise_the_rate(self):
        samples = make_samples(1000)
        rng = random.Random(11)

        once = randomly_sample(0.8, samples, rng=rng)
        twice = randomly_sample(0.5, once, rng=rng)

        assert all(s.sample_rate == pytest.approx(0.4) for s in twice)
        assert all(s.sample_rate <= 0.8 for s in twice)

    def test_input_samples_are_not_modified(self):
        samples = make_samples(50)
        result = randomly_sample(0.5, samples, rng=FixedRandom(0.1))

        assert len(result) == 50
        assert all(s.sample_rate == 1.0 for s in samples)
        assert all(r is not s for r, s in zip(result, samples))

    def test_survivor_tags_are_independent_copies(self):
        original = count("requests", 1, {"route": "/"})
        (kept,) = randomly_sample(0.5, [original], rng=FixedRandom(0.0))

        kept.tags["route"] = "/other"
        assert original.tags == {"route": "/"}


class TestBoundaryRates:

    def test_rate_one_keeps_everything_unchanged(self):
        samples = make_samples(1000, sample_rate=0.5)
        result = randomly_sample(1.0, samples)

        assert [s.name for s in result] == [s.name for s in samples]
        assert all(s.sample_rate == 0.5 for s in result)

    def test_rate_zero_excludes_everything(self):
        result = randomly_sample(0.0, make_samples(10000))
        assert result == []

    def test_rate_zero_pathological_survivor_keeps_rate(self):
        samples = make_samples(3, sample_rate=0.5)
        result = randomly_sample(0.0, samples, rng=FixedRandom(0.0, 0.3))

        assert [s.name for s in result] == ["s0", "s2"]
        assert all(s.sample_rate == 0.5 for s in result)

    def test_rate_above_one_keeps_everything_unchanged(self):
        samples = make_samples(500, sample_rate=0.2)
        result = randomly_sample(1.5, samples)

        assert len(result) == 500
        assert all(s.sample_rate == 0.2 for s in result)

    def test_negative_rate_excludes_everything(self):
        assert randomly_sample(-0.2, make_samples(1000)) == []

    def test_degenerate_rate_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="metricsampler.processors.sampler"):
            randomly_sample(2.0, make_samples(3))
        assert "outside (0, 1]" in caplog.text

    def test_valid_rate_does_not_log_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="metricsampler.processors.sampler"):
            randomly_sample(0.5, make_samples(3))
        assert caplog.records == []

    def test_empty_input(self):
        assert randomly_sample(0.5, []) == []


def test_statistical_fraction_at_half_rate():
    n = 100_000
    samples = make_samples(n)
    result = randomly_sample(0.5, samples, rng=random.Random(1234))

    fraction = len(result) / n
    assert 0.49 <= fraction <= 0.51
    assert all(s.sample_rate == 0.5 for s in result)


def test_order_preserved_and_no_synthesis():
    samples = make_samples(5000)
    result = randomly_sample(0.3, samples, rng=random.Random(99))

    names = [s.name for s in result]
    indexes = [int(name[1:]) for name in names]
    assert indexes == sorted(indexes)
    assert len(set(names)) == len(names)


def test_one_draw_per_sample():
    rng = FixedRandom(0.9, 0.1)
    result = randomly_sample(0.5, make_samples(4), rng=rng)

    assert rng.calls == 4
    assert [s.name for s in result] == ["s1", "s3"]


def test_accepts_any_iterable():
    gen = (gauge(f"g{i}", i) for i in range(10))
    assert len(randomly_sample(1.0, gen)) == 10


def test_set_samples_keep_message():
    (kept,) = randomly_sample(0.25, [set_sample("uniques", "user123")], rng=FixedRandom(0.0))
    assert kept.message == "user123"
    assert kept.sample_rate == 0.25


class TestSampler:

    def test_sampler_uses_its_rate(self):
        sampler = Sampler(0.5, rng=FixedRandom(0.2, 0.7))
        result = sampler.sample(make_samples(4))

        assert [s.name for s in result] == ["s0", "s2"]
        assert all(s.sample_rate == 0.5 for s in result)

    def test_sampler_defaults_to_runtime_rate(self):
        from metricsampler import runtime_config

        runtime_config.set_default_sample_rate(0.25)
        assert Sampler().sample_rate == 0.25

    def test_sampler_default_rate_keeps_everything(self):
        samples = make_samples(100)
        assert len(Sampler().process(samples)) == 100

    def test_should_sample(self):
        sampler = Sampler(0.5, rng=FixedRandom(0.5, 0.6))
        assert sampler.should_sample().sampled is True
        assert sampler.should_sample().sampled is False

    def test_batch_sample_returns_new_batch(self):
        batch = Samples()
        batch.add(*make_samples(10))
        thinned = batch.sample(0.5, rng=FixedRandom(0.0, 0.9))

        assert isinstance(thinned, Samples)
        assert len(thinned) == 5
        assert len(batch) == 10
        assert all(s.sample_rate == 1.0 for s in batch)
