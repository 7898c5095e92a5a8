import pytest

from metricsampler import runtime_config


@pytest.fixture(autouse=True)
def reset_runtime_config():
    """Each test starts from the default process-wide settings."""
    runtime_config.reset()
    yield
    runtime_config.reset()
