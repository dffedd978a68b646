"""Shared fixtures for logpool tests."""
import pytest

from logpool.core import LoggerRegistry, default_registry
from logpool.observability import use_error_reporter

FIXED_STAMP = "12:00:00"


def fixed_renderer(time_format: str) -> str:
    return FIXED_STAMP


@pytest.fixture
def registry():
    """Isolated registry whose loggers always render the same timestamp."""
    reg = LoggerRegistry(renderer=fixed_renderer)
    yield reg
    reg.clear()


@pytest.fixture
def logger(registry):
    return registry.get_or_create("test")


@pytest.fixture
def reported():
    """Collects handler failures instead of logging them."""
    errors = []
    with use_error_reporter(errors.append):
        yield errors


@pytest.fixture(autouse=True)
def _clean_default_registry():
    yield
    default_registry().clear()
