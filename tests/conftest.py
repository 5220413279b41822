"""Shared test fixtures."""

import tempfile
from pathlib import Path

import pytest
import structlog

from beautification.config import BeautificationConfig
from beautification.registry import ProviderRegistry


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def registry():
    """Empty provider registry."""
    return ProviderRegistry()


@pytest.fixture
def calls():
    """Shared list providers append their name to when asked."""
    return []


@pytest.fixture
def config():
    """Configuration independent of BEAUTIFY_* in the environment."""
    return BeautificationConfig(
        log_level="DEBUG",
        log_json=False,
        provider_timeout=0,
        providers=(),
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo structlog configuration done by a test (e.g. through the CLI)."""
    yield
    structlog.reset_defaults()
