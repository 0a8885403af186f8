"""
Pytest Configuration and Shared Fixtures

This file is automatically loaded by pytest and provides:
- Isolated environments for binding tests
- Sample configuration structures
- Resets for the metrics collector and settings singleton

Run tests:
    pytest envbind/tests/ -v
    pytest envbind/tests/ -v --cov=envbind  # with coverage
"""

import pytest

from envbind.binder import Binder
from envbind.config.settings import reset_settings
from envbind.observability import metrics
from envbind.tests.fakes import AppConfig, RecordingEnvironment, ScalarConfig


# =============================================================================
# PYTEST FIXTURES
# =============================================================================

@pytest.fixture(autouse=True)
def reset_state():
    """Reset metrics and the settings singleton around every test."""
    metrics.reset()
    reset_settings()
    yield
    metrics.reset()
    reset_settings()


@pytest.fixture
def env() -> RecordingEnvironment:
    """Create an empty RecordingEnvironment."""
    return RecordingEnvironment()


@pytest.fixture
def binder(env: RecordingEnvironment) -> Binder:
    """Create a Binder reading from the recording environment."""
    return Binder(env)


@pytest.fixture
def app_config() -> AppConfig:
    """Create an AppConfig with its declared defaults."""
    return AppConfig()


@pytest.fixture
def scalar_config() -> ScalarConfig:
    """Create a ScalarConfig with its declared defaults."""
    return ScalarConfig()
