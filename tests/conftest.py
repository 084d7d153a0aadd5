"""
Pytest fixtures for labmock tests.

Design Principles:
- Every test runs against LabMockConfig.for_testing()
- Global configuration is reset after each test so no test sees another
  test's settings

Run with: pytest tests/ -v
"""

from types import SimpleNamespace
from typing import Generator

import pytest

from labmock import LabMockConfig, mock, reset_config, set_config
from tests.mocks import Greeter


# ═══════════════════════════════════════════════════════════════════════════════
# Configuration Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture(autouse=True)
def testing_config() -> Generator[LabMockConfig, None, None]:
    """Install the testing configuration for the duration of a test."""
    config = LabMockConfig.for_testing()
    set_config(config)
    yield config
    reset_config()


# ═══════════════════════════════════════════════════════════════════════════════
# Subject Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def greeter() -> Greeter:
    """Live Greeter instance."""
    return Greeter("hello")


@pytest.fixture
def mocked_greeter(greeter):
    """Mock of a live Greeter instance."""
    return mock(greeter)


@pytest.fixture
def namespace_object() -> SimpleNamespace:
    """Ad-hoc object built from plain functions and values."""
    return SimpleNamespace(
        greet=lambda name: "hi " + name,
        shout=lambda text: text.upper(),
        retries=3,
        label="ns",
    )
