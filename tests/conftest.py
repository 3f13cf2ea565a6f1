"""
Pytest configuration and fixtures.

Provides common fixtures for testing.
"""

import pytest

from coachgen.config import AppConfig
from coachgen.connectivity.interfaces import StaticInterfaceSource
from coachgen.models.connectivity import InterfaceClass, PathStatus

SAMPLE_PROGRAM = """WEEKLY PROGRAM

MONDAY
Focus: Acceleration
Warm-Up (15 minutes)
• Dynamic stretching
Sprint Work (30 minutes)
• 4 x 30m accelerations
Squats: 4 sets x 6 reps

TUESDAY
Focus: Recovery
Light jog

Stay hydrated."""


@pytest.fixture
def test_config() -> AppConfig:
    """
    Create test configuration.

    Returns:
        Test configuration instance
    """
    return AppConfig(
        _env_file=None,
        app_env="development",
        openai_api_key="test-key",
        openai_base_url="https://api.test/v1",
        retry_max_attempts=3,
        retry_delay_seconds=1.0,
        progress_interval_seconds=0.01,
        probe_endpoints="https://probe.test/a,https://probe.test/b",
        probe_timeout_seconds=1.0,
        probe_overall_timeout_seconds=2.0,
    )


@pytest.fixture
def sample_program() -> str:
    """Raw program text with two day blocks and trailing prose."""
    return SAMPLE_PROGRAM


@pytest.fixture
def online_source() -> StaticInterfaceSource:
    """Interface source reporting a usable primary interface."""
    return StaticInterfaceSource(
        {
            InterfaceClass.PRIMARY: PathStatus.SATISFIED,
            InterfaceClass.ANY: PathStatus.SATISFIED,
        }
    )


@pytest.fixture
def offline_source() -> StaticInterfaceSource:
    """Interface source reporting no usable interface."""
    return StaticInterfaceSource()
