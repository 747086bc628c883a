"""
Global pytest configuration and fixtures.
"""
import datetime as dt
import os
from typing import Dict

import pytest

from src.config import ValidationConfig, reload_config
from src.validators.clock import fixed_clock


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'ENVIRONMENT': 'testing',
        'DEBUG': 'true',
        'LOG_LEVEL': 'DEBUG',
        'SANITY_HORIZON_MONTHS': '1200',
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    # Clear the global config to force reload with test values
    import src.config.settings
    src.config.settings._config = None

    yield test_env_vars

    # Clean up
    src.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> ValidationConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def now() -> dt.datetime:
    """Fixed evaluation instant used across date window tests."""
    return dt.datetime(2024, 6, 15, 10, 30)


@pytest.fixture
def clock(now):
    """Clock pinned to the ``now`` fixture."""
    return fixed_clock(now)


@pytest.fixture(autouse=True)
def cleanup_test_files():
    """Clean up any test files created during testing."""
    yield

    # Remove test coverage files in case they're created
    test_files = ['coverage.xml', '.coverage']
    for file in test_files:
        if os.path.exists(file):
            os.remove(file)


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "wallclock: mark test as depending on the real system clock"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        # Add unit marker for tests in tests/unit/
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
