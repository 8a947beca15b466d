"""
Global pytest configuration and fixtures.
"""
import os
from typing import Dict

import pytest

from tabtimetrack.config import TabTimeTrackConfig, reload_config
from tabtimetrack.config.logging_config import reset_logging


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'DEBUG': 'true',
        'LOG_LEVEL': 'DEBUG',
        'OUTPUT_FORMAT': 'table',
        'DESCRIPTION_LIMIT': '50',
        'MAX_LINE_HOURS': '10',
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv('DEFAULT_RATE', raising=False)

    # Clear the global config to force reload with test values
    import tabtimetrack.config.settings
    tabtimetrack.config.settings._config = None

    yield test_env_vars

    # Clean up
    tabtimetrack.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> TabTimeTrackConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def sample_timesheet() -> bytes:
    """Timesheet with a title, a rate, a breakout and four time lines."""
    return (
        b"August client work\n"
        b"@rem\tbilled monthly\n"
        b"@rate\t85.50\n"
        b"@breakout\t[42] Migration project\n"
        b"2023-08-01\t08:00\t09:30\t[123] Fix login form. Review pull request.\n"
        b"2023-08-01\t10:00\t12:00\t[42] Schema changes.\n"
        b"2023-08-02\t13:00\t14:15\tStandup. [123] Fix login form.\n"
        b"2023-07-31\t9\t10:30\tPlanning\n"
    )


@pytest.fixture
def timesheet_file(tmp_path, sample_timesheet):
    """Sample timesheet written to a temporary file."""
    path = tmp_path / "august.txt"
    path.write_bytes(sample_timesheet)
    return path


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Detach handlers installed by the CLI after each test."""
    yield
    reset_logging()


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
        "markers", "integration: mark test as an integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
