"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables read by the configuration."""
    for name in ("CONFIG_FILE", "LOG_FILE", "LOG_LEVEL", "ETP_NOVALUE", "ETP_TIMESTAMP_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
