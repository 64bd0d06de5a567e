"""
Minimal pytest fixtures for amdis tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from test_data import ALANINE_MSL, GLUCOSE_MSL, MISCOUNTED_MSL


@pytest.fixture
def glucose_text():
    return GLUCOSE_MSL


@pytest.fixture
def library_text():
    """Three records separated by blank lines."""
    return "\n\n".join([GLUCOSE_MSL, ALANINE_MSL, MISCOUNTED_MSL])


@pytest.fixture
def library_file(tmp_path, library_text):
    """Write the three-record library to a temporary .msl file."""
    path = tmp_path / "library.msl"
    path.write_text(library_text, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def cleanup_env(monkeypatch):
    """Keep the user's environment from leaking into tests."""
    monkeypatch.delenv('AMDIS_APP_DIR', raising=False)
    monkeypatch.delenv('AMDIS_LOG_LEVEL', raising=False)
    yield


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
