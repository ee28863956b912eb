"""Pytest configuration and shared fixtures for twinslide tests

This module provides common fixtures and test utilities used across
unit and integration tests.
"""

import pytest
import logging
from pathlib import Path
from typing import Generator

from twinslide.common import locks
from twinslide.common.config import AppConfig, ConfigLoader
from twinslide.common.settings import settings


@pytest.fixture
def sample_config() -> AppConfig:
    """Load the example configuration shipped with the repository

    Returns:
        AppConfig object with example values
    """
    config_path = Path(__file__).parent.parent / "config.yml"
    if not config_path.exists():
        pytest.skip("config.yml not found - required for this test")
    return ConfigLoader.config_parse(ConfigLoader.yaml_load(config_path))


@pytest.fixture
def reset_settings() -> Generator[None, None, None]:
    """Reset settings singleton between tests

    This fixture ensures each test gets a fresh Settings instance.
    """
    settings._initialized = False
    settings._config = None
    yield
    settings._initialized = False
    settings._config = None


@pytest.fixture
def reset_locks() -> Generator[None, None, None]:
    """Drop the process-wide lock set around a test"""
    locks._locks = None
    yield
    locks._locks = None


@pytest.fixture
def config_home(tmp_path, monkeypatch) -> Path:
    """Point the per-user config root at a temporary directory"""
    home = tmp_path / "config-home"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home


@pytest.fixture
def no_system_config(monkeypatch) -> None:
    """Ignore config.yml files installed on the test machine"""
    monkeypatch.setattr(ConfigLoader, "DEFAULT_CONFIG_PATHS", [])


@pytest.fixture(autouse=True)
def setup_logging(caplog):
    """Setup logging for tests"""
    caplog.set_level(logging.DEBUG)


# Markers for test organization
def pytest_configure(config) -> None:
    """Register custom pytest markers used by this test suite."""
    config.addinivalue_line("markers", "requires_x11: mark test as requiring X11 display")
