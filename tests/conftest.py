"""
Pytest configuration for the employee roster.

Provides fixtures for:
- Fresh and pre-loaded holders
- Settings isolated from the developer's environment
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

from roster.config import Settings, get_settings
from roster.domain.employees import Employees

ENV_KEYS = ("APP_ENV", "LOG_LEVEL", "LOG_JSON", "CLONE_MODE")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """
    Clear roster env vars and the settings cache around every test.

    Runs from a temporary directory so a local `.env` file is never read.
    """
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with test-specific overrides."""
    return Settings(log_level="DEBUG")


@pytest.fixture
def empty_roster() -> Employees:
    return Employees()


@pytest.fixture
def loaded_roster() -> Employees:
    """A roster populated once from the default static source."""
    roster = Employees()
    roster.load_data()
    return roster
