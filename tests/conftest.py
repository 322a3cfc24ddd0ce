"""
Pytest fixtures for caption-e2e tests.

This module provides common fixtures used across test modules.
"""

import os
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from caption_e2e.config import Settings, get_settings  # noqa: E402

SETTINGS_ENV_VARS = (
    "E2E_BASE_URL",
    "E2E_BROWSER",
    "E2E_HEADLESS",
    "E2E_LOG_LEVEL",
    "E2E_CONFIG_FILE",
    "E2E_REQUIRE_TARGET",
)


@pytest.fixture
def isolated_env(monkeypatch):
    """
    Remove suite settings from the environment for one test.

    Variables the code under test sets are restored afterwards too.
    """
    for name in SETTINGS_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def fast_settings(tmp_path: Path) -> Settings:
    """Settings with short waits for tests that never touch a browser."""
    return Settings(
        base_url="http://caption.test",
        implicit_wait=0.05,
        default_timeout=0.2,
        page_load_timeout=0.2,
        redirect_timeout=0.3,
        negative_check_timeout=0.1,
        generation_timeout=0.3,
        poll_interval=0.01,
        results_dir=tmp_path / "results",
    )
