"""
pytest-side helpers for the browser scenarios.

The e2e conftest delegates here so the skip/fail and screenshot rules
can be exercised without a browser or a running target.
"""

import logging
from pathlib import Path
from typing import Any, Optional

import pytest
import requests
from playwright.async_api import Error as PlaywrightError

from .config import Settings
from .session import SessionHandle

logger = logging.getLogger(__name__)

TARGET_CHECK_TIMEOUT = 5


def ensure_target(settings: Settings, timeout: float = TARGET_CHECK_TIMEOUT) -> int:
    """
    Check that the application under test answers HTTP requests.

    Returns:
        The HTTP status of the base URL.

    Skips the calling test when the target is unreachable, or fails it
    when ``require_target`` is set.
    """
    try:
        response = requests.get(settings.base_url, timeout=timeout)
    except requests.RequestException as e:
        message = f"Target {settings.base_url} is not reachable: {e}"
        if settings.require_target:
            pytest.fail(message, pytrace=False)
        pytest.skip(message)

    logger.info(f"Target answered with HTTP {response.status_code}")
    return response.status_code


def call_failed(node: Any) -> bool:
    """True if the test body of ``node`` ran and failed."""
    rep_call = getattr(node, "rep_call", None)
    return rep_call is not None and rep_call.failed


async def save_failure_screenshot(
    handle: SessionHandle, settings: Settings, test_name: str
) -> Optional[Path]:
    """
    Screenshot the page of a failed case into ``screenshots_dir``.

    Returns:
        The screenshot path, or None if disabled or the page is gone.
    """
    if not settings.screenshot_on_failure:
        return None

    path = settings.screenshots_dir / f"{test_name}.png"
    try:
        await handle.screenshot(path)
    except PlaywrightError as e:
        logger.warning(f"Could not save failure screenshot: {e}")
        return None

    logger.info(f"Saved failure screenshot to {path}")
    return path
