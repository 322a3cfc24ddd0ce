"""
Pytest fixtures for the caption generator E2E scenarios.

Every case gets its own browser session, throwaway account and advisory
log through the ``case`` fixture. The whole package is skipped when the
target application does not answer, unless E2E_REQUIRE_TARGET is set.
"""

import logging
from typing import AsyncGenerator

import pytest
import pytest_asyncio

from caption_e2e.config import Settings, get_settings
from caption_e2e.context import CaseContext
from caption_e2e.harness import call_failed, ensure_target, save_failure_screenshot
from caption_e2e.session import SessionManager

logger = logging.getLogger(__name__)


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "e2e: drives a real browser against the caption generator"
    )


# =============================================================================
# Target
# =============================================================================

@pytest.fixture(scope="session")
def e2e_settings() -> Settings:
    """Suite settings resolved once per run."""
    settings = get_settings()
    logger.info(
        f"E2E target {settings.base_url} with {settings.browser} "
        f"(headless={settings.headless})"
    )
    return settings


@pytest.fixture(scope="session")
def target_available(e2e_settings: Settings) -> bool:
    """Skip (or fail, with E2E_REQUIRE_TARGET=true) when the target is down."""
    ensure_target(e2e_settings)
    return True


# =============================================================================
# Case fixture
# =============================================================================

@pytest_asyncio.fixture
async def case(
    request, e2e_settings: Settings, target_available: bool
) -> AsyncGenerator[CaseContext, None]:
    """
    One isolated browser session plus fresh credentials for a case.

    A SessionSetupError raised here is reported by pytest as an ERROR of
    the case, not a FAILURE.
    """
    manager = SessionManager(e2e_settings)
    async with manager.session() as handle:
        ctx = CaseContext(settings=e2e_settings, session=handle)
        yield ctx

        if call_failed(request.node):
            await save_failure_screenshot(handle, e2e_settings, request.node.name)

        if ctx.advisories.passed or ctx.advisories.warnings:
            logger.info(f"{request.node.name}: {ctx.advisories.summary()}")


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Hook to store test result for the failure screenshot in ``case``."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)
