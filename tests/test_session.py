"""
Tests for the browser session lifecycle.

The Playwright driver is replaced by mocks so these tests check what
the manager asks for and what it releases, without launching a browser.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import Error as PlaywrightError

from caption_e2e.exceptions import SessionSetupError
from caption_e2e.session import LaunchOptions, SessionManager


class FakeDriver:
    """Mocked async_playwright() with every object it hands out."""

    def __init__(self, launch_error: Exception = None):
        self.page = MagicMock(name="page")
        self.page.screenshot = AsyncMock()

        self.context = MagicMock(name="context")
        self.context.new_page = AsyncMock(return_value=self.page)
        self.context.close = AsyncMock()

        self.browser = MagicMock(name="browser")
        self.browser.new_context = AsyncMock(return_value=self.context)
        self.browser.close = AsyncMock()

        self.playwright = MagicMock(name="playwright")
        for name in ("chromium", "firefox", "webkit"):
            browser_type = getattr(self.playwright, name)
            browser_type.launch = AsyncMock(
                return_value=self.browser, side_effect=launch_error
            )
        self.playwright.stop = AsyncMock()

        self.starter = MagicMock(name="starter")
        self.starter.start = AsyncMock(return_value=self.playwright)

    def factory(self):
        return self.starter


@pytest.fixture
def driver():
    return FakeDriver()


class TestLaunchOptions:
    """Launch and context options built from settings."""

    def test_chromium_flags(self, fast_settings):
        options = LaunchOptions.from_settings(fast_settings).to_launch_options()

        assert options["headless"] is True
        assert "--no-sandbox" in options["args"]
        assert "--disable-dev-shm-usage" in options["args"]
        assert "--disable-gpu" in options["args"]
        assert "--disable-blink-features=AutomationControlled" in options["args"]
        assert "--window-size=1920,1080" in options["args"]
        assert "--enable-automation" in options["ignore_default_args"]

    def test_other_engines_get_no_chromium_flags(self, fast_settings):
        settings = fast_settings.model_copy(update={"browser": "firefox"})
        options = LaunchOptions.from_settings(settings).to_launch_options()

        assert "args" not in options
        assert "ignore_default_args" not in options

    def test_channel_is_passed_through(self):
        options = LaunchOptions(channel="chrome").to_launch_options()
        assert options["channel"] == "chrome"

    def test_context_options(self, fast_settings):
        options = LaunchOptions.from_settings(fast_settings).to_context_options()

        assert options["viewport"] == {"width": 1920, "height": 1080}
        assert options["base_url"] == "http://caption.test"


class TestOpen:
    """SessionManager.open acquires one isolated session."""

    @pytest.mark.asyncio
    async def test_opens_browser_context_and_page(self, fast_settings, driver):
        manager = SessionManager(fast_settings, driver_factory=driver.factory)

        handle = await manager.open()

        assert handle.page is driver.page
        assert handle.closed is False
        driver.playwright.chromium.launch.assert_awaited_once()
        driver.browser.new_context.assert_awaited_once()
        driver.context.set_default_timeout.assert_called_once_with(200)
        driver.context.set_default_navigation_timeout.assert_called_once_with(200)

    @pytest.mark.asyncio
    async def test_uses_configured_engine(self, fast_settings, driver):
        settings = fast_settings.model_copy(update={"browser": "webkit"})
        manager = SessionManager(settings, driver_factory=driver.factory)

        handle = await manager.open()

        assert handle.browser_name == "webkit"
        driver.playwright.webkit.launch.assert_awaited_once()
        driver.playwright.chromium.launch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_launch_failure_is_a_setup_error(self, fast_settings):
        driver = FakeDriver(
            launch_error=PlaywrightError("Executable doesn't exist at /ms-playwright")
        )
        manager = SessionManager(fast_settings, driver_factory=driver.factory)

        with pytest.raises(SessionSetupError) as exc_info:
            await manager.open()

        assert exc_info.value.browser == "chromium"
        assert "Executable doesn't exist" in exc_info.value.reason
        # The driver that did start is stopped again
        driver.playwright.stop.assert_awaited_once()
        driver.browser.close.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_setup_error_is_not_an_assertion_error(self, fast_settings):
        driver = FakeDriver(launch_error=PlaywrightError("boom"))
        manager = SessionManager(fast_settings, driver_factory=driver.factory)

        with pytest.raises(SessionSetupError) as exc_info:
            await manager.open()
        assert not isinstance(exc_info.value, AssertionError)


class TestClose:
    """Every opened session is released exactly once."""

    @pytest.mark.asyncio
    async def test_session_block_releases_on_success(self, fast_settings, driver):
        manager = SessionManager(fast_settings, driver_factory=driver.factory)

        async with manager.session() as handle:
            assert handle.closed is False

        assert handle.closed is True
        driver.context.close.assert_awaited_once()
        driver.browser.close.assert_awaited_once()
        driver.playwright.stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_session_block_releases_on_assertion_failure(
        self, fast_settings, driver
    ):
        manager = SessionManager(fast_settings, driver_factory=driver.factory)

        with pytest.raises(AssertionError):
            async with manager.session():
                assert False, "case failed"

        driver.context.close.assert_awaited_once()
        driver.browser.close.assert_awaited_once()
        driver.playwright.stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_session_block_releases_on_unexpected_error(
        self, fast_settings, driver
    ):
        manager = SessionManager(fast_settings, driver_factory=driver.factory)

        with pytest.raises(RuntimeError):
            async with manager.session():
                raise RuntimeError("unexpected")

        driver.browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self, fast_settings, driver):
        manager = SessionManager(fast_settings, driver_factory=driver.factory)
        handle = await manager.open()

        await manager.close(handle)
        await manager.close(handle)

        driver.browser.close.assert_awaited_once()
        driver.playwright.stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_teardown_errors_do_not_stop_release(
        self, fast_settings, driver, caplog
    ):
        driver.context.close.side_effect = PlaywrightError("context already closed")
        manager = SessionManager(fast_settings, driver_factory=driver.factory)

        async with manager.session():
            pass

        driver.browser.close.assert_awaited_once()
        driver.playwright.stop.assert_awaited_once()
        assert "Failed to close context" in caplog.text

    @pytest.mark.asyncio
    async def test_unexpected_teardown_error_still_releases_the_rest(
        self, fast_settings, driver
    ):
        driver.context.close.side_effect = RuntimeError("renderer crashed")
        manager = SessionManager(fast_settings, driver_factory=driver.factory)
        handle = await manager.open()

        with pytest.raises(RuntimeError):
            await manager.close(handle)

        driver.browser.close.assert_awaited_once()
        driver.playwright.stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_cancelled_teardown_still_stops_driver(self, fast_settings, driver):
        driver.browser.close.side_effect = asyncio.CancelledError()
        manager = SessionManager(fast_settings, driver_factory=driver.factory)
        handle = await manager.open()

        with pytest.raises(asyncio.CancelledError):
            await manager.close(handle)

        driver.context.close.assert_awaited_once()
        driver.playwright.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_screenshot_creates_parent_directory(fast_settings, driver, tmp_path):
    manager = SessionManager(fast_settings, driver_factory=driver.factory)
    handle = await manager.open()
    target = tmp_path / "shots" / "case.png"

    assert await handle.screenshot(target) == target
    assert target.parent.is_dir()
    driver.page.screenshot.assert_awaited_once_with(path=str(target), full_page=True)
