"""
Browser session lifecycle.

One session (driver, browser, context and page) is opened per test case
and released when the case ends, however it ends.
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Dict,
    List,
    Optional,
    Tuple,
)

from playwright.async_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
    async_playwright,
)

from .config import Settings
from .exceptions import SessionSetupError
from .waits import to_ms

logger = logging.getLogger(__name__)

# Sandbox and shared-memory flags needed inside CI containers.
SANDBOX_ARGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
]

# Hide navigator.webdriver and the automation info bar.
AUTOMATION_ARGS = ["--disable-blink-features=AutomationControlled"]
IGNORED_DEFAULT_ARGS = ["--enable-automation", "--enable-logging"]


@dataclass
class LaunchOptions:
    """Launch and context configuration for a browser instance."""

    # Browser name: chromium, firefox, webkit
    name: str = "chromium"

    # Browser channel: chrome, chrome-beta, msedge, ...
    channel: Optional[str] = None

    headless: bool = True
    slow_mo: int = 0

    viewport_width: int = 1920
    viewport_height: int = 1080

    locale: str = "en-US"
    base_url: Optional[str] = None

    extra_args: List[str] = field(default_factory=list)

    @classmethod
    def from_settings(cls, settings: Settings) -> "LaunchOptions":
        return cls(
            name=settings.browser,
            channel=settings.channel,
            headless=settings.headless,
            slow_mo=settings.slow_mo,
            viewport_width=settings.window_width,
            viewport_height=settings.window_height,
            base_url=settings.base_url,
        )

    @property
    def is_chromium(self) -> bool:
        return self.name == "chromium"

    def to_launch_options(self) -> Dict[str, Any]:
        """Convert to Playwright browser launch options."""
        options: Dict[str, Any] = {
            "headless": self.headless,
            "slow_mo": self.slow_mo,
        }
        if self.channel:
            options["channel"] = self.channel

        # Chromium-only switches
        if self.is_chromium:
            options["args"] = [
                *SANDBOX_ARGS,
                *AUTOMATION_ARGS,
                f"--window-size={self.viewport_width},{self.viewport_height}",
                *self.extra_args,
            ]
            options["ignore_default_args"] = list(IGNORED_DEFAULT_ARGS)
        elif self.extra_args:
            options["args"] = list(self.extra_args)
        return options

    def to_context_options(self) -> Dict[str, Any]:
        """Convert to Playwright browser context options."""
        options: Dict[str, Any] = {
            "viewport": {
                "width": self.viewport_width,
                "height": self.viewport_height,
            },
            "locale": self.locale,
        }
        if self.base_url:
            options["base_url"] = self.base_url
        return options


@dataclass
class SessionHandle:
    """A live browser session owned by exactly one test case."""

    playwright: Playwright
    browser: Browser
    context: BrowserContext
    page: Page
    browser_name: str = "chromium"
    closed: bool = False

    async def screenshot(self, path: Path) -> Path:
        """Save a full-page screenshot of the current page."""
        path.parent.mkdir(parents=True, exist_ok=True)
        await self.page.screenshot(path=str(path), full_page=True)
        return path


class SessionManager:
    """Opens and closes isolated browser sessions."""

    def __init__(
        self,
        settings: Settings,
        driver_factory: Callable[[], Any] = async_playwright,
    ) -> None:
        self.settings = settings
        self._driver_factory = driver_factory

    async def open(self) -> SessionHandle:
        """
        Launch a browser and open a fresh context and page.

        Raises:
            SessionSetupError: If any step of the launch fails. Whatever
                was already started is released first.
        """
        options = LaunchOptions.from_settings(self.settings)
        logger.info(
            "Opening %s session (headless=%s)", options.name, options.headless
        )

        driver: Optional[Playwright] = None
        browser: Optional[Browser] = None
        context: Optional[BrowserContext] = None
        try:
            driver = await self._driver_factory().start()
            browser_type = getattr(driver, options.name)
            browser = await browser_type.launch(**options.to_launch_options())
            context = await browser.new_context(**options.to_context_options())
            context.set_default_timeout(to_ms(self.settings.default_timeout))
            context.set_default_navigation_timeout(
                to_ms(self.settings.page_load_timeout)
            )
            page = await context.new_page()
        except (PlaywrightError, OSError) as exc:
            logger.error("Session setup failed: %s", exc)
            await self._release(driver, browser, context)
            raise SessionSetupError(
                options.name,
                str(exc),
                details={"headless": options.headless,
                         "channel": options.channel},
            ) from exc

        return SessionHandle(
            playwright=driver,
            browser=browser,
            context=context,
            page=page,
            browser_name=options.name,
        )

    async def close(self, handle: SessionHandle) -> None:
        """Release a session. Closing an already closed handle is a no-op."""
        if handle.closed:
            return
        handle.closed = True
        await self._release(handle.playwright, handle.browser, handle.context)
        logger.info("Closed %s session", handle.browser_name)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[SessionHandle]:
        """Open a session for the duration of a ``async with`` block."""
        handle = await self.open()
        try:
            yield handle
        finally:
            await self.close(handle)

    async def _release(
        self,
        driver: Optional[Playwright],
        browser: Optional[Browser],
        context: Optional[BrowserContext],
    ) -> None:
        await self._close_in_order([
            ("context", context.close if context else None),
            ("browser", browser.close if browser else None),
            ("driver", driver.stop if driver else None),
        ])

    async def _close_in_order(
        self, closers: List[Tuple[str, Optional[Callable[[], Awaitable[None]]]]]
    ) -> None:
        """
        Run each closer in turn. Playwright errors are logged; anything
        else, cancellation included, propagates once the rest have run.
        """
        if not closers:
            return
        (name, closer), rest = closers[0], closers[1:]
        try:
            if closer is not None:
                await closer()
        except PlaywrightError as exc:
            logger.warning("Failed to close %s: %s", name, exc)
        finally:
            await self._close_in_order(rest)
