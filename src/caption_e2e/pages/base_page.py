"""
Base Page Object class with common functionality for all pages.
"""

from playwright.async_api import Locator, Page

from ..config import Settings
from ..waits import is_present, to_ms, wait_for_visible


class BasePage:
    """Base class for all Page Objects with common functionality."""

    def __init__(self, page: Page, settings: Settings):
        self.page = page
        self.settings = settings
        self.base_url = settings.base_url

    # Common selectors
    @property
    def loading_indicator(self) -> Locator:
        """Loading spinner or indicator."""
        return self.page.locator(
            ".loading, .spinner, .animate-spin, [data-testid='loading'], "
            "[aria-busy='true']"
        )

    @property
    def error_message(self) -> Locator:
        """Error message elements."""
        return self.page.locator(
            ".error, .error-message, [data-testid='error'], [role='alert'].error"
        )

    # Navigation
    async def navigate_to(self, path: str = "") -> None:
        """Navigate to a path relative to the base URL."""
        url = f"{self.base_url}/{path.lstrip('/')}" if path else self.base_url
        await self.page.goto(url, wait_until="load")

    async def wait_for_page_load(self) -> None:
        """Wait for the DOM of the current document to be ready."""
        await self.page.wait_for_load_state(
            "domcontentloaded", timeout=to_ms(self.settings.page_load_timeout)
        )

    @property
    def url(self) -> str:
        return self.page.url

    async def title(self) -> str:
        return await self.page.title()

    # Interaction
    async def visible(self, locator: Locator, description: str) -> Locator:
        """Wait for ``locator`` with the suite's default timeout."""
        return await wait_for_visible(
            locator, self.settings.default_timeout, description
        )

    async def first_available(
        self, preferred: Locator, fallback: Locator
    ) -> Locator:
        """``preferred`` if it matches anything now, otherwise ``fallback``."""
        if await preferred.count() > 0:
            return preferred
        return fallback

    async def present(self, locator: Locator) -> bool:
        """Advisory presence probe bounded by the implicit wait."""
        return await is_present(locator, self.settings.implicit_wait)

    async def fill_input(
        self, locator: Locator, value: str, clear_first: bool = True
    ) -> None:
        """Fill an input field."""
        if clear_first:
            await locator.clear()
        await locator.fill(value)

    async def error_count(self) -> int:
        return await self.error_message.count()

    async def is_busy(self) -> bool:
        """True while a loading indicator is on screen."""
        if await self.loading_indicator.count() == 0:
            return False
        return await self.loading_indicator.first.is_visible()
