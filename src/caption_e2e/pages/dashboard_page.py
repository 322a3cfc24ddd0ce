"""
Dashboard Page Object: prompt input, caption output and account controls.
"""

import re
from typing import Sequence

from playwright.async_api import Locator

from .base_page import BasePage

DASHBOARD_PATH = "/dashboard"


class DashboardPage(BasePage):
    """Page Object for the authenticated dashboard."""

    # Selectors
    @property
    def dashboard_marker(self) -> Locator:
        """Text that only the caption dashboard shows."""
        return self.page.get_by_text(re.compile(r"Generate|Caption"))

    @property
    def prompt_input(self) -> Locator:
        return self.page.locator(
            "textarea[placeholder], textarea[class*='textarea']"
        )

    @property
    def any_textarea(self) -> Locator:
        return self.page.locator("textarea")

    @property
    def generate_button(self) -> Locator:
        return self.page.locator(
            "button:has-text('Generate'), button:has-text('Send')"
        )

    @property
    def caption_results(self) -> Locator:
        """Rendered caption responses."""
        return self.page.locator(
            "[data-testid='caption-output'], [data-testid='generated-caption'], "
            ".generated-caption, .caption-output, .message-content, .response"
        )

    @property
    def copy_button(self) -> Locator:
        return self.page.locator(
            "button:has-text('Copy'), button:has([class*='copy'])"
        )

    @property
    def copy_confirmation(self) -> Locator:
        """Toast text or check icon shown after copying."""
        return self.page.get_by_text(re.compile(r"copied", re.IGNORECASE)).or_(
            self.page.locator("[class*='check']")
        )

    @property
    def history_section(self) -> Locator:
        return self.page.get_by_text(
            re.compile(r"History|Recent|Previous")
        ).or_(self.page.locator("div[class*='history']"))

    @property
    def menu_button(self) -> Locator:
        """Sidebar toggle."""
        return self.page.locator(
            "button:has([class*='menu']), button:has-text('Menu')"
        )

    @property
    def logout_button(self) -> Locator:
        return self.page.get_by_text(
            re.compile(r"Logout|Sign Out|Log Out")
        )

    # Actions
    async def goto(self) -> None:
        await self.navigate_to(DASHBOARD_PATH)
        await self.wait_for_page_load()

    async def wait_until_ready(self) -> Locator:
        """Wait for the prompt box that marks a usable dashboard."""
        prompt_input = await self.first_available(
            self.prompt_input, self.any_textarea
        )
        return await self.visible(prompt_input, "caption prompt input")

    async def enter_prompt(self, prompt: str) -> None:
        prompt_input = await self.wait_until_ready()
        await self.fill_input(prompt_input, prompt)

    async def click_generate(self) -> None:
        button = await self.visible(self.generate_button, "Generate button")
        await button.click()

    async def click_logout(self) -> None:
        button = await self.visible(self.logout_button, "Logout control")
        await button.click()

    # Queries
    def on_dashboard(self) -> bool:
        return DASHBOARD_PATH in self.page.url

    async def result_count(self) -> int:
        return await self.caption_results.count()

    async def generate_enabled(self) -> bool:
        button = await self.visible(self.generate_button, "Generate button")
        return await button.is_enabled()

    async def generation_settled(
        self, baseline: int, baseline_errors: int = 0
    ) -> bool:
        """
        True once a generation request has finished.

        Finished means nothing is loading and either a new caption was
        rendered past ``baseline`` or a new error message appeared past
        ``baseline_errors``. Errors already on the page do not count.
        """
        if await self.is_busy():
            return False
        if await self.result_count() > baseline:
            return True
        return await self.error_count() > baseline_errors

    async def mentions_any(self, phrases: Sequence[str]) -> bool:
        """True if any of ``phrases`` appears on the page right now."""
        for phrase in phrases:
            if await self.page.get_by_text(phrase).count() > 0:
                return True
        return False
