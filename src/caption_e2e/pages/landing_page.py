"""
Landing Page Object: the public page with the Sign In / Sign Up forms.
"""

import re
from typing import Optional, Sequence

from playwright.async_api import Locator, expect

from ..waits import to_ms
from .base_page import BasePage

TITLE_KEYWORDS = ("LinkedIn", "Caption", "Generator")


class LandingPage(BasePage):
    """Page Object for the landing/authentication page."""

    # Selectors
    @property
    def auth_affordance(self) -> Locator:
        """Any Sign In or Sign Up text on the page."""
        return self.page.get_by_text(re.compile(r"Sign (In|Up)"))

    @property
    def sign_in_tab(self) -> Locator:
        return self.page.get_by_text("Sign In")

    @property
    def sign_up_tab(self) -> Locator:
        return self.page.get_by_text("Sign Up")

    @property
    def auth_form(self) -> Locator:
        return self.page.locator("form")

    @property
    def name_input(self) -> Locator:
        """Full name input of the registration form."""
        return self.page.locator(
            "input[type='text'][placeholder='Full Name'], "
            "input[type='text'][placeholder='Name']"
        )

    @property
    def any_text_input(self) -> Locator:
        return self.page.locator("input[type='text']")

    @property
    def email_input(self) -> Locator:
        return self.page.locator("input[type='email']")

    @property
    def password_input(self) -> Locator:
        return self.page.locator("input[type='password']")

    @property
    def sign_up_button(self) -> Locator:
        """Registration submit button, scoped to the form to skip the tab."""
        return self.auth_form.locator(
            "button:has-text('Sign Up'), button[type='submit']"
        )

    @property
    def sign_in_button(self) -> Locator:
        return self.auth_form.locator(
            "button:has-text('Sign In'), button[type='submit']"
        )

    @property
    def page_sign_up_button(self) -> Locator:
        """Page-wide match for apps without a <form>; the tab comes first."""
        return self.page.locator(
            "button[type='submit'], button:has-text('Sign Up')"
        ).last

    @property
    def page_sign_in_button(self) -> Locator:
        return self.page.locator(
            "button[type='submit'], button:has-text('Sign In')"
        ).last

    # Actions
    async def goto(self) -> None:
        """Navigate to the landing page."""
        await self.navigate_to()
        await self.wait_for_page_load()

    async def open_sign_up(self) -> None:
        tab = await self.visible(self.sign_up_tab, "Sign Up tab")
        await tab.click()
        await self.visible(self.email_input, "email input")

    async def open_sign_in(self) -> bool:
        """Select the Sign In tab if the page shows one."""
        if not await self.present(self.sign_in_tab):
            return False
        await self.sign_in_tab.first.click()
        return True

    async def fill_registration(
        self, name: str, email: str, password: str
    ) -> None:
        name_locator = await self.first_available(
            self.name_input, self.any_text_input)
        name_input = await self.visible(name_locator, "name input")
        email_input = await self.visible(self.email_input, "email input")
        password_input = await self.visible(
            self.password_input, "password input")

        await self.fill_input(name_input, name)
        await self.fill_input(email_input, email)
        await self.fill_input(password_input, password)

    async def submit_registration(self) -> None:
        locator = await self.first_available(
            self.sign_up_button, self.page_sign_up_button)
        button = await self.visible(locator, "Sign Up button")
        await button.click()

    async def fill_credentials(self, email: str, password: str) -> None:
        email_input = await self.visible(self.email_input, "email input")
        password_input = await self.visible(
            self.password_input, "password input")

        await self.fill_input(email_input, email)
        await self.fill_input(password_input, password)

    async def submit_sign_in(self) -> None:
        locator = await self.first_available(
            self.sign_in_button, self.page_sign_in_button)
        button = await self.visible(locator, "Sign In button")
        await button.click()

    # Assertions
    async def assert_title_matches(
        self,
        keywords: Sequence[str] = TITLE_KEYWORDS,
        timeout: Optional[float] = None,
    ) -> None:
        """Assert that the document title mentions any of ``keywords``."""
        if timeout is None:
            timeout = self.settings.default_timeout
        pattern = re.compile("|".join(re.escape(k) for k in keywords))
        await expect(self.page).to_have_title(pattern, timeout=to_ms(timeout))

    # Queries
    async def has_auth_affordance(self) -> bool:
        return await self.present(self.auth_affordance)
