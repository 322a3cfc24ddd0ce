"""
User journeys composed from page objects and bounded waits.

Each helper is a straight-line script over a ``CaseContext``. Helpers
that end in a page transition return whether the transition happened
instead of asserting, so the calling case decides what is load-bearing.
"""

import logging
from typing import Optional

from .context import CaseContext
from .pages import DASHBOARD_PATH, LandingPage
from .waits import wait_for_url_contains, wait_for_url_excludes, wait_until

logger = logging.getLogger(__name__)

CLEAR_STORAGE_SCRIPT = """
() => {
    try { window.localStorage.clear(); } catch (e) {}
    try { window.sessionStorage.clear(); } catch (e) {}
}
"""


async def open_landing(ctx: CaseContext) -> LandingPage:
    landing = ctx.landing
    await landing.goto()
    return landing


async def fill_registration_form(
    ctx: CaseContext, name: str, email: str, password: str
) -> None:
    await ctx.landing.fill_registration(name, email, password)


async def sign_up(
    ctx: CaseContext, name: str, email: str, password: str
) -> bool:
    """
    Register through the Sign Up tab of the current landing page.

    Returns:
        True if the app redirected to the dashboard within the redirect
        timeout.
    """
    landing = ctx.landing
    await landing.open_sign_up()
    await fill_registration_form(ctx, name, email, password)
    await landing.submit_registration()

    redirected = await wait_for_url_contains(
        ctx.page, DASHBOARD_PATH, ctx.settings.redirect_timeout
    )
    logger.info("Sign up as %s redirected=%s", email, redirected)
    return redirected


async def create_account_and_login(ctx: CaseContext) -> bool:
    """Register the case's own account and wait for a usable dashboard."""
    creds = ctx.credentials
    await open_landing(ctx)
    if not await sign_up(ctx, creds.name, creds.email, creds.password):
        logger.warning("No dashboard redirect after signing up %s", creds.email)
        return False
    await ctx.dashboard.wait_until_ready()
    return True


async def sign_in(ctx: CaseContext, email: str, password: str) -> None:
    landing = await open_landing(ctx)
    await landing.open_sign_in()
    await landing.fill_credentials(email, password)
    await landing.submit_sign_in()


async def reaches_dashboard(
    ctx: CaseContext, timeout: Optional[float] = None
) -> bool:
    """
    Watch for a dashboard redirect that a negative case expects not to
    happen. Bounded by ``negative_check_timeout`` unless overridden.
    """
    if timeout is None:
        timeout = ctx.settings.negative_check_timeout
    return await wait_for_url_contains(ctx.page, DASHBOARD_PATH, timeout)


async def logout(ctx: CaseContext) -> bool:
    """Click the logout control and wait to leave the dashboard."""
    await ctx.dashboard.click_logout()
    return await wait_for_url_excludes(
        ctx.page, DASHBOARD_PATH, ctx.settings.default_timeout
    )


async def try_logout(ctx: CaseContext) -> bool:
    """Advisory logout: skipped if no logout control is shown."""
    dashboard = ctx.dashboard
    if not await dashboard.present(dashboard.logout_button):
        return ctx.advisories.record("logout control", False)
    left = await logout(ctx)
    return ctx.advisories.record("logout", left, ctx.page.url)


async def reset_client_state(ctx: CaseContext) -> None:
    """Drop cookies and web storage so the next visit is anonymous."""
    await ctx.session.context.clear_cookies()
    await ctx.page.evaluate(CLEAR_STORAGE_SCRIPT)


async def generate_caption(ctx: CaseContext, prompt: str) -> bool:
    """
    Submit ``prompt`` and wait for the generation round trip.

    Returns:
        True if a new caption or a new error was rendered and loading
        stopped within the generation timeout.
    """
    dashboard = ctx.dashboard
    await dashboard.enter_prompt(prompt)
    baseline = await dashboard.result_count()
    baseline_errors = await dashboard.error_count()
    await dashboard.click_generate()

    settled = await wait_until(
        lambda: dashboard.generation_settled(baseline, baseline_errors),
        ctx.settings.generation_timeout,
        ctx.settings.poll_interval,
    )
    if not settled:
        logger.warning(
            "Generation for %r did not settle within %gs",
            prompt,
            ctx.settings.generation_timeout,
        )
    return settled


async def copy_latest_caption(ctx: CaseContext) -> bool:
    dashboard = ctx.dashboard
    if not await dashboard.present(dashboard.copy_button):
        return ctx.advisories.record("copy button", False)
    await dashboard.copy_button.first.click()
    confirmed = await dashboard.present(dashboard.copy_confirmation)
    return ctx.advisories.record("copy confirmation", confirmed)


async def toggle_sidebar(ctx: CaseContext) -> bool:
    """Open and close the sidebar menu if the dashboard has one."""
    dashboard = ctx.dashboard
    if not await dashboard.present(dashboard.menu_button):
        return ctx.advisories.record("sidebar menu button", False)
    menu = dashboard.menu_button.first
    await menu.click()
    await menu.click()
    return ctx.advisories.record("sidebar toggle", True)
