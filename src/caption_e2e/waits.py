"""
Bounded waits over an asynchronously rendering page.

Every helper here either returns within its timeout or raises; none of
them can block forever. Element and URL waits are Playwright's own;
``wait_until`` polls the compound conditions Playwright cannot express.
Flows and cases call these helpers instead of sleeping.
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Union

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .exceptions import ElementNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 20.0
IMPLICIT_WAIT = 10.0
DEFAULT_POLL_INTERVAL = 0.25

Condition = Callable[[], Union[Any, Awaitable[Any]]]


def to_ms(seconds: float) -> int:
    """Convert seconds to a Playwright timeout; 0 would mean "no limit"."""
    return max(1, int(seconds * 1000))


async def wait_until(
    condition: Condition,
    timeout: float,
    interval: float = DEFAULT_POLL_INTERVAL,
) -> bool:
    """
    Poll ``condition`` until it is truthy or ``timeout`` seconds pass.

    The condition may be a plain callable or a coroutine function. It is
    always evaluated at least once, and once more at the deadline.

    Args:
        condition: Zero-argument predicate.
        timeout: Upper bound in seconds.
        interval: Pause between evaluations in seconds.

    Returns:
        True as soon as the condition holds, False on timeout.
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + max(timeout, 0.0)

    while True:
        result = condition()
        if inspect.isawaitable(result):
            result = await result
        if result:
            return True

        remaining = deadline - loop.time()
        if remaining <= 0:
            return False
        await asyncio.sleep(min(interval, remaining))


async def wait_for_visible(
    locator: Locator,
    timeout: float = DEFAULT_TIMEOUT,
    description: Optional[str] = None,
) -> Locator:
    """
    Wait for the first element matching ``locator`` to become visible.

    Returns:
        Locator narrowed to the first match.

    Raises:
        ElementNotFoundError: If nothing became visible within the timeout.
    """
    target = locator.first
    try:
        await target.wait_for(state="visible", timeout=to_ms(timeout))
    except PlaywrightTimeoutError as exc:
        raise ElementNotFoundError(
            description or str(locator),
            timeout,
            details={"state": "visible"},
        ) from exc
    return target


async def is_present(locator: Locator, timeout: float = IMPLICIT_WAIT) -> bool:
    """
    Probe for an element without failing the case.

    Returns:
        True if a matching element is attached within ``timeout`` seconds.
    """
    try:
        await locator.first.wait_for(state="attached", timeout=to_ms(timeout))
    except PlaywrightError as exc:
        logger.debug("Presence probe negative for %s: %s", locator, exc)
        return False
    return True


async def _wait_for_url(
    page: Page, predicate: Callable[[str], bool], timeout: float, what: str
) -> bool:
    try:
        await page.wait_for_url(
            predicate, timeout=to_ms(timeout), wait_until="commit"
        )
    except PlaywrightTimeoutError:
        return False
    except PlaywrightError as exc:
        logger.warning("URL wait %s aborted: %s", what, exc)
        return False
    return True


async def wait_for_url_contains(page: Page, fragment: str, timeout: float) -> bool:
    """Return True once the page URL contains ``fragment``; never raises."""
    return await _wait_for_url(
        page, lambda url: fragment in url, timeout, f"for {fragment!r}"
    )


async def wait_for_url_excludes(page: Page, fragment: str, timeout: float) -> bool:
    """Return True once the page URL no longer contains ``fragment``."""
    return await _wait_for_url(
        page, lambda url: fragment not in url, timeout, f"away from {fragment!r}"
    )


async def wait_for_url_change(page: Page, from_url: str, timeout: float) -> bool:
    """Return True if the page navigates away from ``from_url``."""
    return await _wait_for_url(
        page, lambda url: url != from_url, timeout, f"off {from_url!r}"
    )
