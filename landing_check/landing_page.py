"""The landing page check.

Navigates to the configured base URL, reads the text of the whole document
and asserts that the guest login option is offered.
"""

from dataclasses import dataclass
from typing import Optional

from playwright.async_api import Error as PlaywrightError, Page

from landing_check.browser import open_page
from landing_check.config import Settings
from landing_check.exceptions import LoginOptionsMissingError, NavigationError
from landing_check.logging_config import log_check_error, log_check_result, log_navigation

GUEST_LOGIN_TEXT = "continue as guest"


@dataclass(frozen=True)
class LandingPageResult:
    url: str
    status: Optional[int]
    text: str


def has_login_options(text: str) -> bool:
    """Return True when the page text offers the guest login option.

    Matching is exact and case-sensitive.
    """
    return GUEST_LOGIN_TEXT in text


def assert_has_login_options(text: str, url: Optional[str] = None) -> None:
    if has_login_options(text):
        return

    where = f" at {url}" if url else ""
    raise LoginOptionsMissingError(
        f"Landing page{where} does not contain {GUEST_LOGIN_TEXT!r}", url=url
    )


def _resolve_base_url(settings: Settings) -> str:
    try:
        return settings.require_base_url()
    except NavigationError as e:
        log_check_error(e, context="resolve base url")
        raise


async def fetch_landing_page(page: Page, settings: Settings) -> LandingPageResult:
    """Navigate the page to the base URL and read the document text.

    Raises:
        NavigationError: BASE_URL is unset, or the navigation failed or timed out
    """
    url = _resolve_base_url(settings)

    try:
        response = await page.goto(url, wait_until=settings.wait_until, timeout=settings.timeout_ms)
        text = await page.text_content("html")
    except PlaywrightError as e:
        log_check_error(e, url=url, context="navigation")
        raise NavigationError(f"Failed to load {url}: {e}", url=url) from e

    status = response.status if response is not None else None
    log_navigation(url, status, settings.wait_until, extra_data={"browser": settings.browser_name})

    return LandingPageResult(url=url, status=status, text=text or "")


async def check_landing_page(settings: Settings) -> LandingPageResult:
    """Run the whole check in its own browser and return what was read.

    Raises:
        NavigationError: The landing page could not be loaded
        LoginOptionsMissingError: The page loaded without the guest login option
    """
    # Fail before launching anything when there is nowhere to go
    _resolve_base_url(settings)

    async with open_page(settings) as page:
        result = await fetch_landing_page(page, settings)

    passed = has_login_options(result.text)
    log_check_result(result.url, passed, GUEST_LOGIN_TEXT)
    assert_has_login_options(result.text, url=result.url)
    return result
