"""Scoped Playwright browser and page acquisition.

Every browser, context and page handed out here is closed when the
``async with`` block exits, whether the check passed or raised.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import Browser, Error as PlaywrightError, Page, async_playwright

from landing_check.config import SUPPORTED_BROWSERS, Settings
from landing_check.exceptions import BrowserLaunchError, ConfigurationError
from landing_check.logging_config import get_logger

logger = get_logger()


@asynccontextmanager
async def browser_session(settings: Settings) -> AsyncIterator[Browser]:
    """Start Playwright and launch the configured browser."""
    if settings.browser_name not in SUPPORTED_BROWSERS:
        raise ConfigurationError(
            f"Unsupported browser: {settings.browser_name}. "
            f"Must be one of {', '.join(SUPPORTED_BROWSERS)}"
        )

    async with async_playwright() as p:
        browser_type = getattr(p, settings.browser_name)
        try:
            browser = await browser_type.launch(headless=settings.headless)
        except PlaywrightError as e:
            raise BrowserLaunchError(f"Could not launch {settings.browser_name}: {e}") from e

        logger.debug(f"Launched {settings.browser_name} (headless={settings.headless})")
        try:
            yield browser
        finally:
            await browser.close()
            logger.debug(f"Closed {settings.browser_name}")


@asynccontextmanager
async def open_page(settings: Settings) -> AsyncIterator[Page]:
    """Open a fresh page in its own browser context."""
    async with browser_session(settings) as browser:
        context = await browser.new_context()
        try:
            page = await context.new_page()
            page.set_default_navigation_timeout(settings.timeout_ms)
            yield page
        finally:
            await context.close()
