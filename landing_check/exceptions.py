"""Exceptions raised by the landing page check."""

from typing import Optional


class LandingCheckError(Exception):
    """Base class for landing page check failures."""


class ConfigurationError(LandingCheckError):
    """A configuration value is malformed."""


class BrowserLaunchError(LandingCheckError):
    """Playwright could not start the requested browser."""


class NavigationError(LandingCheckError):
    """The page could not be navigated to the base URL."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class MissingBaseURLError(NavigationError):
    """BASE_URL is not set, so there is nothing to navigate to."""

    def __init__(self):
        super().__init__(
            "BASE_URL is not set. Point it at the application under test, "
            "e.g. BASE_URL=http://localhost:3000"
        )


class InvalidBaseURLError(NavigationError):
    """BASE_URL is set but is not an http(s) address a browser can open."""

    def __init__(self, url: str):
        super().__init__(
            f"Invalid BASE_URL: {url}. Must start with http:// or https://", url=url
        )


class LoginOptionsMissingError(AssertionError):
    """The landing page rendered without the guest login option."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url
