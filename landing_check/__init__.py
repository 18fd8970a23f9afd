"""End-to-end check that the landing page offers guest login."""

from .config import Settings, get_settings
from .exceptions import (
    BrowserLaunchError,
    ConfigurationError,
    InvalidBaseURLError,
    LandingCheckError,
    LoginOptionsMissingError,
    MissingBaseURLError,
    NavigationError,
)
from .landing_page import GUEST_LOGIN_TEXT, LandingPageResult, check_landing_page

__all__ = [
    "Settings",
    "get_settings",
    "BrowserLaunchError",
    "ConfigurationError",
    "InvalidBaseURLError",
    "LandingCheckError",
    "LoginOptionsMissingError",
    "MissingBaseURLError",
    "NavigationError",
    "GUEST_LOGIN_TEXT",
    "LandingPageResult",
    "check_landing_page",
]
