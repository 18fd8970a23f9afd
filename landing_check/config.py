from dataclasses import dataclass
from functools import lru_cache
import os
from typing import Mapping, Optional

from landing_check.exceptions import ConfigurationError, InvalidBaseURLError, MissingBaseURLError

DEFAULT_TIMEOUT_MS = 30_000.0
SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")
WAIT_UNTIL_STATES = ("load", "domcontentloaded", "networkidle", "commit")

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


def parse_base_url(value: Optional[str]) -> Optional[str]:
    """Validate BASE_URL and strip any trailing slash.

    An unset or blank value returns None; the caller decides whether that is fatal.
    """
    if value is None or not value.strip():
        return None

    base_url = value.strip()
    if not base_url.startswith(("http://", "https://")):
        raise InvalidBaseURLError(base_url)

    return base_url.rstrip("/")


def parse_bool(name: str, value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default

    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ConfigurationError(f"Invalid {name}: {value}. Expected one of {_TRUTHY + _FALSY}")


def parse_timeout(value: Optional[str]) -> float:
    if value is None or not value.strip():
        return DEFAULT_TIMEOUT_MS

    try:
        timeout = float(value)
    except ValueError as e:
        raise ConfigurationError(f"Invalid LANDING_CHECK_TIMEOUT_MS: {value}") from e

    if timeout < 0:
        raise ConfigurationError(f"LANDING_CHECK_TIMEOUT_MS must not be negative, got {value}")
    return timeout


def parse_choice(name: str, value: Optional[str], choices: tuple, default: str) -> str:
    if value is None or not value.strip():
        return default

    normalized = value.strip().lower()
    if normalized not in choices:
        raise ConfigurationError(f"Invalid {name}: {value}. Must be one of {', '.join(choices)}")
    return normalized


@dataclass(frozen=True)
class Settings:
    """Everything the landing page check needs, passed explicitly.

    Build it with ``Settings.from_env()`` at the entry point; nothing below
    that reads the environment.
    """

    base_url: Optional[str] = None
    timeout_ms: float = DEFAULT_TIMEOUT_MS
    browser_name: str = "chromium"
    headless: bool = True
    wait_until: str = "load"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            base_url=parse_base_url(env.get("BASE_URL")),
            timeout_ms=parse_timeout(env.get("LANDING_CHECK_TIMEOUT_MS")),
            browser_name=parse_choice(
                "LANDING_CHECK_BROWSER", env.get("LANDING_CHECK_BROWSER"), SUPPORTED_BROWSERS, "chromium"
            ),
            headless=parse_bool("LANDING_CHECK_HEADLESS", env.get("LANDING_CHECK_HEADLESS"), True),
            wait_until=parse_choice(
                "LANDING_CHECK_WAIT_UNTIL", env.get("LANDING_CHECK_WAIT_UNTIL"), WAIT_UNTIL_STATES, "load"
            ),
        )

    def require_base_url(self) -> str:
        """Return the base URL, failing as a navigation error when it is unset."""
        if self.base_url is None:
            raise MissingBaseURLError()
        return self.base_url


@lru_cache()
def get_settings() -> Settings:
    """Get settings from the process environment."""
    return Settings.from_env()
