"""Centralized logging configuration for the landing page check."""

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "landing_check"


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Configure and return the application logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)

    if logger.handlers:
        return logger

    # Set log level
    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Prevent duplicate logs
    logger.propagate = False

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger instance."""
    return logging.getLogger(LOGGER_NAME)


def log_navigation(
    url: str,
    status: Optional[int],
    wait_until: str,
    extra_data: Optional[dict] = None,
) -> None:
    """Log a completed navigation.

    Args:
        url: URL the page was sent to
        status: HTTP status of the main response, if there was one
        wait_until: Readiness state the navigation waited for
        extra_data: Optional additional data to log
    """
    logger = get_logger()

    log_data = {
        "url": url,
        "status": status,
        "wait_until": wait_until,
    }

    if extra_data:
        log_data.update(extra_data)

    logger.info(f"Navigation: {log_data}")


def log_check_result(url: str, passed: bool, expected_text: str) -> None:
    """Log the outcome of the login options assertion."""
    logger = get_logger()

    log_data = {
        "url": url,
        "passed": passed,
        "expected_text": expected_text,
    }

    level = logging.INFO if passed else logging.WARNING
    logger.log(level, f"Landing page check: {log_data}")


def log_check_error(
    error: Exception,
    url: Optional[str] = None,
    context: Optional[str] = None,
) -> None:
    """Log a failure that stopped the check before the assertion ran.

    Args:
        error: Exception that occurred
        url: Optional URL being checked
        context: Optional context description
    """
    logger = get_logger()

    log_data = {
        "error_type": type(error).__name__,
        "error_message": str(error),
    }

    if url:
        log_data["url"] = url

    if context:
        log_data["context"] = context

    logger.error(f"Landing check error: {log_data}")


# Initialize logging on import
_log_level = os.getenv("LOG_LEVEL", "INFO")
setup_logging(_log_level)
