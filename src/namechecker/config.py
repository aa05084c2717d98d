"""
Runtime settings for namechecker.

All settings come from environment variables:

    NAMECHECKER_DEBUG     Verbose logging, including HTTP requests
    NAMECHECKER_TIMEOUT   Request timeout in seconds (default: httpx default)
    NO_COLOR              Disable ANSI colors in the report
"""

import logging
import os
import sys

import httpx

logger = logging.getLogger(__name__)

DEBUG_ENV = "NAMECHECKER_DEBUG"
TIMEOUT_ENV = "NAMECHECKER_TIMEOUT"
NO_COLOR_ENV = "NO_COLOR"

# Same as the httpx default
DEFAULT_TIMEOUT = 5.0


def is_debug() -> bool:
    """Check if verbose logging was requested."""
    return bool(os.environ.get(DEBUG_ENV))


def use_color() -> bool:
    """Colors are on unless NO_COLOR is set to anything non-empty."""
    return not os.environ.get(NO_COLOR_ENV)


def get_timeout() -> httpx.Timeout:
    """
    Get the request timeout.

    Falls back to the httpx default when the variable is unset or invalid.
    """
    raw = os.environ.get(TIMEOUT_ENV, "").strip()
    if not raw:
        return httpx.Timeout(DEFAULT_TIMEOUT)

    try:
        seconds = float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {TIMEOUT_ENV}={raw!r}")
        return httpx.Timeout(DEFAULT_TIMEOUT)

    if seconds <= 0:
        logger.warning(f"Ignoring non-positive {TIMEOUT_ENV}={raw!r}")
        return httpx.Timeout(DEFAULT_TIMEOUT)

    return httpx.Timeout(seconds)


def setup_logging() -> None:
    """Send diagnostics to stderr as plain lines."""
    level = logging.DEBUG if is_debug() else logging.INFO
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)

    # httpx logs every request at INFO; keep that quiet unless debugging
    if not is_debug():
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
