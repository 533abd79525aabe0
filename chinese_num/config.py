"""
Runtime settings, read from environment variables.

Entry points (the CLI and api.py) call `load_dotenv()` before reading these,
so settings can also live in a `.env` file during development.

Environment Variables:
    LOG_LEVEL:              Root logging level for the CLI and API (default WARNING)
    CHINESE_NUM_MAX_DIGITS: Longest number the HTTP API accepts (default 4096)

Bad values fall back to the defaults with a warning.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_DIGITS = 4096


def _resolve_level(name: str) -> str:
    level = name.strip().upper()
    # getLevelName maps known names to ints and anything else to "Level x"
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Unknown log level %r, using %s", name, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


def get_log_level() -> str:
    return _resolve_level(os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))


def get_max_digits() -> int:
    raw = os.getenv("CHINESE_NUM_MAX_DIGITS")
    if raw is None:
        return DEFAULT_MAX_DIGITS
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        logger.warning(
            "Invalid CHINESE_NUM_MAX_DIGITS %r, using %d", raw, DEFAULT_MAX_DIGITS
        )
        return DEFAULT_MAX_DIGITS
    return value


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for an entry point. Library code only gets loggers."""
    logging.basicConfig(
        level=_resolve_level(level) if level else get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
