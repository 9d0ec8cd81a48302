"""
Storefront logging.

    from storefront.logging import get_logger
    logger = get_logger(__name__)

The root handler is installed once on import. LOG_LEVEL picks the level and
VERCEL=1 switches to the compact format Vercel's log viewer already
timestamps.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# Transport chatter from the Upstash REST client
QUIET_LOGGERS = ("httpx", "httpcore", "upstash_redis")

# Control characters that could forge extra log lines (CWE-117)
_LOG_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a stdout handler to the root logger unless one is already there.

    Args:
        level: Level name; defaults to LOG_LEVEL or INFO

    Returns:
        The root logger
    """
    root = logging.getLogger()
    if root.handlers:
        return root

    level_name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    compact = os.environ.get("VERCEL") == "1"
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if compact else LOG_FORMAT))

    root.setLevel(numeric_level)
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return root


configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Make shopper-supplied text safe to log: escaped, truncated, "N/A" if empty.
    """
    if not value:
        return "N/A"
    safe_value = str(value).translate(_LOG_ESCAPES)
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


def sanitize_id_for_logging(id_value: str | None) -> str:
    """Product/line ids are logged by their first 8 characters."""
    if not id_value:
        return "N/A"
    return str(id_value).translate(_LOG_ESCAPES)[:8]


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "configure_logging",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
