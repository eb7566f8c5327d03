"""Local configuration for markdown_extract."""

from __future__ import annotations

import os

DEFAULT_PATTERN_SIZE_LIMIT = 1024 * 100
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def resolve_log_level(value: str | None) -> str:
    """Normalize a log level name, falling back to the default.

    Args:
        value: Level name from the environment, in any case, or None.

    Returns:
        An upper-case level name accepted by ``logging``.
    """
    level = (value or "").strip().upper()
    return level if level in _LOG_LEVELS else DEFAULT_LOG_LEVEL


# Upper bound on pattern length, in characters.
MARKDOWN_EXTRACT_PATTERN_SIZE_LIMIT = int(
    os.getenv("MARKDOWN_EXTRACT_PATTERN_SIZE_LIMIT", str(DEFAULT_PATTERN_SIZE_LIMIT))
)
MARKDOWN_EXTRACT_ENCODING = os.getenv("MARKDOWN_EXTRACT_ENCODING", DEFAULT_ENCODING)
MARKDOWN_EXTRACT_LOG_LEVEL = resolve_log_level(os.getenv("MARKDOWN_EXTRACT_LOG_LEVEL"))
