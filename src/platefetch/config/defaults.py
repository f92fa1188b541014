"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Default fetch settings
DEFAULT_MAX_CONCURRENCY = 5
DEFAULT_TIMEOUT = 10.0
DEFAULT_FOLLOW_REDIRECTS = True
DEFAULT_USER_AGENT = "platefetch"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "max_concurrency": DEFAULT_MAX_CONCURRENCY,
        "timeout": DEFAULT_TIMEOUT,
        "follow_redirects": DEFAULT_FOLLOW_REDIRECTS,
        "user_agent": DEFAULT_USER_AGENT,
    }
