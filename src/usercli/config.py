"""Runtime configuration for usercli."""

from __future__ import annotations

from . import __version__

DEFAULT_BASE_URL = "https://dummyjson.com"

# Seconds before an API request is abandoned.
REQUEST_TIMEOUT = 10.0

USER_AGENT = f"usercli/{__version__}"


def default_headers() -> dict[str, str]:
    """Return the headers sent with every API request."""
    return {"User-Agent": USER_AGENT, "Accept": "application/json"}
