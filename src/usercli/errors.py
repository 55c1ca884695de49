"""Errors raised while fetching users from the API."""

from __future__ import annotations


class FetchError(Exception):
    """Base class for failures of a single fetch."""

    def add_context(self, context: str) -> None:
        """Prefix the message with ``context``, keeping the error type."""
        self.args = (f"{context}: {self}",)


class NetworkError(FetchError):
    """The request could not be completed (DNS, connection, timeout)."""


class HTTPStatusError(FetchError):
    """The API answered with a status other than 200."""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        status = f"{status_code} {reason}".strip()
        super().__init__(f"API returned status: {status}")


class DecodeError(FetchError):
    """The response body was not a valid users payload."""
