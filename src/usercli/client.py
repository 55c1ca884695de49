"""HTTP client for the users API.

Performs a single GET per call, with no retries, and turns the JSON envelope
into a :class:`~usercli.models.UsersResponse`.
"""

from __future__ import annotations

import json
import logging
import time

import requests

from .config import REQUEST_TIMEOUT, default_headers
from .errors import DecodeError, HTTPStatusError, NetworkError
from .models import UsersResponse

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 1024


def users_url(base_url: str, limit: int, skip: int) -> str:
    """Return the users endpoint URL for one page."""
    return f"{base_url}/users?limit={limit}&skip={skip}"


class UserClient:
    """Fetches pages of users from the API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a plain HTTP session; no retry adapter is mounted."""
        session = requests.Session()
        session.headers.update(default_headers())
        return session

    def fetch_users(self, limit: int, skip: int) -> UsersResponse:
        """Fetch one page of users.

        Args:
            limit: Page size, sent as-is.
            skip: Number of records to skip, sent as-is.

        Returns:
            UsersResponse: The decoded envelope.

        Raises:
            NetworkError: On transport failure or timeout.
            HTTPStatusError: If the status is not 200. The body is not parsed.
            DecodeError: If the body is not a valid users payload.
        """
        url = users_url(self.base_url, limit, skip)
        logger.debug(f"Fetching from {url}")
        start_time = time.monotonic()
        deadline = start_time + self.timeout

        try:
            response = self.session.get(url, timeout=self.timeout, stream=True)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"failed to make request: {e}") from e

        try:
            if response.status_code != 200:
                raise HTTPStatusError(response.status_code, response.reason or "")

            try:
                body = self._read_body(response, deadline)
            except requests.exceptions.RequestException as e:
                raise NetworkError(f"failed to read response: {e}") from e
        finally:
            response.close()

        logger.debug(f"Fetched from {url}: {time.monotonic() - start_time:.2f} seconds")

        try:
            return UsersResponse.from_dict(json.loads(body))
        except (ValueError, TypeError, RecursionError) as e:
            raise DecodeError(f"failed to parse JSON: {e}") from e

    def _read_body(self, response: requests.Response, deadline: float) -> bytes:
        """Read the whole body, failing once ``deadline`` has passed."""
        chunks = []
        for chunk in response.iter_content(chunk_size=READ_CHUNK_SIZE):
            if time.monotonic() > deadline:
                raise NetworkError("failed to read response: timeout")
            chunks.append(chunk)
        if time.monotonic() > deadline:
            raise NetworkError("failed to read response: timeout")
        return b"".join(chunks)
