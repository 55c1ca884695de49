"""Fetch-then-display orchestration for the users command."""

from __future__ import annotations

import typer

from .client import UserClient, users_url
from .config import DEFAULT_BASE_URL
from .display import UserDisplayer
from .errors import FetchError


class UserService:
    """Fetches a page of users and prints it in the requested format."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        client: UserClient | None = None,
        displayer: UserDisplayer | None = None,
    ):
        self.base_url = base_url
        self.client = client or UserClient(base_url)
        self.displayer = displayer or UserDisplayer()

    def get_users_and_display(self, limit: int, skip: int, format: str) -> None:
        """Fetch users and display them.

        Raises:
            FetchError: If the fetch fails, with its message prefixed by
                "failed to fetch users"; nothing is displayed in that case.
        """
        typer.echo(f"Fetching users from: {users_url(self.base_url, limit, skip)}")

        try:
            users_resp = self.client.fetch_users(limit, skip)
        except FetchError as e:
            e.add_context("failed to fetch users")
            raise
        self.displayer.display(users_resp, format)
