"""Text output formats for a page of users."""

from __future__ import annotations

import json
from typing import Callable, Sequence

import typer

from .models import User, UsersResponse

ELLIPSIS = "..."
TABLE_RULE = "-" * 84


def truncate(s: str, max_len: int) -> str:
    """Shorten ``s`` to ``max_len`` characters, ending in an ellipsis.

    Strings that already fit are returned unchanged. When ``max_len`` leaves
    no room for the ellipsis (3 or less) the string is simply cut.
    """
    if len(s) <= max_len:
        return s
    if max_len <= len(ELLIPSIS):
        return s[: max(max_len, 0)]
    return s[: max_len - len(ELLIPSIS)] + ELLIPSIS


class UserDisplayer:
    """Writes users to stdout in one of the supported formats."""

    def __init__(self) -> None:
        self._formats: dict[str, Callable[[Sequence[User]], None]] = {
            "json": self.display_json,
            "table": self.display_table,
            "simple": self.display_simple,
            "default": self.display_default,
        }

    def display(self, users_resp: UsersResponse, format: str) -> None:
        """Print the summary line, then the users; unknown formats use default."""
        self.print_summary(users_resp)
        render = self._formats.get(format, self.display_default)
        render(users_resp.users)

    def print_summary(self, users_resp: UsersResponse) -> None:
        typer.echo(
            f"\n📊 Found {users_resp.total} users "
            f"(showing {len(users_resp.users)}, skipped {users_resp.skip})\n"
        )

    def display_json(self, users: Sequence[User]) -> None:
        typer.echo(json.dumps([user.to_dict() for user in users], indent=2, ensure_ascii=False))

    def display_table(self, users: Sequence[User]) -> None:
        typer.echo(
            f"{'ID':<4} {'First Name':<15} {'Last Name':<15} {'Email':<25} {'Phone':<15} {'Age':<5}"
        )
        typer.echo(TABLE_RULE)
        for user in users:
            typer.echo(
                f"{user.id:<4d} "
                f"{truncate(user.first_name, 14):<15} "
                f"{truncate(user.last_name, 14):<15} "
                f"{truncate(user.email, 24):<25} "
                f"{truncate(user.phone, 14):<15} "
                f"{user.age:<5d}"
            )

    def display_simple(self, users: Sequence[User]) -> None:
        for user in users:
            typer.echo(f"{user.id}: {user.first_name} {user.last_name} ({user.email})")

    def display_default(self, users: Sequence[User]) -> None:
        for i, user in enumerate(users):
            typer.echo(f"👤 User #{user.id}")
            typer.echo(f"   Name: {user.full_name}")
            typer.echo(f"   Email: {user.email}")
            typer.echo(f"   Phone: {user.phone}")
            typer.echo(f"   Username: {user.username}")
            typer.echo(f"   Age: {user.age}, Gender: {user.gender}")
            if user.company.name:
                typer.echo(f"   Company: {user.company.name} ({user.company.department})")
                typer.echo(f"   Title: {user.company.title}")

            # Blank line between blocks, not after the last one
            if i < len(users) - 1:
                typer.echo()
