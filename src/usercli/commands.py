"""CLI commands for usercli."""

from __future__ import annotations

import platform
from typing import Annotated

import typer

from . import __build_time__, __version__
from .config import DEFAULT_BASE_URL
from .errors import FetchError
from .service import UserService


def hello(
    name: Annotated[str, typer.Argument(help="Who to greet")] = "World",
) -> None:
    """Say hello to someone. If no name is provided, it will greet the world."""
    typer.echo(f"Hello, {name}!")


def users(
    limit: Annotated[
        int,
        typer.Option("--limit", "-l", help="Number of users to fetch (max 100)"),
    ] = 10,
    skip: Annotated[
        int,
        typer.Option("--skip", "-s", help="Number of users to skip"),
    ] = 0,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: default, table, simple, json"),
    ] = "default",
) -> None:
    """Fetch user data from the dummyjson.com API and display it in a formatted way."""
    service = UserService(DEFAULT_BASE_URL)
    try:
        service.get_users_and_display(limit, skip, format)
    except FetchError as e:
        typer.secho(f"Error fetching users: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)


def version() -> None:
    """Print the version number and build information of the CLI tool."""
    typer.echo(f"usercli {__version__}")
    typer.echo(f"Built: {__build_time__}")
    typer.echo(f"Python version: {platform.python_version()}")
    typer.echo(f"Platform: {platform.system().lower()}/{platform.machine()}")
