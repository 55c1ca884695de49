"""usercli - fetch and display users from the dummyjson.com API."""

from typing import Sequence

import typer

from . import __version__, commands
from .log import setup_logging

app = typer.Typer(help="A simple CLI tool built with Python and Typer")
app.command("hello")(commands.hello)
app.command("users")(commands.users)
app.command("version")(commands.version)


def version_callback(v: bool) -> None:
    if v:
        typer.echo(f"v{__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "-v", "--version", is_eager=True, callback=version_callback
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        typer.echo("Hello, World! Welcome to your Python CLI tool!")
        typer.echo("Use --help to see available commands")


def main(argv: Sequence[str] | None = None) -> int:
    rc = app(
        args=list(argv) if argv is not None else None,
        standalone_mode=False,
    )
    return rc or 0
