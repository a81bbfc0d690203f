"""Top-level CLI callback: version and logging options."""

from typing import Optional

import typer

from commitect import __version__
from commitect.cli.utils import configure_logging


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commitect {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging, including retry and cache decisions",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Zero-config git commit assistant."""
    configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)
