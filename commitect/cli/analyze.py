"""CLI command for analyzing changes."""

import typer

from commitect.cli.utils import suggest_for_working_tree
from commitect.config import load_settings
from commitect.git import GitError


def analyze_command() -> None:
    """Analyze working-tree changes and print a suggested commit message."""
    settings = load_settings()

    try:
        typer.echo("Analyzing changes...", err=True)
        suggestion = suggest_for_working_tree(settings)
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(suggestion.render())
