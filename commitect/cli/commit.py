"""CLI command for committing with a generated message."""

import typer

from commitect.cli.utils import suggest_for_working_tree
from commitect.config import load_settings
from commitect.git import GitError, execute_commit


def commit_command(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Bypass confirmation prompt and commit immediately",
    ),
) -> None:
    """Generate a commit message and run git commit with it.

    Stage your changes first: the commit includes only what is staged.
    """
    settings = load_settings()

    try:
        typer.echo("Generating commit message...", err=True)
        suggestion = suggest_for_working_tree(settings)
        commit_message = suggestion.render()

        typer.echo("")
        typer.echo(commit_message)

        if not yes:
            typer.echo("")
            confirm = typer.prompt(
                "Commit with this message? [Y/n]",
                default="y",
                show_default=False,
            )
            if confirm.lower() not in ("y", "yes", ""):
                typer.echo("Commit cancelled.", err=True)
                raise typer.Exit(0)

        typer.echo("Committing changes...", err=True)
        output = execute_commit(commit_message)
        if output:
            typer.echo(output)
        typer.echo(f"Committed: {commit_message}", err=True)

    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
