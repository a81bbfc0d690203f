"""CLI entry point for commitect.

This module provides the main CLI application that combines all commands
into a single interface.
"""

import typer

from commitect.cli.analyze import analyze_command
from commitect.cli.cache import clear_cache_command
from commitect.cli.commit import commit_command
from commitect.cli.history import history_command
from commitect.cli.main import main_command

# Main application
app = typer.Typer(
    name="commitect",
    help="commitect: zero-config git commit assistant",
    add_completion=False,
)

app.command("analyze")(analyze_command)
app.command("commit")(commit_command)
app.command("history")(history_command)
app.command("clear-cache")(clear_cache_command)

app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "analyze_command",
    "clear_cache_command",
    "commit_command",
    "history_command",
    "main_command",
]
