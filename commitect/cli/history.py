"""CLI command for showing cached suggestions."""

import typer

from commitect.cache import current_time_ms, get_origin_folder
from commitect.cli.utils import build_cache, format_time_ago, format_timestamp
from commitect.config import load_settings

RULE_WIDTH = 70


def history_command(
    here: bool = typer.Option(
        False,
        "--here",
        help="Only show suggestions generated from the current folder",
    ),
) -> None:
    """Show cached commit suggestions, newest first."""
    cache = build_cache(load_settings())

    if here:
        entries = cache.history_for_folder(get_origin_folder())
    else:
        entries = cache.snapshot_ordered_by_recency()

    if not entries:
        typer.echo("No commit history found.")
        typer.echo("Generate suggestions first with 'commitect analyze' or 'commitect commit'.")
        return

    now = current_time_ms()
    typer.echo("COMMIT HISTORY")
    typer.echo("-" * RULE_WIDTH)
    for index, entry in enumerate(entries, start=1):
        typer.echo(f"[{index}] {entry.intent}: {entry.message}")
        typer.echo(f"    folder: {entry.origin_folder}")
        typer.echo(
            f"    time:   {format_timestamp(entry.timestamp)} "
            f"({format_time_ago(entry.timestamp, now)})"
        )
        typer.echo("")
    typer.echo("-" * RULE_WIDTH)

    plural = "s" if len(entries) != 1 else ""
    typer.echo(f"Total: {len(entries)} cached commit message{plural}")

    stats = cache.stats()
    if stats.oldest_timestamp is not None:
        typer.echo(f"Oldest cached entry: {format_time_ago(stats.oldest_timestamp, now)}")
