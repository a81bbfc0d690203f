"""CLI command for clearing the suggestion cache."""

import typer

from commitect.cli.utils import build_cache
from commitect.config import load_settings


def clear_cache_command() -> None:
    """Remove every cached commit suggestion."""
    cache = build_cache(load_settings())

    if len(cache) == 0:
        typer.echo("Cache is already empty.")
        return

    removed = cache.clear()
    plural = "y" if removed == 1 else "ies"
    typer.echo(f"Cache cleared ({removed} entr{plural} removed).")
