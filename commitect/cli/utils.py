"""Shared utility functions for CLI commands."""

import asyncio
import logging
from datetime import datetime
from typing import Optional

import typer

from commitect.cache import ResultCache, current_time_ms
from commitect.config import Settings
from commitect.git import GitDiffSource, NoChangesError, has_changes, is_git_repository
from commitect.models import CommitSuggestion
from commitect.orchestrator import SuggestionService
from commitect.remote import RemoteClassifier

LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    if not verbose:
        # Keep request logs out of normal output
        logging.getLogger("httpx").setLevel(logging.WARNING)


def build_cache(settings: Settings) -> ResultCache:
    """Create the ResultCache described by the settings."""
    return ResultCache(settings.cache_file, ttl_ms=settings.cache_ttl_ms)


def build_remote(settings: Settings) -> RemoteClassifier:
    """Create the RemoteClassifier described by the settings."""
    return RemoteClassifier(
        endpoint=settings.api_endpoint,
        timeout=settings.timeout,
        max_attempts=settings.max_attempts,
        backoff_base=settings.backoff_base,
    )


def ensure_changes() -> None:
    """Exit unless run inside a git repository with pending changes."""
    if not is_git_repository():
        typer.echo("Error: Not a git repository", err=True)
        raise typer.Exit(1)

    if not has_changes():
        typer.echo("No changes detected", err=True)
        raise typer.Exit(0)


async def _suggest(settings: Settings, source: GitDiffSource) -> CommitSuggestion:
    async with build_remote(settings) as remote:
        service = SuggestionService(build_cache(settings), remote)
        return await service.suggest_from_source(source)


def suggest_for_working_tree(settings: Settings) -> CommitSuggestion:
    """Generate a suggestion for the current working tree.

    Exits with code 0 when there is nothing to analyze.

    Args:
        settings: Resolved settings.

    Returns:
        The CommitSuggestion.
    """
    ensure_changes()
    try:
        return asyncio.run(_suggest(settings, GitDiffSource()))
    except NoChangesError:
        typer.echo("No changes to analyze", err=True)
        raise typer.Exit(0)


def format_time_ago(timestamp_ms: int, now_ms: Optional[int] = None) -> str:
    """Describe how long ago a timestamp was.

    Args:
        timestamp_ms: Epoch milliseconds of the event.
        now_ms: Current epoch milliseconds; defaults to wall time.

    Returns:
        A phrase such as "3 days ago" or "just now".
    """
    now_ms = current_time_ms() if now_ms is None else now_ms
    seconds = max(0, (now_ms - timestamp_ms) // 1000)
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    for amount, unit in ((days, "day"), (hours, "hour"), (minutes, "minute")):
        if amount > 0:
            return f"{amount} {unit}{'s' if amount != 1 else ''} ago"
    return "just now"


def format_timestamp(timestamp_ms: int) -> str:
    """Format epoch milliseconds as local date and time."""
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%Y-%m-%d %H:%M:%S")
