"""Suggestion pipeline: cache lookup, remote classification, local fallback.

SuggestionService always produces a CommitSuggestion. A cached result is
returned as is; otherwise the remote classifier is tried and, on any
failure, the heuristic classifier answers instead. Whatever is produced is
stored under the diff digest before it is returned.
"""

import logging
from typing import Callable, Optional, Protocol

from commitect.cache import ResultCache, compute_diff_digest, get_origin_folder
from commitect.heuristics import classify_diff
from commitect.models import ChangeSummary, CommitSuggestion
from commitect.remote import RemoteClassifier, RemoteSuccess

logger = logging.getLogger(__name__)

FallbackClassifier = Callable[[str, Optional[ChangeSummary]], CommitSuggestion]


class DiffSource(Protocol):
    """Supplies the diff text and change summary to classify."""

    def get_diff_text(self) -> str: ...

    def get_change_summary(self) -> Optional[ChangeSummary]: ...


class SuggestionService:
    """Produces one commit suggestion per diff."""

    def __init__(
        self,
        cache: ResultCache,
        remote: RemoteClassifier,
        fallback: FallbackClassifier = classify_diff,
    ):
        self.cache = cache
        self.remote = remote
        self.fallback = fallback

    async def generate_suggestion(
        self,
        diff_text: str,
        summary: Optional[ChangeSummary] = None,
        origin_folder: Optional[str] = None,
    ) -> CommitSuggestion:
        """Return a suggestion for a diff.

        Args:
            diff_text: Raw diff text.
            summary: Optional file-level statistics for the fallback.
            origin_folder: Folder name recorded with new cache entries.
                Defaults to the current working directory's name.

        Returns:
            The cached, remote or fallback CommitSuggestion.
        """
        digest = compute_diff_digest(diff_text)

        cached = self.cache.lookup(digest)
        if cached is not None:
            logger.debug("Cache hit for %s", digest[:12])
            return cached.to_suggestion()

        outcome = await self.remote.classify(diff_text)
        if isinstance(outcome, RemoteSuccess):
            suggestion = outcome.suggestion
        else:
            logger.warning(
                "Remote classifier unavailable (%s); using local heuristics",
                outcome.describe(),
            )
            suggestion = self.fallback(diff_text, summary)

        self.cache.store(
            digest,
            suggestion.intent,
            suggestion.message,
            origin_folder if origin_folder is not None else get_origin_folder(),
        )
        return suggestion

    async def suggest_from_source(
        self,
        source: DiffSource,
        origin_folder: Optional[str] = None,
    ) -> CommitSuggestion:
        """Run the pipeline on the diff and summary supplied by a source."""
        return await self.generate_suggestion(
            source.get_diff_text(),
            source.get_change_summary(),
            origin_folder=origin_folder,
        )
