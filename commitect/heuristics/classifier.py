"""Deterministic fallback classifier.

Turns diff text into a CommitSuggestion without any I/O. Used when the
remote classifier is unavailable.
"""

from typing import Optional

from commitect.cache.utils import normalize_diff
from commitect.heuristics.decision import decide_intent
from commitect.heuristics.features import extract_features
from commitect.heuristics.messages import render_message
from commitect.models import ChangeSummary, CommitSuggestion


def classify_diff(diff_text: str, summary: Optional[ChangeSummary] = None) -> CommitSuggestion:
    """Classify a diff using lexical heuristics.

    Args:
        diff_text: Raw diff text.
        summary: Optional file-level statistics.

    Returns:
        A CommitSuggestion whose intent is an IntentCategory value.
    """
    features = extract_features(normalize_diff(diff_text), summary)
    category = decide_intent(features)
    file_count = summary.total_files if summary else None
    return CommitSuggestion(
        intent=category.value,
        message=render_message(category, features, file_count),
    )
