"""Intent decision for the heuristic classifier.

The precedence below is an ordered table: the first predicate that holds
decides the category. A diff with no changed lines is always a Chore.
"""

from typing import Callable

from commitect.heuristics.features import FeatureVector
from commitect.models import IntentCategory


def is_removal_heavy(features: FeatureVector) -> bool:
    return features.removed_lines > 2 * features.added_lines


DECISION_TABLE: tuple[tuple[Callable[[FeatureVector], bool], IntentCategory], ...] = (
    (lambda f: f.bug_fix or f.test_fix, IntentCategory.BUG_FIX),
    (lambda f: f.test and not f.bug_fix, IntentCategory.TEST),
    (lambda f: f.docs, IntentCategory.DOCUMENTATION),
    (lambda f: f.refactor or f.moved_code or is_removal_heavy(f), IntentCategory.REFACTOR),
    (
        lambda f: f.new_function or f.new_class or f.new_component or f.new_endpoint,
        IntentCategory.FEATURE,
    ),
    (lambda f: f.dependency or f.config, IntentCategory.CHORE),
    (lambda f: f.style or f.whitespace_only, IntentCategory.STYLE),
)


def decide_intent(features: FeatureVector) -> IntentCategory:
    """Pick the intent category for a FeatureVector.

    Args:
        features: Signals extracted from the diff.

    Returns:
        The first matching IntentCategory, or UPDATE if none match.
    """
    if not features.has_changes:
        return IntentCategory.CHORE

    for predicate, category in DECISION_TABLE:
        if predicate(features):
            return category
    return IntentCategory.UPDATE
