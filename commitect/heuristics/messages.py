"""Message templates for the heuristic classifier.

Each category has an ordered list of (predicate, template, with_count)
entries; the first entry whose predicate holds is used. Templates marked
with_count get an " in N file(s)" suffix when the file count is known.
All templates fit in the 70-character message limit.
"""

from typing import Callable, Optional

from commitect.heuristics.decision import is_removal_heavy
from commitect.heuristics.features import FeatureVector
from commitect.models import IntentCategory, truncate_message

Template = tuple[Callable[[FeatureVector], bool], str, bool]


def _always(features: FeatureVector) -> bool:
    return True


MESSAGE_TEMPLATES: dict[IntentCategory, tuple[Template, ...]] = {
    IntentCategory.BUG_FIX: (
        (lambda f: f.test_fix, "fix failing tests", True),
        (_always, "fix bugs", True),
    ),
    IntentCategory.TEST: (
        (_always, "add and update tests", True),
    ),
    IntentCategory.DOCUMENTATION: (
        (_always, "update documentation", True),
    ),
    IntentCategory.REFACTOR: (
        (lambda f: f.moved_code, "restructure code", True),
        (lambda f: is_removal_heavy(f) and not f.refactor, "remove unused code", True),
        (_always, "refactor code", True),
    ),
    IntentCategory.FEATURE: (
        (lambda f: f.new_endpoint, "add new API endpoints", False),
        (lambda f: f.new_component, "add new UI components", False),
        (lambda f: f.new_class, "add new classes", True),
        (_always, "add new functionality", True),
    ),
    IntentCategory.CHORE: (
        (lambda f: f.dependency, "update dependencies", False),
        (lambda f: f.config, "update configuration", True),
        (_always, "update project files", True),
    ),
    IntentCategory.STYLE: (
        (lambda f: f.whitespace_only, "format and style code", False),
        (_always, "apply linting and style fixes", False),
    ),
    IntentCategory.UPDATE: (
        (_always, "update code", True),
    ),
}


def file_count_suffix(file_count: Optional[int]) -> str:
    """Return " in N file(s)" for a known, positive file count."""
    if not file_count:
        return ""
    noun = "file" if file_count == 1 else "files"
    return f" in {file_count} {noun}"


def render_message(
    category: IntentCategory,
    features: FeatureVector,
    file_count: Optional[int] = None,
) -> str:
    """Render the commit message for a decided category.

    Args:
        category: The decided intent.
        features: Signals that led to the decision.
        file_count: Total changed files, if known.

    Returns:
        The commit message text.
    """
    for predicate, template, with_count in MESSAGE_TEMPLATES[category]:
        if predicate(features):
            message = template + (file_count_suffix(file_count) if with_count else "")
            return truncate_message(message)
    raise ValueError(f"No message template for {category.value}")
