"""Feature extraction for the heuristic classifier.

Contains:
- FeatureVector: Immutable set of boolean signals and line counts
- extract_features: Compute a FeatureVector from diff text and a summary
"""

import re
from dataclasses import dataclass
from typing import Optional

from commitect.heuristics.diff import ParsedDiff, parse_diff
from commitect.heuristics.patterns import (
    PATTERN_RULES,
    PUNCTUATION_ONLY,
    PatternRule,
    Signal,
    Target,
)
from commitect.models import ChangeSummary

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class FeatureVector:
    """Signals derived from one diff, used to pick an intent."""

    bug_fix: bool = False
    test_fix: bool = False
    docs: bool = False
    test: bool = False
    config: bool = False
    dependency: bool = False
    new_function: bool = False
    new_class: bool = False
    new_component: bool = False
    new_endpoint: bool = False
    refactor: bool = False
    moved_code: bool = False
    style: bool = False
    whitespace_only: bool = False
    added_lines: int = 0
    removed_lines: int = 0

    @property
    def has_changes(self) -> bool:
        return self.added_lines + self.removed_lines > 0


def _lines_for(rule: PatternRule, parsed: ParsedDiff) -> tuple[str, ...]:
    if rule.target is Target.PATHS:
        return parsed.paths
    if rule.target is Target.ADDED:
        return parsed.added
    return parsed.changed


def match_signals(parsed: ParsedDiff, rules=PATTERN_RULES) -> set[Signal]:
    """Return every signal whose pattern matches the parsed diff.

    Args:
        parsed: Output of parse_diff.
        rules: Pattern table to evaluate.

    Returns:
        Set of raised signals.
    """
    signals = set()
    for rule in rules:
        if rule.signal in signals:
            continue
        if rule.matches(_lines_for(rule, parsed)):
            signals.add(rule.signal)
    return signals


def _is_whitespace_only(parsed: ParsedDiff) -> bool:
    if not parsed.changed:
        return False

    if all(PUNCTUATION_ONLY.match(line) for line in parsed.changed):
        return True

    # Pure reformatting: same content once whitespace is ignored
    added = sorted(_WHITESPACE.sub("", line) for line in parsed.added)
    removed = sorted(_WHITESPACE.sub("", line) for line in parsed.removed)
    return bool(added) and added == removed


def extract_features(diff_text: str, summary: Optional[ChangeSummary] = None) -> FeatureVector:
    """Compute the FeatureVector for a diff.

    Args:
        diff_text: Normalized diff text.
        summary: Optional file-level statistics. Only renamed_files is used here.

    Returns:
        The FeatureVector.
    """
    parsed = parse_diff(diff_text)
    signals = match_signals(parsed)

    added_lines = len(parsed.added)
    removed_lines = len(parsed.removed)

    renamed_files = (summary.renamed_files or 0) if summary else 0
    moved_code = renamed_files > 0 and added_lines > 0 and removed_lines > 0

    bug_fix = Signal.BUG_FIX in signals
    test = Signal.TEST in signals

    return FeatureVector(
        bug_fix=bug_fix,
        test_fix=bug_fix and test,
        docs=Signal.DOCS in signals,
        test=test,
        config=Signal.CONFIG in signals,
        dependency=Signal.DEPENDENCY in signals,
        new_function=Signal.NEW_FUNCTION in signals,
        new_class=Signal.NEW_CLASS in signals,
        new_component=(
            Signal.COMPONENT_FILE in signals and Signal.EXPORTED_COMPONENT in signals
        ),
        new_endpoint=Signal.NEW_ENDPOINT in signals,
        refactor=Signal.REFACTOR in signals,
        moved_code=moved_code,
        style=Signal.STYLE in signals,
        whitespace_only=_is_whitespace_only(parsed),
        added_lines=added_lines,
        removed_lines=removed_lines,
    )
