"""Heuristic fallback classifier for commitect.

This package classifies diffs locally when the remote service is unavailable:
- diff: Lexical reading of diff text into paths and changed lines
- patterns: Declarative table of pattern -> signal rules
- features: FeatureVector extraction
- decision: Ordered intent precedence
- messages: Per-category message templates
- classifier: classify_diff, the pure entry point
"""

from commitect.heuristics.classifier import classify_diff
from commitect.heuristics.decision import decide_intent
from commitect.heuristics.diff import ParsedDiff, parse_diff
from commitect.heuristics.features import FeatureVector, extract_features, match_signals
from commitect.heuristics.messages import render_message
from commitect.heuristics.patterns import PATTERN_RULES, PatternRule, Signal, Target


__all__ = [
    "classify_diff",
    "decide_intent",
    "ParsedDiff",
    "parse_diff",
    "FeatureVector",
    "extract_features",
    "match_signals",
    "render_message",
    "PATTERN_RULES",
    "PatternRule",
    "Signal",
    "Target",
]
