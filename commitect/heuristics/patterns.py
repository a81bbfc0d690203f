"""Pattern table for heuristic feature extraction.

Each PatternRule maps a regular expression to the signal it raises and the
part of the diff it is matched against. The table is plain data so it can be
inspected and extended without touching the decision logic.
"""

import re
from dataclasses import dataclass
from enum import Enum


class Signal(str, Enum):
    """Boolean signals raised directly by pattern matches."""

    BUG_FIX = "bug_fix"
    DOCS = "docs"
    TEST = "test"
    CONFIG = "config"
    DEPENDENCY = "dependency"
    NEW_FUNCTION = "new_function"
    NEW_CLASS = "new_class"
    NEW_ENDPOINT = "new_endpoint"
    EXPORTED_COMPONENT = "exported_component"
    COMPONENT_FILE = "component_file"
    REFACTOR = "refactor"
    STYLE = "style"


class Target(Enum):
    """Which part of the diff a rule is matched against."""

    PATHS = "paths"
    ADDED = "added"
    CHANGED = "changed"


@dataclass(frozen=True)
class PatternRule:
    """A named pattern that raises a signal when it matches."""

    signal: Signal
    target: Target
    pattern: re.Pattern

    def matches(self, lines) -> bool:
        return any(self.pattern.search(line) for line in lines)


def _rule(signal: Signal, target: Target, regex: str, flags: int = 0) -> PatternRule:
    return PatternRule(signal=signal, target=target, pattern=re.compile(regex, flags))


PATTERN_RULES: tuple[PatternRule, ...] = (
    # Vocabulary in changed lines
    _rule(
        Signal.BUG_FIX, Target.CHANGED,
        r"\b(fix(es|ed|ing)?|bug(s|fix|fixes)?|hotfix(es)?|patch(es|ed|ing)?|issues?"
        r"|exceptions?|resolv(e|es|ed|ing)|errors?|crash(es|ed|ing)?|broken|regression)\b",
        re.I,
    ),
    _rule(
        Signal.REFACTOR, Target.CHANGED,
        r"\b(refactor\w*|clean\s?up|cleanup|restructur\w*|reorganiz\w*|simplif\w*)\b",
        re.I,
    ),
    _rule(
        Signal.STYLE, Target.CHANGED,
        r"\b(format(ting|ted)?|lint(ing|er|s)?|prettier|eslint|black|isort"
        r"|indent(ation)?|whitespace)\b(?!\s*\()",
        re.I,
    ),
    # File paths
    _rule(Signal.DOCS, Target.PATHS, r"\.(md|mdx|rst|adoc)$", re.I),
    _rule(Signal.DOCS, Target.PATHS, r"readme", re.I),
    _rule(Signal.DOCS, Target.PATHS, r"(^|/)docs?/", re.I),
    _rule(Signal.TEST, Target.PATHS, r"(^|/)(tests?|__tests__|spec)/", re.I),
    _rule(Signal.TEST, Target.PATHS, r"(^|/)test_[^/]+$", re.I),
    _rule(Signal.TEST, Target.PATHS, r"_test\.\w+$", re.I),
    _rule(Signal.TEST, Target.PATHS, r"\.(test|spec)\.\w+$", re.I),
    _rule(Signal.TEST, Target.PATHS, r"(^|/)[\w.]*Tests?\.cs$"),
    _rule(Signal.CONFIG, Target.PATHS, r"\.(json|ya?ml|toml|ini|cfg|conf|env|properties)$", re.I),
    _rule(Signal.CONFIG, Target.PATHS, r"(^|/)\.[\w.-]*rc$", re.I),
    _rule(Signal.CONFIG, Target.PATHS, r"(^|/)(dockerfile|docker-compose[\w.-]*|\.editorconfig|\.gitignore)$", re.I),
    _rule(
        Signal.DEPENDENCY, Target.PATHS,
        r"(^|/)(package(-lock)?\.json|yarn\.lock|pnpm-lock\.yaml|requirements[\w.-]*\.txt"
        r"|pyproject\.toml|poetry\.lock|pipfile(\.lock)?|setup\.(py|cfg)|cargo\.(toml|lock)"
        r"|go\.(mod|sum)|gemfile(\.lock)?|composer\.(json|lock)|pom\.xml"
        r"|build\.gradle(\.kts)?|packages\.config|[\w.-]+\.csproj)$",
        re.I,
    ),
    _rule(Signal.COMPONENT_FILE, Target.PATHS, r"\.(jsx|tsx|vue|svelte)$", re.I),
    # Declarations in added lines
    _rule(Signal.NEW_FUNCTION, Target.ADDED, r"^\s*(export\s+)?(default\s+)?(async\s+)?(def|function\*?)\s+\w+"),
    _rule(
        Signal.NEW_FUNCTION, Target.ADDED,
        r"^\s*(export\s+)?(const|let|var)\s+\w+\s*=\s*(async\s+)?(\([^)]*\)|\w+)\s*=>",
    ),
    _rule(Signal.NEW_FUNCTION, Target.ADDED, r"^\s*(func|fn|pub\s+fn|pub\(crate\)\s+fn)\s+[\w(]"),
    _rule(
        Signal.NEW_FUNCTION, Target.ADDED,
        r"^\s*(public|private|protected|internal)\s+(static\s+|async\s+|virtual\s+|override\s+)*"
        r"[\w<>\[\],?]+\s+\w+\s*\(",
    ),
    _rule(Signal.NEW_FUNCTION, Target.ADDED, r"^\s*export\s+(default\s+)?(function|const)\b"),
    _rule(
        Signal.NEW_CLASS, Target.ADDED,
        r"^\s*(export\s+)?(default\s+)?(abstract\s+)?(data\s+)?(class|interface|struct|enum|trait)\s+\w+",
    ),
    _rule(
        Signal.NEW_CLASS, Target.ADDED,
        r"^\s*(public|internal|private)\s+(sealed\s+|abstract\s+|static\s+|partial\s+)*"
        r"(class|record|interface|struct|enum)\s+\w+",
    ),
    _rule(
        Signal.EXPORTED_COMPONENT, Target.ADDED,
        r"^\s*export\s+(default\s+)?(function|const|class)\s+[A-Z]\w*",
    ),
    _rule(
        Signal.NEW_ENDPOINT, Target.ADDED,
        r"\b(app|router|api|server|route|routes|bp|blueprint)\.(get|post|put|patch|delete|route|all)\s*\(",
        re.I,
    ),
    _rule(Signal.NEW_ENDPOINT, Target.ADDED, r"^\s*@\w+\.(get|post|put|patch|delete|route|api_route)\b"),
    _rule(Signal.NEW_ENDPOINT, Target.ADDED, r"^\s*@(Get|Post|Put|Patch|Delete|Request)Mapping\b"),
    _rule(Signal.NEW_ENDPOINT, Target.ADDED, r"^\s*\[(Http(Get|Post|Put|Patch|Delete)|Route)\b"),
)

# Changed-line content that carries no logic: blank, brackets or punctuation
PUNCTUATION_ONLY = re.compile(r"^[\s{}()\[\];,.:]*$")
