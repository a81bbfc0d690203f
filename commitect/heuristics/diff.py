"""Lexical reading of diff text.

Contains:
- ParsedDiff: Paths and changed lines extracted from a diff
- parse_diff: Split diff text into file paths, added and removed lines

The text is never validated as a structural diff. Anything that does not look
like a file header or a +/- line is ignored.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

_HUNK_HEADER = re.compile(r"^@@ -\d+(?:,(\d+))? \+\d+(?:,(\d+))? @@")


@dataclass(frozen=True)
class ParsedDiff:
    """Paths and changed lines extracted from diff text."""

    paths: tuple[str, ...] = ()
    added: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()

    @property
    def changed(self) -> tuple[str, ...]:
        return self.added + self.removed


@dataclass
class _DiffReader:
    paths: list[str] = field(default_factory=list)
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    in_hunk: bool = False
    # Lines still expected in the current hunk; None when the header has no counts
    old_left: Optional[int] = None
    new_left: Optional[int] = None

    def add_path(self, path: str) -> None:
        path = path.strip()
        if path and path != "/dev/null" and path not in self.paths:
            self.paths.append(path)

    def start_hunk(self, header: str) -> None:
        self.in_hunk = True
        match = _HUNK_HEADER.match(header)
        if match is None:
            self.old_left = self.new_left = None
            return
        old_count, new_count = match.groups()
        self.old_left = int(old_count) if old_count is not None else 1
        self.new_left = int(new_count) if new_count is not None else 1

    def hunk_exhausted(self) -> bool:
        if self.old_left is None or self.new_left is None:
            return False
        return self.old_left <= 0 and self.new_left <= 0

    def consume(self, old: int, new: int) -> None:
        if self.old_left is not None and self.new_left is not None:
            self.old_left -= old
            self.new_left -= new

    def feed(self, line: str) -> None:
        if line.startswith("diff --git "):
            self.in_hunk = False
            if " b/" in line:
                self.add_path(line.split(" b/", 1)[1])
            return

        if line.startswith("@@"):
            self.start_hunk(line)
            return

        if self.in_hunk and self.hunk_exhausted():
            self.in_hunk = False

        if not self.in_hunk:
            if line.startswith("+++ "):
                target = line[4:]
                self.add_path(target[2:] if target.startswith("b/") else target)
                return
            if line.startswith("--- "):
                return

        if line.startswith("+"):
            self.added.append(line[1:])
            self.consume(0, 1)
        elif line.startswith("-"):
            self.removed.append(line[1:])
            self.consume(1, 0)
        elif self.in_hunk and not line.startswith("\\"):
            self.consume(1, 1)


def parse_diff(diff_text: str) -> ParsedDiff:
    """Extract file paths and changed lines from diff text.

    File paths come from ``diff --git`` and ``+++`` headers. Lines starting
    with ``+``/``-`` count as added/removed, except ``+++``/``---`` header
    lines outside a hunk. A hunk ends at the next ``diff --git`` line or once
    the line counts in its ``@@`` header are used up.

    Args:
        diff_text: Normalized diff text.

    Returns:
        ParsedDiff with paths in first-seen order.
    """
    reader = _DiffReader()
    for line in diff_text.splitlines():
        reader.feed(line)
    return ParsedDiff(
        paths=tuple(reader.paths),
        added=tuple(reader.added),
        removed=tuple(reader.removed),
    )
