"""Diff source backed by the current git working tree."""

from pathlib import Path
from typing import Optional

from commitect.git.diff import get_change_summary, get_working_diff
from commitect.models import ChangeSummary


class GitDiffSource:
    """Supplies the working-tree diff and its change summary."""

    def __init__(self, cwd: Optional[Path] = None):
        self.cwd = cwd

    def get_diff_text(self) -> str:
        return get_working_diff(self.cwd)

    def get_change_summary(self) -> Optional[ChangeSummary]:
        return get_change_summary(self.cwd)
