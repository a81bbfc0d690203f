"""Git collaborator for commitect.

Extracts the diff and file statistics the core classifies, and executes
commits. The classification core never calls git directly.
"""

from commitect.git.commit import execute_commit
from commitect.git.diff import (
    IGNORED_PATH_PREFIXES,
    filter_ignored_paths,
    get_change_summary,
    get_working_diff,
    has_changes,
    parse_name_status,
)
from commitect.git.exceptions import GitError, NoChangesError
from commitect.git.runner import is_git_repository
from commitect.git.source import GitDiffSource


__all__ = [
    "execute_commit",
    "IGNORED_PATH_PREFIXES",
    "filter_ignored_paths",
    "get_change_summary",
    "get_working_diff",
    "has_changes",
    "parse_name_status",
    "GitError",
    "NoChangesError",
    "is_git_repository",
    "GitDiffSource",
]
