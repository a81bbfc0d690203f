"""Git diff utilities.

Contains:
- IGNORED_PATH_PREFIXES: Build output and vendored paths dropped from the diff
- filter_ignored_paths: Drop per-file sections for ignored paths
- has_changes: Check whether the working tree has any changes
- get_working_diff: Get the diff of the working tree against HEAD
- get_change_summary: File counts from the name-status diff
"""

from pathlib import Path
from typing import Optional

from commitect.git.exceptions import GitError, NoChangesError
from commitect.git.runner import _run_git_command
from commitect.models import ChangeSummary

IGNORED_PATH_PREFIXES = [
    "node_modules/",
    "bin/",
    "obj/",
    "dist/",
    "build/",
    ".git/",
]


def _is_ignored(path: str, prefixes: list[str]) -> bool:
    return any(path.startswith(prefix) for prefix in prefixes)


def filter_ignored_paths(diff: str, prefixes: Optional[list[str]] = None) -> str:
    """Remove the sections of a diff that belong to ignored paths.

    Args:
        diff: Full ``git diff`` output.
        prefixes: Path prefixes to drop. Defaults to IGNORED_PATH_PREFIXES.

    Returns:
        The diff without sections for ignored files.
    """
    prefixes = IGNORED_PATH_PREFIXES if prefixes is None else prefixes
    kept = []
    skip_file = False

    for line in diff.split("\n"):
        if line.startswith("diff --git"):
            path = line.split(" b/", 1)[1] if " b/" in line else ""
            skip_file = _is_ignored(path, prefixes)
        if not skip_file:
            kept.append(line)

    return "\n".join(kept)


def has_changes(cwd: Optional[Path] = None) -> bool:
    """Return True if ``git status --porcelain`` reports anything."""
    try:
        status = _run_git_command(["status", "--porcelain"], cwd=cwd)
    except GitError:
        return False
    return bool(status.strip())


def get_working_diff(cwd: Optional[Path] = None) -> str:
    """Get staged and unstaged changes against HEAD, without ignored paths.

    Returns:
        The filtered diff text.

    Raises:
        NoChangesError: If the filtered diff is empty.
        GitError: If git fails.
    """
    diff = filter_ignored_paths(_run_git_command(["diff", "HEAD"], cwd=cwd))
    if not diff.strip():
        raise NoChangesError("No changes to analyze.")
    return diff


def parse_name_status(output: str, prefixes: Optional[list[str]] = None) -> ChangeSummary:
    """Build a ChangeSummary from ``git diff --name-status -M`` output.

    Args:
        output: The name-status listing.
        prefixes: Ignored path prefixes, as for filter_ignored_paths.

    Returns:
        ChangeSummary with total and renamed file counts.
    """
    prefixes = IGNORED_PATH_PREFIXES if prefixes is None else prefixes
    total = 0
    renamed = 0

    for line in output.splitlines():
        parts = line.split("\t")
        if len(parts) < 2:
            continue
        status, path = parts[0], parts[-1]
        if _is_ignored(path, prefixes):
            continue
        total += 1
        if status.startswith("R"):
            renamed += 1

    return ChangeSummary(total_files=total, renamed_files=renamed)


def get_change_summary(cwd: Optional[Path] = None) -> Optional[ChangeSummary]:
    """Return file counts for the working diff, or None if git fails."""
    try:
        output = _run_git_command(["diff", "HEAD", "--name-status", "-M"], cwd=cwd)
    except GitError:
        return None
    return parse_name_status(output)
