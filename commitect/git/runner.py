"""Subprocess wrapper around the git executable.

Every git invocation in commitect goes through _run_git_command so failures
surface uniformly as GitError.
"""

import subprocess
from pathlib import Path
from typing import Optional

from commitect.git.exceptions import GitError


def _run_git_command(args: list[str], cwd: Optional[Path] = None) -> str:
    """Run ``git <args>`` and return its stdout unmodified.

    Raises:
        GitError: If git exits non-zero or is not installed.
    """
    try:
        completed = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            check=True,
            cwd=cwd,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not on PATH.")
    return completed.stdout


def is_git_repository(cwd: Optional[Path] = None) -> bool:
    """Return True if the directory is inside a git working tree."""
    try:
        _run_git_command(["rev-parse", "--git-dir"], cwd=cwd)
    except GitError:
        return False
    return True

