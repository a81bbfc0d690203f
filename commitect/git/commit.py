"""Git commit execution."""

from pathlib import Path
from typing import Optional

from commitect.git.runner import _run_git_command


def execute_commit(message: str, cwd: Optional[Path] = None) -> str:
    """Commit the staged changes with a message.

    Args:
        message: The full commit message.
        cwd: Directory to run git in.

    Returns:
        The output of ``git commit``.

    Raises:
        GitError: If the commit fails.
    """
    return _run_git_command(["commit", "-m", message], cwd=cwd).strip()
