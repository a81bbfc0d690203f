"""Cache utility functions for commitect.

Contains utility functions for caching:
- normalize_diff: Normalize diff text before hashing or analysis
- compute_diff_digest: Compute SHA256 digest of normalized diff text
- current_time_ms: Wall-clock time in epoch milliseconds
- get_origin_folder: Name of the working directory recorded with entries
"""

import hashlib
import time
from pathlib import Path
from typing import Optional


def normalize_diff(diff_text: str) -> str:
    """Trim surrounding whitespace from diff text.

    Args:
        diff_text: The raw diff text.

    Returns:
        The normalized diff text.
    """
    return diff_text.strip()


def compute_diff_digest(diff_text: str) -> str:
    """Compute SHA256 digest of the normalized diff text.

    Args:
        diff_text: The raw diff text.

    Returns:
        SHA256 hex digest (64 characters).
    """
    return hashlib.sha256(normalize_diff(diff_text).encode("utf-8")).hexdigest()


def current_time_ms() -> int:
    """Return the current time as epoch milliseconds."""
    return int(time.time() * 1000)


def get_origin_folder(cwd: Optional[Path] = None) -> str:
    """Return the name of the directory a suggestion was generated from.

    Args:
        cwd: Directory to use instead of the current working directory.

    Returns:
        The directory's base name.
    """
    path = cwd or Path.cwd()
    return path.name or str(path)
