"""Cache file path utilities for commitect.

Contains functions for getting paths to cache files:
- get_cache_dir: Get the per-user ~/.commitect directory
- get_cache_file: Get path to the persisted classification cache
"""

from pathlib import Path

from commitect.global_config import get_global_config_dir


def get_cache_dir() -> Path:
    """Return the per-user cache directory.

    The directory is not created here; ResultCache creates it on first write.

    Returns:
        Path to ~/.commitect.
    """
    return get_global_config_dir()


def get_cache_file() -> Path:
    """Return path to the persisted cache file.

    Returns:
        Path to ~/.commitect/cache.json.
    """
    return get_cache_dir() / "cache.json"
