"""Cache module for commitect.

This package provides the classification cache that prevents redundant
remote calls:
- models: CacheEntry, CacheStats data models
- paths: Functions for getting cache file paths
- utils: Utility functions (digest computation, timestamps)
- store: ResultCache, the TTL-bound persistent store
"""

# Models
from commitect.cache.models import CacheEntry, CacheStats

# Path utilities
from commitect.cache.paths import get_cache_dir, get_cache_file

# General utilities
from commitect.cache.utils import (
    compute_diff_digest,
    current_time_ms,
    get_origin_folder,
    normalize_diff,
)

# Store
from commitect.cache.store import DEFAULT_TTL_MS, ResultCache


__all__ = [
    # Models
    "CacheEntry",
    "CacheStats",
    # Path utilities
    "get_cache_dir",
    "get_cache_file",
    # General utilities
    "compute_diff_digest",
    "current_time_ms",
    "get_origin_folder",
    "normalize_diff",
    # Store
    "DEFAULT_TTL_MS",
    "ResultCache",
]
