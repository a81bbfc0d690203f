"""Persistent, TTL-bound classification cache.

ResultCache maps a diff digest to the classification produced for it. The
whole cache is loaded once when the instance is created and rewritten to a
single JSON file after every mutation. Entries older than the TTL are treated
as absent and evicted lazily on lookup.

Cache I/O problems never reach the caller: an unreadable or corrupt file
yields an empty cache, and a failed write is logged and ignored.
"""

import json
import logging
from pathlib import Path
from typing import Callable, Optional

from commitect.cache.models import CacheEntry, CacheStats
from commitect.cache.utils import current_time_ms
from commitect.config import DEFAULT_CACHE_TTL_DAYS, MILLIS_PER_DAY

logger = logging.getLogger(__name__)

DEFAULT_TTL_MS = DEFAULT_CACHE_TTL_DAYS * MILLIS_PER_DAY


class ResultCache:
    """Content-addressed classification cache persisted to one file."""

    def __init__(
        self,
        cache_file: Path,
        ttl_ms: int = DEFAULT_TTL_MS,
        clock: Optional[Callable[[], int]] = None,
    ):
        """Create the cache and load any persisted entries.

        Args:
            cache_file: Path of the JSON file backing the cache.
            ttl_ms: Maximum entry age in milliseconds.
            clock: Returns the current epoch milliseconds. Defaults to wall time.
        """
        self.cache_file = Path(cache_file)
        self.ttl_ms = ttl_ms
        self._clock = clock or current_time_ms
        self._entries: dict[str, CacheEntry] = {}
        self._load()

    def __len__(self) -> int:
        return len(self._entries)

    def _is_expired(self, entry: CacheEntry, now_ms: int) -> bool:
        return entry.age_ms(now_ms) > self.ttl_ms

    def _load(self) -> None:
        """Read persisted entries, dropping any already past the TTL."""
        if not self.cache_file.exists():
            return

        try:
            data = json.loads(self.cache_file.read_text(encoding="utf-8"))
            if not isinstance(data, list):
                raise ValueError("cache file does not contain a JSON array")
            entries = [CacheEntry.model_validate(item) for item in data]
        except (OSError, ValueError, TypeError) as e:
            # Corrupt or unreadable cache: start fresh
            logger.warning("Ignoring unreadable cache file %s: %s", self.cache_file, e)
            self._entries = {}
            return

        now = self._clock()
        for entry in entries:
            if not self._is_expired(entry, now):
                self._entries[entry.digest] = entry
        logger.debug("Loaded %d cache entries from %s", len(self._entries), self.cache_file)

    def _save(self) -> None:
        """Rewrite the cache file with the current in-memory entries."""
        payload = [
            entry.model_dump(by_alias=True) for entry in self._entries.values()
        ]
        try:
            self.cache_file.parent.mkdir(parents=True, exist_ok=True)
            self.cache_file.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Failed to save cache to %s: %s", self.cache_file, e)

    def lookup(self, digest: str) -> Optional[CacheEntry]:
        """Return the live entry for a digest.

        An expired entry is evicted and the change persisted.

        Args:
            digest: Digest of the normalized diff text.

        Returns:
            The cached entry, or None if absent or expired.
        """
        entry = self._entries.get(digest)
        if entry is None:
            return None

        if self._is_expired(entry, self._clock()):
            del self._entries[digest]
            self._save()
            logger.debug("Evicted expired cache entry %s", digest[:12])
            return None

        return entry

    def store(self, digest: str, intent: str, message: str, origin_folder: str) -> CacheEntry:
        """Create or replace the entry for a digest and persist the cache.

        Args:
            digest: Digest of the normalized diff text.
            intent: Intent label of the classification.
            message: Commit message of the classification.
            origin_folder: Name of the directory the diff came from.

        Returns:
            The stored entry.
        """
        entry = CacheEntry(
            digest=digest,
            intent=intent,
            message=message,
            timestamp=self._clock(),
            origin_folder=origin_folder,
        )
        self._entries[digest] = entry
        self._save()
        return entry

    def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries removed.
        """
        removed = len(self._entries)
        self._entries.clear()
        self._save()
        return removed

    def snapshot(self) -> list[CacheEntry]:
        """Return all live entries in insertion order."""
        now = self._clock()
        return [e for e in self._entries.values() if not self._is_expired(e, now)]

    def snapshot_ordered_by_recency(self) -> list[CacheEntry]:
        """Return all live entries, most recent first."""
        return sorted(self.snapshot(), key=lambda e: e.timestamp, reverse=True)

    def history_for_folder(self, folder: str) -> list[CacheEntry]:
        """Return live entries generated from a folder, most recent first."""
        return [e for e in self.snapshot_ordered_by_recency() if e.origin_folder == folder]

    def stats(self) -> CacheStats:
        """Return the size and oldest timestamp of the live cache."""
        entries = self.snapshot()
        oldest = min((e.timestamp for e in entries), default=None)
        return CacheStats(size=len(entries), oldest_timestamp=oldest)
