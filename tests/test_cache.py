"""Tests for commitect.cache module."""

import json

import pytest
from pydantic import ValidationError

from commitect.cache import (
    CacheEntry,
    ResultCache,
    compute_diff_digest,
    get_cache_file,
    get_origin_folder,
    normalize_diff,
)
from commitect.models import CommitSuggestion

DAY_MS = 24 * 60 * 60 * 1000


class TestComputeDiffDigest:
    """Tests for compute_diff_digest function."""

    def test_computes_sha256_hex(self):
        """Test that a 64-character hex digest is produced."""
        digest = compute_diff_digest("diff text")
        assert isinstance(digest, str)
        assert len(digest) == 64
        int(digest, 16)

    def test_same_text_same_digest(self):
        """Test that equal text produces equal digests."""
        assert compute_diff_digest("a\nb") == compute_diff_digest("a\nb")

    def test_surrounding_whitespace_ignored(self):
        """Test that digests are computed over normalized text."""
        assert compute_diff_digest("  a\nb\n\n") == compute_diff_digest("a\nb")

    def test_different_text_different_digest(self):
        """Test that different text produces different digests."""
        assert compute_diff_digest("context 1") != compute_diff_digest("context 2")

    def test_normalize_diff_keeps_inner_whitespace(self):
        assert normalize_diff("\n a  b \n") == "a  b"


class TestPaths:
    """Tests for cache path helpers."""

    def test_cache_file_in_config_dir(self, isolated_config):
        path = get_cache_file()
        assert path == isolated_config / "cache.json"

    def test_origin_folder_is_basename(self, temp_dir):
        assert get_origin_folder(temp_dir / "my-project") == "my-project"


class TestStoreAndLookup:
    """Tests for ResultCache.store and ResultCache.lookup."""

    def test_lookup_missing_returns_none(self, cache):
        assert cache.lookup("nope") is None

    def test_store_then_lookup(self, cache, clock):
        """Test that a stored entry is returned with its metadata."""
        cache.store("abc", "Feature", "add login", "proj")

        entry = cache.lookup("abc")
        assert entry is not None
        assert entry.intent == "Feature"
        assert entry.message == "add login"
        assert entry.origin_folder == "proj"
        assert entry.timestamp == clock.now_ms

    def test_store_replaces_existing_entry(self, cache, clock):
        """Test that one digest never has two entries."""
        cache.store("abc", "Feature", "first", "proj")
        clock.advance_days(1)
        cache.store("abc", "BugFix", "second", "proj")

        assert len(cache) == 1
        assert cache.lookup("abc").message == "second"
        assert len(cache.snapshot()) == 1

    def test_store_persists_pretty_json(self, cache, cache_file):
        """Test that the file holds a pretty-printed JSON array of records."""
        cache.store("abc", "Feature", "add login", "proj")

        text = cache_file.read_text()
        assert "\n  " in text
        data = json.loads(text)
        assert data == [
            {
                "digest": "abc",
                "intent": "Feature",
                "message": "add login",
                "timestamp": data[0]["timestamp"],
                "originFolder": "proj",
            }
        ]

    def test_entries_survive_reload(self, cache, cache_file, clock):
        cache.store("abc", "Feature", "add login", "proj")

        reloaded = ResultCache(cache_file, clock=clock)
        assert reloaded.lookup("abc").message == "add login"


class TestExpiry:
    """Tests for TTL handling."""

    def test_entry_within_ttl_is_returned(self, cache, clock):
        cache.store("abc", "Feature", "add login", "proj")
        clock.advance_days(29)
        assert cache.lookup("abc") is not None

    def test_entry_at_exact_ttl_is_returned(self, cache, clock):
        cache.store("abc", "Feature", "add login", "proj")
        clock.now_ms += 30 * DAY_MS
        assert cache.lookup("abc") is not None

    def test_expired_entry_evicted_on_lookup(self, cache, cache_file, clock):
        """Test that lookup drops an expired entry and persists the removal."""
        cache.store("abc", "Feature", "add login", "proj")
        clock.advance_days(31)

        assert cache.lookup("abc") is None
        assert cache.snapshot() == []
        assert json.loads(cache_file.read_text()) == []

    def test_snapshot_excludes_expired_entries(self, cache, clock):
        cache.store("old", "Feature", "old entry", "proj")
        clock.advance_days(20)
        cache.store("new", "BugFix", "new entry", "proj")
        clock.advance_days(15)

        digests = [e.digest for e in cache.snapshot()]
        assert digests == ["new"]

    def test_expired_entries_dropped_on_load(self, cache_file, clock):
        """Test that load skips entries already past the TTL."""
        records = [
            {"digest": "old", "intent": "Chore", "message": "m", "timestamp": clock.now_ms - 31 * DAY_MS, "originFolder": "p"},
            {"digest": "new", "intent": "Chore", "message": "m", "timestamp": clock.now_ms - DAY_MS, "originFolder": "p"},
        ]
        cache_file.parent.mkdir(parents=True)
        cache_file.write_text(json.dumps(records))

        cache = ResultCache(cache_file, clock=clock)
        assert len(cache) == 1
        assert cache.lookup("old") is None
        assert cache.lookup("new") is not None


class TestCorruptStorage:
    """Tests for recovery from unreadable cache files."""

    def test_invalid_json_starts_empty(self, cache_file, clock):
        cache_file.parent.mkdir(parents=True)
        cache_file.write_text("{not json")

        cache = ResultCache(cache_file, clock=clock)
        assert len(cache) == 0

    def test_non_list_json_starts_empty(self, cache_file, clock):
        cache_file.parent.mkdir(parents=True)
        cache_file.write_text('{"digest": "abc"}')

        assert len(ResultCache(cache_file, clock=clock)) == 0

    def test_invalid_records_start_empty(self, cache_file, clock):
        cache_file.parent.mkdir(parents=True)
        cache_file.write_text('[{"digest": "abc"}]')

        assert len(ResultCache(cache_file, clock=clock)) == 0

    def test_blank_text_records_start_empty(self, cache_file, clock):
        """Test that a record whose intent is only whitespace counts as corrupt."""
        record = {"digest": "abc", "intent": "  ", "message": "m", "timestamp": clock.now_ms, "originFolder": "p"}
        cache_file.parent.mkdir(parents=True)
        cache_file.write_text(json.dumps([record]))

        cache = ResultCache(cache_file, clock=clock)
        assert len(cache) == 0
        assert cache.lookup("abc") is None

    def test_corrupt_cache_is_overwritten_on_store(self, cache_file, clock):
        cache_file.parent.mkdir(parents=True)
        cache_file.write_text("garbage")

        cache = ResultCache(cache_file, clock=clock)
        cache.store("abc", "Feature", "add login", "proj")
        assert json.loads(cache_file.read_text())[0]["digest"] == "abc"

    def test_save_failure_is_swallowed(self, temp_dir, clock):
        """Test that an unwritable location does not raise."""
        blocker = temp_dir / "blocker"
        blocker.write_text("a file, not a directory")

        cache = ResultCache(blocker / "cache.json", clock=clock)
        entry = cache.store("abc", "Feature", "add login", "proj")

        assert entry.digest == "abc"
        assert cache.lookup("abc") is not None


class TestClearAndHistory:
    """Tests for clear, ordering and stats."""

    def test_clear_returns_prior_count(self, cache):
        cache.store("a", "Feature", "one", "p")
        cache.store("b", "Feature", "two", "p")

        assert cache.clear() == 2
        assert cache.lookup("a") is None
        assert cache.lookup("b") is None
        assert cache.snapshot() == []

    def test_clear_empty_returns_zero(self, cache):
        assert cache.clear() == 0

    def test_clear_persists(self, cache, cache_file, clock):
        cache.store("a", "Feature", "one", "p")
        cache.clear()
        assert len(ResultCache(cache_file, clock=clock)) == 0

    def test_ordered_by_recency(self, cache, clock):
        cache.store("a", "Feature", "one", "p")
        clock.advance_days(1)
        cache.store("b", "Feature", "two", "p")
        clock.advance_days(1)
        cache.store("c", "Feature", "three", "p")

        assert [e.digest for e in cache.snapshot_ordered_by_recency()] == ["c", "b", "a"]

    def test_history_for_folder(self, cache, clock):
        cache.store("a", "Feature", "one", "web")
        clock.advance_days(1)
        cache.store("b", "Feature", "two", "api")
        clock.advance_days(1)
        cache.store("c", "Feature", "three", "web")

        assert [e.digest for e in cache.history_for_folder("web")] == ["c", "a"]

    def test_stats(self, cache, clock):
        assert cache.stats().size == 0
        assert cache.stats().oldest_timestamp is None

        first = clock.now_ms
        cache.store("a", "Feature", "one", "p")
        clock.advance_days(1)
        cache.store("b", "Feature", "two", "p")

        stats = cache.stats()
        assert stats.size == 2
        assert stats.oldest_timestamp == first


class TestCacheEntry:
    """Tests for CacheEntry model."""

    def test_accepts_alias_and_field_name(self):
        by_alias = CacheEntry.model_validate(
            {"digest": "d", "intent": "i", "message": "m", "timestamp": 1, "originFolder": "f"}
        )
        by_name = CacheEntry(digest="d", intent="i", message="m", timestamp=1, origin_folder="f")
        assert by_alias == by_name

    def test_strips_text_fields(self):
        entry = CacheEntry(digest="d", intent=" Feature ", message=" add login \n", timestamp=1)
        assert entry.to_suggestion() == CommitSuggestion(intent="Feature", message="add login")

    @pytest.mark.parametrize("field", ["intent", "message"])
    def test_blank_text_rejected(self, field):
        values = {"digest": "d", "intent": "Feature", "message": "add login", "timestamp": 1}
        values[field] = "   "
        with pytest.raises(ValidationError):
            CacheEntry(**values)

    def test_to_suggestion_truncates_long_message(self):
        entry = CacheEntry(digest="d", intent="Feature", message="x" * 90, timestamp=1)
        suggestion = entry.to_suggestion()
        assert len(suggestion.message) == 70
        assert suggestion.message.endswith("...")
