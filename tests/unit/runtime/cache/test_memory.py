"""Unit tests for InMemoryRecordCache."""

from __future__ import annotations

import threading

import pytest

from socialgraph.lookup.core import ValidationError
from socialgraph.lookup.runtime.cache import InMemoryRecordCache, RecordCache, get_default_cache


class TestInMemoryRecordCache:
    """Test InMemoryRecordCache operations."""

    def test_get_missing_returns_none(self, cache):
        assert cache.get(42) is None
        assert not cache.contains(42)
        assert 42 not in cache

    def test_put_then_get(self, cache, user_factory):
        record = user_factory(42)
        cache.put(42, record)

        assert cache.contains(42)
        assert cache.get(42) is record
        assert len(cache) == 1
        assert list(cache) == [42]

    def test_put_overwrites_last_write_wins(self, cache, user_factory):
        cache.put(7, user_factory(7, followers_count=1))
        cache.put(7, user_factory(7, followers_count=2))

        assert cache.get(7).followers_count == 2
        assert len(cache) == 1

    def test_put_rejects_mismatched_key(self, cache, user_factory):
        """Test the id-matches-key invariant is enforced on insert."""
        with pytest.raises(ValidationError, match="does not match"):
            cache.put(1, user_factory(2))
        assert len(cache) == 0

    def test_contains_operator_ignores_non_int(self, cache):
        assert "1" not in cache

    def test_satisfies_protocol(self, cache):
        assert isinstance(cache, RecordCache)

    def test_concurrent_threads_lose_nothing(self, cache, user_factory):
        """Test many writer threads on overlapping keys keep every entry consistent."""
        records = {i: user_factory(i) for i in range(500)}

        def writer(offset: int) -> None:
            for i in range(500):
                key = (i + offset) % 500
                cache.put(key, records[key])
                assert cache.get(key).id == key

        threads = [threading.Thread(target=writer, args=(n * 37,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(cache) == 500
        assert all(cache.get(k).id == k for k in cache.keys())


def test_default_cache_is_shared():
    """Test the process-wide cache is created once."""
    first = get_default_cache()
    assert isinstance(first, InMemoryRecordCache)
    assert get_default_cache() is first
