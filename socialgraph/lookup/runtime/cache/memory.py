"""Unbounded in-memory record cache."""

from __future__ import annotations

import threading
from collections.abc import Iterator

from ...models import UserRecord
from .base import check_record_key


class InMemoryRecordCache:
    """Thread-safe dict-backed cache that never evicts.

    Entries live for the lifetime of the cache object. A single lock guards
    the mapping so the cache can be shared between coroutines and threads.
    """

    def __init__(self) -> None:
        self._records: dict[int, UserRecord] = {}
        self._lock = threading.Lock()

    def contains(self, key: int) -> bool:
        with self._lock:
            return key in self._records

    def get(self, key: int) -> UserRecord | None:
        with self._lock:
            return self._records.get(key)

    def put(self, key: int, record: UserRecord) -> None:
        check_record_key(key, record)
        with self._lock:
            self._records[key] = record

    def keys(self) -> list[int]:
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.contains(key)

    def __iter__(self) -> Iterator[int]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(entries={len(self)})"


_default_cache: InMemoryRecordCache | None = None
_default_lock = threading.Lock()


def get_default_cache() -> InMemoryRecordCache:
    """Get the process-wide record cache, creating it on first use."""
    global _default_cache
    with _default_lock:
        if _default_cache is None:
            _default_cache = InMemoryRecordCache()
        return _default_cache
