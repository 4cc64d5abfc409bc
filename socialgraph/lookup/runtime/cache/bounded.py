"""Bounded record cache with LRU and optional TTL eviction."""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from collections.abc import Callable, Iterator

from ...models import UserRecord
from .base import check_record_key


class BoundedRecordCache:
    """Drop-in replacement for InMemoryRecordCache that evicts.

    The least recently used entry is dropped once ``max_entries`` is
    exceeded. With ``ttl_seconds`` set, entries older than the TTL read back
    as absent and are removed lazily.
    """

    def __init__(
        self,
        max_entries: int = 10_000,
        *,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self._max_entries = max_entries
        self._ttl = ttl_seconds
        self._clock = clock
        # key -> (record, stored_at)
        self._entries: OrderedDict[int, tuple[UserRecord, float]] = OrderedDict()
        self._lock = threading.Lock()
        self.evictions = 0

    def _live(self, key: int) -> UserRecord | None:
        # Caller holds the lock.
        entry = self._entries.get(key)
        if entry is None:
            return None
        record, stored_at = entry
        if self._ttl is not None and self._clock() - stored_at >= self._ttl:
            del self._entries[key]
            self.evictions += 1
            return None
        self._entries.move_to_end(key)
        return record

    def contains(self, key: int) -> bool:
        with self._lock:
            return self._live(key) is not None

    def get(self, key: int) -> UserRecord | None:
        with self._lock:
            return self._live(key)

    def put(self, key: int, record: UserRecord) -> None:
        check_record_key(key, record)
        with self._lock:
            self._entries[key] = (record, self._clock())
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)
                self.evictions += 1

    def keys(self) -> list[int]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.contains(key)

    def __iter__(self) -> Iterator[int]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(entries={len(self)}, max_entries={self._max_entries}, "
            f"ttl_seconds={self._ttl})"
        )
