"""Record cache protocol.

Architecture:
    The lookup engine only needs lookup, existence check and insert. Any
    class implementing these methods can back the engine: the unbounded
    in-memory cache (process lifetime, never evicts) or a bounded cache with
    LRU/TTL eviction.

Design Decision:
    A key that was evicted reads back as absent, which the engine treats
    exactly like a key that was never fetched.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from ...core.exceptions import ValidationError
from ...models import UserRecord


@runtime_checkable
class RecordCache(Protocol):
    """Protocol for concurrent key -> record stores.

    Implementations must be safe under any number of concurrent callers
    without external locking.
    """

    def contains(self, key: int) -> bool:
        """Return True if a record is stored for key."""
        ...

    def get(self, key: int) -> UserRecord | None:
        """Return the record stored for key, or None if absent."""
        ...

    def put(self, key: int, record: UserRecord) -> None:
        """Insert or overwrite the record for key.

        Raises:
            ValidationError: If record.id does not match key
        """
        ...

    def keys(self) -> list[int]:
        """Snapshot of stored keys."""
        ...

    def __len__(self) -> int: ...

    def __contains__(self, key: object) -> bool: ...

    def __iter__(self) -> Iterator[int]: ...


def check_record_key(key: int, record: UserRecord) -> None:
    """Enforce the id-matches-key invariant for a cache insert."""
    if record.id != key:
        raise ValidationError(f"Record id {record.id} does not match cache key {key}")
