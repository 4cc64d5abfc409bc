"""Batching metadata definitions and policy structures.

This module defines the data structures used to describe how a bulk lookup
is split into remote calls and what each call produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...core.exceptions import FetchError
from ...models import UserRecord

DEFAULT_MAX_BATCH_SIZE = 100


@dataclass(frozen=True)
class BatchPolicy:
    """Batching policy for a bulk-lookup endpoint.

    Attributes:
        max_batch_size: Maximum number of keys sent in one remote call
        max_concurrency: Maximum batches in flight at once (None = all of them)
    """

    max_batch_size: int = DEFAULT_MAX_BATCH_SIZE
    max_concurrency: int | None = None

    def __post_init__(self) -> None:
        """Validate policy configuration."""
        if self.max_batch_size <= 0:
            raise ValueError(f"max_batch_size must be positive, got {self.max_batch_size}")
        if self.max_concurrency is not None and self.max_concurrency <= 0:
            raise ValueError(f"max_concurrency must be positive, got {self.max_concurrency}")


@dataclass(frozen=True)
class BatchPlan:
    """Plan for a single batch.

    Attributes:
        keys: Ordered keys sent in this batch
        batch_index: Zero-based index of this batch in the overall plan
    """

    keys: tuple[int, ...]
    batch_index: int = 0

    def __len__(self) -> int:
        return len(self.keys)


@dataclass(frozen=True)
class BatchOutcome:
    """Explicit success/failure value for one remote batch call.

    Exactly one of ``records`` (possibly empty) or ``error`` is meaningful:
    a failed outcome always carries an error and no records.
    """

    keys: tuple[int, ...]
    records: tuple[UserRecord, ...] = ()
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, keys: tuple[int, ...], records: list[UserRecord]) -> BatchOutcome:
        return cls(keys=tuple(keys), records=tuple(records))

    @classmethod
    def failure(cls, keys: tuple[int, ...], error: FetchError) -> BatchOutcome:
        return cls(keys=tuple(keys), error=error)


@dataclass
class LookupReport:
    """Result of a bulk lookup with per-batch diagnostics.

    Attributes:
        records: Fresh records followed by cache hits
        outcomes: One outcome per dispatched batch, in plan order
        cached_keys: Keys answered from the cache
        batches_dispatched: Number of remote calls issued
        batches_failed: Number of remote calls that failed
    """

    records: list[UserRecord] = field(default_factory=list)
    outcomes: list[BatchOutcome] = field(default_factory=list)
    cached_keys: list[int] = field(default_factory=list)
    batches_dispatched: int = 0
    batches_failed: int = 0

    @property
    def failed_keys(self) -> list[int]:
        """Keys whose batch failed, in plan order."""
        return [key for outcome in self.outcomes if not outcome.ok for key in outcome.keys]

    @property
    def fresh_records(self) -> list[UserRecord]:
        return [record for outcome in self.outcomes for record in outcome.records]
