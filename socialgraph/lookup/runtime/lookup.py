"""Cached, batched bulk-lookup engine.

Architecture:
    A lookup is a stateless pipeline over a shared cache:
    1. partition the requested keys into cache hits and misses
    2. fetch the misses in bounded batches, concurrently (BatchExecutor)
    3. read the hits back from the cache
    4. return fresh records followed by cached records

Design Decisions:
    - Remote failures degrade the result instead of raising: keys whose
      batch failed are simply absent. lookup_with_report() exposes which.
    - Misses are de-duplicated before batching so repeated input keys never
      trigger repeated remote calls.
    - No ordering guarantee relative to the input; duplicate input keys that
      were cache hits yield duplicate records.

See Also:
    - BatchExecutor: Fan-out, failure isolation and cache merge
    - RecordCache: Protocol for cache backends
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from time import perf_counter
from typing import Protocol

from ..models import UserRecord
from .cache import RecordCache, get_default_cache
from .chunking import BatchExecutor, BatchOutcome, BatchPolicy, LookupReport
from .chunking.telemetry import log_lookup_complete

logger = logging.getLogger(__name__)


class RemoteFetcher(Protocol):
    """Performs one remote call for one batch of keys."""

    async def fetch_batch(self, keys: Sequence[int]) -> BatchOutcome:
        """Fetch and decode records for at most one batch of keys.

        Transport errors, error statuses and undecodable payloads are
        returned as a failed outcome, never raised.
        """
        ...


class IdListFetcher(Protocol):
    """Resolves a named subject to its related key collection."""

    async def fetch_ids(self, screen_name: str, *, relation: str = "followers") -> list[int]:
        """Fetch follower or friend ids for an account in a single call."""
        ...


def partition(keys: Iterable[int], cache: RecordCache) -> tuple[list[int], list[int]]:
    """Split keys into cache hits and misses.

    One ``contains`` check per key. Every input key lands in exactly one of
    the two lists; input order and duplicates are preserved in each.

    Args:
        keys: Requested keys
        cache: Cache to check

    Returns:
        Tuple of (cached_hits, missing)
    """
    cached_hits: list[int] = []
    missing: list[int] = []
    for key in keys:
        if cache.contains(key):
            cached_hits.append(key)
        else:
            missing.append(key)
    return cached_hits, missing


def _unique(keys: Iterable[int]) -> list[int]:
    return list(dict.fromkeys(keys))


class LookupEngine:
    """Bulk lookup over a shared cache and a batching remote fetcher."""

    def __init__(
        self,
        fetcher: RemoteFetcher,
        *,
        cache: RecordCache | None = None,
        policy: BatchPolicy | None = None,
        endpoint_id: str = "users_lookup",
    ) -> None:
        """Initialize lookup engine.

        Args:
            fetcher: Remote fetcher for single batches
            cache: Record cache (defaults to the process-wide cache)
            policy: Batching policy (defaults to 100 keys per batch, full fan-out)
            endpoint_id: Endpoint identifier used in telemetry
        """
        self._fetcher = fetcher
        self._cache = cache if cache is not None else get_default_cache()
        self._endpoint_id = endpoint_id
        self._executor = BatchExecutor(policy, endpoint_id=endpoint_id)

    @property
    def cache(self) -> RecordCache:
        return self._cache

    @property
    def policy(self) -> BatchPolicy:
        return self._executor.policy

    async def lookup(self, keys: Iterable[int]) -> list[UserRecord]:
        """Resolve keys to records, fetching only what the cache lacks.

        Never raises for remote-side errors; returns a partial result instead.
        """
        report = await self.lookup_with_report(keys)
        return report.records

    async def lookup_with_report(self, keys: Iterable[int]) -> LookupReport:
        """Resolve keys and return per-batch outcomes alongside the records."""
        start = perf_counter()
        cached_hits, missing = partition(keys, self._cache)
        logger.debug(
            "cache_partition",
            extra={
                "endpoint_id": self._endpoint_id,
                "cached_hits": len(cached_hits),
                "missing": len(missing),
            },
        )

        report = await self._executor.execute(
            keys=_unique(missing),
            fetch_batch=self._fetcher.fetch_batch,
            cache=self._cache,
        )

        for key in cached_hits:
            record = self._cache.get(key)
            # Only an evicting cache can drop a hit between partition and read-back.
            if record is not None:
                report.records.append(record)
        report.cached_keys = cached_hits

        log_lookup_complete(
            endpoint_id=self._endpoint_id,
            report=report,
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )
        return report

    async def refresh(self, keys: Iterable[int]) -> list[UserRecord]:
        """Re-fetch keys regardless of cache state, overwriting cached entries."""
        report = await self._executor.execute(
            keys=_unique(keys),
            fetch_batch=self._fetcher.fetch_batch,
            cache=self._cache,
        )
        return report.records
