"""Batch execution logic for fetching and merging batches.

This module provides the BatchExecutor class that fans batch plans out to a
fetch function, isolates per-batch failures, and feeds fetched records into
the shared cache.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from time import perf_counter

from ...core.exceptions import FetchError
from ...models import UserRecord
from ..cache import RecordCache
from .definitions import BatchOutcome, BatchPlan, BatchPolicy, LookupReport
from .planners import BatchPlanner
from .telemetry import log_batch_completed, log_batch_error

FetchBatch = Callable[[tuple[int, ...]], Awaitable[BatchOutcome]]


class BatchExecutor:
    """Executes batch plans concurrently and merges results into a cache.

    Every batch is dispatched without waiting for earlier ones. With
    ``policy.max_concurrency`` set, a semaphore bounds the number of batches
    in flight; every batch is still attempted.
    """

    def __init__(self, policy: BatchPolicy | None = None, *, endpoint_id: str = "unknown") -> None:
        """Initialize batch executor.

        Args:
            policy: Batching policy for the endpoint
            endpoint_id: Endpoint identifier used in telemetry
        """
        self._policy = policy or BatchPolicy()
        self._endpoint_id = endpoint_id
        self._planner = BatchPlanner(self._policy, endpoint_id=endpoint_id)

    @property
    def policy(self) -> BatchPolicy:
        return self._policy

    async def execute(
        self,
        *,
        keys: Iterable[int],
        fetch_batch: FetchBatch,
        cache: RecordCache,
    ) -> LookupReport:
        """Fetch all keys in batches and merge successful records into cache.

        Args:
            keys: Keys missing from the cache
            fetch_batch: Async function that takes a key tuple and returns a BatchOutcome
            cache: Cache receiving every successfully fetched record

        Returns:
            LookupReport with one outcome per batch; ``records`` holds the
            fresh records only
        """
        plans = self._planner.plan(keys)
        report = LookupReport(batches_dispatched=len(plans))
        if not plans:
            return report

        semaphore = (
            asyncio.Semaphore(self._policy.max_concurrency)
            if self._policy.max_concurrency is not None
            else None
        )

        async def run(plan: BatchPlan) -> BatchOutcome:
            if semaphore is None:
                return await self._run_batch(plan, fetch_batch)
            async with semaphore:
                return await self._run_batch(plan, fetch_batch)

        outcomes = await asyncio.gather(*(run(plan) for plan in plans))

        for outcome in outcomes:
            report.outcomes.append(outcome)
            if not outcome.ok:
                report.batches_failed += 1
                continue
            for record in outcome.records:
                cache.put(record.id, record)
                report.records.append(record)

        return report

    async def resolve_missing(
        self,
        missing: Iterable[int],
        fetch_batch: FetchBatch,
        cache: RecordCache,
    ) -> list[UserRecord]:
        """Fetch missing keys and return the records that were obtained.

        May return fewer records than keys when a batch failed or the remote
        side omitted ids.
        """
        report = await self.execute(keys=missing, fetch_batch=fetch_batch, cache=cache)
        return report.records

    async def _run_batch(self, plan: BatchPlan, fetch_batch: FetchBatch) -> BatchOutcome:
        """Run one batch, converting any raised error into a failed outcome."""
        start = perf_counter()
        try:
            outcome = await fetch_batch(plan.keys)
        except Exception as e:
            error = e if isinstance(e, FetchError) else FetchError(str(e), batch=plan.keys)
            outcome = BatchOutcome.failure(plan.keys, error)
        latency_ms = (perf_counter() - start) * 1000.0

        if outcome.ok:
            log_batch_completed(
                endpoint_id=self._endpoint_id,
                batch_index=plan.batch_index,
                keys_requested=len(plan),
                records_received=len(outcome.records),
                latency_ms=latency_ms,
            )
        else:
            error = outcome.error
            log_batch_error(
                endpoint_id=self._endpoint_id,
                batch_index=plan.batch_index,
                keys_requested=len(plan),
                error_type=type(error).__name__,
                error_message=str(error),
            )
        return outcome
