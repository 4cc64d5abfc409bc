"""Batch planning logic for splitting key collections.

This module provides the ``chunk`` primitive and the BatchPlanner class that
turns a collection of keys into bounded-size remote calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice

from .definitions import BatchPlan, BatchPolicy
from .telemetry import log_batch_plan


def chunk(keys: Iterable[int], max_size: int) -> Iterator[tuple[int, ...]]:
    """Split keys into ordered groups of at most ``max_size``.

    The input is consumed through a single iterator, so it is enumerated
    exactly once. Every group holds ``max_size`` keys except possibly the
    last one. An empty input yields no groups.

    Args:
        keys: Keys to split (any iterable, including generators)
        max_size: Maximum group size

    Returns:
        Iterator of key tuples

    Raises:
        ValueError: If max_size is not positive
    """
    if max_size <= 0:
        raise ValueError(f"max_size must be positive, got {max_size}")
    return _iter_chunks(iter(keys), max_size)


def _iter_chunks(it: Iterator[int], max_size: int) -> Iterator[tuple[int, ...]]:
    while batch := tuple(islice(it, max_size)):
        yield batch


class BatchPlanner:
    """Plans batches for a bulk lookup.

    The planner takes the keys missing from the cache and a batch policy,
    then determines how to split them into remote calls that respect the
    endpoint's per-request limit.
    """

    def __init__(self, policy: BatchPolicy | None = None, *, endpoint_id: str = "unknown") -> None:
        """Initialize batch planner.

        Args:
            policy: Batching policy for the endpoint
            endpoint_id: Endpoint identifier used in telemetry
        """
        self._policy = policy or BatchPolicy()
        self._endpoint_id = endpoint_id

    def plan(self, keys: Iterable[int]) -> list[BatchPlan]:
        """Plan batches for a set of keys.

        Args:
            keys: Keys to fetch, in dispatch order

        Returns:
            List of batch plans (empty when there is nothing to fetch)
        """
        plans = [
            BatchPlan(keys=batch, batch_index=index)
            for index, batch in enumerate(chunk(keys, self._policy.max_batch_size))
        ]

        log_batch_plan(
            endpoint_id=self._endpoint_id,
            total_keys=sum(len(p) for p in plans),
            total_batches=len(plans),
            max_batch_size=self._policy.max_batch_size,
        )

        return plans
