"""Generic batching layer for bulk lookups.

This module provides reusable logic for splitting an unbounded key set into
bounded remote calls, running them concurrently, and merging the results.

Architecture:
    The batching layer consists of:
    - definitions.py: Batch metadata structures (BatchPolicy, BatchPlan, BatchOutcome, LookupReport)
    - planners.py: Batch planning logic (chunk, BatchPlanner)
    - executors.py: Batch execution logic (fan-out, failure isolation, cache merge)
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import (
    DEFAULT_MAX_BATCH_SIZE,
    BatchOutcome,
    BatchPlan,
    BatchPolicy,
    LookupReport,
)
from .executors import BatchExecutor, FetchBatch
from .planners import BatchPlanner, chunk

__all__ = [
    "DEFAULT_MAX_BATCH_SIZE",
    "BatchPolicy",
    "BatchPlan",
    "BatchOutcome",
    "LookupReport",
    "BatchPlanner",
    "BatchExecutor",
    "FetchBatch",
    "chunk",
]
