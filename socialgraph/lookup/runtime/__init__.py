"""Runtime orchestration components."""

from .cache import BoundedRecordCache, InMemoryRecordCache, RecordCache, get_default_cache
from .chunking import (
    BatchExecutor,
    BatchOutcome,
    BatchPlan,
    BatchPlanner,
    BatchPolicy,
    LookupReport,
    chunk,
)
from .lookup import IdListFetcher, LookupEngine, RemoteFetcher, partition

__all__ = [
    "LookupEngine",
    "RemoteFetcher",
    "IdListFetcher",
    "partition",
    "chunk",
    "BatchPlanner",
    "BatchExecutor",
    "BatchPolicy",
    "BatchPlan",
    "BatchOutcome",
    "LookupReport",
    "RecordCache",
    "InMemoryRecordCache",
    "BoundedRecordCache",
    "get_default_cache",
]
