"""Record caches shared by concurrent lookups."""

from .base import RecordCache, check_record_key
from .bounded import BoundedRecordCache
from .memory import InMemoryRecordCache, get_default_cache

__all__ = [
    "RecordCache",
    "InMemoryRecordCache",
    "BoundedRecordCache",
    "get_default_cache",
    "check_record_key",
]
