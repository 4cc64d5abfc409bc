"""Social-graph lookup - batched, cached bulk user lookups."""

from .clients import UserLookupClient
from .connectors.twitter import TwitterRESTConnector
from .core import (
    FetchError,
    LookupServiceError,
    ProviderError,
    RateLimitError,
    ValidationError,
)
from .models import UserRecord
from .runtime import (
    BatchOutcome,
    BatchPolicy,
    BoundedRecordCache,
    InMemoryRecordCache,
    LookupEngine,
    LookupReport,
    RecordCache,
    chunk,
    get_default_cache,
    partition,
)

__version__ = "0.1.0"

__all__ = [
    # Clients
    "UserLookupClient",
    "TwitterRESTConnector",
    # Engine
    "LookupEngine",
    "LookupReport",
    "BatchOutcome",
    "BatchPolicy",
    "chunk",
    "partition",
    # Caches
    "RecordCache",
    "InMemoryRecordCache",
    "BoundedRecordCache",
    "get_default_cache",
    # Models
    "UserRecord",
    # Exceptions
    "LookupServiceError",
    "ProviderError",
    "RateLimitError",
    "FetchError",
    "ValidationError",
]
