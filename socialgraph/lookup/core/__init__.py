"""Core primitives shared across the library."""

from .exceptions import (
    FetchError,
    LookupServiceError,
    ProviderError,
    RateLimitError,
    ValidationError,
)

__all__ = [
    "LookupServiceError",
    "ProviderError",
    "RateLimitError",
    "FetchError",
    "ValidationError",
]
