"""Custom exception hierarchy."""

from __future__ import annotations

from collections.abc import Sequence


class LookupServiceError(Exception):
    """Base exception for all library errors."""

    pass


class ProviderError(LookupServiceError):
    """Error from the remote social-graph API or its transport."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(ProviderError):
    """Provider rate limit exceeded."""

    def __init__(self, message: str, retry_after: int = 60) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class FetchError(ProviderError):
    """A single batch could not be fetched or decoded.

    Isolated to its batch: the orchestrator records it and carries on with
    the remaining batches.
    """

    def __init__(
        self,
        message: str,
        batch: Sequence[int] = (),
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.batch = tuple(batch)


class ValidationError(LookupServiceError):
    """Data validation failure."""

    pass
