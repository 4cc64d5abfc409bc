"""Async HTTP client wrapper over aiohttp."""

from __future__ import annotations

from typing import Any

import aiohttp

from ...core.exceptions import ProviderError, RateLimitError


class HTTPClient:
    """Async HTTP client with a shared session and error mapping.

    HTTP 429 is raised as RateLimitError, any other error status as
    ProviderError carrying the status code.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    def _build_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def _handle_response(self, response: aiohttp.ClientResponse) -> Any:
        if response.status == 429:
            retry_after = response.headers.get("Retry-After") if response.headers else None
            raise RateLimitError(
                f"Rate limit exceeded for {response.url}",
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else 60,
            )
        try:
            response.raise_for_status()
        except aiohttp.ClientResponseError as e:
            raise ProviderError(f"HTTP {e.status}: {e.message}", status_code=e.status) from e
        return await response.json()

    async def get(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET request returning the decoded JSON body."""
        async with self.session.get(self._build_url(url), params=params) as response:
            return await self._handle_response(response)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
