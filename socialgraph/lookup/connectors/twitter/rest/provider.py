"""Twitter REST connector.

This connector resolves single batches of user ids and single id-lists
against the Twitter-style REST API. It implements the RemoteFetcher and
IdListFetcher protocols used by the lookup engine.

Architecture:
    The connector uses the endpoint registry to look up specs and adapters,
    then uses RestRunner to execute requests. Batch failures are returned as
    failed BatchOutcome values and never raised past fetch_batch().
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

import aiohttp

from socialgraph.lookup.connectors.twitter.config import BASE_URL, MAX_USERS_PER_LOOKUP
from socialgraph.lookup.core import FetchError, LookupServiceError, ProviderError
from socialgraph.lookup.runtime.chunking import BatchOutcome
from socialgraph.lookup.runtime.rest import RestRunner, RESTTransport

from .endpoints import get_endpoint_adapter, get_endpoint_spec

logger = logging.getLogger(__name__)

# Transport and decode failures that are reported as provider errors
_REMOTE_ERRORS = (
    LookupServiceError,
    aiohttp.ClientError,
    asyncio.TimeoutError,
    KeyError,
    TypeError,
    ValueError,  # includes pydantic.ValidationError
)

_RELATION_ENDPOINTS = {
    "followers": "followers_ids",
    "friends": "friends_ids",
}


class TwitterRESTConnector:
    """REST connector for user lookups and follower/friend id lists."""

    def __init__(
        self,
        *,
        base_url: str = BASE_URL,
        bearer_token: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Twitter REST connector.

        Args:
            base_url: API base URL
            bearer_token: Optional static bearer token sent on every request
            timeout: Total request timeout in seconds
        """
        headers = {"Authorization": f"Bearer {bearer_token}"} if bearer_token else None
        self._transport = RESTTransport(base_url=base_url, timeout=timeout, headers=headers)
        self._runner = RestRunner(self._transport)

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch data from a REST endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "users_lookup", "followers_ids")
            params: Request parameters

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    async def fetch_batch(self, keys: Sequence[int]) -> BatchOutcome:
        """Resolve one batch of at most 100 user ids.

        Args:
            keys: User ids for a single users/lookup call

        Returns:
            Successful outcome with the decoded records, or a failed outcome
            carrying a FetchError for transport, status or decode failures
        """
        batch = tuple(keys)
        if len(batch) > MAX_USERS_PER_LOOKUP:
            raise ValueError(
                f"Batch of {len(batch)} ids exceeds the limit of {MAX_USERS_PER_LOOKUP}"
            )
        try:
            records = await self.fetch("users_lookup", {"user_ids": batch})
        except ProviderError as e:
            return BatchOutcome.failure(
                batch, FetchError(str(e), batch=batch, status_code=e.status_code)
            )
        except _REMOTE_ERRORS as e:
            return BatchOutcome.failure(
                batch, FetchError(f"{type(e).__name__}: {e}", batch=batch)
            )
        return BatchOutcome.success(batch, records)

    async def fetch_ids(self, screen_name: str, *, relation: str = "followers") -> list[int]:
        """Fetch follower or friend ids for an account.

        Args:
            screen_name: Account handle (leading "@" is ignored)
            relation: "followers" or "friends"

        Returns:
            List of account ids

        Raises:
            ValueError: If relation is unknown or screen_name is blank
            ProviderError: If the remote call fails or the response cannot be decoded
        """
        endpoint_id = _RELATION_ENDPOINTS.get(relation)
        if endpoint_id is None:
            raise ValueError(f"Unknown relation: {relation!r}")
        if not screen_name.strip().lstrip("@"):
            raise ValueError("screen_name must not be empty")
        try:
            ids = await self.fetch(endpoint_id, {"screen_name": screen_name})
        except ProviderError:
            raise
        except _REMOTE_ERRORS as e:
            raise ProviderError(
                f"Failed to fetch {relation} of {screen_name}: {type(e).__name__}: {e}"
            ) from e
        logger.info(
            "id_list_fetched",
            extra={"endpoint_id": endpoint_id, "screen_name": screen_name, "ids": len(ids)},
        )
        return ids

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._transport.close()

    async def __aenter__(self) -> TwitterRESTConnector:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
