"""High-level client for bulk user lookups.

Wraps a connector and a LookupEngine behind a developer-friendly API:

- lookup(ids) for an arbitrary number of user ids
- lookup_followers / lookup_friends to resolve an account's id-list first
- async context manager that closes the HTTP session

Notes:
- The engine and its cache are shared by every call on this client; by
  default the cache is the process-wide one, so separate clients also share
  cached records.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..connectors.twitter import TwitterRESTConnector
from ..connectors.twitter.rest.endpoints import get_endpoint_spec
from ..models import UserRecord
from ..runtime.cache import RecordCache
from ..runtime.chunking import BatchPolicy, LookupReport
from ..runtime.lookup import LookupEngine


class UserLookupClient:
    """Bulk user lookups with caching and batch failure isolation."""

    def __init__(
        self,
        connector: TwitterRESTConnector | None = None,
        *,
        cache: RecordCache | None = None,
        policy: BatchPolicy | None = None,
        bearer_token: str | None = None,
    ) -> None:
        self._connector = connector or TwitterRESTConnector(bearer_token=bearer_token)
        endpoint_policy = get_endpoint_spec("users_lookup").batch_policy
        if policy is None:
            policy = endpoint_policy
        elif policy.max_batch_size > endpoint_policy.max_batch_size:
            raise ValueError(
                f"max_batch_size {policy.max_batch_size} exceeds the users_lookup limit "
                f"of {endpoint_policy.max_batch_size}"
            )
        self._engine = LookupEngine(self._connector, cache=cache, policy=policy)

    @property
    def engine(self) -> LookupEngine:
        return self._engine

    async def lookup(self, user_ids: Iterable[int]) -> list[UserRecord]:
        """Resolve user ids to records; ids whose batch failed are absent."""
        return await self._engine.lookup(user_ids)

    async def lookup_with_report(self, user_ids: Iterable[int]) -> LookupReport:
        """Resolve user ids and report which batches failed."""
        return await self._engine.lookup_with_report(user_ids)

    async def lookup_followers(self, screen_name: str) -> list[UserRecord]:
        """Resolve every follower of an account."""
        ids = await self._connector.fetch_ids(screen_name, relation="followers")
        return await self._engine.lookup(ids)

    async def lookup_friends(self, screen_name: str) -> list[UserRecord]:
        """Resolve every account an account follows."""
        ids = await self._connector.fetch_ids(screen_name, relation="friends")
        return await self._engine.lookup(ids)

    async def refresh(self, user_ids: Iterable[int]) -> list[UserRecord]:
        """Re-fetch user ids and overwrite their cached records."""
        return await self._engine.refresh(user_ids)

    async def close(self) -> None:
        await self._connector.close()

    async def __aenter__(self) -> UserLookupClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
