"""Shared fixtures for unit tests."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence

import pytest

from socialgraph.lookup.core import FetchError
from socialgraph.lookup.models import UserRecord
from socialgraph.lookup.runtime.cache import InMemoryRecordCache
from socialgraph.lookup.runtime.chunking import BatchOutcome


def make_user(user_id: int, **overrides) -> UserRecord:
    """Build a UserRecord with predictable fields for an id."""
    fields = {
        "id": user_id,
        "name": f"User {user_id}",
        "screen_name": f"user{user_id}",
        "followers_count": user_id,
        "friends_count": 2 * user_id,
    }
    fields.update(overrides)
    return UserRecord(**fields)


class FakeFetcher:
    """RemoteFetcher returning one record per requested id.

    Batches for which ``fail_when`` returns True produce a failed outcome.
    """

    def __init__(
        self,
        fail_when: Callable[[tuple[int, ...]], bool] | None = None,
        delay: float = 0.0,
    ) -> None:
        self.calls: list[tuple[int, ...]] = []
        self.fail_when = fail_when or (lambda batch: False)
        self.delay = delay
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch_batch(self, keys: Sequence[int]) -> BatchOutcome:
        batch = tuple(keys)
        self.calls.append(batch)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            # Always yield so sibling batches interleave.
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1
        if self.fail_when(batch):
            return BatchOutcome.failure(batch, FetchError("remote error", batch=batch))
        return BatchOutcome.success(batch, [make_user(k) for k in batch])


@pytest.fixture
def cache() -> InMemoryRecordCache:
    """Fresh, empty cache (never the process-wide one)."""
    return InMemoryRecordCache()


@pytest.fixture
def fetcher() -> FakeFetcher:
    """Fetcher that succeeds for every batch."""
    return FakeFetcher()


@pytest.fixture
def user_factory() -> Callable[..., UserRecord]:
    return make_user
