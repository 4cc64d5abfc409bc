"""Twitter users/lookup endpoint definition and adapter.

One call resolves up to 100 comma-separated user ids to user objects.
Unknown or suspended ids are silently omitted by the remote side.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from socialgraph.lookup.connectors.twitter.config import (
    CREATED_AT_FORMAT,
    MAX_USERS_PER_LOOKUP,
    USERS_LOOKUP_PATH,
)
from socialgraph.lookup.core import ValidationError
from socialgraph.lookup.models import UserRecord
from socialgraph.lookup.runtime.chunking import BatchPolicy
from socialgraph.lookup.runtime.rest import ResponseAdapter, RestEndpointSpec

logger = logging.getLogger(__name__)


def build_path(params: dict[str, Any]) -> str:
    """Build the users/lookup path."""
    return USERS_LOOKUP_PATH


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for users/lookup."""
    ids = list(params["user_ids"])
    if not ids:
        raise ValueError("users/lookup requires at least one id")
    if len(ids) > MAX_USERS_PER_LOOKUP:
        raise ValueError(
            f"users/lookup accepts at most {MAX_USERS_PER_LOOKUP} ids, got {len(ids)}"
        )
    return {
        "user_id": ",".join(str(int(i)) for i in ids),
        "include_entities": "false",
    }


# Endpoint specification
SPEC = RestEndpointSpec(
    id="users_lookup",
    build_path=build_path,
    build_query=build_query,
    batch_policy=BatchPolicy(max_batch_size=MAX_USERS_PER_LOOKUP),
)


def _parse_created_at(value: Any) -> datetime | None:
    if not value:
        return None
    return datetime.strptime(str(value), CREATED_AT_FORMAT)


def parse_user(row: Any) -> UserRecord:
    """Build a UserRecord from one user object.

    Raises:
        ValidationError: If row is not an object
        KeyError: If id or screen_name is missing
        ValueError: If a field fails conversion or model validation
    """
    if not isinstance(row, dict):
        raise ValidationError(f"Expected a user object, got {type(row).__name__}")
    return UserRecord(
        id=int(row["id"]),
        name=row.get("name") or "",
        screen_name=row["screen_name"],
        followers_count=int(row.get("followers_count", 0)),
        friends_count=int(row.get("friends_count", 0)),
        statuses_count=int(row.get("statuses_count", 0)),
        favourites_count=int(row.get("favourites_count", 0)),
        listed_count=int(row.get("listed_count", 0)),
        description=row.get("description"),
        location=row.get("location"),
        protected=bool(row.get("protected", False)),
        verified=bool(row.get("verified", False)),
        created_at=_parse_created_at(row.get("created_at")),
    )


class Adapter(ResponseAdapter):
    """Adapter for parsing users/lookup response into UserRecord list.

    A row that cannot be turned into a UserRecord is logged and skipped, so
    its id is simply absent from the result like an id the remote omitted.
    """

    def parse(self, response: Any, params: dict[str, Any]) -> list[UserRecord]:
        """Parse users/lookup response.

        Args:
            response: Raw response (list of user objects)
            params: Request parameters containing user_ids

        Returns:
            List of UserRecord objects for the valid rows, in response order

        Raises:
            ValidationError: If the payload is not a list
        """
        if not isinstance(response, list):
            raise ValidationError(f"Expected a list of users, got {type(response).__name__}")
        out: list[UserRecord] = []
        for index, row in enumerate(response):
            try:
                out.append(parse_user(row))
            except (ValidationError, KeyError, TypeError, ValueError) as e:
                logger.warning(
                    "user_row_skipped",
                    extra={
                        "row_index": index,
                        "user_id": row.get("id") if isinstance(row, dict) else None,
                        "error_type": type(e).__name__,
                        "error_message": str(e),
                    },
                )
        return out
