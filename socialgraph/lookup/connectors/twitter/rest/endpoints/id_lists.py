"""Twitter followers/ids and friends/ids endpoint definitions and adapter.

Both endpoints resolve a screen name to a list of numeric ids in a single,
unbatched call.
"""

from __future__ import annotations

from typing import Any

from socialgraph.lookup.connectors.twitter.config import get_id_list_path
from socialgraph.lookup.core import ValidationError
from socialgraph.lookup.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for an id-list endpoint."""
    screen_name = str(params["screen_name"]).strip().lstrip("@")
    if not screen_name:
        raise ValueError("screen_name must not be empty")
    query: dict[str, Any] = {"screen_name": screen_name, "stringify_ids": "false"}
    if params.get("count") is not None:
        query["count"] = int(params["count"])
    return query


FOLLOWERS_SPEC = RestEndpointSpec(
    id="followers_ids",
    build_path=lambda params: get_id_list_path("followers"),
    build_query=build_query,
)

FRIENDS_SPEC = RestEndpointSpec(
    id="friends_ids",
    build_path=lambda params: get_id_list_path("friends"),
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing an id-list response into a list of ints."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[int]:
        """Parse an id-list response.

        Accepts either the documented ``{"ids": [...]}`` envelope or a bare
        list of ids.
        """
        ids = response.get("ids") if isinstance(response, dict) else response
        if not isinstance(ids, list):
            raise ValidationError("Id-list response has no 'ids' array")
        return [int(i) for i in ids]
