"""Shared Twitter-style API constants.

This module centralizes URLs and per-request limits used by the REST
endpoints so the connector can stay small and focused.
"""

from __future__ import annotations

BASE_URL = "https://api.twitter.com"
API_VERSION = "1.1"

# users/lookup accepts at most 100 ids per call
MAX_USERS_PER_LOOKUP = 100

USERS_LOOKUP_PATH = f"/{API_VERSION}/users/lookup.json"
FOLLOWERS_IDS_PATH = f"/{API_VERSION}/followers/ids.json"
FRIENDS_IDS_PATH = f"/{API_VERSION}/friends/ids.json"

# Relation name -> id-list path
ID_LIST_PATHS = {
    "followers": FOLLOWERS_IDS_PATH,
    "friends": FRIENDS_IDS_PATH,
}

# Format of the created_at field, e.g. "Wed Oct 10 20:19:24 +0000 2018"
CREATED_AT_FORMAT = "%a %b %d %H:%M:%S %z %Y"


def get_id_list_path(relation: str) -> str:
    """Get the id-list path for a relation.

    Examples:
        >>> get_id_list_path("followers")
        '/1.1/followers/ids.json'

    Raises:
        ValueError: If relation is not "followers" or "friends"
    """
    try:
        return ID_LIST_PATHS[relation]
    except KeyError:
        raise ValueError(
            f"Unknown relation: {relation!r} (expected one of {sorted(ID_LIST_PATHS)})"
        ) from None
