"""Twitter REST endpoint registry.

This module exports all endpoint specifications and adapters from the
modular endpoint structure.
"""

from __future__ import annotations

from socialgraph.lookup.runtime.rest import ResponseAdapter, RestEndpointSpec

from . import id_lists, users_lookup

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "users_lookup": (users_lookup.SPEC, users_lookup.Adapter),
    "followers_ids": (id_lists.FOLLOWERS_SPEC, id_lists.Adapter),
    "friends_ids": (id_lists.FRIENDS_SPEC, id_lists.Adapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "users_lookup", "followers_ids")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "users_lookup", "followers_ids")

    Returns:
        Adapter class if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    """List all available endpoint IDs."""
    return list(_ENDPOINT_REGISTRY.keys())
