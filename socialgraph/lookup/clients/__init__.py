"""High-level clients."""

from .user_lookup import UserLookupClient

__all__ = ["UserLookupClient"]
