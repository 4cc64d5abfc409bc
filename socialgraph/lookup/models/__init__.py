"""Data models for social-graph entities.

All models are immutable (frozen=True) pydantic v2 models; a record is built
once from a decoded API response and shared freely afterwards.
"""

from .user import UserRecord

__all__ = ["UserRecord"]
