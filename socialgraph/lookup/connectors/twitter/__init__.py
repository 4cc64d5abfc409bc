"""Twitter connector implementation."""

from .rest.provider import TwitterRESTConnector

__all__ = ["TwitterRESTConnector"]
