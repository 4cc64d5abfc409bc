"""Twitter REST connector and endpoints."""

from .provider import TwitterRESTConnector

__all__ = ["TwitterRESTConnector"]
