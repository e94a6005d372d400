"""
Exceptions raised by the ICE portal client.

Every failure of a fetch surfaces as exactly one of the subclasses of
PortalAPIException below.
"""

from typing import Optional


class PortalAPIException(Exception):
    """Base exception for portal API-related errors."""

    pass


class PortalNetworkException(PortalAPIException):
    """Exception for network-related errors (unreachable host, timeout)."""

    pass


class PortalHttpStatusException(PortalAPIException):
    """Exception for non-success HTTP status codes."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        message = f"Portal returned HTTP {status_code}"
        if url:
            message += f" for {url}"
        super().__init__(message)


class PortalDeserializationException(PortalAPIException):
    """Exception for response bodies that do not match the expected shape."""

    pass


# Short names for the three failure kinds
NetworkError = PortalNetworkException
HttpStatusError = PortalHttpStatusException
DeserializationError = PortalDeserializationException
