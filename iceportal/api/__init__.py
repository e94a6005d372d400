"""
API integration for the ICE portal client.

This module handles communication with the on-board portal,
including error handling and response parsing.
"""

from .exceptions import (
    PortalAPIException,
    PortalNetworkException,
    PortalHttpStatusException,
    PortalDeserializationException,
    NetworkError,
    HttpStatusError,
    DeserializationError,
)
from .portal_api_manager import (
    AioHttpClient,
    HTTPClient,
    PortalAPIFactory,
    PortalAPIResponse,
    TrainInfoClient,
    fetch_train_information,
)
from .response_parser import PortalResponseParser

__all__ = [
    "PortalAPIException",
    "PortalNetworkException",
    "PortalHttpStatusException",
    "PortalDeserializationException",
    "NetworkError",
    "HttpStatusError",
    "DeserializationError",
    "AioHttpClient",
    "HTTPClient",
    "PortalAPIFactory",
    "PortalAPIResponse",
    "TrainInfoClient",
    "fetch_train_information",
    "PortalResponseParser",
]
