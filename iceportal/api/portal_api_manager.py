"""
Portal API manager for fetching train information from the on-board portal.

This module handles all communication with the portal API. Each fetch is a
single GET per document with no retries: failures surface immediately as
one of the exceptions in .exceptions and the caller owns retry policy.
"""

import asyncio
import aiohttp
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from ..version import __portal_api_provider__
from ..managers.portal_config import PortalConfig, PortalConfigFactory
from ..models.status import Status
from ..models.trip import Trip
from ..models.train_information import TrainInformation
from .exceptions import (
    PortalAPIException,
    PortalNetworkException,
    PortalHttpStatusException,
    PortalDeserializationException,
)
from .response_parser import PortalResponseParser

logger = logging.getLogger(__name__)


@dataclass
class PortalAPIResponse:
    """Container for a raw portal response."""

    status_code: int
    body: Optional[str]
    timestamp: datetime
    url: str
    source: str = __portal_api_provider__

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class HTTPClient(ABC):
    """Abstract HTTP client interface for dependency injection."""

    @abstractmethod
    async def get(self, url: str) -> PortalAPIResponse:
        """Make HTTP GET request."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close HTTP client."""
        pass


class AioHttpClient(HTTPClient):
    """
    Concrete HTTP client implementation using aiohttp.

    The response body is only read for 2xx responses.
    """

    def __init__(self, timeout_seconds: int = 10, headers: Optional[Dict[str, str]] = None):
        """Initialize HTTP client with timeout and default headers."""
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._headers = dict(headers or {})
        self._session: Optional[aiohttp.ClientSession] = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self._timeout,
                headers=self._headers,
            )
        return self._session

    async def get(self, url: str) -> PortalAPIResponse:
        """
        Make HTTP GET request.

        Raises:
            PortalNetworkException: If the host is unreachable or the request times out
        """
        session = await self._ensure_session()

        try:
            async with session.get(url) as response:
                body = None
                if 200 <= response.status < 300:
                    body = await response.text(errors="replace")
                return PortalAPIResponse(
                    status_code=response.status,
                    body=body,
                    timestamp=datetime.now(),
                    url=url,
                )
        except asyncio.TimeoutError as e:
            raise PortalNetworkException(f"Request to {url} timed out") from e
        except aiohttp.ClientError as e:
            raise PortalNetworkException(f"Network error: {e}") from e

    async def close(self) -> None:
        """Close HTTP client."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None


class TrainInfoClient:
    """
    Client for the on-board portal.

    Stateless apart from the HTTP session: every fetch issues fresh requests
    and returns a new immutable record.
    """

    def __init__(
        self,
        config: Optional[PortalConfig] = None,
        http_client: Optional[HTTPClient] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Portal configuration (defaults to the on-board endpoints)
            http_client: HTTP client implementation (defaults to aiohttp)
        """
        self._config = config or PortalConfigFactory.create_default_config()
        self._http_client = http_client or AioHttpClient(
            timeout_seconds=self._config.timeout_seconds,
            headers=self._config.get_headers(),
        )
        self._parser = PortalResponseParser()
        logger.debug(f"TrainInfoClient initialized for {self._config.status_url}")

    @property
    def config(self) -> PortalConfig:
        return self._config

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def fetch_status(self) -> Status:
        """
        Fetch the status document (speed, position, connectivity).

        Raises:
            PortalNetworkException: For network-related errors
            PortalHttpStatusException: For non-2xx responses
            PortalDeserializationException: For malformed documents
        """
        body = await self._get_document(self._config.status_url)
        try:
            status = self._parser.parse_status(body)
        except PortalDeserializationException as e:
            logger.error(f"Failed to parse status document: {e}")
            raise

        logger.info(f"Fetched status: {status.speed_display}")
        return status

    async def fetch_trip(self) -> Trip:
        """
        Fetch the trip document (train number, stations, delays).

        Raises:
            PortalNetworkException: For network-related errors
            PortalHttpStatusException: For non-2xx responses
            PortalDeserializationException: For malformed documents
        """
        body = await self._get_document(self._config.trip_url)
        try:
            trip = self._parser.parse_trip(body)
        except PortalDeserializationException as e:
            logger.error(f"Failed to parse trip document: {e}")
            raise

        logger.info(f"Fetched trip {trip.train_identifier} with {len(trip.stations)} stops")
        return trip

    async def fetch_train_information(self) -> TrainInformation:
        """
        Fetch a snapshot of the current train state.

        Requests the status document, then the trip document. The first
        failure is raised as-is.

        Returns:
            TrainInformation: Snapshot combining both documents
        """
        status = await self.fetch_status()
        trip = await self.fetch_trip()
        return TrainInformation(status=status, trip=trip)

    async def _get_document(self, url: str) -> str:
        logger.debug(f"Requesting {url}")
        try:
            response = await self._http_client.get(url)
        except PortalNetworkException as e:
            logger.warning(f"Portal unreachable: {e}")
            raise

        if not response.is_success:
            logger.warning(f"Portal returned HTTP {response.status_code} for {url}")
            raise PortalHttpStatusException(response.status_code, url)

        return response.body or ""

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._http_client.close()
        logger.debug("TrainInfoClient closed")


class PortalAPIFactory:
    """
    Factory for creating portal clients.

    Implements Factory pattern for easy instantiation.
    """

    @staticmethod
    def create_client(config: Optional[PortalConfig] = None) -> TrainInfoClient:
        """Create a client using aiohttp."""
        config = config or PortalConfigFactory.create_default_config()
        http_client = AioHttpClient(
            timeout_seconds=config.timeout_seconds,
            headers=config.get_headers(),
        )
        return TrainInfoClient(config, http_client)

    @staticmethod
    def create_client_for_base_url(base_url: str, **kwargs) -> TrainInfoClient:
        """Create a client talking to a portal at a custom base URL."""
        config = PortalConfigFactory.create_for_base_url(base_url, **kwargs)
        return PortalAPIFactory.create_client(config)


async def fetch_train_information(config: Optional[PortalConfig] = None) -> TrainInformation:
    """Fetch one snapshot with a short-lived client."""
    async with PortalAPIFactory.create_client(config) as client:
        return await client.fetch_train_information()


__all__ = [
    "PortalAPIException",
    "PortalNetworkException",
    "PortalHttpStatusException",
    "PortalDeserializationException",
    "PortalAPIResponse",
    "HTTPClient",
    "AioHttpClient",
    "TrainInfoClient",
    "PortalAPIFactory",
    "fetch_train_information",
]
