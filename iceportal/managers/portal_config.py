"""
Portal configuration for the ICE portal client.

This module holds the settings the client needs to reach the on-board
portal. The endpoints are fixed on a real train, but are kept configurable
so the client can be pointed at a mock server.
"""

import logging
from pydantic import BaseModel, Field, field_validator

from ..version import (
    __version__,
    __portal_status_path__,
    __portal_trip_path__,
    __default_user_agent__,
    get_portal_info,
)

logger = logging.getLogger(__name__)

_PORTAL_INFO = get_portal_info()


class PortalConfig(BaseModel):
    """
    Configuration for portal access.

    Follows Single Responsibility Principle - only responsible for
    portal configuration data and validation.
    """

    # Endpoint settings
    status_url: str = Field(
        default=_PORTAL_INFO["status_url"],
        description="URL of the JSON status document",
    )
    trip_url: str = Field(
        default=_PORTAL_INFO["trip_url"],
        description="URL of the JSON trip document",
    )

    # Request settings
    user_agent: str = Field(
        default=__default_user_agent__,
        description="User-Agent header sent with every request",
    )
    timeout_seconds: int = Field(
        default=10,
        ge=1,
        le=60,
        description="Total request timeout",
    )

    # Metadata
    api_provider: str = Field(
        default=_PORTAL_INFO["provider"],
        description="Portal API provider name",
    )
    config_version: str = Field(
        default=__version__,
        description="Portal configuration version",
    )

    @field_validator("status_url", "trip_url")
    @classmethod
    def validate_url(cls, v):
        """Validate endpoint URLs are absolute HTTP URLs."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("Endpoint URL must start with http:// or https://")
        return v

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, v):
        """Validate user agent is not empty."""
        if not v.strip():
            raise ValueError("User agent cannot be empty")
        return v.strip()

    def get_headers(self) -> dict:
        """Get HTTP headers for portal requests."""
        return {"User-Agent": self.user_agent, "Accept": "application/json"}

    def to_summary_dict(self) -> dict:
        """Get configuration summary for display."""
        return {
            "status_url": self.status_url,
            "trip_url": self.trip_url,
            "timeout": f"{self.timeout_seconds} seconds",
            "api_provider": self.api_provider,
            "config_version": self.config_version,
        }


class PortalConfigFactory:
    """
    Factory for creating portal configurations.

    Implements Factory pattern for configuration creation.
    """

    @staticmethod
    def create_default_config() -> PortalConfig:
        """Create configuration for the on-board portal."""
        logger.info("Creating default portal configuration")
        return PortalConfig()

    @staticmethod
    def create_for_base_url(base_url: str, **kwargs) -> PortalConfig:
        """Create configuration with both endpoints rooted at base_url."""
        base_url = base_url.rstrip("/")
        config_data = {
            "status_url": f"{base_url}{__portal_status_path__}",
            "trip_url": f"{base_url}{__portal_trip_path__}",
        }
        config_data.update(kwargs)
        logger.debug(f"Creating portal configuration for {base_url}")
        return PortalConfig(**config_data)
