"""
Version information for the ICE portal client.

Centralized version management for the library, including the portal
endpoints the client talks to by default.
"""

# Core library information
__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
__app_name__ = "iceportal"
__description__ = "Client for the on-board train WiFi portal API"
__license__ = "GPL v3"

# Portal integration information
__portal_api_provider__ = "ICE Portal"
__portal_base_url__ = "https://iceportal.de"
__portal_status_path__ = "/api1/rs/status"
__portal_trip_path__ = "/api1/rs/tripInfo/trip"

# The portal rejects requests without a browser user agent (403 Forbidden)
__default_user_agent__ = (
    "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0"
)


def get_portal_info() -> dict:
    """Get portal integration information."""
    return {
        "version": __version__,
        "provider": __portal_api_provider__,
        "base_url": __portal_base_url__,
        "status_url": f"{__portal_base_url__}{__portal_status_path__}",
        "trip_url": f"{__portal_base_url__}{__portal_trip_path__}",
        "api_key_required": False,
    }
