"""
Tests for the package version metadata.
"""

import iceportal
from iceportal import version
from iceportal.managers.portal_config import PortalConfig


class TestVersionInfo:
    """Test version module contents."""

    def test_package_exposes_version(self):
        assert iceportal.__version__ == version.__version__

    def test_get_portal_info(self):
        info = version.get_portal_info()

        assert info["provider"] == "ICE Portal"
        assert info["status_url"] == "https://iceportal.de/api1/rs/status"
        assert info["trip_url"] == "https://iceportal.de/api1/rs/tripInfo/trip"
        assert info["api_key_required"] is False

    def test_config_defaults_follow_portal_info(self):
        info = version.get_portal_info()
        config = PortalConfig()

        assert config.status_url == info["status_url"]
        assert config.trip_url == info["trip_url"]
        assert config.api_provider == info["provider"]
        assert config.config_version == info["version"]
