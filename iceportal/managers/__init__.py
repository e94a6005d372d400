"""
Configuration management for the ICE portal client.
"""

from .portal_config import PortalConfig, PortalConfigFactory

__all__ = ["PortalConfig", "PortalConfigFactory"]
