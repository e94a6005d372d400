"""
ICE portal client

Reads live train information from the WiFi portal on board Deutsche Bahn
ICE trains.

Features:
- Current speed and GPS position
- Train number and the list of stations with platforms and delays
- On-board connectivity status
"""

from .version import __version__
from .api import (
    TrainInfoClient,
    PortalAPIFactory,
    fetch_train_information,
    PortalAPIException,
    NetworkError,
    HttpStatusError,
    DeserializationError,
)
from .managers import PortalConfig, PortalConfigFactory
from .models import (
    Connection,
    ConnectivityState,
    GeoPosition,
    Station,
    Status,
    Trip,
    TrainInformation,
)

__all__ = [
    "__version__",
    "TrainInfoClient",
    "PortalAPIFactory",
    "fetch_train_information",
    "PortalAPIException",
    "NetworkError",
    "HttpStatusError",
    "DeserializationError",
    "PortalConfig",
    "PortalConfigFactory",
    "Connection",
    "ConnectivityState",
    "GeoPosition",
    "Station",
    "Status",
    "Trip",
    "TrainInformation",
]
