"""
Data models for the ICE portal client.

This module contains the immutable records decoded from the portal,
including train status, trip, stations and the combined snapshot.
"""

from .status import ConnectivityState, Connection, GeoPosition, Status
from .trip import DelayReason, Station, StopInfo, Trip
from .train_information import TrainInformation

__all__ = [
    "ConnectivityState",
    "Connection",
    "GeoPosition",
    "Status",
    "DelayReason",
    "Station",
    "StopInfo",
    "Trip",
    "TrainInformation",
]
