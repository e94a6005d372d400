"""
Status data models for the ICE portal client.

This module contains immutable data classes for the live state of the
train as reported by the portal status document: speed, GPS position,
server time and on-board connectivity.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class ConnectivityState(Enum):
    """On-board internet connectivity levels reported by the portal."""

    HIGH = "HIGH"
    MIDDLE = "MIDDLE"
    WEAK = "WEAK"
    UNSTABLE = "UNSTABLE"
    NO_INTERNET = "NO_INTERNET"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_wire(cls, value: Any) -> "ConnectivityState":
        """Map a wire value to a state, tolerating values we do not know."""
        if not isinstance(value, str) or not value:
            return cls.UNKNOWN
        try:
            return cls(value.upper())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class GeoPosition:
    """Immutable GPS position."""

    latitude: float
    longitude: float

    def as_tuple(self) -> tuple[float, float]:
        """Get position as (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class Connection:
    """
    On-board network connectivity.

    The portal reports a coarse flag plus the current and upcoming
    connectivity level; all of it is optional on the wire.
    """

    connected: Optional[bool] = None
    internet: ConnectivityState = ConnectivityState.UNKNOWN
    current_state: ConnectivityState = ConnectivityState.UNKNOWN
    next_state: ConnectivityState = ConnectivityState.UNKNOWN
    remaining_seconds: Optional[int] = None

    @property
    def is_online(self) -> bool:
        """Check if the train currently has internet access."""
        if self.connected is False:
            return False
        state = self.current_state
        if state == ConnectivityState.UNKNOWN:
            state = self.internet
        return state not in (ConnectivityState.NO_INTERNET, ConnectivityState.UNKNOWN)


@dataclass(frozen=True)
class Status:
    """
    Immutable snapshot of the status document.

    Speed is in km/h. server_time is the portal clock in UTC.
    """

    speed: float
    position: GeoPosition
    server_time: datetime
    train_type: Optional[str] = None
    tzn: Optional[str] = None
    series: Optional[str] = None
    wagon_class: Optional[str] = None
    gps_status: Optional[str] = None
    connection: Connection = field(default_factory=Connection)

    @property
    def latitude(self) -> float:
        return self.position.latitude

    @property
    def longitude(self) -> float:
        return self.position.longitude

    @property
    def speed_display(self) -> str:
        """Get formatted speed display."""
        return f"{self.speed:.1f} km/h"

    def __str__(self) -> str:
        return (
            f"Speed: {self.speed:5.1f} km/h; "
            f"Lat/Long: {self.latitude:7.4f},{self.longitude:8.4f}; "
            f"Time: {self.server_time.strftime('%Y-%m-%d %H:%M:%S')}"
        )
