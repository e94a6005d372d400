"""
Train information snapshot.

Combines the status and trip documents of one fetch into a single
point-in-time view of the train.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Tuple

from .status import Connection, GeoPosition, Status
from .trip import Station, Trip


@dataclass(frozen=True)
class TrainInformation:
    """
    Immutable snapshot of the train state.

    A new snapshot is created for every fetch; it is never updated in place.
    """

    status: Status
    trip: Trip

    @property
    def speed(self) -> float:
        """Current speed in km/h."""
        return self.status.speed

    @property
    def position(self) -> GeoPosition:
        return self.status.position

    @property
    def connection(self) -> Connection:
        return self.status.connection

    @property
    def server_time(self) -> datetime:
        return self.status.server_time

    @property
    def trip_identifier(self) -> str:
        """Get the train identifier, like "ICE 123"."""
        return self.trip.train_identifier

    @property
    def stations(self) -> Tuple[Station, ...]:
        """All stops of the trip, past and upcoming, in order."""
        return self.trip.stations

    @property
    def next_stop(self) -> Optional[Station]:
        return self.trip.next_stop()

    @property
    def current_delay(self) -> timedelta:
        """Get the arrival delay at the next stop, zero if unknown."""
        stop = self.next_stop
        if stop is None:
            return timedelta(0)
        return stop.arrival_delay

    def __str__(self) -> str:
        summary = f"{self.trip_identifier}: {self.status}"
        stop = self.next_stop
        if stop is not None:
            summary += f"; Next: {stop.name}"
            if stop.platform:
                summary += f" (platform {stop.platform})"
        return summary
