"""
Trip data models for the ICE portal client.

This module defines the structures decoded from the portal trip document:
the train identity, its ordered list of stations with timetable, platform
and delay information, and the pointers to the last and next stop.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from .status import GeoPosition


@dataclass(frozen=True)
class DelayReason:
    """A reason given by the portal for a delay."""

    code: str
    text: str


@dataclass(frozen=True)
class Station:
    """
    Immutable data class representing one stop of the trip.

    Times are timezone-aware UTC datetimes. Distances are in metres, as
    delivered by the portal. The first stop has no arrival and the last
    stop has no departure, so all timetable fields are optional.
    """

    eva_nr: str
    name: str
    sequence: int
    position: Optional[GeoPosition] = None
    scheduled_arrival: Optional[datetime] = None
    actual_arrival: Optional[datetime] = None
    scheduled_departure: Optional[datetime] = None
    actual_departure: Optional[datetime] = None
    arrival_delay: timedelta = timedelta(0)
    departure_delay: timedelta = timedelta(0)
    scheduled_platform: Optional[str] = None
    actual_platform: Optional[str] = None
    passed: bool = False
    status: Optional[int] = None
    distance_from_previous: Optional[int] = None
    distance_from_start: Optional[int] = None
    delay_reasons: Tuple[DelayReason, ...] = ()

    @property
    def platform(self) -> Optional[str]:
        """Get the platform the train actually uses, falling back to the scheduled one."""
        return self.actual_platform or self.scheduled_platform

    @property
    def platform_changed(self) -> bool:
        return bool(
            self.actual_platform
            and self.scheduled_platform
            and self.actual_platform != self.scheduled_platform
        )

    @property
    def is_delayed(self) -> bool:
        """Check if the train is late at this stop."""
        return self.arrival_delay > timedelta(0) or self.departure_delay > timedelta(0)

    @property
    def distance_from_previous_km(self) -> Optional[float]:
        if self.distance_from_previous is None:
            return None
        return Trip.distance_to_km(self.distance_from_previous)

    @property
    def distance_from_start_km(self) -> Optional[float]:
        if self.distance_from_start is None:
            return None
        return Trip.distance_to_km(self.distance_from_start)

    def format_arrival_time(self) -> str:
        """Format arrival time for display."""
        time_to_show = self.actual_arrival or self.scheduled_arrival
        if time_to_show:
            return time_to_show.strftime("%H:%M")
        return ""

    def format_departure_time(self) -> str:
        """Format departure time for display."""
        time_to_show = self.actual_departure or self.scheduled_departure
        if time_to_show:
            return time_to_show.strftime("%H:%M")
        return ""


@dataclass(frozen=True)
class StopInfo:
    """References the last and the next stop of the train by EVA number."""

    scheduled_next: Optional[str] = None
    actual_next: Optional[str] = None
    actual_last: Optional[str] = None
    actual_last_started: Optional[str] = None
    final_station_eva_nr: Optional[str] = None
    final_station_name: Optional[str] = None


@dataclass(frozen=True)
class Trip:
    """
    Immutable data class representing the trip of a train.

    Contains the train type and number, the stops along the way and
    up-to-date information about platforms, delays and distances.
    """

    train_type: str
    train_number: str
    stations: Tuple[Station, ...] = ()
    stop_info: StopInfo = field(default_factory=StopInfo)
    trip_date: Optional[date] = None
    actual_position: Optional[int] = None
    distance_from_last_stop: Optional[int] = None
    total_distance: Optional[int] = None

    @staticmethod
    def distance_to_km(distance: int) -> float:
        """Convert a distance in metres to kilometres."""
        return distance / 1000.0

    @property
    def train_identifier(self) -> str:
        """Get the identifier of the train, like "ICE 123"."""
        return f"{self.train_type} {self.train_number}".strip()

    def get_stop(self, eva_nr: Optional[str]) -> Optional[Station]:
        """Get a specific stop by its EVA number."""
        if not eva_nr:
            return None
        for station in self.stations:
            if station.eva_nr == eva_nr:
                return station
        return None

    def next_stop(self) -> Optional[Station]:
        """Get the next stop in the trajectory of the train."""
        return self.get_stop(self.stop_info.actual_next)

    def previous_stop(self) -> Optional[Station]:
        """Get the previous stop in the trajectory of the train."""
        return self.get_stop(self.stop_info.actual_last)

    def origin(self) -> Optional[Station]:
        """Get the first station in the trajectory."""
        if self.stations:
            return self.stations[0]
        return None

    def destination(self) -> Optional[Station]:
        """
        Get the final station in the trajectory.

        Uses the final station announced by the portal and falls back to
        the last listed stop.
        """
        final = self.get_stop(self.stop_info.final_station_eva_nr)
        if final is None and self.stations:
            return self.stations[-1]
        return final

    def upcoming_stations(self) -> Tuple[Station, ...]:
        return tuple(s for s in self.stations if not s.passed)

    def passed_stations(self) -> Tuple[Station, ...]:
        return tuple(s for s in self.stations if s.passed)

    def distance_to_previous_stop(self) -> float:
        """Get the distance travelled since the previous stop in kilometres."""
        return Trip.distance_to_km(self.distance_from_last_stop or 0)

    def distance_to_next_stop(self) -> Optional[float]:
        """
        Get the distance to the next stop in kilometres.

        Returns None if there is no next stop or its distance is unknown.
        """
        between = self.distance_between_adjacent_stops()
        if between is None:
            return None
        return between - self.distance_to_previous_stop()

    def distance_between_adjacent_stops(self) -> Optional[float]:
        """Get the distance between the previous and the next stop in kilometres."""
        stop = self.next_stop()
        if stop is None:
            return None
        return stop.distance_from_previous_km

    def total_distance_km(self) -> Optional[float]:
        """Get the total length of the trip in kilometres."""
        if self.total_distance is None:
            return None
        return Trip.distance_to_km(self.total_distance)
