"""
Response parsing for the ICE portal API.

Maps the JSON documents served by the portal onto the immutable models.
Unknown fields are ignored so additive changes on the portal side do not
break the client; a missing required field raises
PortalDeserializationException naming the field.
"""

import json
import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from ..models.status import Connection, ConnectivityState, GeoPosition, Status
from ..models.trip import DelayReason, Station, StopInfo, Trip
from .exceptions import PortalDeserializationException

logger = logging.getLogger(__name__)

_MISSING = object()


class PortalResponseParser:
    """
    Parser for portal status and trip documents.

    Follows Single Responsibility Principle - only responsible for turning
    response bodies into model objects.
    """

    def decode_json(self, body: str, document: str = "response") -> Dict[str, Any]:
        """
        Decode a response body into a JSON object.

        Raises:
            PortalDeserializationException: If the body is not a JSON object
        """
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, TypeError, RecursionError) as e:
            raise PortalDeserializationException(f"Malformed JSON in {document}: {e}") from e

        if not isinstance(data, dict):
            raise PortalDeserializationException(
                f"Expected a JSON object in {document}, got {type(data).__name__}"
            )
        return data

    def parse_status(self, body: str) -> Status:
        """
        Parse the status document.

        Args:
            body: Raw response body

        Returns:
            Status: Parsed train status

        Raises:
            PortalDeserializationException: For malformed or incomplete documents
        """
        data = self.decode_json(body, "status")
        try:
            return self._parse_status_data(data)
        except PortalDeserializationException:
            raise
        except (TypeError, ValueError, AttributeError, OverflowError) as e:
            raise PortalDeserializationException(f"Status parsing failed: {e}") from e

    def parse_trip(self, body: str) -> Trip:
        """
        Parse the trip document.

        The portal wraps the trip in a top-level "trip" key; a bare trip
        object is accepted as well.

        Raises:
            PortalDeserializationException: For malformed or incomplete documents
        """
        data = self.decode_json(body, "trip")
        trip_data = data.get("trip", data)
        if not isinstance(trip_data, dict):
            raise PortalDeserializationException("Field 'trip' must be an object")

        try:
            return self._parse_trip_data(trip_data)
        except PortalDeserializationException:
            raise
        except (TypeError, ValueError, AttributeError, OverflowError) as e:
            raise PortalDeserializationException(f"Trip parsing failed: {e}") from e

    def _parse_status_data(self, data: Dict) -> Status:
        position = GeoPosition(
            latitude=self._float(self._require(data, "latitude", "status")),
            longitude=self._float(self._require(data, "longitude", "status")),
        )

        status = Status(
            speed=self._float(self._require(data, "speed", "status")),
            position=position,
            server_time=self.parse_timestamp(self._require(data, "serverTime", "status")),
            train_type=self._optional_str(data.get("trainType")),
            tzn=self._optional_str(data.get("tzn")),
            series=self._optional_str(data.get("series")),
            wagon_class=self._optional_str(data.get("wagonClass")),
            gps_status=self._optional_str(data.get("gpsStatus")),
            connection=self._parse_connection(data),
        )
        logger.debug(f"Parsed status: {status}")
        return status

    def _parse_connection(self, data: Dict) -> Connection:
        connectivity = data.get("connectivity")
        if not isinstance(connectivity, dict):
            connectivity = {}

        connected = data.get("connection")
        return Connection(
            connected=bool(connected) if connected is not None else None,
            internet=ConnectivityState.from_wire(data.get("internet")),
            current_state=ConnectivityState.from_wire(connectivity.get("currentState")),
            next_state=ConnectivityState.from_wire(connectivity.get("nextState")),
            remaining_seconds=self._optional_int(connectivity.get("remainingTimeSeconds")),
        )

    def _parse_trip_data(self, data: Dict) -> Trip:
        stops = self._require(data, "stops", "trip")
        if not isinstance(stops, list):
            raise PortalDeserializationException("Field 'stops' in trip must be a list")

        stations = tuple(
            self._parse_station(stop, sequence) for sequence, stop in enumerate(stops)
        )

        trip_date = data.get("tripDate")
        trip = Trip(
            train_type=str(self._require(data, "trainType", "trip")),
            train_number=str(self._require(data, "vzn", "trip")),
            stations=stations,
            stop_info=self._parse_stop_info(data.get("stopInfo")),
            trip_date=date.fromisoformat(trip_date) if trip_date else None,
            actual_position=self._optional_int(data.get("actualPosition")),
            distance_from_last_stop=self._optional_int(data.get("distanceFromLastStop")),
            total_distance=self._optional_int(data.get("totalDistance")),
        )
        logger.debug(f"Parsed trip {trip.train_identifier} with {len(stations)} stops")
        return trip

    def _parse_stop_info(self, data: Optional[Dict]) -> StopInfo:
        if not isinstance(data, dict):
            return StopInfo()

        return StopInfo(
            scheduled_next=self._optional_str(data.get("scheduledNext")),
            actual_next=self._optional_str(data.get("actualNext")),
            actual_last=self._optional_str(data.get("actualLast")),
            actual_last_started=self._optional_str(data.get("actualLastStarted")),
            final_station_eva_nr=self._optional_str(data.get("finalStationEvaNr")),
            final_station_name=self._optional_str(data.get("finalStationName")),
        )

    def _parse_station(self, stop: Dict, sequence: int) -> Station:
        if not isinstance(stop, dict):
            raise PortalDeserializationException(f"Stop {sequence} must be an object")

        context = f"stop {sequence}"
        station = self._require(stop, "station", context)
        if not isinstance(station, dict):
            raise PortalDeserializationException(f"Field 'station' in {context} must be an object")

        timetable = stop.get("timetable") or {}
        track = stop.get("track") or {}
        info = stop.get("info") or {}

        return Station(
            eva_nr=str(self._require(station, "evaNr", context)),
            name=str(self._require(station, "name", context)),
            sequence=sequence,
            position=self._parse_position(station.get("geocoordinates")),
            scheduled_arrival=self._optional_timestamp(timetable.get("scheduledArrivalTime")),
            actual_arrival=self._optional_timestamp(timetable.get("actualArrivalTime")),
            scheduled_departure=self._optional_timestamp(timetable.get("scheduledDepartureTime")),
            actual_departure=self._optional_timestamp(timetable.get("actualDepartureTime")),
            arrival_delay=self.parse_delay(timetable.get("arrivalDelay")),
            departure_delay=self.parse_delay(timetable.get("departureDelay")),
            scheduled_platform=self._optional_str(track.get("scheduled")),
            actual_platform=self._optional_str(track.get("actual")),
            passed=info.get("passed") is True,
            status=self._optional_int(info.get("status")),
            distance_from_previous=self._optional_int(info.get("distance")),
            distance_from_start=self._optional_int(info.get("distanceFromStart")),
            delay_reasons=self._parse_delay_reasons(stop.get("delayReasons")),
        )

    def _parse_position(self, data: Optional[Dict]) -> Optional[GeoPosition]:
        if not isinstance(data, dict):
            return None
        latitude = data.get("latitude")
        longitude = data.get("longitude")
        if latitude is None or longitude is None:
            return None
        return GeoPosition(latitude=self._float(latitude), longitude=self._float(longitude))

    def _parse_delay_reasons(self, data: Optional[List]) -> tuple:
        if not data:
            return ()

        reasons = []
        for entry in data:
            if not isinstance(entry, dict):
                logger.warning(f"Skipping delay reason that is not an object: {entry!r}")
                continue
            reasons.append(
                DelayReason(code=str(entry.get("code", "")), text=str(entry.get("text", "")))
            )
        return tuple(reasons)

    @staticmethod
    def parse_timestamp(value: Any) -> datetime:
        """Convert a portal timestamp (epoch milliseconds) to a UTC datetime."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PortalDeserializationException(f"Invalid timestamp: {value!r}")
        try:
            millis = int(value)
            return datetime.fromtimestamp(millis // 1000, tz=timezone.utc) + timedelta(
                milliseconds=millis % 1000
            )
        except (OverflowError, OSError, ValueError) as e:
            raise PortalDeserializationException(f"Timestamp out of range: {value!r}") from e

    @staticmethod
    def parse_delay(value: Optional[str]) -> timedelta:
        """
        Convert a portal delay string to a timedelta.

        The portal sends "+5" for five minutes late, "-2" for two minutes
        early and an empty string when there is no delay.
        """
        if value is None:
            return timedelta(0)

        text = str(value).strip()
        if not text:
            return timedelta(0)

        try:
            return timedelta(minutes=int(text))
        except ValueError as e:
            raise PortalDeserializationException(f"Invalid delay: {value!r}") from e

    def _optional_timestamp(self, value: Any) -> Optional[datetime]:
        if value is None:
            return None
        return self.parse_timestamp(value)

    @staticmethod
    def _require(data: Dict, key: str, context: str) -> Any:
        value = data.get(key, _MISSING)
        if value is _MISSING or value is None:
            raise PortalDeserializationException(f"Missing required field '{key}' in {context}")
        return value

    @staticmethod
    def _float(value: Any) -> float:
        if isinstance(value, bool):
            raise PortalDeserializationException(f"Expected a number, got {value!r}")
        return float(value)

    @staticmethod
    def _optional_int(value: Any) -> Optional[int]:
        if value is None or value == "":
            return None
        return int(value)

    @staticmethod
    def _optional_str(value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None
