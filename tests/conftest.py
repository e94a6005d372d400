"""
Global pytest configuration and fixtures.
"""

import json
import pytest

from iceportal.managers.portal_config import PortalConfigFactory


@pytest.fixture
def test_config():
    """Provide a portal configuration pointing at a local test host."""
    return PortalConfigFactory.create_for_base_url(
        "http://portal.test", timeout_seconds=5
    )


@pytest.fixture
def status_payload():
    """Provide a status document as served by the portal."""
    return {
        "connection": True,
        "serviceLevel": "AVAILABLE_SERVICE",
        "gpsStatus": "VALID",
        "internet": "HIGH",
        "latitude": 50.5,
        "longitude": 8.1,
        "tileY": -77,
        "tileX": 133,
        "series": "803",
        "serverTime": 1700000000123,
        "speed": 254.0,
        "trainType": "ICE",
        "tzn": "ICE9457",
        "wagonClass": "SECOND",
        "connectivity": {
            "currentState": "HIGH",
            "nextState": "WEAK",
            "remainingTimeSeconds": 300,
        },
        "bapInstalled": True,
    }


@pytest.fixture
def trip_payload():
    """Provide a trip document with three stops, between stop 1 and stop 2."""
    return {
        "trip": {
            "tripDate": "2023-11-14",
            "trainType": "ICE",
            "vzn": "599",
            "actualPosition": 175000,
            "distanceFromLastStop": 15000,
            "totalDistance": 600000,
            "stopInfo": {
                "scheduledNext": "8000105",
                "actualNext": "8000105",
                "actualLast": "8011160",
                "actualLastStarted": "8000105",
                "finalStationEvaNr": "8000261",
                "finalStationName": "München Hbf",
            },
            "stops": [
                {
                    "station": {
                        "evaNr": "8011160",
                        "name": "Berlin Hbf",
                        "geocoordinates": {"latitude": 52.525, "longitude": 13.369},
                    },
                    "timetable": {
                        "scheduledArrivalTime": None,
                        "actualArrivalTime": None,
                        "arrivalDelay": "",
                        "scheduledDepartureTime": 1699990000000,
                        "actualDepartureTime": 1699990120000,
                        "departureDelay": "+2",
                    },
                    "track": {"scheduled": "7", "actual": "7"},
                    "info": {
                        "status": 0,
                        "passed": True,
                        "distance": 0,
                        "distanceFromStart": 0,
                    },
                    "delayReasons": None,
                },
                {
                    "station": {
                        "evaNr": "8000105",
                        "name": "Frankfurt(Main)Hbf",
                        "geocoordinates": {"latitude": 50.107, "longitude": 8.663},
                    },
                    "timetable": {
                        "scheduledArrivalTime": 1700001000000,
                        "actualArrivalTime": 1700001300000,
                        "arrivalDelay": "+5",
                        "scheduledDepartureTime": 1700001240000,
                        "actualDepartureTime": 1700001540000,
                        "departureDelay": "+5",
                    },
                    "track": {"scheduled": "9", "actual": "11"},
                    "info": {
                        "status": 0,
                        "passed": False,
                        "distance": 40000,
                        "distanceFromStart": 160000,
                    },
                    "delayReasons": [
                        {"code": "38", "text": "Technische Störung am Zug"}
                    ],
                },
                {
                    "station": {
                        "evaNr": "8000261",
                        "name": "München Hbf",
                        "geocoordinates": {"latitude": 48.140, "longitude": 11.558},
                    },
                    "timetable": {
                        "scheduledArrivalTime": 1700015000000,
                        "actualArrivalTime": 1700014880000,
                        "arrivalDelay": "-2",
                        "scheduledDepartureTime": None,
                        "actualDepartureTime": None,
                        "departureDelay": "",
                    },
                    "track": {"scheduled": "18", "actual": ""},
                    "info": {
                        "status": 0,
                        "passed": False,
                        "distance": 400000,
                        "distanceFromStart": 560000,
                    },
                    "delayReasons": None,
                },
            ],
        }
    }


@pytest.fixture
def status_body(status_payload):
    return json.dumps(status_payload)


@pytest.fixture
def trip_body(trip_payload):
    return json.dumps(trip_payload)
