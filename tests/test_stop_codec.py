"""Tests for transit stop and stop schedule codecs."""

from datetime import datetime
from typing import Any

import pytest

from transit_trail.adapters.transit_api.stop_codec import (
    decode_schedule,
    decode_schedule_response,
    decode_stop_response,
    decode_stops_response,
    decode_transit_stop,
    encode_schedule,
    encode_transit_stop,
)
from transit_trail.domain.errors import MalformedPayload
from transit_trail.domain.models import (
    BlueRoute,
    Direction,
    Distances,
    GeoLocation,
    RegularRoute,
    Side,
)


@pytest.fixture
def stop_payload() -> dict[str, Any]:
    return {
        "key": 10064,
        "name": "Northbound Osborne at Glasgow",
        "number": 10064,
        "direction": "Northbound",
        "side": "Nearside",
        "street": {"key": 2715, "name": "Osborne Street", "type": "Street"},
        "cross-street": {"key": 1486, "name": "Glasgow Avenue", "type": "Avenue"},
        "centre": {
            "utm": {"zone": "14U", "x": 633838, "y": 5527759},
            "geographic": {"latitude": "49.86912", "longitude": "-97.1375"},
        },
    }


def _scheduled_stop(
    key: str, departure: str, estimated: str | None = None, cancelled: str = "false"
) -> dict[str, Any]:
    departure_time = {"scheduled": departure}
    if estimated is not None:
        departure_time["estimated"] = estimated
    return {
        "key": key,
        "cancelled": cancelled,
        "times": {"arrival": departure_time, "departure": departure_time},
        "variant": {"key": "16-1-V", "name": "Selkirk-Osborne to Southdale"},
    }


@pytest.fixture
def schedule_payload(stop_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "stop": stop_payload,
        "route-schedules": [
            {
                "route": {
                    "key": 16,
                    "number": 16,
                    "name": "Route 16 Selkirk-Osborne",
                    "customer-type": "regular",
                    "coverage": "regular",
                    "badge-label": 16,
                },
                "scheduled-stops": [
                    {
                        **_scheduled_stop(
                            "11053616-34", "2023-05-01T08:10:00", "2023-05-01T08:12:30"
                        ),
                        "bus": {"key": 811, "bike-rack": "true", "wifi": "false"},
                    },
                    _scheduled_stop("11053617-34", "2023-05-01T08:25:00", cancelled="true"),
                ],
            },
            {
                "route": {"key": "BLUE", "number": "BLUE", "badge-label": "B"},
                "scheduled-stops": [
                    _scheduled_stop("11060012-12", "2023-05-01T08:05:00", "2023-05-01T08:04:00"),
                ],
            },
        ],
    }


class TestTransitStop:
    """Tests for full stop decoding."""

    def test_decodes_api_stop(self, stop_payload: dict[str, Any]) -> None:
        """Given a stop from the stops endpoint, when decoding, then direction, side and streets are read."""
        stop = decode_transit_stop(stop_payload)

        assert stop.number == 10064
        assert stop.direction is Direction.NORTHBOUND
        assert stop.side is Side.NEARSIDE
        assert stop.street.name == "Osborne Street"
        assert stop.cross_street.key == 1486
        assert stop.centre == GeoLocation(49.86912, -97.1375)
        assert stop.distances is None

    def test_quoted_distances(self, stop_payload: dict[str, Any]) -> None:
        """Given distances as strings, when decoding, then they become floats."""
        stop = decode_transit_stop({**stop_payload, "distances": {"direct": "91.41", "walking": "120.0"}})

        assert stop.distances == Distances(direct=91.41, walking=120.0)

    def test_multi_word_side(self, stop_payload: dict[str, Any]) -> None:
        """Given a side with a space in it, when decoding, then the matching member is returned."""
        stop = decode_transit_stop({**stop_payload, "side": "Farside Opposite"})

        assert stop.side is Side.FARSIDE_OPPOSITE

    def test_unknown_side_raises(self, stop_payload: dict[str, Any]) -> None:
        """Given an unknown side, when decoding, then MalformedPayload names the field."""
        with pytest.raises(MalformedPayload) as exc_info:
            decode_transit_stop({**stop_payload, "side": "Upside"})

        assert exc_info.value.path == "side"

    def test_negative_distance_raises(self, stop_payload: dict[str, Any]) -> None:
        """Given a negative distance, when decoding, then MalformedPayload names the distances."""
        with pytest.raises(MalformedPayload) as exc_info:
            decode_transit_stop({**stop_payload, "distances": {"direct": "-1", "walking": "5"}})

        assert exc_info.value.path == "distances"

    def test_round_trip(self, stop_payload: dict[str, Any]) -> None:
        """Given a decoded stop with optional fields, when round-tripping, then it is unchanged."""
        stop = decode_transit_stop(
            {
                **stop_payload,
                "distances": {"direct": 10.5, "walking": 12.0},
                "internal-name": "OsborneGlasgowNB",
                "sequence-on-street": 4,
                "icon-style": "blue",
            }
        )

        encoded = encode_transit_stop(stop)

        assert encoded["cross-street"]["name"] == "Glasgow Avenue"
        assert decode_transit_stop(encoded) == stop

    def test_stop_responses(self, stop_payload: dict[str, Any]) -> None:
        """Given single and list stop responses, when decoding, then the wrapper keys are unwrapped."""
        assert decode_stop_response({"stop": stop_payload}).key == 10064
        assert [stop.key for stop in decode_stops_response({"stops": [stop_payload]})] == [10064]


class TestSchedule:
    """Tests for stop schedule decoding."""

    def test_decodes_route_schedules(self, schedule_payload: dict[str, Any]) -> None:
        """Given a stop schedule, when decoding, then both route shapes and their passes are read."""
        schedule = decode_schedule_response({"stop-schedule": schedule_payload})

        regular, blue = schedule.route_schedules
        assert isinstance(regular.route, RegularRoute)
        assert isinstance(blue.route, BlueRoute)
        first, second = regular.scheduled_stops
        assert first.cancelled is False
        assert first.bus.bike_rack is True
        assert first.times.departure.estimated == datetime(2023, 5, 1, 8, 12, 30)
        assert second.cancelled is True
        assert second.bus is None

    def test_missing_estimate_means_on_schedule(self, schedule_payload: dict[str, Any]) -> None:
        """Given a pass without an estimate, when decoding, then the estimate equals the schedule."""
        schedule = decode_schedule(schedule_payload)

        departure = schedule.route_schedules[0].scheduled_stops[1].times.departure
        assert departure.estimated == departure.scheduled == datetime(2023, 5, 1, 8, 25)

    def test_missing_times_are_empty(self, schedule_payload: dict[str, Any]) -> None:
        """Given a pass without times, when decoding, then arrival and departure are None."""
        del schedule_payload["route-schedules"][1]["scheduled-stops"][0]["times"]

        scheduled_stop = decode_schedule(schedule_payload).route_schedules[1].scheduled_stops[0]

        assert scheduled_stop.times.arrival is None
        assert scheduled_stop.times.departure is None

    def test_bad_time_reports_full_path(self, schedule_payload: dict[str, Any]) -> None:
        """Given a malformed departure time, when decoding, then the path points into the pass."""
        schedule_payload["route-schedules"][0]["scheduled-stops"][1]["times"]["departure"] = {
            "scheduled": "tomorrow"
        }

        with pytest.raises(MalformedPayload) as exc_info:
            decode_schedule_response({"stop-schedule": schedule_payload})

        assert exc_info.value.path == (
            "stop-schedule.route-schedules[0].scheduled-stops[1].times.departure.scheduled"
        )

    def test_round_trip(self, schedule_payload: dict[str, Any]) -> None:
        """Given a decoded schedule, when round-tripping, then it is unchanged."""
        schedule = decode_schedule(schedule_payload)

        assert decode_schedule(encode_schedule(schedule)) == schedule
