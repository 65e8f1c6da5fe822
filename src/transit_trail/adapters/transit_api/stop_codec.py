"""Codecs for full transit stops and stop schedules.

Stop and schedule responses are wrapped in a single key: ``stop``,
``stops`` or ``stop-schedule``. Distances and the ``cancelled`` flag are
usually quoted.
"""

from collections.abc import Mapping
from typing import Any

from transit_trail.adapters.transit_api.geo_codec import (
    decode_geo_location,
    decode_street,
    encode_geo_location,
    encode_street,
)
from transit_trail.adapters.transit_api.payload_fields import (
    DATETIME_FORMAT,
    as_bool,
    as_datetime,
    as_enum,
    as_float,
    as_int,
    as_str,
    expect_mapping,
    field,
    is_present,
    list_field,
    optional_field,
)
from transit_trail.adapters.transit_api.route_codec import (
    decode_bus,
    decode_route,
    decode_variant,
    encode_bus,
    encode_route,
    encode_variant,
)
from transit_trail.domain.errors import MalformedPayload
from transit_trail.domain.models.stop import (
    Direction,
    Distances,
    RouteSchedule,
    Schedule,
    ScheduledStop,
    ScheduledTime,
    ScheduledTimes,
    Side,
    TransitStop,
)


def decode_distances(value: Any) -> Distances:
    obj = expect_mapping(value, "distances")
    direct = field(obj, "direct", as_float)
    walking = field(obj, "walking", as_float)
    try:
        return Distances(direct=direct, walking=walking)
    except ValueError as e:
        raise MalformedPayload(str(e)) from e


def encode_distances(distances: Distances) -> dict[str, Any]:
    return {"direct": distances.direct, "walking": distances.walking}


def decode_transit_stop_fields(obj: Mapping[str, Any]) -> TransitStop:
    return TransitStop(
        key=field(obj, "key", as_int),
        name=field(obj, "name", as_str),
        number=field(obj, "number", as_int),
        direction=field(obj, "direction", as_enum(Direction)),
        side=field(obj, "side", as_enum(Side)),
        street=field(obj, "street", decode_street),
        cross_street=field(obj, "cross-street", decode_street),
        centre=field(obj, "centre", decode_geo_location),
        distances=optional_field(obj, "distances", decode_distances),
        internal_name=optional_field(obj, "internal-name", as_str),
        sequence_on_street=optional_field(obj, "sequence-on-street", as_int),
        icon_style=optional_field(obj, "icon-style", as_str),
    )


def decode_transit_stop(value: Any) -> TransitStop:
    return decode_transit_stop_fields(expect_mapping(value, "stop"))


def encode_transit_stop(stop: TransitStop) -> dict[str, Any]:
    out: dict[str, Any] = {
        "key": stop.key,
        "name": stop.name,
        "number": stop.number,
        "direction": stop.direction.value,
        "side": stop.side.value,
        "street": encode_street(stop.street),
        "cross-street": encode_street(stop.cross_street),
        "centre": encode_geo_location(stop.centre),
    }
    if stop.distances is not None:
        out["distances"] = encode_distances(stop.distances)
    if stop.internal_name is not None:
        out["internal-name"] = stop.internal_name
    if stop.sequence_on_street is not None:
        out["sequence-on-street"] = stop.sequence_on_street
    if stop.icon_style is not None:
        out["icon-style"] = stop.icon_style
    return out


def decode_scheduled_time(value: Any) -> ScheduledTime:
    """Decode ``{scheduled, estimated}``; a missing estimate means on schedule."""
    obj = expect_mapping(value, "scheduled time")
    scheduled = field(obj, "scheduled", as_datetime)
    estimated = optional_field(obj, "estimated", as_datetime)
    return ScheduledTime(scheduled=scheduled, estimated=estimated or scheduled)


def encode_scheduled_time(scheduled_time: ScheduledTime) -> dict[str, str]:
    return {
        "scheduled": scheduled_time.scheduled.strftime(DATETIME_FORMAT),
        "estimated": scheduled_time.estimated.strftime(DATETIME_FORMAT),
    }


def decode_scheduled_times(value: Any) -> ScheduledTimes:
    obj = expect_mapping(value, "scheduled times")
    return ScheduledTimes(
        arrival=optional_field(obj, "arrival", decode_scheduled_time),
        departure=optional_field(obj, "departure", decode_scheduled_time),
    )


def encode_scheduled_times(times: ScheduledTimes) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if times.arrival is not None:
        out["arrival"] = encode_scheduled_time(times.arrival)
    if times.departure is not None:
        out["departure"] = encode_scheduled_time(times.departure)
    return out


def decode_scheduled_stop(value: Any) -> ScheduledStop:
    obj = expect_mapping(value, "scheduled stop")
    return ScheduledStop(
        key=field(obj, "key", as_str),
        cancelled=optional_field(obj, "cancelled", as_bool) or False,
        times=optional_field(obj, "times", decode_scheduled_times) or ScheduledTimes(),
        variant=field(obj, "variant", decode_variant),
        bus=optional_field(obj, "bus", decode_bus),
    )


def encode_scheduled_stop(scheduled_stop: ScheduledStop) -> dict[str, Any]:
    out: dict[str, Any] = {
        "key": scheduled_stop.key,
        "cancelled": scheduled_stop.cancelled,
        "times": encode_scheduled_times(scheduled_stop.times),
        "variant": encode_variant(scheduled_stop.variant),
    }
    if scheduled_stop.bus is not None:
        out["bus"] = encode_bus(scheduled_stop.bus)
    return out


def decode_route_schedule(value: Any) -> RouteSchedule:
    obj = expect_mapping(value, "route schedule")
    scheduled_stops = (
        list_field(obj, "scheduled-stops", decode_scheduled_stop)
        if is_present(obj, "scheduled-stops")
        else []
    )
    return RouteSchedule(
        route=field(obj, "route", decode_route),
        scheduled_stops=tuple(scheduled_stops),
    )


def encode_route_schedule(route_schedule: RouteSchedule) -> dict[str, Any]:
    return {
        "route": encode_route(route_schedule.route),
        "scheduled-stops": [
            encode_scheduled_stop(scheduled_stop)
            for scheduled_stop in route_schedule.scheduled_stops
        ],
    }


def decode_schedule(value: Any) -> Schedule:
    obj = expect_mapping(value, "stop schedule")
    route_schedules = (
        list_field(obj, "route-schedules", decode_route_schedule)
        if is_present(obj, "route-schedules")
        else []
    )
    return Schedule(
        stop=field(obj, "stop", decode_transit_stop),
        route_schedules=tuple(route_schedules),
    )


def encode_schedule(schedule: Schedule) -> dict[str, Any]:
    return {
        "stop": encode_transit_stop(schedule.stop),
        "route-schedules": [
            encode_route_schedule(route_schedule) for route_schedule in schedule.route_schedules
        ],
    }


def decode_stop_response(value: Any) -> TransitStop:
    """Decode ``{"stop": {...}}``."""
    obj = expect_mapping(value, "stop response")
    return field(obj, "stop", decode_transit_stop)


def decode_stops_response(value: Any) -> list[TransitStop]:
    """Decode ``{"stops": [...]}``, as returned by a search around a location."""
    obj = expect_mapping(value, "stops response")
    return list_field(obj, "stops", decode_transit_stop)


def decode_schedule_response(value: Any) -> Schedule:
    """Decode ``{"stop-schedule": {...}}``."""
    obj = expect_mapping(value, "stop schedule response")
    return field(obj, "stop-schedule", decode_schedule)
