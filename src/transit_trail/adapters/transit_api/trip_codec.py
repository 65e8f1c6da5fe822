"""Codec for trip planner plans, segments and trip stops.

Segments are tagged by ``type`` and each kind has a fixed set of fields it
must, may and must not carry:

    ========  ======  ====  =====  ===  ===  =====  =======  ============
    kind      bounds  from  times  to   bus  route  variant  instructions
    ========  ======  ====  =====  ===  ===  =====  =======  ============
    walk      opt     opt   req    opt  -    -      -        opt
    ride      opt     -     req    -    opt  req    req      -
    transfer  opt     req   -      req  -    -      -        -
    ========  ======  ====  =====  ===  ===  =====  =======  ============
"""

import logging
from collections.abc import Mapping
from typing import Any, assert_never

from transit_trail.adapters.transit_api.geo_codec import (
    decode_geo_location,
    decode_stop,
    encode_geo_location,
    encode_stop,
)
from transit_trail.adapters.transit_api.location_codec import LocationCodec
from transit_trail.adapters.transit_api.payload_fields import (
    DATETIME_FORMAT,
    as_datetime,
    as_int,
    as_list,
    as_str,
    expect_mapping,
    field,
    is_present,
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
from transit_trail.domain.errors import (
    AmbiguousVariant,
    DecodeError,
    MalformedPayload,
    NoVariantMatched,
    SegmentShapeMismatch,
    UnknownVariant,
)
from transit_trail.domain.models.decode_result import PlanDecodeResult, SegmentDecodeFailure
from transit_trail.domain.models.trip import (
    Bounds,
    Destination,
    Durations,
    Origin,
    Plan,
    Ride,
    Segment,
    SegmentKind,
    StopVisit,
    Times,
    Transfer,
    TripStop,
    Walk,
)

logger = logging.getLogger(__name__)

# kind -> (required fields, optional fields)
SEGMENT_CONTRACTS: dict[SegmentKind, tuple[frozenset[str], frozenset[str]]] = {
    SegmentKind.WALK: (frozenset({"times"}), frozenset({"bounds", "from", "to", "instructions"})),
    SegmentKind.RIDE: (frozenset({"times", "route", "variant"}), frozenset({"bounds", "bus"})),
    SegmentKind.TRANSFER: (frozenset({"from", "to"}), frozenset({"bounds"})),
}

_SEGMENT_FIELDS = frozenset().union(
    *(required | optional for required, optional in SEGMENT_CONTRACTS.values())
)

# Trip stop keys, checked in this order
_TRIP_STOP_KEYS = ("origin", "stop", "destination")


def _as_minutes(value: Any) -> int:
    minutes = as_int(value)
    if minutes < 0:
        raise MalformedPayload(f"duration must not be negative, got {minutes}")
    return minutes


def decode_durations(value: Any) -> Durations:
    obj = expect_mapping(value, "durations")
    return Durations(
        total=optional_field(obj, "total", _as_minutes) or 0,
        walking=optional_field(obj, "walking", _as_minutes) or 0,
        waiting=optional_field(obj, "waiting", _as_minutes) or 0,
        riding=optional_field(obj, "riding", _as_minutes) or 0,
    )


def encode_durations(durations: Durations) -> dict[str, int]:
    return {
        "total": durations.total,
        "walking": durations.walking,
        "waiting": durations.waiting,
        "riding": durations.riding,
    }


def decode_times(value: Any) -> Times:
    obj = expect_mapping(value, "times")
    return Times(
        start=field(obj, "start", as_datetime),
        end=field(obj, "end", as_datetime),
        durations=optional_field(obj, "durations", decode_durations) or Durations(),
    )


def encode_times(times: Times) -> dict[str, Any]:
    return {
        "start": times.start.strftime(DATETIME_FORMAT),
        "end": times.end.strftime(DATETIME_FORMAT),
        "durations": encode_durations(times.durations),
    }


def decode_bounds(value: Any) -> Bounds:
    obj = expect_mapping(value, "bounds")
    return Bounds(
        maximum=field(obj, "maximum", decode_geo_location),
        minimum=field(obj, "minimum", decode_geo_location),
    )


def encode_bounds(bounds: Bounds) -> dict[str, Any]:
    return {
        "maximum": encode_geo_location(bounds.maximum),
        "minimum": encode_geo_location(bounds.minimum),
    }


def decode_trip_stop(value: Any) -> TripStop:
    """Decode ``{"origin": location}``, ``{"stop": stop}`` or ``{"destination": location}``."""
    obj = expect_mapping(value, "trip stop")
    present = [key for key in _TRIP_STOP_KEYS if is_present(obj, key)]
    if not present:
        raise NoVariantMatched(f"expected exactly one of {', '.join(_TRIP_STOP_KEYS)}")
    if len(present) > 1:
        raise AmbiguousVariant(f"found several trip stop kinds: {', '.join(present)}")

    match present[0]:
        case "origin":
            return Origin(field(obj, "origin", LocationCodec.decode_untagged))
        case "stop":
            return StopVisit(field(obj, "stop", decode_stop))
        case _:
            return Destination(field(obj, "destination", LocationCodec.decode_untagged))


def encode_trip_stop(trip_stop: TripStop) -> dict[str, Any]:
    match trip_stop:
        case Origin(location=location):
            return {"origin": LocationCodec.encode_untagged(location)}
        case StopVisit(stop=stop):
            return {"stop": encode_stop(stop)}
        case Destination(location=location):
            return {"destination": LocationCodec.encode_untagged(location)}
        case _:
            assert_never(trip_stop)


class TripCodec:
    """Decodes and encodes trip planner segments and plans."""

    @staticmethod
    def decode_segment(value: Any) -> Segment:
        """Decode one segment and check it against its kind's field contract.

        Raises:
            UnknownVariant: ``type`` is missing or not walk, ride or transfer.
            SegmentShapeMismatch: a required field is missing or a field of
                another kind is populated.
            MalformedPayload: a field is present but has the wrong shape.
        """
        obj = expect_mapping(value, "segment")
        kind = TripCodec._resolve_kind(obj)
        required, optional = SEGMENT_CONTRACTS[kind]

        missing = sorted(name for name in required if not is_present(obj, name))
        if missing:
            raise SegmentShapeMismatch(f"{kind.value} segment is missing {', '.join(missing)}")
        forbidden = sorted(
            name for name in _SEGMENT_FIELDS - required - optional if is_present(obj, name)
        )
        if forbidden:
            raise SegmentShapeMismatch(
                f"{kind.value} segment must not carry {', '.join(forbidden)}"
            )

        bounds = optional_field(obj, "bounds", decode_bounds)
        match kind:
            case SegmentKind.WALK:
                return Walk(
                    times=field(obj, "times", decode_times),
                    bounds=bounds,
                    from_=optional_field(obj, "from", decode_trip_stop),
                    to=optional_field(obj, "to", decode_trip_stop),
                    instructions=optional_field(obj, "instructions", as_str),
                )
            case SegmentKind.RIDE:
                return Ride(
                    times=field(obj, "times", decode_times),
                    route=field(obj, "route", decode_route),
                    variant=field(obj, "variant", decode_variant),
                    bounds=bounds,
                    bus=optional_field(obj, "bus", decode_bus),
                )
            case SegmentKind.TRANSFER:
                return Transfer(
                    from_=field(obj, "from", decode_trip_stop),
                    to=field(obj, "to", decode_trip_stop),
                    bounds=bounds,
                )
            case _:
                assert_never(kind)

    @staticmethod
    def _resolve_kind(obj: Mapping[str, Any]) -> SegmentKind:
        discriminant = obj.get("type")
        if discriminant is None:
            raise UnknownVariant("segment type is missing", "type")
        for kind in SegmentKind:
            if kind.value == discriminant:
                return kind
        raise UnknownVariant(f"unknown segment type {discriminant!r}", "type")

    @staticmethod
    def encode_segment(segment: Segment) -> dict[str, Any]:
        out: dict[str, Any] = {"type": segment.kind.value}
        if segment.bounds is not None:
            out["bounds"] = encode_bounds(segment.bounds)
        match segment:
            case Walk():
                out["times"] = encode_times(segment.times)
                if segment.from_ is not None:
                    out["from"] = encode_trip_stop(segment.from_)
                if segment.to is not None:
                    out["to"] = encode_trip_stop(segment.to)
                if segment.instructions is not None:
                    out["instructions"] = segment.instructions
            case Ride():
                out["times"] = encode_times(segment.times)
                out["route"] = encode_route(segment.route)
                out["variant"] = encode_variant(segment.variant)
                if segment.bus is not None:
                    out["bus"] = encode_bus(segment.bus)
            case Transfer():
                out["from"] = encode_trip_stop(segment.from_)
                out["to"] = encode_trip_stop(segment.to)
            case _:
                assert_never(segment)
        return out

    @staticmethod
    def decode_plan(value: Any) -> PlanDecodeResult:
        """Decode a plan, keeping every segment that decodes.

        A segment that fails is left out of the plan and reported as a
        ``SegmentDecodeFailure``; its siblings are unaffected. Problems with
        the plan itself (times, the segment list) raise.
        """
        obj = expect_mapping(value, "plan")
        number = optional_field(obj, "number", as_int)
        times = field(obj, "times", decode_times)
        items = field(obj, "segments", as_list) if is_present(obj, "segments") else []

        segments: list[Segment] = []
        failures: list[SegmentDecodeFailure] = []
        for index, item in enumerate(items):
            try:
                segments.append(TripCodec.decode_segment(item))
            except DecodeError as e:
                e.at(f"segments[{index}]")
                logger.warning(f"Skipping segment {index} of plan {number}: {e}")
                failures.append(
                    SegmentDecodeFailure(
                        index=index,
                        error=type(e).__name__,
                        message=e.message,
                        path=e.path,
                    )
                )

        return PlanDecodeResult(
            plan=Plan(times=times, segments=tuple(segments), number=number),
            failures=tuple(failures),
        )

    @staticmethod
    def decode_plans(value: Any) -> list[PlanDecodeResult]:
        """Decode a trip planner response body ``{"plans": [...]}``."""
        obj = expect_mapping(value, "trip planner response")
        items = field(obj, "plans", as_list)
        results = []
        for index, item in enumerate(items):
            try:
                results.append(TripCodec.decode_plan(item))
            except DecodeError as e:
                raise e.at(f"plans[{index}]")
        return results

    @staticmethod
    def encode_plan(plan: Plan) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if plan.number is not None:
            out["number"] = plan.number
        out["times"] = encode_times(plan.times)
        out["segments"] = [TripCodec.encode_segment(segment) for segment in plan.segments]
        return out
