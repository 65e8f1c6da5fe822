"""Codecs for geographic primitives: points, streets, addresses, intersections,
monuments and trip planner stops.

Wire keys are hyphenated (``street-number``, ``cross-street``); optional
fields are left out of encoded objects rather than written as null.
"""

from collections.abc import Mapping
from typing import Any

from transit_trail.adapters.transit_api.payload_fields import (
    as_float,
    as_int,
    as_str,
    expect_mapping,
    field,
    list_field,
    optional_field,
)
from transit_trail.domain.errors import MalformedPayload
from transit_trail.domain.models.geo import (
    Address,
    GeoLocation,
    Intersection,
    Monument,
    Street,
    StreetLeg,
)
from transit_trail.domain.models.location import Stop

# Keys the API wraps coordinates in, tried in this order
_WRAPPER_KEYS = ("geographic", "centre")


def decode_geo_location(value: Any) -> GeoLocation:
    """Decode a point.

    Accepts ``{latitude, longitude}`` and ``{lat, lng}`` with numbers or
    numeric strings, optionally wrapped in a ``geographic`` or ``centre`` key.
    """
    obj = expect_mapping(value, "geographic point")

    if "latitude" in obj or "longitude" in obj:
        latitude = field(obj, "latitude", as_float)
        longitude = field(obj, "longitude", as_float)
    elif "lat" in obj or "lng" in obj:
        latitude = field(obj, "lat", as_float)
        longitude = field(obj, "lng", as_float)
    else:
        for key in _WRAPPER_KEYS:
            if key in obj:
                return field(obj, key, decode_geo_location)
        raise MalformedPayload("expected latitude and longitude")

    try:
        return GeoLocation(latitude=latitude, longitude=longitude)
    except ValueError as e:
        raise MalformedPayload(str(e)) from e


def encode_geo_location(point: GeoLocation) -> dict[str, Any]:
    return {"latitude": point.latitude, "longitude": point.longitude}


def _as_street_leg(value: Any) -> StreetLeg:
    try:
        return StreetLeg.parse(as_str(value))
    except ValueError as e:
        raise MalformedPayload(str(e)) from e


def decode_street(value: Any) -> Street:
    obj = expect_mapping(value, "street")
    return Street(
        key=field(obj, "key", as_int),
        name=field(obj, "name", as_str),
        type=optional_field(obj, "type", as_str),
        leg=optional_field(obj, "leg", _as_street_leg),
    )


def encode_street(street: Street) -> dict[str, Any]:
    out: dict[str, Any] = {"key": street.key, "name": street.name}
    if street.type is not None:
        out["type"] = street.type
    if street.leg is not None:
        out["leg"] = street.leg.value
    return out


def decode_address_fields(obj: Mapping[str, Any]) -> Address:
    """Build an Address from an object that holds its fields directly."""
    return Address(
        key=field(obj, "key", as_int),
        street=field(obj, "street", decode_street),
        street_number=field(obj, "street-number", as_int),
        centre=field(obj, "centre", decode_geo_location),
    )


def decode_address(value: Any) -> Address:
    return decode_address_fields(expect_mapping(value, "address"))


def encode_address(address: Address) -> dict[str, Any]:
    return {
        "key": address.key,
        "street": encode_street(address.street),
        "street-number": address.street_number,
        "centre": encode_geo_location(address.centre),
    }


def decode_intersection_fields(obj: Mapping[str, Any]) -> Intersection:
    return Intersection(
        key=field(obj, "key", as_str),
        street=field(obj, "street", decode_street),
        cross_street=field(obj, "cross-street", decode_street),
        centre=field(obj, "centre", decode_geo_location),
    )


def decode_intersection(value: Any) -> Intersection:
    return decode_intersection_fields(expect_mapping(value, "intersection"))


def encode_intersection(intersection: Intersection) -> dict[str, Any]:
    return {
        "key": intersection.key,
        "street": encode_street(intersection.street),
        "cross-street": encode_street(intersection.cross_street),
        "centre": encode_geo_location(intersection.centre),
    }


def decode_monument_fields(obj: Mapping[str, Any]) -> Monument:
    categories = list_field(obj, "categories", as_str)
    return Monument(
        key=field(obj, "key", as_int),
        name=field(obj, "name", as_str),
        # Categories behave like a set but keep their first-seen order
        categories=tuple(dict.fromkeys(categories)),
        address=field(obj, "address", decode_address),
    )


def decode_monument(value: Any) -> Monument:
    return decode_monument_fields(expect_mapping(value, "monument"))


def encode_monument(monument: Monument) -> dict[str, Any]:
    return {
        "key": monument.key,
        "name": monument.name,
        "categories": list(monument.categories),
        "address": encode_address(monument.address),
    }


def decode_stop_fields(obj: Mapping[str, Any]) -> Stop:
    return Stop(
        key=field(obj, "key", as_int),
        name=field(obj, "name", as_str),
        centre=optional_field(obj, "centre", decode_geo_location),
    )


def decode_stop(value: Any) -> Stop:
    return decode_stop_fields(expect_mapping(value, "stop"))


def encode_stop(stop: Stop) -> dict[str, Any]:
    out: dict[str, Any] = {"key": stop.key, "name": stop.name}
    if stop.centre is not None:
        out["centre"] = encode_geo_location(stop.centre)
    return out
