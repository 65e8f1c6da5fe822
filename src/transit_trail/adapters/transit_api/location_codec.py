"""Location variant resolver.

The transit API uses two conventions for the same location union:

* tagged, used by the locations/stops endpoints::

      {"type": "address", "key": 42, "street": {...}, "street-number": 10, "centre": {...}}

* untagged, used by the trip planner, where the single top-level key names the kind::

      {"Address": {"key": 42, "street": {...}, "street-number": 10, "centre": {...}}}

Both decoders enforce that exactly one variant's payload is present.
"""

from collections.abc import Callable, Mapping
from typing import Any

from transit_trail.adapters.transit_api.geo_codec import (
    decode_address,
    decode_address_fields,
    decode_geo_location,
    decode_intersection,
    decode_intersection_fields,
    decode_monument,
    decode_monument_fields,
    decode_stop,
    decode_stop_fields,
    encode_address,
    encode_geo_location,
    encode_intersection,
    encode_monument,
    encode_stop,
)
from transit_trail.adapters.transit_api.payload_fields import expect_mapping, field, is_present
from transit_trail.domain.errors import (
    AmbiguousVariant,
    FieldMismatch,
    NoVariantMatched,
    UnknownVariant,
)
from transit_trail.domain.models.location import (
    Location,
    LocationKind,
    PartialLocation,
    location_kind,
)

DISCRIMINANT = "type"


def _decode_point_fields(obj: Mapping[str, Any]) -> Location:
    return field(obj, "point", decode_geo_location)


# Tagged form: (required fields, optional fields, decoder over the flat object)
_TAGGED_VARIANTS: dict[
    LocationKind, tuple[frozenset[str], frozenset[str], Callable[[Mapping[str, Any]], Location]]
] = {
    LocationKind.ADDRESS: (
        frozenset({"key", "street", "street-number", "centre"}),
        frozenset(),
        decode_address_fields,
    ),
    LocationKind.MONUMENT: (
        frozenset({"key", "name", "categories", "address"}),
        frozenset(),
        decode_monument_fields,
    ),
    LocationKind.INTERSECTION: (
        frozenset({"key", "street", "cross-street", "centre"}),
        frozenset(),
        decode_intersection_fields,
    ),
    LocationKind.POINT: (frozenset({"point"}), frozenset(), _decode_point_fields),
    LocationKind.STOP: (frozenset({"key", "name"}), frozenset({"centre"}), decode_stop_fields),
}

_PAYLOAD_FIELDS = frozenset().union(
    *(required | optional for required, optional, _ in _TAGGED_VARIANTS.values())
)

# Untagged form: shapes are tried in this order; each matches on its top-level key
_UNTAGGED_VARIANTS: tuple[tuple[LocationKind, Callable[[Any], Location]], ...] = (
    (LocationKind.ADDRESS, decode_address),
    (LocationKind.MONUMENT, decode_monument),
    (LocationKind.INTERSECTION, decode_intersection),
    (LocationKind.POINT, decode_geo_location),
    (LocationKind.STOP, decode_stop),
)

_PAYLOAD_ENCODERS: dict[LocationKind, Callable[[Any], dict[str, Any]]] = {
    LocationKind.ADDRESS: encode_address,
    LocationKind.MONUMENT: encode_monument,
    LocationKind.INTERSECTION: encode_intersection,
    LocationKind.POINT: encode_geo_location,
    LocationKind.STOP: encode_stop,
}


class LocationCodec:
    """Decodes and encodes locations in the tagged and untagged conventions."""

    @staticmethod
    def decode_tagged(value: Any) -> Location:
        """Decode ``{"type": kind, ...fields}``.

        Raises:
            UnknownVariant: the ``type`` field is missing or names no known kind.
            FieldMismatch: a required field of the kind is missing, or a field
                that only other kinds carry is present.
            MalformedPayload: a field is present but has the wrong shape.
        """
        obj = expect_mapping(value, "location")
        kind = LocationCodec._resolve_discriminant(obj)
        required, optional, decode = _TAGGED_VARIANTS[kind]

        missing = sorted(name for name in required if not is_present(obj, name))
        if missing:
            raise FieldMismatch(
                f"{kind.value} location is missing {', '.join(missing)}",
            )
        foreign = sorted(
            name
            for name in _PAYLOAD_FIELDS - required - optional
            if is_present(obj, name)
        )
        if foreign:
            raise FieldMismatch(
                f"{kind.value} location carries fields of other kinds: {', '.join(foreign)}",
            )
        return decode(obj)

    @staticmethod
    def _resolve_discriminant(obj: Mapping[str, Any]) -> LocationKind:
        discriminant = obj.get(DISCRIMINANT)
        if discriminant is None:
            raise UnknownVariant("location type is missing", DISCRIMINANT)
        if isinstance(discriminant, str):
            for kind in LocationKind:
                if kind.value == discriminant:
                    return kind
        raise UnknownVariant(f"unknown location type {discriminant!r}", DISCRIMINANT)

    @staticmethod
    def decode_untagged(value: Any) -> Location:
        """Decode ``{"Address": {...}}`` and friends.

        Raises:
            NoVariantMatched: none of the variant keys is present.
            AmbiguousVariant: more than one variant key is present.
            MalformedPayload: the matched payload has the wrong shape.
        """
        obj = expect_mapping(value, "location")
        matches = [
            (kind, decode)
            for kind, decode in _UNTAGGED_VARIANTS
            if is_present(obj, kind.untagged_key)
        ]
        if not matches:
            expected = ", ".join(kind.untagged_key for kind, _ in _UNTAGGED_VARIANTS)
            raise NoVariantMatched(f"expected exactly one of {expected}")
        if len(matches) > 1:
            found = ", ".join(kind.untagged_key for kind, _ in matches)
            raise AmbiguousVariant(f"found several location kinds: {found}")

        kind, decode = matches[0]
        return field(obj, kind.untagged_key, decode)

    @staticmethod
    def encode_tagged(location: Location) -> dict[str, Any]:
        kind = location_kind(location)
        payload = _PAYLOAD_ENCODERS[kind](location)
        if kind is LocationKind.POINT:
            return {DISCRIMINANT: kind.value, "point": payload}
        return {DISCRIMINANT: kind.value, **payload}

    @staticmethod
    def encode_untagged(location: Location) -> dict[str, Any]:
        kind = location_kind(location)
        return {kind.untagged_key: _PAYLOAD_ENCODERS[kind](location)}

    @staticmethod
    def encode_partial(partial: PartialLocation) -> dict[str, Any]:
        """Encode ``{"Address": "42"}``, ``{"Point": [lat, lon]}``, ``{"Stop": 10064}`` and so on."""
        if partial.kind is LocationKind.POINT:
            return {partial.kind.untagged_key: list(partial.value)}  # type: ignore[arg-type]
        return {partial.kind.untagged_key: partial.value}
