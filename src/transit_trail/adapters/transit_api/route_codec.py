"""Codecs for routes, variants, buses and badge styles.

Routes are an untagged union distinguished by value shape: BLUE rapid transit
routes use strings for ``key``, ``number`` and ``badge-label`` while every
other route uses integers.
"""

from collections.abc import Callable, Mapping
from typing import Any

from transit_trail.adapters.transit_api.payload_fields import (
    as_bool,
    as_enum,
    as_int,
    as_str,
    expect_mapping,
    field,
    is_integer_literal,
    is_present,
    list_field,
    optional_field,
)
from transit_trail.domain.errors import DecodeError, NoVariantMatched
from transit_trail.domain.models.route import (
    BadgeStyle,
    BlueRoute,
    Bus,
    Coverage,
    Customer,
    RegularRoute,
    Route,
    Variant,
)


def decode_variant(value: Any) -> Variant:
    obj = expect_mapping(value, "variant")
    return Variant(key=field(obj, "key", as_str), name=optional_field(obj, "name", as_str))


def encode_variant(variant: Variant) -> dict[str, Any]:
    out: dict[str, Any] = {"key": variant.key}
    if variant.name is not None:
        out["name"] = variant.name
    return out


def decode_bus(value: Any) -> Bus:
    obj = expect_mapping(value, "bus")
    return Bus(
        key=field(obj, "key", as_int),
        bike_rack=optional_field(obj, "bike-rack", as_bool) or False,
        wifi=optional_field(obj, "wifi", as_bool) or False,
    )


def encode_bus(bus: Bus) -> dict[str, Any]:
    return {"key": bus.key, "bike-rack": bus.bike_rack, "wifi": bus.wifi}


def decode_badge_style(value: Any) -> BadgeStyle:
    obj = expect_mapping(value, "badge style")
    class_names: list[str] = []
    holder = optional_field(obj, "class-names", expect_mapping)
    if holder is not None:
        try:
            class_names = list_field(holder, "class-name", as_str)
        except DecodeError as e:
            raise e.at("class-names")
    return BadgeStyle(
        class_names=tuple(class_names),
        background_color=field(obj, "background-color", as_str),
        border_color=field(obj, "border-color", as_str),
        color=field(obj, "color", as_str),
    )


def encode_badge_style(style: BadgeStyle) -> dict[str, Any]:
    return {
        "class-names": {"class-name": list(style.class_names)},
        "background-color": style.background_color,
        "border-color": style.border_color,
        "color": style.color,
    }


def _decode_common(obj: Mapping[str, Any], default_coverage: Coverage) -> dict[str, Any]:
    variants = list_field(obj, "variants", decode_variant) if is_present(obj, "variants") else None
    return {
        "customer_type": optional_field(obj, "customer-type", as_enum(Customer))
        or Customer.REGULAR,
        "coverage": optional_field(obj, "coverage", as_enum(Coverage)) or default_coverage,
        "badge_style": optional_field(obj, "badge-style", decode_badge_style),
        "variants": tuple(variants) if variants is not None else None,
    }


def _decode_blue(obj: Mapping[str, Any]) -> BlueRoute:
    return BlueRoute(
        key=field(obj, "key", as_str),
        number=field(obj, "number", as_str),
        badge_label=field(obj, "badge-label", as_str),
        name=optional_field(obj, "name", as_str),
        **_decode_common(obj, Coverage.RAPID_TRANSIT),
    )


def _decode_regular(obj: Mapping[str, Any]) -> RegularRoute:
    return RegularRoute(
        key=field(obj, "key", as_int),
        number=field(obj, "number", as_int),
        badge_label=field(obj, "badge-label", as_int),
        name=optional_field(obj, "name", as_str),
        **_decode_common(obj, Coverage.REGULAR),
    )


# Route shapes in the order they are tried
_ROUTE_SHAPES: tuple[
    tuple[str, Callable[[Mapping[str, Any]], bool], Callable[[Mapping[str, Any]], Route]], ...
] = (
    (
        "blue",
        lambda obj: isinstance(obj.get("key"), str) and not is_integer_literal(obj["key"]),
        _decode_blue,
    ),
    ("regular", lambda obj: is_integer_literal(obj.get("key")), _decode_regular),
)


def decode_route(value: Any) -> Route:
    """Decode a route, picking the BLUE or regular shape from the key's type."""
    obj = expect_mapping(value, "route")
    for _name, matches, decode in _ROUTE_SHAPES:
        if matches(obj):
            return decode(obj)
    raise NoVariantMatched("route key is neither a BLUE line name nor a route number", "key")


def encode_route(route: Route) -> dict[str, Any]:
    out: dict[str, Any] = {"key": route.key, "number": route.number}
    if route.name is not None:
        out["name"] = route.name
    out["customer-type"] = route.customer_type.value
    out["coverage"] = route.coverage.value
    out["badge-label"] = route.badge_label
    if route.badge_style is not None:
        out["badge-style"] = encode_badge_style(route.badge_style)
    if route.variants is not None:
        out["variants"] = [encode_variant(variant) for variant in route.variants]
    return out
