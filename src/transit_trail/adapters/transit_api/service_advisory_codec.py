"""Codec for service advisories.

Advisory priorities travel as integers 1-5; categories arrive capitalised
("Handi-Transit") but are matched without regard to case.
"""

from typing import Any

from transit_trail.adapters.transit_api.payload_fields import (
    DATETIME_FORMAT,
    as_datetime,
    as_int,
    as_str,
    expect_mapping,
    field,
    list_field,
)
from transit_trail.domain.errors import MalformedPayload
from transit_trail.domain.models.service_advisory import Category, Priority, ServiceAdvisory

# Display form of each category on the wire
_CATEGORY_NAMES = {
    Category.TRANSIT: "Transit",
    Category.HANDI_TRANSIT: "Handi-Transit",
    Category.ALL: "All",
}


def _as_priority(value: Any) -> Priority:
    number = as_int(value)
    try:
        return Priority(number)
    except ValueError:
        raise MalformedPayload(f"priority must be between 1 and 5, got {number}") from None


def _as_category(value: Any) -> Category:
    try:
        return Category.parse(as_str(value))
    except ValueError as e:
        raise MalformedPayload(str(e)) from e


def decode_service_advisory(value: Any) -> ServiceAdvisory:
    obj = expect_mapping(value, "service advisory")
    return ServiceAdvisory(
        key=field(obj, "key", as_int),
        priority=field(obj, "priority", _as_priority),
        title=field(obj, "title", as_str),
        body=field(obj, "body", as_str),
        category=field(obj, "category", _as_category),
        updated_at=field(obj, "updated-at", as_datetime),
    )


def encode_service_advisory(advisory: ServiceAdvisory) -> dict[str, Any]:
    return {
        "key": advisory.key,
        "priority": int(advisory.priority),
        "title": advisory.title,
        "body": advisory.body,
        "category": _CATEGORY_NAMES[advisory.category],
        "updated-at": advisory.updated_at.strftime(DATETIME_FORMAT),
    }


def decode_service_advisories(value: Any) -> list[ServiceAdvisory]:
    """Decode the advisory list response, ``{"service-advisories": [...]}``."""
    obj = expect_mapping(value, "service advisories response")
    return list_field(obj, "service-advisories", decode_service_advisory)


def decode_service_advisory_response(value: Any) -> ServiceAdvisory:
    """Decode the single advisory response, ``{"service-advisory": {...}}``."""
    obj = expect_mapping(value, "service advisory response")
    return field(obj, "service-advisory", decode_service_advisory)
