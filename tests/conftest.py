"""Shared fixtures: transit API payloads and the domain values they decode to."""

from typing import Any

import pytest

from transit_trail.domain.models import (
    Address,
    GeoLocation,
    Intersection,
    Monument,
    Stop,
    Street,
    StreetLeg,
)


@pytest.fixture
def portage() -> Street:
    return Street(key=2903, name="Portage Avenue", type="Avenue")


@pytest.fixture
def main_street() -> Street:
    return Street(key=2265, name="Main Street", type="Street", leg=StreetLeg.NORTH)


@pytest.fixture
def address(portage: Street) -> Address:
    return Address(
        key=136590,
        street=portage,
        street_number=393,
        centre=GeoLocation(latitude=49.89218, longitude=-97.14351),
    )


@pytest.fixture
def intersection(portage: Street, main_street: Street) -> Intersection:
    return Intersection(
        key=Intersection.compose_key(portage, main_street),
        street=portage,
        cross_street=main_street,
        centre=GeoLocation(latitude=49.89553, longitude=-97.13858),
    )


@pytest.fixture
def monument(address: Address) -> Monument:
    return Monument(
        key=3011,
        name="Canadian Museum for Human Rights",
        categories=("Museums", "Attractions"),
        address=address,
    )


@pytest.fixture
def point() -> GeoLocation:
    return GeoLocation(latitude=49.8951, longitude=-97.1384)


@pytest.fixture
def stop() -> Stop:
    return Stop(
        key=10064,
        name="Northbound Osborne at Glasgow",
        centre=GeoLocation(latitude=49.86902, longitude=-97.13899),
    )


@pytest.fixture
def street_payload() -> dict[str, Any]:
    return {"key": 2903, "name": "Portage Avenue", "type": "Avenue"}


@pytest.fixture
def address_payload(street_payload: dict[str, Any]) -> dict[str, Any]:
    # Coordinates arrive quoted and wrapped, as the API sends them
    return {
        "key": "136590",
        "street": street_payload,
        "street-number": 393,
        "centre": {"geographic": {"latitude": "49.89218", "longitude": "-97.14351"}},
    }
