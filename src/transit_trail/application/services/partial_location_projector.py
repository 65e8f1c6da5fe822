"""Partial location projector.

Turns a full location into the minimal reference sent with trip plan
requests. The transit API understands its own keys; any other planner only
understands coordinates, and monuments by name.
"""

from typing import assert_never

from transit_trail.domain.errors import MissingCentre
from transit_trail.domain.models.geo import (
    Address,
    GeoLocation,
    Intersection,
    Monument,
)
from transit_trail.domain.models.location import (
    Location,
    LocationKind,
    PartialLocation,
    Stop,
    location_path,
)


def _point_at(centre: GeoLocation | None, location: Location) -> PartialLocation:
    if centre is None:
        raise MissingCentre(f"{location_path(location)} has no centre")
    return PartialLocation.point(centre.latitude, centre.longitude)


def to_partial(location: Location, target_is_transit_api: bool) -> PartialLocation:
    """Project a location onto the reference sent to a trip planner.

    Args:
        location: Any location value.
        target_is_transit_api: True when the request goes to the transit API,
            which resolves its own keys. Otherwise only coordinates and
            monument names are used.

    Raises:
        MissingCentre: A point is needed but the location has no centre.
    """
    if target_is_transit_api:
        match location:
            case Address(key=key):
                return PartialLocation(LocationKind.ADDRESS, str(key))
            case Monument(key=key):
                return PartialLocation(LocationKind.MONUMENT, str(key))
            case Intersection(key=key):
                return PartialLocation(LocationKind.INTERSECTION, key)
            case GeoLocation(latitude=latitude, longitude=longitude):
                return PartialLocation.point(latitude, longitude)
            case Stop(key=key):
                return PartialLocation(LocationKind.STOP, key)
            case _:
                assert_never(location)

    match location:
        case Monument(name=name):
            return PartialLocation(LocationKind.MONUMENT, name)
        case Address(centre=centre) | Intersection(centre=centre) | Stop(centre=centre):
            return _point_at(centre, location)
        case GeoLocation(latitude=latitude, longitude=longitude):
            return PartialLocation.point(latitude, longitude)
        case _:
            assert_never(location)


class PartialLocationProjector:
    """Projects locations for one kind of trip planner."""

    def __init__(self, target_is_transit_api: bool = True) -> None:
        """Initialize for the transit API or for a coordinate-only planner."""
        self._target_is_transit_api = target_is_transit_api

    @property
    def target_is_transit_api(self) -> bool:
        return self._target_is_transit_api

    def project(self, location: Location) -> PartialLocation:
        return to_partial(location, self._target_is_transit_api)
