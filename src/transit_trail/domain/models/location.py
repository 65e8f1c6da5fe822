"""Location union and the partial location sent with trip plan requests."""

from dataclasses import dataclass
from enum import Enum
from typing import assert_never

from transit_trail.domain.errors import UnknownVariant
from transit_trail.domain.models.geo import Address, GeoLocation, Intersection, Monument


class LocationKind(Enum):
    """The closed set of location kinds. Values are the tagged-form discriminants."""

    ADDRESS = "address"
    MONUMENT = "monument"
    INTERSECTION = "intersection"
    POINT = "point"
    STOP = "stop"

    @property
    def untagged_key(self) -> str:
        """Top-level key identifying this kind in the untagged form."""
        return self.value.capitalize()


@dataclass(frozen=True)
class Stop:
    """Basic information about a stop on a trip.

    This is the reduced stop shape used by the trip planner; it carries no
    direction, side or schedule information.
    """

    key: int
    name: str
    centre: GeoLocation | None = None


# A point location is a bare GeoLocation.
Location = Address | Monument | Intersection | GeoLocation | Stop


def location_kind(location: Location) -> LocationKind:
    """Return the kind of a location value."""
    match location:
        case Address():
            return LocationKind.ADDRESS
        case Monument():
            return LocationKind.MONUMENT
        case Intersection():
            return LocationKind.INTERSECTION
        case GeoLocation():
            return LocationKind.POINT
        case Stop():
            return LocationKind.STOP
        case _:
            raise UnknownVariant(f"{type(location).__name__} is not a location")


def location_path(location: Location) -> str:
    """Resource path of a location, e.g. ``addresses/42`` or ``geo/49.9,-97.1``."""
    match location:
        case Address(key=key):
            return f"addresses/{key}"
        case Monument(key=key):
            return f"monuments/{key}"
        case Intersection(key=key):
            return f"intersections/{key}"
        case GeoLocation(latitude=latitude, longitude=longitude):
            return f"geo/{latitude},{longitude}"
        case Stop(key=key):
            return f"stops/{key}"
        case _:
            assert_never(location)


PartialValue = str | int | tuple[float, float]


@dataclass(frozen=True)
class PartialLocation:
    """Minimal reference to a location for outbound trip plan requests.

    Exactly one kind is set. Address, Monument and Intersection carry a string
    (a key or, for monuments outside the transit API, a name), Point carries a
    (latitude, longitude) pair and Stop carries the integer stop key.
    """

    kind: LocationKind
    value: PartialValue

    def __post_init__(self) -> None:
        match self.kind:
            case LocationKind.ADDRESS | LocationKind.MONUMENT | LocationKind.INTERSECTION:
                valid = isinstance(self.value, str)
            case LocationKind.POINT:
                valid = (
                    isinstance(self.value, tuple)
                    and len(self.value) == 2
                    and all(
                        isinstance(v, (int, float)) and not isinstance(v, bool)
                        for v in self.value
                    )
                )
            case LocationKind.STOP:
                valid = isinstance(self.value, int) and not isinstance(self.value, bool)
            case _:
                assert_never(self.kind)
        if not valid:
            raise ValueError(f"{self.value!r} is not a valid {self.kind.value} reference")

    @classmethod
    def point(cls, latitude: float, longitude: float) -> "PartialLocation":
        return cls(LocationKind.POINT, (latitude, longitude))

    @property
    def path(self) -> str:
        """Resource path of the referenced location."""
        match self.kind:
            case LocationKind.ADDRESS:
                return f"addresses/{self.value}"
            case LocationKind.MONUMENT:
                return f"monuments/{self.value}"
            case LocationKind.INTERSECTION:
                return f"intersections/{self.value}"
            case LocationKind.POINT:
                latitude, longitude = self.value  # type: ignore[misc]
                return f"geo/{latitude},{longitude}"
            case LocationKind.STOP:
                return f"stops/{self.value}"
            case _:
                assert_never(self.kind)
