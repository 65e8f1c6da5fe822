"""Geographic primitive domain models."""

import math
from dataclasses import dataclass
from enum import Enum

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


@dataclass(frozen=True)
class GeoLocation:
    """A point on the Earth, given by latitude and longitude in degrees.

    Winnipeg lies roughly between latitudes 49.75 and 49.97 and longitudes
    -97.35 and -96.96.
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.latitude) or not (
            LATITUDE_RANGE[0] <= self.latitude <= LATITUDE_RANGE[1]
        ):
            raise ValueError(f"latitude {self.latitude!r} is outside {LATITUDE_RANGE}")
        if not math.isfinite(self.longitude) or not (
            LONGITUDE_RANGE[0] <= self.longitude <= LONGITUDE_RANGE[1]
        ):
            raise ValueError(f"longitude {self.longitude!r} is outside {LONGITUDE_RANGE}")


class StreetLeg(Enum):
    """The part of a street that is split into more than one part."""

    NORTH = "North"
    EAST = "East"
    SOUTH = "South"
    WEST = "West"

    @classmethod
    def parse(cls, value: str) -> "StreetLeg":
        """Parse a leg name case-insensitively ("east", "East", "EAST")."""
        for leg in cls:
            if leg.value.lower() == value.strip().lower():
                return leg
        raise ValueError(f"{value!r} is not one of north, east, south, west")

    @property
    def abbreviation(self) -> str:
        """Single-letter form used in street query parameters."""
        return self.value[0]


class StreetType(Enum):
    """Street types the street endpoint can filter by."""

    AVENUE = "Avenue"
    BOULEVARD = "Boulevard"
    CRESCENT = "Crescent"
    DRIVE = "Drive"
    LOOP = "Loop"
    ROAD = "Road"
    STREET = "Street"
    WAY = "Way"
    TERMINAL = "Terminal"


@dataclass(frozen=True)
class Street:
    """A street as returned by the transit API."""

    key: int
    name: str
    type: str | None = None  # e.g. "Avenue", "Road"; kept as free text
    leg: StreetLeg | None = None


@dataclass(frozen=True)
class Address:
    """A residential address. Carries its own copy of the street."""

    key: int
    street: Street
    street_number: int
    centre: GeoLocation


@dataclass(frozen=True)
class Intersection:
    """The intersection of two streets."""

    key: str
    street: Street
    cross_street: Street
    centre: GeoLocation

    @staticmethod
    def compose_key(street: Street, cross_street: Street) -> str:
        """Build an intersection key from two streets, smaller street key first."""
        first, second = sorted((street.key, cross_street.key))
        return f"{first}:{second}"


@dataclass(frozen=True)
class Monument:
    """A significant point of interest."""

    key: int
    name: str
    categories: tuple[str, ...]
    address: Address
