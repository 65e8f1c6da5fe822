"""Transit stops and their schedules, as returned by the stop endpoints.

``TransitStop`` is the full stop record. The trip planner only ever returns
the reduced ``Stop`` from ``location``.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from transit_trail.domain.models.geo import GeoLocation, Street
from transit_trail.domain.models.route import Bus, Route, Variant


class Direction(Enum):
    """Which way buses serving the stop are heading."""

    NORTHBOUND = "Northbound"
    EASTBOUND = "Eastbound"
    SOUTHBOUND = "Southbound"
    WESTBOUND = "Westbound"


class Side(Enum):
    """Which side of the intersection the stop lies on."""

    DIRECT_OPPOSITE = "Direct Opposite"
    FARSIDE = "Farside"
    FARSIDE_OPPOSITE = "Farside Opposite"
    NEARSIDE = "Nearside"
    NEARSIDE_OPPOSITE = "Nearside Opposite"
    NA = "NA"


@dataclass(frozen=True)
class Distances:
    """Metres from a queried location to the stop."""

    direct: float
    walking: float

    def __post_init__(self) -> None:
        if self.direct < 0 or self.walking < 0:
            raise ValueError(
                f"distances must not be negative, got direct={self.direct}, "
                f"walking={self.walking}"
            )


@dataclass(frozen=True)
class TransitStop:
    """A stop with its direction, side of street and location."""

    key: int
    name: str
    number: int
    direction: Direction
    side: Side
    street: Street
    cross_street: Street
    centre: GeoLocation
    # Only set when stops were searched around a location
    distances: Distances | None = None
    internal_name: str | None = None
    sequence_on_street: int | None = None
    icon_style: str | None = None


@dataclass(frozen=True)
class ScheduledTime:
    scheduled: datetime
    estimated: datetime


@dataclass(frozen=True)
class ScheduledTimes:
    """Arrival and departure at a stop. Either may be missing, e.g. at a terminus."""

    arrival: ScheduledTime | None = None
    departure: ScheduledTime | None = None


@dataclass(frozen=True)
class ScheduledStop:
    """One pass of a bus by the stop."""

    key: str
    cancelled: bool
    times: ScheduledTimes
    variant: Variant
    # Usually only present in today's schedule
    bus: Bus | None = None


@dataclass(frozen=True)
class RouteSchedule:
    route: Route
    scheduled_stops: tuple[ScheduledStop, ...] = ()


@dataclass(frozen=True)
class Schedule:
    """Upcoming passes at a stop, one route schedule per route serving it."""

    stop: TransitStop
    route_schedules: tuple[RouteSchedule, ...] = ()
