"""Trip plan domain models: plans, segments and the stops between them."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from transit_trail.domain.models.geo import GeoLocation
from transit_trail.domain.models.location import Location, Stop
from transit_trail.domain.models.route import Bus, Route, Variant


@dataclass(frozen=True)
class Durations:
    """Minutes spent on each part of a plan or segment. Unused parts are 0."""

    total: int = 0
    walking: int = 0
    waiting: int = 0
    riding: int = 0

    def __post_init__(self) -> None:
        for name in ("total", "walking", "waiting", "riding"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} duration must not be negative")


@dataclass(frozen=True)
class Times:
    """When a plan or segment starts and ends, and how the time is spent."""

    start: datetime
    end: datetime
    durations: Durations = Durations()


@dataclass(frozen=True)
class Bounds:
    """The geographic bounding box of a plan or segment."""

    maximum: GeoLocation
    minimum: GeoLocation


@dataclass(frozen=True)
class Origin:
    """The segment starts or ends at the plan's origin."""

    location: Location


@dataclass(frozen=True)
class StopVisit:
    """The segment starts or ends at a stop along the way."""

    stop: Stop


@dataclass(frozen=True)
class Destination:
    """The segment starts or ends at the plan's destination."""

    location: Location


TripStop = Origin | StopVisit | Destination


class SegmentKind(Enum):
    """Segment discriminants as they appear in the ``type`` field."""

    WALK = "walk"
    RIDE = "ride"
    TRANSFER = "transfer"


@dataclass(frozen=True)
class Walk:
    """A walking segment."""

    times: Times
    bounds: Bounds | None = None
    from_: TripStop | None = None
    to: TripStop | None = None
    instructions: str | None = None

    kind = SegmentKind.WALK


@dataclass(frozen=True)
class Ride:
    """A segment spent riding a bus."""

    times: Times
    route: Route
    variant: Variant
    bounds: Bounds | None = None
    bus: Bus | None = None

    kind = SegmentKind.RIDE


@dataclass(frozen=True)
class Transfer:
    """A transfer between two stops."""

    from_: TripStop
    to: TripStop
    bounds: Bounds | None = None

    kind = SegmentKind.TRANSFER


Segment = Walk | Ride | Transfer


@dataclass(frozen=True)
class Plan:
    """One way of getting from the origin to the destination.

    Segments are in travel order; the first one starts at the trip origin.
    """

    times: Times
    segments: tuple[Segment, ...]
    number: int | None = None
