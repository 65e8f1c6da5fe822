"""Domain models for transit trip planning."""

from transit_trail.domain.models.decode_result import PlanDecodeResult, SegmentDecodeFailure
from transit_trail.domain.models.filters import FilterCollection, FilterFamily, TimeMode
from transit_trail.domain.models.geo import (
    Address,
    GeoLocation,
    Intersection,
    Monument,
    Street,
    StreetLeg,
    StreetType,
)
from transit_trail.domain.models.location import (
    Location,
    LocationKind,
    PartialLocation,
    Stop,
    location_kind,
    location_path,
)
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
from transit_trail.domain.models.service_advisory import Category, Priority, ServiceAdvisory
from transit_trail.domain.models.stop import (
    Direction,
    Distances,
    RouteSchedule,
    Schedule,
    ScheduledStop,
    ScheduledTime,
    ScheduledTimes,
    Side,
    TransitStop,
)
from transit_trail.domain.models.trip import (
    Bounds,
    Destination,
    Durations,
    Origin,
    Plan,
    Ride,
    Segment,
    SegmentKind,
    StopVisit,
    Times,
    Transfer,
    TripStop,
    Walk,
)
from transit_trail.domain.models.trip_plan_request import TripPlanRequest, Usage
from transit_trail.domain.models.trip_planner_settings import TripPlannerSettings

__all__ = [
    "Address",
    "BadgeStyle",
    "BlueRoute",
    "Bounds",
    "Bus",
    "Category",
    "Coverage",
    "Customer",
    "Destination",
    "Direction",
    "Distances",
    "Durations",
    "FilterCollection",
    "FilterFamily",
    "GeoLocation",
    "Intersection",
    "Location",
    "LocationKind",
    "Monument",
    "Origin",
    "PartialLocation",
    "Plan",
    "PlanDecodeResult",
    "Priority",
    "RegularRoute",
    "Ride",
    "Route",
    "RouteSchedule",
    "Schedule",
    "ScheduledStop",
    "ScheduledTime",
    "ScheduledTimes",
    "Segment",
    "SegmentDecodeFailure",
    "SegmentKind",
    "ServiceAdvisory",
    "Side",
    "Stop",
    "StopVisit",
    "Street",
    "StreetLeg",
    "StreetType",
    "Times",
    "Transfer",
    "TransitStop",
    "TripPlanRequest",
    "TripPlannerSettings",
    "TripStop",
    "Usage",
    "Variant",
    "Walk",
    "location_kind",
    "location_path",
]
