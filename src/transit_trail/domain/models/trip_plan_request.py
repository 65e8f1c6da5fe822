"""Trip plan request domain model."""

from dataclasses import dataclass, field
from enum import Enum

from transit_trail.domain.models.filters import FilterCollection, FilterFamily
from transit_trail.domain.models.location import PartialLocation


class Usage(Enum):
    """Whether the API should return normal, longer or shorter names."""

    NORMAL = "normal"
    LONG = "long"
    SHORT = "short"


@dataclass(frozen=True)
class TripPlanRequest:
    """Everything needed to ask the trip planner for plans."""

    origin: PartialLocation
    destination: PartialLocation
    filters: FilterCollection = field(
        default_factory=lambda: FilterCollection(family=FilterFamily.TRIP_PLAN)
    )
    usage: Usage = Usage.NORMAL

    def __post_init__(self) -> None:
        if self.filters.family is not FilterFamily.TRIP_PLAN:
            raise ValueError(
                f"trip plan requests take trip-plan filters, not {self.filters.family.value}"
            )
