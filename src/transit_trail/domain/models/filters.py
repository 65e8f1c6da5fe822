"""Filter options for service advisory, trip plan, street and stop schedule queries.

Every option is a small frozen dataclass whose ``tag`` names it on the wire.
Options of one family are combined into a ``FilterCollection``.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from typing import ClassVar

from transit_trail.domain.models.geo import StreetLeg, StreetType
from transit_trail.domain.models.service_advisory import Category, Priority

logger = logging.getLogger(__name__)


class FilterFamily(Enum):
    """The query a filter option belongs to."""

    SERVICE_ADVISORY = "service-advisory"
    TRIP_PLAN = "trip-plan"
    STREET = "street"
    STOP_SCHEDULE = "stop-schedule"


class TimeMode(Enum):
    """What the trip time means: when to leave or when to arrive."""

    DEPART_BEFORE = "depart-before"
    DEPART_AFTER = "depart-after"
    ARRIVE_BEFORE = "arrive-before"
    ARRIVE_AFTER = "arrive-after"


def _require_non_negative(value: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{what} must be a non-negative integer, got {value!r}")


# Service advisories


@dataclass(frozen=True)
class AdvisoryPriority:
    """Only advisories of this priority or more urgent."""

    priority: Priority

    tag: ClassVar[str] = "Priority"
    family: ClassVar[FilterFamily] = FilterFamily.SERVICE_ADVISORY


@dataclass(frozen=True)
class AdvisoryCategory:
    """Only advisories of this category."""

    category: Category

    tag: ClassVar[str] = "Category"
    family: ClassVar[FilterFamily] = FilterFamily.SERVICE_ADVISORY


@dataclass(frozen=True)
class AdvisoryMaxAge:
    """Only advisories created or updated in the last ``days`` days."""

    days: int

    tag: ClassVar[str] = "MaxAge"
    family: ClassVar[FilterFamily] = FilterFamily.SERVICE_ADVISORY

    def __post_init__(self) -> None:
        _require_non_negative(self.days, "MaxAge")


@dataclass(frozen=True)
class AdvisoryLimit:
    """At most ``count`` advisories."""

    count: int

    tag: ClassVar[str] = "Limit"
    family: ClassVar[FilterFamily] = FilterFamily.SERVICE_ADVISORY

    def __post_init__(self) -> None:
        _require_non_negative(self.count, "Limit")


# Trip planning


@dataclass(frozen=True)
class TripDate:
    """The date to plan for. The API defaults to today."""

    date: date

    tag: ClassVar[str] = "Date"
    family: ClassVar[FilterFamily] = FilterFamily.TRIP_PLAN


@dataclass(frozen=True)
class TripTime:
    """The time to plan for, interpreted according to ``TripMode``. Defaults to now."""

    time: time

    tag: ClassVar[str] = "Time"
    family: ClassVar[FilterFamily] = FilterFamily.TRIP_PLAN


@dataclass(frozen=True)
class TripMode:
    mode: TimeMode = TimeMode.DEPART_AFTER

    tag: ClassVar[str] = "Mode"
    family: ClassVar[FilterFamily] = FilterFamily.TRIP_PLAN


@dataclass(frozen=True)
class WalkSpeed:
    """Walking speed in km/h."""

    km_per_hour: float

    tag: ClassVar[str] = "WalkSpeed"
    family: ClassVar[FilterFamily] = FilterFamily.TRIP_PLAN

    def __post_init__(self) -> None:
        if isinstance(self.km_per_hour, bool) or not self.km_per_hour > 0:
            raise ValueError(f"WalkSpeed must be positive, got {self.km_per_hour!r}")


@dataclass(frozen=True)
class MaxWalkTime:
    """Maximum minutes to spend walking."""

    minutes: int

    tag: ClassVar[str] = "MaxWalkTime"
    family: ClassVar[FilterFamily] = FilterFamily.TRIP_PLAN

    def __post_init__(self) -> None:
        _require_non_negative(self.minutes, "MaxWalkTime")


@dataclass(frozen=True)
class MinTransferWait:
    """Minimum minutes to wait for a transfer."""

    minutes: int

    tag: ClassVar[str] = "MinTransferWait"
    family: ClassVar[FilterFamily] = FilterFamily.TRIP_PLAN

    def __post_init__(self) -> None:
        _require_non_negative(self.minutes, "MinTransferWait")


@dataclass(frozen=True)
class MaxTransferWait:
    """Maximum minutes to wait for a transfer."""

    minutes: int

    tag: ClassVar[str] = "MaxTransferWait"
    family: ClassVar[FilterFamily] = FilterFamily.TRIP_PLAN

    def __post_init__(self) -> None:
        _require_non_negative(self.minutes, "MaxTransferWait")


@dataclass(frozen=True)
class MaxTransfers:
    """Maximum number of transfers."""

    count: int

    tag: ClassVar[str] = "MaxTransfers"
    family: ClassVar[FilterFamily] = FilterFamily.TRIP_PLAN

    def __post_init__(self) -> None:
        _require_non_negative(self.count, "MaxTransfers")


# Streets


@dataclass(frozen=True)
class StreetName:
    name: str

    tag: ClassVar[str] = "Name"
    family: ClassVar[FilterFamily] = FilterFamily.STREET


@dataclass(frozen=True)
class StreetTypeFilter:
    street_type: StreetType

    tag: ClassVar[str] = "Type"
    family: ClassVar[FilterFamily] = FilterFamily.STREET


@dataclass(frozen=True)
class StreetLegFilter:
    leg: StreetLeg

    tag: ClassVar[str] = "Leg"
    family: ClassVar[FilterFamily] = FilterFamily.STREET


# Stop schedules


@dataclass(frozen=True)
class ScheduleRoutes:
    """Only these route numbers. An empty tuple means all routes."""

    routes: tuple[int, ...]

    tag: ClassVar[str] = "Routes"
    family: ClassVar[FilterFamily] = FilterFamily.STOP_SCHEDULE

    def __post_init__(self) -> None:
        # Accept any iterable of route numbers, store a tuple
        object.__setattr__(self, "routes", tuple(self.routes))
        for route in self.routes:
            _require_non_negative(route, "route number")


@dataclass(frozen=True)
class ScheduleStart:
    """Only results after this time of day. Defaults to now."""

    time: time

    tag: ClassVar[str] = "Start"
    family: ClassVar[FilterFamily] = FilterFamily.STOP_SCHEDULE


@dataclass(frozen=True)
class ScheduleEnd:
    """Only results before this time of day. Defaults to two hours from now."""

    time: time

    tag: ClassVar[str] = "End"
    family: ClassVar[FilterFamily] = FilterFamily.STOP_SCHEDULE


@dataclass(frozen=True)
class MaxResultsPerRoute:
    count: int

    tag: ClassVar[str] = "MaxResultsPerRoute"
    family: ClassVar[FilterFamily] = FilterFamily.STOP_SCHEDULE

    def __post_init__(self) -> None:
        _require_non_negative(self.count, "MaxResultsPerRoute")


ServiceAdvisoryFilter = AdvisoryPriority | AdvisoryCategory | AdvisoryMaxAge | AdvisoryLimit
TripPlanFilter = (
    TripDate
    | TripTime
    | TripMode
    | WalkSpeed
    | MaxWalkTime
    | MinTransferWait
    | MaxTransferWait
    | MaxTransfers
)
StreetFilter = StreetName | StreetTypeFilter | StreetLegFilter
StopScheduleFilter = ScheduleRoutes | ScheduleStart | ScheduleEnd | MaxResultsPerRoute

FilterOption = ServiceAdvisoryFilter | TripPlanFilter | StreetFilter | StopScheduleFilter


@dataclass(frozen=True)
class FilterCollection:
    """An ordered set of filter options for one query.

    When the same option kind is given more than once the last one wins;
    earlier duplicates are dropped.
    """

    family: FilterFamily
    options: tuple[FilterOption, ...] = ()

    def __post_init__(self) -> None:
        options = tuple(self.options)
        for option in options:
            if option.family is not self.family:
                raise ValueError(
                    f"{type(option).__name__} is a {option.family.value} filter, "
                    f"not a {self.family.value} filter"
                )

        last_index = {type(option): index for index, option in enumerate(options)}
        kept: list[FilterOption] = []
        for index, option in enumerate(options):
            if last_index[type(option)] != index:
                logger.debug(
                    f"Dropping {option!r}: overridden by a later {option.tag} filter"
                )
                continue
            kept.append(option)
        object.__setattr__(self, "options", tuple(kept))

    @classmethod
    def build(cls, family: FilterFamily, options: Iterable[FilterOption]) -> "FilterCollection":
        """Create a collection from any iterable of options."""
        return cls(family=family, options=tuple(options))

    def __iter__(self) -> Iterator[FilterOption]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)
