"""Encoders for filter collections.

Two outbound forms are produced:

* the JSON wire form, a list of single-key objects named after each option
  (``[{"Mode": "depart-after"}, {"WalkSpeed": 4.0}]``);
* query parameters as the transit API expects them
  (``[("mode", "depart-after"), ("walk-speed", "4.0")]``).
"""

from datetime import time
from typing import Any, assert_never

from transit_trail.domain.models.filters import (
    AdvisoryCategory,
    AdvisoryLimit,
    AdvisoryMaxAge,
    AdvisoryPriority,
    FilterCollection,
    FilterOption,
    MaxResultsPerRoute,
    MaxTransfers,
    MaxTransferWait,
    MaxWalkTime,
    MinTransferWait,
    ScheduleEnd,
    ScheduleRoutes,
    ScheduleStart,
    StreetLegFilter,
    StreetName,
    StreetTypeFilter,
    TripDate,
    TripMode,
    TripTime,
    WalkSpeed,
)

QueryParam = tuple[str, str]


def _schedule_time(value: time) -> str:
    # Stop schedules only take hours and minutes
    return f"{value.hour:02d}:{value.minute:02d}:00"


class FilterEncoder:
    """Turns filter collections into their JSON and query-parameter forms."""

    @staticmethod
    def encode_option(option: FilterOption) -> dict[str, Any]:
        """Encode one option as ``{tag: value}``."""
        match option:
            case AdvisoryPriority(priority=priority):
                value: Any = int(priority)
            case AdvisoryCategory(category=category):
                value = category.value
            case AdvisoryMaxAge(days=days):
                value = days
            case AdvisoryLimit(count=count):
                value = count
            case TripDate(date=day):
                value = day.isoformat()
            case TripTime(time=moment):
                value = moment.strftime("%H:%M:%S")
            case TripMode(mode=mode):
                value = mode.value
            case WalkSpeed(km_per_hour=speed):
                value = float(speed)
            case MaxWalkTime(minutes=minutes) | MinTransferWait(minutes=minutes):
                value = minutes
            case MaxTransferWait(minutes=minutes):
                value = minutes
            case MaxTransfers(count=count):
                value = count
            case StreetName(name=name):
                value = name
            case StreetTypeFilter(street_type=street_type):
                value = street_type.value
            case StreetLegFilter(leg=leg):
                value = leg.value
            case ScheduleRoutes(routes=routes):
                value = list(routes)
            case ScheduleStart(time=moment) | ScheduleEnd(time=moment):
                value = moment.strftime("%H:%M:%S")
            case MaxResultsPerRoute(count=count):
                value = count
            case _:
                assert_never(option)
        return {option.tag: value}

    @staticmethod
    def encode(collection: FilterCollection) -> list[dict[str, Any]]:
        """Encode a collection to its JSON wire form, keeping option order."""
        return [FilterEncoder.encode_option(option) for option in collection]

    @staticmethod
    def option_query_params(option: FilterOption) -> list[QueryParam]:
        """Query parameters for one option. Most options yield exactly one."""
        match option:
            case AdvisoryPriority(priority=priority):
                return [("priority", str(int(priority)))]
            case AdvisoryCategory(category=category):
                return [("category", category.value)]
            case AdvisoryMaxAge(days=days):
                return [("max_age", str(days))]
            case AdvisoryLimit(count=count):
                return [("limit", str(count))]
            case TripDate(date=day):
                return [("date", day.isoformat())]
            case TripTime(time=moment):
                return [("time", moment.strftime("%H:%M:%S"))]
            case TripMode(mode=mode):
                return [("mode", mode.value)]
            case WalkSpeed(km_per_hour=speed):
                return [("walk-speed", str(float(speed)))]
            case MaxWalkTime(minutes=minutes):
                return [("max-walk-time", str(minutes))]
            case MinTransferWait(minutes=minutes):
                return [("min-transfer-wait", str(minutes))]
            case MaxTransferWait(minutes=minutes):
                return [("max-transfer-wait", str(minutes))]
            case MaxTransfers(count=count):
                return [("max-transfers", str(count))]
            case StreetName(name=name):
                return [("name", name)]
            case StreetTypeFilter(street_type=street_type):
                return [("type", street_type.value)]
            case StreetLegFilter(leg=leg):
                return [("leg", leg.abbreviation)]
            case ScheduleRoutes(routes=()):
                return []
            case ScheduleRoutes(routes=(route,)):
                return [("route", str(route))]
            case ScheduleRoutes(routes=routes):
                return [("routes", ",".join(str(route) for route in routes))]
            case ScheduleStart(time=moment):
                return [("start", _schedule_time(moment))]
            case ScheduleEnd(time=moment):
                return [("end", _schedule_time(moment))]
            case MaxResultsPerRoute(count=count):
                return [("max-results-per-route", str(count))]
            case _:
                assert_never(option)

    @staticmethod
    def to_query_params(collection: FilterCollection) -> list[QueryParam]:
        """Encode a collection as ordered ``(name, value)`` query parameters."""
        params: list[QueryParam] = []
        for option in collection:
            params.extend(FilterEncoder.option_query_params(option))
        return params
