"""Trip planner settings domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TripPlannerSettings:
    """User preferences passed through to trip plan filters.

    These values are never interpreted here, only forwarded to the API.
    """

    min_waiting_time: int = 0  # minutes
    max_waiting_time: int = 60  # minutes
    max_transfers: int = 10
    max_walking_time: int = 30  # minutes
    walking_speed: float = 4.0  # km/h
