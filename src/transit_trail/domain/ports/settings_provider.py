"""Settings provider port."""

from typing import Protocol

from transit_trail.domain.models.trip_planner_settings import TripPlannerSettings


class SettingsProvider(Protocol):
    """Port for reading the user's trip planner preferences."""

    def trip_planner_settings(self) -> TripPlannerSettings:
        """Return the current trip planner settings."""
        ...
