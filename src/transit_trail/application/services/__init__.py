"""Application services."""

from transit_trail.application.services.partial_location_projector import (
    PartialLocationProjector,
    to_partial,
)
from transit_trail.application.services.trip_plan_request_builder import TripPlanRequestBuilder

__all__ = ["PartialLocationProjector", "TripPlanRequestBuilder", "to_partial"]
