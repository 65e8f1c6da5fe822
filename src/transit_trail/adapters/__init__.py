"""Adapters layer - external system integrations."""

from transit_trail.adapters.config import AppConfig
from transit_trail.adapters.transit_api import (
    FilterEncoder,
    LocationCodec,
    TransitApiTripPlanner,
    TripCodec,
)

__all__ = [
    "AppConfig",
    "FilterEncoder",
    "LocationCodec",
    "TransitApiTripPlanner",
    "TripCodec",
]
