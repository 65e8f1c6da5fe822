"""Winnipeg Transit API adapters: payload codecs and the trip planner client."""

from transit_trail.adapters.transit_api.filter_encoder import FilterEncoder
from transit_trail.adapters.transit_api.location_codec import LocationCodec
from transit_trail.adapters.transit_api.trip_codec import TripCodec
from transit_trail.adapters.transit_api.trip_planner_client import TransitApiTripPlanner

__all__ = ["FilterEncoder", "LocationCodec", "TransitApiTripPlanner", "TripCodec"]
