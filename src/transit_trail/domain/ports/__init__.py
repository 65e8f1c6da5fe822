"""Ports (interfaces) for the ports-and-adapters architecture."""

from transit_trail.domain.ports.settings_provider import SettingsProvider
from transit_trail.domain.ports.transit_transport import TransitTransport

__all__ = [
    "SettingsProvider",
    "TransitTransport",
]
