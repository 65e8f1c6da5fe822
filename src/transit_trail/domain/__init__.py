"""Domain layer - entities, errors and ports."""

from transit_trail.domain.errors import (
    AmbiguousVariant,
    DecodeError,
    FieldMismatch,
    MalformedPayload,
    MissingCentre,
    NoVariantMatched,
    SegmentShapeMismatch,
    TransitTrailError,
    UnknownVariant,
)
from transit_trail.domain.ports import SettingsProvider, TransitTransport

__all__ = [
    "AmbiguousVariant",
    "DecodeError",
    "FieldMismatch",
    "MalformedPayload",
    "MissingCentre",
    "NoVariantMatched",
    "SegmentShapeMismatch",
    "SettingsProvider",
    "TransitTrailError",
    "TransitTransport",
    "UnknownVariant",
]
