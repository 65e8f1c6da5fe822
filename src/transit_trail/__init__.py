"""Data model and wire encoding for Winnipeg Transit trip planning."""

__version__ = "0.1.0"
