"""Configuration adapters."""

from transit_trail.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
