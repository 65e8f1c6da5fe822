"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from transit_trail.domain.models.trip_plan_request import Usage
from transit_trail.domain.models.trip_planner_settings import TripPlannerSettings

logger = logging.getLogger(__name__)

# Keys of the [trip_planner] TOML table that override settings
_TRIP_PLANNER_KEYS = (
    "min_waiting_time",
    "max_waiting_time",
    "max_transfers",
    "max_walking_time",
    "walking_speed",
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Transit API configuration
    transit_api_key: str = Field(default="", description="Winnipeg Transit API key")
    transit_api_base_url: str = Field(
        default="https://api.winnipegtransit.com/v3",
        description="Base URL of the Winnipeg Transit API",
    )
    usage: str = Field(
        default="normal",
        description="Name length the API returns: 'normal', 'long' or 'short'",
    )
    timezone: str = Field(
        default="America/Winnipeg",
        description="Timezone trip dates and times default from (IANA timezone name)",
    )

    # Trip planner settings
    min_waiting_time: int = Field(default=0, description="Minimum transfer wait in minutes")
    max_waiting_time: int = Field(default=60, description="Maximum transfer wait in minutes")
    max_transfers: int = Field(default=10, description="Maximum number of transfers")
    max_walking_time: int = Field(default=30, description="Maximum walking time in minutes")
    walking_speed: float = Field(default=4.0, description="Walking speed in km/h")

    # TOML config file path
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with a [trip_planner] table",
    )

    @field_validator("usage")
    @classmethod
    def validate_usage(cls, v: str) -> str:
        """Validate usage is 'normal', 'long' or 'short'."""
        if v.lower() not in ("normal", "long", "short"):
            raise ValueError("usage must be either 'normal', 'long', or 'short'")
        return v.lower()

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"unknown timezone: {v}") from None
        return v

    @field_validator("min_waiting_time", "max_waiting_time", "max_transfers", "max_walking_time")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate minute and count settings are not negative."""
        if v < 0:
            raise ValueError("trip planner settings must not be negative")
        return v

    @field_validator("walking_speed")
    @classmethod
    def validate_walking_speed(cls, v: float) -> float:
        """Validate walking speed is positive."""
        if v <= 0:
            raise ValueError("walking_speed must be positive")
        return v

    @property
    def usage_mode(self) -> Usage:
        return Usage(self.usage)

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file, updating trip planner settings."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        trip_planner = toml_data.get("trip_planner", {})
        if not isinstance(trip_planner, dict):
            raise ValueError("TOML config 'trip_planner' must be a table")
        for key in _TRIP_PLANNER_KEYS:
            if key in trip_planner:
                setattr(self, key, trip_planner[key])
        unknown = set(trip_planner) - set(_TRIP_PLANNER_KEYS)
        if unknown:
            logger.warning(f"Ignoring unknown trip_planner settings: {sorted(unknown)}")

        return toml_data

    def trip_planner_settings(self) -> TripPlannerSettings:
        """Return trip planner settings, applying overrides from the TOML file if set."""
        self._load_toml_data()
        return TripPlannerSettings(
            min_waiting_time=self.min_waiting_time,
            max_waiting_time=self.max_waiting_time,
            max_transfers=self.max_transfers,
            max_walking_time=self.max_walking_time,
            walking_speed=self.walking_speed,
        )
