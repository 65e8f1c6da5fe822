"""Tests for configuration adapter."""

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest

from transit_trail.adapters.config import AppConfig
from transit_trail.domain.models import TripPlannerSettings, Usage


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    for name in (
        "TRANSIT_API_KEY",
        "USAGE",
        "TIMEZONE",
        "MAX_TRANSFERS",
        "WALKING_SPEED",
        "CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


def _write_toml(content: str) -> str:
    with NamedTemporaryFile(mode="w", suffix=".toml", delete=False) as f:
        f.write(content)
        return f.name


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.transit_api_base_url == "https://api.winnipegtransit.com/v3"
    assert config.transit_api_key == ""
    assert config.usage_mode is Usage.NORMAL
    assert config.timezone == "America/Winnipeg"
    assert config.trip_planner_settings() == TripPlannerSettings()


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("TRANSIT_API_KEY", "secret")
    monkeypatch.setenv("USAGE", "Short")
    monkeypatch.setenv("MAX_TRANSFERS", "3")
    monkeypatch.setenv("WALKING_SPEED", "5.5")

    config = AppConfig()

    assert config.transit_api_key == "secret"
    assert config.usage == "short"
    assert config.trip_planner_settings().max_transfers == 3
    assert config.trip_planner_settings().walking_speed == 5.5


def test_config_validates_usage(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given invalid usage, when loading config, then validation error is raised."""
    monkeypatch.setenv("USAGE", "verbose")

    with pytest.raises(ValueError, match="usage must be either"):
        AppConfig()


def test_config_validates_timezone() -> None:
    """Given an unknown timezone, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="unknown timezone"):
        AppConfig(timezone="America/Atlantis")


@pytest.mark.parametrize(
    ("field", "value"),
    [("max_transfers", -1), ("min_waiting_time", -5), ("walking_speed", 0.0)],
)
def test_config_rejects_out_of_range_settings(field: str, value: float) -> None:
    """Given a negative count or a zero walking speed, when loading config, then validation error is raised."""
    with pytest.raises(ValueError):
        AppConfig(**{field: value})


def test_config_reads_trip_planner_table_from_toml() -> None:
    """Given a TOML file with a trip_planner table, when reading settings, then its values override defaults."""
    temp_path = _write_toml(
        """
[trip_planner]
max_waiting_time = 20
max_walking_time = 15
walking_speed = 3.5
"""
    )

    try:
        settings = AppConfig(config_file=temp_path).trip_planner_settings()
        assert settings.max_waiting_time == 20
        assert settings.max_walking_time == 15
        assert settings.walking_speed == 3.5
        assert settings.max_transfers == 10
    finally:
        Path(temp_path).unlink()


def test_config_validates_toml_values() -> None:
    """Given a negative value in the TOML file, when reading settings, then validation error is raised."""
    temp_path = _write_toml("[trip_planner]\nmax_transfers = -2\n")

    try:
        with pytest.raises(ValueError, match="must not be negative"):
            AppConfig(config_file=temp_path).trip_planner_settings()
    finally:
        Path(temp_path).unlink()


def test_config_warns_about_unknown_toml_keys(caplog: pytest.LogCaptureFixture) -> None:
    """Given an unknown key in the trip_planner table, when reading settings, then a warning is logged."""
    temp_path = _write_toml("[trip_planner]\nmax_bikes = 2\n")

    try:
        AppConfig(config_file=temp_path).trip_planner_settings()
    finally:
        Path(temp_path).unlink()

    assert "max_bikes" in caplog.text


def test_config_raises_error_when_file_not_found() -> None:
    """Given non-existent config file, when reading settings, then FileNotFoundError is raised."""
    config = AppConfig(config_file="/nonexistent/transit.toml")

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.trip_planner_settings()
