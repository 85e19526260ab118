"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from wxlookup.config.schema import AppConfig
from wxlookup.models.place import Place
from wxlookup.models.weather import RawForecast

FIXTURE_DIR = Path(__file__).parent / "fixtures"

GEOCODE_URL = "https://test-geo.example.com/v1/search"
FORECAST_URL = "https://test-wx.example.com/v1/forecast"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


def raw_forecast(name: str = "forecast_tampa.json", **overrides) -> RawForecast:
    """RawForecast built from a fixture, with optional lat/lon overrides."""
    data = load_fixture(name)
    return RawForecast(
        latitude=overrides.get("latitude", data["latitude"]),
        longitude=overrides.get("longitude", data["longitude"]),
        timezone=data.get("timezone"),
        current=data["current"],
        daily=data["daily"],
    )


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def tampa() -> Place:
    return Place(
        id=4174757,
        name="Tampa",
        latitude=27.94752,
        longitude=-82.45843,
        country="United States",
        admin1="Florida",
    )


@pytest.fixture
def test_config() -> AppConfig:
    """Config pointing both services at test hosts with no debounce delay."""
    return AppConfig(
        geocoding={"base_url": "https://test-geo.example.com"},
        forecast={"base_url": "https://test-wx.example.com"},
        ui={"debounce_ms": 0},
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "geocoding": {"base_url": "https://test-geo.example.com"},
        "forecast": {"base_url": "https://test-wx.example.com"},
        "ui": {"units": "imperial", "debounce_ms": 0},
        "geolocation": {"latitude": 27.95, "longitude": -82.46},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
