"""Tests for weather view formatting and WMO lookups."""

import json

from wxlookup.models.common import UnitSystem
from wxlookup.models.place import Place
from wxlookup.models.weather import DailyForecastEntry, WeatherView
from wxlookup.pipeline.forecast_shaper import shape, shape_current
from wxlookup.reporting.formatters import (
    format_day,
    format_suggestions,
    format_view_json,
    format_view_text,
)
from wxlookup.reporting.wmo import code_to_emoji, code_to_label
from wxlookup.tests.conftest import load_fixture


def _view(place: Place, fixture: str = "forecast_tampa.json") -> WeatherView:
    data = load_fixture(fixture)
    return WeatherView(
        place=place,
        latitude=data["latitude"],
        longitude=data["longitude"],
        timezone=data["timezone"],
        current=shape_current(data["current"]),
        forecast=tuple(shape(data["daily"])),
    )


class TestWmo:
    def test_known(self):
        assert code_to_label(0) == "Clear sky"
        assert code_to_emoji(95) == "⛈️"

    def test_unknown_code(self):
        assert code_to_label(42) == "Code 42"
        assert code_to_emoji(42) == "❓"

    def test_missing_code(self):
        assert code_to_label(None) == "Unknown"
        assert code_to_emoji(None) == "❓"


class TestFormatViewText:
    def test_metric(self, tampa: Place):
        text = format_view_text(_view(tampa), UnitSystem.METRIC)
        assert "=== Tampa, Florida, United States ===" in text
        assert "Timezone: America/New_York" in text
        assert "29°C Partly cloudy" in text
        assert "Feels like: 33°C" in text
        assert "Humidity: 68%" in text
        assert "Wind: 4.3 m/s" in text
        assert "Precip: 0.2 mm" in text
        assert "Coords: 27.95, -82.46" in text
        assert "5-Day Forecast" in text

    def test_imperial(self, tampa: Place):
        text = format_view_text(_view(tampa), UnitSystem.IMPERIAL)
        assert "85°F" in text  # 29.4 C
        assert "Wind: 9.6 mph" in text
        # precipitation is always shown in mm
        assert "Precip: 0.2 mm" in text

    def test_forecast_lines(self, tampa: Place):
        lines = format_view_text(_view(tampa)).splitlines()
        day_lines = [ln for ln in lines if ln.startswith(("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"))]
        assert len(day_lines) == 5
        assert day_lines[0].startswith("Mon, Oct 19")


class TestFormatDay:
    def test_unknown_fields_omitted(self):
        line = format_day(DailyForecastEntry(date="2026-10-19"), UnitSystem.METRIC)
        assert "0°" not in line
        assert "Wind max" not in line
        assert "Precip prob" not in line
        assert "Unknown" in line

    def test_partial_temperatures(self):
        entry = DailyForecastEntry(date="2026-10-19", weather_code=3, temp_min_c=0.0)
        line = format_day(entry, UnitSystem.IMPERIAL)
        assert "32°F" in line
        assert "/" not in line

    def test_no_wind_max_fixture(self):
        view = _view(Place(1, "London", 51.5, -0.12, country="United Kingdom"),
                     "forecast_no_wind_max.json")
        for entry in view.forecast:
            assert "Wind max" not in format_day(entry, UnitSystem.METRIC)


class TestOtherFormats:
    def test_json_keeps_metric_values(self, tampa: Place):
        data = json.loads(format_view_json(_view(tampa)))
        assert data["place"]["label"] == "Tampa, Florida, United States"
        assert data["current"]["temperature_c"] == 29.4
        assert len(data["forecast"]) == 5
        assert data["forecast"][0]["date"] == "2026-10-19"

    def test_suggestions(self, tampa: Place):
        assert format_suggestions([tampa]) == "Tampa, Florida, United States (27.95, -82.46)"
