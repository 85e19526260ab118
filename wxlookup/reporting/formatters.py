"""Output formatters for weather views and suggestion lists."""

import json
from dataclasses import asdict
from datetime import date

from wxlookup.models.common import UnitSystem
from wxlookup.models.place import Place
from wxlookup.models.weather import DailyForecastEntry, WeatherView
from wxlookup.pipeline.forecast_shaper import (
    convert_speed,
    convert_temperature,
    speed_unit,
    temperature_unit,
)
from wxlookup.reporting.wmo import code_to_emoji, code_to_label


def format_view_text(view: WeatherView, units: UnitSystem = UnitSystem.METRIC) -> str:
    """Plain text rendering of a weather view in the chosen units."""
    t_unit = temperature_unit(units)
    s_unit = speed_unit(units)
    cur = view.current

    lines = [f"=== {view.place.label} ==="]
    if view.timezone:
        lines.append(f"Timezone: {view.timezone}")
    lines.extend([
        f"{code_to_emoji(cur.weather_code)} "
        f"{convert_temperature(cur.temperature_c, units):.0f}{t_unit} "
        f"{code_to_label(cur.weather_code)}",
        f"Feels like: {convert_temperature(cur.apparent_temperature_c, units):.0f}{t_unit}",
        f"Humidity: {round(cur.relative_humidity_pct)}%",
        f"Wind: {convert_speed(cur.wind_speed_ms, units):.1f} {s_unit}",
        f"Precip: {cur.precipitation_mm:.1f} mm",
        f"Coords: {view.latitude:.2f}, {view.longitude:.2f}",
    ])
    if view.forecast:
        lines.append("")
        lines.append(f"{len(view.forecast)}-Day Forecast")
        for entry in view.forecast:
            lines.append(format_day(entry, units))
    return "\n".join(lines)


def format_day(entry: DailyForecastEntry, units: UnitSystem) -> str:
    """One forecast line; unknown values are left out rather than shown as 0."""
    t_unit = temperature_unit(units)
    parts = [
        _day_label(entry.date),
        f"{code_to_emoji(entry.weather_code)} {code_to_label(entry.weather_code)}",
    ]
    temps = []
    if entry.temp_max_c is not None:
        temps.append(f"{convert_temperature(entry.temp_max_c, units):.0f}{t_unit}")
    if entry.temp_min_c is not None:
        temps.append(f"{convert_temperature(entry.temp_min_c, units):.0f}{t_unit}")
    if temps:
        parts.append(" / ".join(temps))
    if entry.precip_prob_pct is not None:
        parts.append(f"Precip prob: {round(entry.precip_prob_pct)}%")
    if entry.wind_max_ms is not None:
        parts.append(
            f"Wind max: {convert_speed(entry.wind_max_ms, units):.1f} {speed_unit(units)}"
        )
    return " | ".join(parts)


def format_view_json(view: WeatherView) -> str:
    """JSON rendering of the stored (metric) values."""
    data = asdict(view)
    data["place"]["label"] = view.place.label
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_suggestions(places: tuple[Place, ...] | list[Place]) -> str:
    return "\n".join(
        f"{p.label} ({p.latitude:.2f}, {p.longitude:.2f})" for p in places
    )


def _day_label(iso_date: str) -> str:
    try:
        return date.fromisoformat(iso_date).strftime("%a, %b %d")
    except ValueError:
        return iso_date
