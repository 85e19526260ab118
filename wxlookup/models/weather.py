"""Weather data models. All stored values are metric/SI."""

from dataclasses import dataclass, field

from wxlookup.models.place import Place


@dataclass(frozen=True)
class CurrentConditions:
    temperature_c: float
    apparent_temperature_c: float
    precipitation_mm: float
    weather_code: int
    wind_speed_ms: float
    relative_humidity_pct: float


@dataclass(frozen=True)
class DailyForecastEntry:
    date: str  # YYYY-MM-DD
    weather_code: int | None = None
    temp_max_c: float | None = None
    temp_min_c: float | None = None
    precip_prob_pct: float | None = None
    wind_max_ms: float | None = None


@dataclass(frozen=True)
class RawForecast:
    """Forecast service response before shaping."""

    latitude: float
    longitude: float
    timezone: str | None
    current: dict
    daily: dict[str, list] = field(default_factory=dict)


@dataclass(frozen=True)
class WeatherView:
    place: Place
    latitude: float
    longitude: float
    timezone: str | None
    current: CurrentConditions
    forecast: tuple[DailyForecastEntry, ...]
