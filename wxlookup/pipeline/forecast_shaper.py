"""Shape raw forecast payloads into models and convert units for display."""

from wxlookup.models.common import UnitSystem
from wxlookup.models.errors import NetworkError
from wxlookup.models.weather import CurrentConditions, DailyForecastEntry

FORECAST_LENGTH = 5
MPS_TO_MPH = 2.236936


def shape(raw_daily: dict) -> list[DailyForecastEntry]:
    """Zip the parallel daily arrays into per-day entries, first 5 days only.

    Entries keep the order of ``time``; the service delivers it ascending.
    A missing array, or one shorter than ``time``, yields None for that field.
    Values of the wrong type raise NetworkError.
    """
    times = raw_daily.get("time") or []
    entries = []
    try:
        for i, date in enumerate(times[:FORECAST_LENGTH]):
            code = _at(raw_daily, "weather_code", i)
            entries.append(
                DailyForecastEntry(
                    date=str(date),
                    weather_code=int(code) if code is not None else None,
                    temp_max_c=_number_at(raw_daily, "temperature_2m_max", i),
                    temp_min_c=_number_at(raw_daily, "temperature_2m_min", i),
                    precip_prob_pct=_number_at(raw_daily, "precipitation_probability_max", i),
                    wind_max_ms=_number_at(raw_daily, "wind_speed_10m_max", i),
                )
            )
    except (TypeError, ValueError) as e:
        raise NetworkError(f"Failed to fetch weather: malformed daily forecast ({e})") from e
    return entries


def shape_current(raw_current: dict) -> CurrentConditions:
    try:
        return CurrentConditions(
            temperature_c=float(raw_current["temperature_2m"]),
            apparent_temperature_c=float(raw_current["apparent_temperature"]),
            precipitation_mm=float(raw_current["precipitation"]),
            weather_code=int(raw_current["weather_code"]),
            wind_speed_ms=float(raw_current["wind_speed_10m"]),
            relative_humidity_pct=float(raw_current["relative_humidity_2m"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise NetworkError(f"Failed to fetch weather: incomplete current conditions ({e})") from e


def convert_temperature(celsius: float | None, unit: UnitSystem) -> float | None:
    if celsius is None or unit == UnitSystem.METRIC:
        return celsius
    return celsius * 9 / 5 + 32


def convert_speed(meters_per_second: float | None, unit: UnitSystem) -> float | None:
    if meters_per_second is None or unit == UnitSystem.METRIC:
        return meters_per_second
    return meters_per_second * MPS_TO_MPH


def temperature_unit(unit: UnitSystem) -> str:
    return "°C" if unit == UnitSystem.METRIC else "°F"


def speed_unit(unit: UnitSystem) -> str:
    return "m/s" if unit == UnitSystem.METRIC else "mph"


def _at(raw_daily: dict, key: str, index: int):
    values = raw_daily.get(key)
    if not values or index >= len(values):
        return None
    return values[index]


def _number_at(raw_daily: dict, key: str, index: int) -> float | None:
    value = _at(raw_daily, key, index)
    return float(value) if value is not None else None
