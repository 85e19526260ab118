"""Open-Meteo forecast client: current conditions and daily forecast."""

import logging

import httpx

from wxlookup.config.schema import FORECAST_BASE_URL
from wxlookup.models.errors import NetworkError
from wxlookup.models.weather import RawForecast

logger = logging.getLogger(__name__)

CURRENT_FIELDS = (
    "temperature_2m",
    "apparent_temperature",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
    "relative_humidity_2m",
)
DAILY_FIELDS = (
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_probability_max",
    "wind_speed_10m_max",
)
FORECAST_DAYS = 7


class WeatherClient:
    def __init__(self, client: httpx.AsyncClient, base_url: str = FORECAST_BASE_URL):
        self.client = client
        self.base_url = base_url

    async def fetch(self, lat: float, lon: float) -> RawForecast:
        """Fetch current conditions and a 7-day daily forecast.

        The daily arrays are returned as delivered; shaping happens later.
        """
        url = f"{self.base_url}/v1/forecast"
        params = {
            "latitude": lat,
            "longitude": lon,
            "timezone": "auto",
            "current": ",".join(CURRENT_FIELDS),
            "daily": ",".join(DAILY_FIELDS),
            "forecast_days": FORECAST_DAYS,
            "wind_speed_unit": "ms",
        }
        try:
            resp = await self.client.get(url, params=params)
        except httpx.RequestError as e:
            logger.error("Forecast request failed for %s,%s: %s", lat, lon, e)
            raise NetworkError(f"Failed to fetch weather: {e}") from e

        if resp.status_code >= 400:
            logger.error("Forecast API %d for %s,%s", resp.status_code, lat, lon)
            raise NetworkError(
                f"Failed to fetch weather: HTTP {resp.status_code}", resp.status_code
            )

        try:
            data = resp.json()
            current = data["current"]
            daily = data["daily"]
            if not isinstance(current, dict) or not isinstance(daily.get("time"), list):
                raise TypeError("current/daily payload has unexpected shape")
            return RawForecast(
                latitude=float(data.get("latitude", lat)),
                longitude=float(data.get("longitude", lon)),
                timezone=data.get("timezone"),
                current=current,
                daily=daily,
            )
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error("Malformed forecast response for %s,%s: %s", lat, lon, e)
            raise NetworkError("Failed to fetch weather: malformed response") from e
