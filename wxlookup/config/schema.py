"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, model_validator

from wxlookup.models.common import UnitSystem

GEOCODING_BASE_URL = "https://geocoding-api.open-meteo.com"
FORECAST_BASE_URL = "https://api.open-meteo.com"


class HttpConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # None keeps the httpx default
    timeout_s: float | None = Field(default=None, gt=0.0)


class GeocodingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = GEOCODING_BASE_URL
    language: str = "en"
    suggest_limit: int = Field(default=5, ge=1, le=5)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = FORECAST_BASE_URL


class UiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    units: UnitSystem = UnitSystem.METRIC
    debounce_ms: int = Field(default=300, ge=0)


class GeolocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    high_accuracy: bool = True
    timeout_s: float = Field(default=10.0, gt=0.0)
    maximum_age_s: float = Field(default=300.0, ge=0.0)
    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)

    @model_validator(mode="after")
    def check_location_pair(self) -> "GeolocationConfig":
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("geolocation latitude and longitude must be set together")
        return self

    @property
    def has_fixed_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    http: HttpConfig = HttpConfig()
    geocoding: GeocodingConfig = GeocodingConfig()
    forecast: ForecastConfig = ForecastConfig()
    ui: UiConfig = UiConfig()
    geolocation: GeolocationConfig = GeolocationConfig()
