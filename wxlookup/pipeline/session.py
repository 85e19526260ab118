"""Weather session: user intents in, snapshots out to the presentation layer."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

import httpx

from wxlookup.config.schema import AppConfig
from wxlookup.ingest.geocode_client import GeocodeClient
from wxlookup.ingest.geolocation import (
    FixedLocationProvider,
    GeolocationOptions,
    Geolocator,
    LocationProvider,
    UnavailableLocationProvider,
)
from wxlookup.ingest.weather_client import WeatherClient
from wxlookup.models.common import UnitSystem
from wxlookup.models.place import Place
from wxlookup.models.weather import WeatherView
from wxlookup.pipeline.autosuggest import AutoSuggest
from wxlookup.pipeline.resolution import PipelineState, ResolutionPipeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    query: str
    units: UnitSystem
    state: PipelineState
    view: WeatherView | None
    error_message: str | None
    loading: bool
    suggestions: tuple[Place, ...]


class WeatherSession:
    def __init__(
        self,
        pipeline: ResolutionPipeline,
        autosuggest: AutoSuggest,
        units: UnitSystem = UnitSystem.METRIC,
        listener: Callable[[SessionSnapshot], None] | None = None,
    ):
        self.pipeline = pipeline
        self.autosuggest = autosuggest
        self.units = units
        self.query = ""
        self.listener = listener
        pipeline.on_change = self._publish
        autosuggest.on_change = self._publish

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        http_client: httpx.AsyncClient,
        provider: LocationProvider | None = None,
        listener: Callable[[SessionSnapshot], None] | None = None,
    ) -> "WeatherSession":
        geo = config.geolocation
        if provider is None:
            if geo.has_fixed_location:
                provider = FixedLocationProvider(geo.latitude, geo.longitude)
            else:
                provider = UnavailableLocationProvider()
        geolocator = Geolocator(
            provider,
            GeolocationOptions(
                high_accuracy=geo.high_accuracy,
                timeout=geo.timeout_s,
                maximum_age=geo.maximum_age_s,
            ),
        )
        geocoder = GeocodeClient(
            http_client,
            base_url=config.geocoding.base_url,
            language=config.geocoding.language,
        )
        weather = WeatherClient(http_client, base_url=config.forecast.base_url)
        pipeline = ResolutionPipeline(geocoder, weather, geolocator)
        autosuggest = AutoSuggest(
            geocoder,
            delay=config.ui.debounce_ms / 1000,
            limit=config.geocoding.suggest_limit,
        )
        return cls(pipeline, autosuggest, units=config.ui.units, listener=listener)

    # --- Intents ---

    def edit_query(self, text: str) -> None:
        self.query = text
        self.autosuggest.on_query(text)
        self._publish()

    async def submit(self, text: str | None = None) -> None:
        if text is not None:
            self.query = text
        await self.pipeline.submit(self.query)

    async def pick_suggestion(self, place: Place) -> None:
        self.query = place.label
        self.autosuggest.clear()
        await self.pipeline.fetch_for_place(place)

    async def use_my_location(self) -> None:
        await self.pipeline.use_my_location()

    def set_unit(self, units: UnitSystem) -> None:
        self.units = UnitSystem(units)
        self._publish()

    # --- Output ---

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            query=self.query,
            units=self.units,
            state=self.pipeline.state,
            view=self.pipeline.view,
            error_message=self.pipeline.error_message,
            loading=self.pipeline.loading,
            suggestions=self.autosuggest.suggestions,
        )

    def _publish(self) -> None:
        if self.listener is not None:
            self.listener(self.snapshot())
