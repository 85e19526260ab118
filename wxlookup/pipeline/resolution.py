"""Resolution pipeline: input to coordinates to weather, last request wins."""

import logging
from collections.abc import Callable
from enum import StrEnum

from wxlookup.ingest.geocode_client import GeocodeClient
from wxlookup.ingest.geolocation import Geolocator
from wxlookup.ingest.input_classifier import CoordinateInput, classify
from wxlookup.ingest.weather_client import WeatherClient
from wxlookup.models.errors import GeolocationError, LookupFailure
from wxlookup.models.place import Place, synthetic_place
from wxlookup.models.weather import WeatherView
from wxlookup.pipeline.forecast_shaper import shape, shape_current

logger = logging.getLogger(__name__)


class PipelineState(StrEnum):
    IDLE = "idle"
    RESOLVING = "resolving"
    SUCCESS = "success"
    FAILED = "failed"


class ResolutionPipeline:
    """Turns a submission into a WeatherView or an error.

    Each attempt takes a token from a monotonically increasing counter. After
    every await the token is compared with the latest one; a superseded
    attempt commits nothing.
    """

    def __init__(
        self,
        geocoder: GeocodeClient,
        weather: WeatherClient,
        geolocator: Geolocator,
        on_change: Callable[[], None] | None = None,
    ):
        self.geocoder = geocoder
        self.weather = weather
        self.geolocator = geolocator
        self.on_change = on_change

        self.state = PipelineState.IDLE
        self.view: WeatherView | None = None
        self.error: LookupFailure | None = None
        self._seq = 0

    @property
    def loading(self) -> bool:
        return self.state == PipelineState.RESOLVING

    @property
    def error_message(self) -> str | None:
        return str(self.error) if self.error is not None else None

    async def submit(self, text: str) -> None:
        """Resolve free text or a "lat, lon" pair and fetch its weather."""
        if not text.strip():
            logger.debug("Ignoring blank submission")
            return

        token = self._begin()
        parsed = classify(text)
        if isinstance(parsed, CoordinateInput):
            place = synthetic_place(parsed.lat, parsed.lon)
        else:
            try:
                place = await self.geocoder.resolve(parsed.text)
            except LookupFailure as e:
                self._fail(token, e)
                return
            if not self._is_current(token):
                return

        await self._fetch(token, place)

    async def fetch_for_place(self, place: Place) -> None:
        """Fetch weather for an already resolved place, e.g. a picked suggestion."""
        token = self._begin()
        await self._fetch(token, place)

    async def use_my_location(self) -> None:
        token = self._begin()
        try:
            position = await self.geolocator.locate()
        except GeolocationError as e:
            self._fail(token, e)
            return
        if not self._is_current(token):
            return
        await self._fetch(token, synthetic_place(position.latitude, position.longitude))

    def _begin(self) -> int:
        self._seq += 1
        self.state = PipelineState.RESOLVING
        self.error = None
        self._notify()
        return self._seq

    async def _fetch(self, token: int, place: Place) -> None:
        self.view = None
        self._notify()
        try:
            raw = await self.weather.fetch(place.latitude, place.longitude)
            if not self._is_current(token):
                return
            view = WeatherView(
                place=place,
                latitude=raw.latitude,
                longitude=raw.longitude,
                timezone=raw.timezone,
                current=shape_current(raw.current),
                forecast=tuple(shape(raw.daily)),
            )
        except LookupFailure as e:
            self._fail(token, e)
            return

        self.view = view
        self.state = PipelineState.SUCCESS
        logger.info("Weather ready for %s", place.label)
        self._notify()

    def _fail(self, token: int, error: LookupFailure) -> None:
        if not self._is_current(token):
            return
        logger.warning("Resolution failed: %s", error)
        self.error = error
        self.state = PipelineState.FAILED
        self._notify()

    def _is_current(self, token: int) -> bool:
        if token != self._seq:
            logger.debug("Discarding stale result for request %d (latest %d)", token, self._seq)
            return False
        return True

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()
