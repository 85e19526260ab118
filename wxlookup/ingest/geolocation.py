"""Device location adapter with timeout and cached-position policy."""

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from wxlookup.models.errors import GeolocationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 10.0
DEFAULT_MAXIMUM_AGE_S = 300.0


@dataclass(frozen=True)
class Position:
    latitude: float
    longitude: float
    acquired_at: float  # monotonic seconds


@dataclass(frozen=True)
class GeolocationOptions:
    high_accuracy: bool = True
    timeout: float = DEFAULT_TIMEOUT_S
    maximum_age: float = DEFAULT_MAXIMUM_AGE_S


class LocationProvider(Protocol):
    async def current_position(self, high_accuracy: bool) -> tuple[float, float]:
        """Return (latitude, longitude) or raise GeolocationError."""
        ...


class FixedLocationProvider:
    """Reports a configured device location."""

    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude

    async def current_position(self, high_accuracy: bool) -> tuple[float, float]:
        return self.latitude, self.longitude


class UnavailableLocationProvider:
    async def current_position(self, high_accuracy: bool) -> tuple[float, float]:
        raise GeolocationError("Geolocation not supported")


class Geolocator:
    def __init__(
        self,
        provider: LocationProvider,
        options: GeolocationOptions | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.provider = provider
        self.options = options or GeolocationOptions()
        self.clock = clock
        self._last: Position | None = None

    async def locate(self) -> Position:
        """Return a position no older than maximum_age.

        Raises GeolocationError when the provider fails or does not answer
        within the timeout.
        """
        now = self.clock()
        if self._last is not None and now - self._last.acquired_at <= self.options.maximum_age:
            logger.debug("Using cached position from %.0fs ago", now - self._last.acquired_at)
            return self._last

        try:
            lat, lon = await asyncio.wait_for(
                self.provider.current_position(self.options.high_accuracy),
                timeout=self.options.timeout,
            )
        except TimeoutError as e:
            logger.warning("Geolocation timed out after %.1fs", self.options.timeout)
            raise GeolocationError("Timed out acquiring your location") from e

        self._last = Position(latitude=lat, longitude=lon, acquired_at=self.clock())
        return self._last
