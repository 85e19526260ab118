"""Debounced place suggestions for the text being typed."""

import logging
from collections.abc import Callable

from wxlookup.ingest.geocode_client import SUGGEST_LIMIT, GeocodeClient
from wxlookup.ingest.input_classifier import is_coordinate_input
from wxlookup.models.place import Place
from wxlookup.pipeline.debounce import Debouncer

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_S = 0.3


class AutoSuggest:
    def __init__(
        self,
        geocoder: GeocodeClient,
        delay: float = DEFAULT_DEBOUNCE_S,
        limit: int = SUGGEST_LIMIT,
        on_change: Callable[[], None] | None = None,
    ):
        self.geocoder = geocoder
        self.limit = limit
        self.on_change = on_change
        self.suggestions: tuple[Place, ...] = ()
        self._debouncer = Debouncer(delay)
        self._seq = 0

    def on_query(self, text: str) -> None:
        """React to an edit of the query text.

        Blank text and coordinate pairs clear the list immediately; anything
        else schedules a lookup after the debounce delay.
        """
        self._seq += 1
        if not text.strip() or is_coordinate_input(text):
            self._debouncer.cancel()
            self._replace(())
            return
        token = self._seq
        self._debouncer.schedule(lambda: self._load(text, token))

    def clear(self) -> None:
        self._seq += 1
        self._debouncer.cancel()
        self._replace(())

    async def wait(self) -> None:
        await self._debouncer.wait()

    async def _load(self, text: str, token: int) -> None:
        places = await self.geocoder.suggest(text, self.limit)
        if token != self._seq:
            logger.debug("Discarding stale suggestions for %r", text)
            return
        self._replace(tuple(places[: self.limit]))

    def _replace(self, places: tuple[Place, ...]) -> None:
        self.suggestions = places
        if self.on_change is not None:
            self.on_change()
