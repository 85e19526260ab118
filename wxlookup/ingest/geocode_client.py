"""Open-Meteo geocoding client: place-name search for suggestions and submit."""

import logging

import httpx

from wxlookup.config.schema import GEOCODING_BASE_URL
from wxlookup.models.errors import LookupFailure, NetworkError, NotFoundError
from wxlookup.models.place import Place

logger = logging.getLogger(__name__)

SUGGEST_LIMIT = 5


class GeocodeClient:
    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = GEOCODING_BASE_URL,
        language: str = "en",
    ):
        self.client = client
        self.base_url = base_url
        self.language = language

    async def suggest(self, text: str, limit: int = SUGGEST_LIMIT) -> list[Place]:
        """Best-effort candidate lookup for autosuggest. Never raises."""
        query = text.strip()
        if not query:
            return []
        try:
            places = await self._search(query, limit)
        except LookupFailure as e:
            logger.warning("Suggestion lookup failed for %r: %s", query, e)
            return []
        return places[:limit]

    async def resolve(self, text: str) -> Place:
        """Return the best match for a submitted query.

        Raises NotFoundError on zero results and NetworkError when the
        search cannot complete.
        """
        query = text.strip()
        places = await self._search(query, 1)
        if not places:
            raise NotFoundError("No matching locations found")
        return places[0]

    async def _search(self, name: str, count: int) -> list[Place]:
        url = f"{self.base_url}/v1/search"
        params = {
            "name": name,
            "count": count,
            "language": self.language,
            "format": "json",
        }
        try:
            resp = await self.client.get(url, params=params)
        except httpx.RequestError as e:
            logger.debug("Geocoding request failed for name=%r: %s", name, e)
            raise NetworkError(f"Failed to resolve location: {e}") from e

        if resp.status_code >= 400:
            logger.debug("Geocoding API %d for name=%r", resp.status_code, name)
            raise NetworkError(
                f"Failed to resolve location: HTTP {resp.status_code}",
                resp.status_code,
            )

        try:
            data = resp.json()
            # "results" is omitted entirely when nothing matches
            return [Place.from_api(r) for r in (data.get("results") or [])]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.debug("Malformed geocoding response for name=%r: %s", name, e)
            raise NetworkError("Failed to resolve location: malformed response") from e
