"""City name lookup using GeoDB Cities on RapidAPI."""

import logging
import os

import httpx

from citysearch.data import RawSuggestion

GEODB_API_URL = "https://wft-geo-db.p.rapidapi.com/v1/geo/cities"
GEODB_API_HOST = "wft-geo-db.p.rapidapi.com"
GEODB_MAX_LIMIT = 10  # free tier page cap

logger = logging.getLogger(__name__)


class GeoDBProvider:
    """Look up cities by name prefix using the GeoDB Cities API.

    Args:
        api_key: RapidAPI key (defaults to GEODB_API_KEY env var).
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("GEODB_API_KEY")
        if not self._api_key:
            raise ValueError("GeoDB API key required. Pass api_key or set GEODB_API_KEY env var.")
        self._timeout = timeout

    async def find_cities(self, name_prefix: str, *, limit: int = 10) -> list[RawSuggestion]:
        """Return cities whose name starts with ``name_prefix``.

        Args:
            name_prefix: Partial city name.
            limit: Maximum number of hits (capped at 10).

        Returns:
            Raw geocoding hits in provider order.
        """
        params: dict[str, str | int] = {
            "namePrefix": name_prefix,
            "limit": min(max(limit, 1), GEODB_MAX_LIMIT),
        }
        headers = {
            "X-RapidAPI-Key": self._api_key or "",
            "X-RapidAPI-Host": GEODB_API_HOST,
        }
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(GEODB_API_URL, params=params, headers=headers)
            response.raise_for_status()
            data = response.json()

        hits = [
            RawSuggestion(name=item["city"], country=item["country"])
            for item in data.get("data", [])
        ]
        logger.debug(f"GeoDB returned {len(hits)} cities for {name_prefix!r}")
        return hits
