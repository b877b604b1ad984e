"""Name-prefix suggestion lookup."""

import logging

from citysearch.data import RawSuggestion
from citysearch.providers.base import GeocodingProvider

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 3
DEFAULT_SUGGESTION_LIMIT = 10


class SuggestionFetcher:
    """Query a geocoding provider for cities matching a partial name.

    Suggestions are advisory: failures are logged and produce an empty list,
    never an error for the user.

    Args:
        provider: Geocoding provider to query.
        min_query_length: Queries shorter than this make no request.
        limit: Maximum number of hits to request.
    """

    def __init__(
        self,
        provider: GeocodingProvider,
        *,
        min_query_length: int = MIN_QUERY_LENGTH,
        limit: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> None:
        self._provider = provider
        self._min_query_length = min_query_length
        self._limit = limit

    async def fetch(self, query: str) -> list[RawSuggestion]:
        """Return raw geocoding hits for ``query``.

        Args:
            query: Free text typed by the user.

        Returns:
            Hits in provider order, or an empty list if the query is too short
            or the lookup failed.
        """
        if len(query) < self._min_query_length:
            return []

        try:
            return await self._provider.find_cities(query, limit=self._limit)
        except Exception as e:
            logger.warning("Error fetching city suggestions for %r. Error: %s", query, e)
            return []
