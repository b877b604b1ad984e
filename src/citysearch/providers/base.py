from datetime import datetime
from typing import Protocol

from citysearch.data import EventSummary, RawSuggestion, WeatherSnapshot


class GeocodingProvider(Protocol):
    """Interface for looking up cities by name prefix."""

    async def find_cities(self, name_prefix: str, *, limit: int = 10) -> list[RawSuggestion]:
        """Return cities whose name starts with ``name_prefix``.

        Args:
            name_prefix: Partial city name typed by the user.
            limit: Maximum number of hits to request.

        Returns:
            Geocoding hits in provider order (may contain duplicates).
        """
        ...


class WeatherProvider(Protocol):
    """Interface for current weather conditions."""

    async def current(self, city_name: str) -> WeatherSnapshot:
        """Return current conditions for ``city_name``.

        Raises:
            httpx.HTTPError: On transport failure or non-2xx response.
            KeyError: If the response is missing required fields.
        """
        ...


class EventsProvider(Protocol):
    """Interface for upcoming events in a city."""

    async def upcoming(
        self,
        city_name: str,
        *,
        start: datetime,
        end: datetime,
        size: int = 5,
    ) -> list[EventSummary]:
        """Return events in ``city_name`` between ``start`` and ``end``, by date ascending.

        A response without any events yields an empty list.
        """
        ...


class PhotoProvider(Protocol):
    """Interface for a representative image of a place."""

    async def find_photo(self, query: str, *, orientation: str = "landscape") -> str | None:
        """Return the URL of the first matching image, or None."""
        ...


class SummaryProvider(Protocol):
    """Interface for a short encyclopedic summary of a place."""

    async def summary(self, title: str) -> str | None:
        """Return the plain-text extract for ``title``, or None."""
        ...
