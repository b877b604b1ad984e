"""Upcoming events from the Ticketmaster Discovery API."""

import logging
import os
from datetime import UTC, datetime

import httpx

from citysearch.data import EventSummary

TICKETMASTER_API_URL = "https://app.ticketmaster.com/discovery/v2/events.json"

logger = logging.getLogger(__name__)


class TicketmasterProvider:
    """Search events in a city within a date window.

    Args:
        api_key: Ticketmaster consumer key (defaults to TICKETMASTER_API_KEY env var).
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("TICKETMASTER_API_KEY")
        if not self._api_key:
            raise ValueError(
                "Ticketmaster API key required. "
                "Pass api_key or set TICKETMASTER_API_KEY env var."
            )
        self._timeout = timeout

    async def upcoming(
        self,
        city_name: str,
        *,
        start: datetime,
        end: datetime,
        size: int = 5,
    ) -> list[EventSummary]:
        """Return events in ``city_name`` between ``start`` and ``end``.

        Args:
            city_name: City to search in.
            start: Window start (converted to UTC).
            end: Window end (converted to UTC).
            size: Page size.

        Returns:
            Events sorted by date ascending; empty when the response embeds none.
        """
        params: dict[str, str | int] = {
            "apikey": self._api_key or "",
            "city": city_name,
            "startDateTime": to_utc_timestamp(start),
            "endDateTime": to_utc_timestamp(end),
            "sort": "date,asc",
            "size": size,
        }
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(TICKETMASTER_API_URL, params=params)
            response.raise_for_status()
            data = response.json()

        # Ticketmaster omits "_embedded" entirely when nothing matches
        items = data.get("_embedded", {}).get("events", [])
        events: list[EventSummary] = []
        for item in items:
            start_info = item.get("dates", {}).get("start", {})
            events.append(
                EventSummary(
                    name=item.get("name", ""),
                    start_date=start_info.get("localDate"),
                    ticket_url=item.get("url"),
                )
            )
        return events


def to_utc_timestamp(value: datetime) -> str:
    """Format a datetime as ``YYYY-MM-DDTHH:MM:SSZ``.

    Naive datetimes are assumed to already be UTC.
    """
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")
