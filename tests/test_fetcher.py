"""Tests for SuggestionFetcher."""

import logging
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from citysearch.data import RawSuggestion
from citysearch.suggestions import SuggestionFetcher


@pytest.fixture
def mock_provider() -> MagicMock:
    """Create a mock geocoding provider."""
    provider = MagicMock()
    provider.find_cities = AsyncMock(
        return_value=[
            RawSuggestion(name="Paris", country="France"),
            RawSuggestion(name="Paris", country="United States of America"),
        ]
    )
    return provider


@pytest.mark.parametrize("query", ["", "P", "Pa", "  "])
async def test_short_query_makes_no_request(mock_provider: MagicMock, query: str) -> None:
    fetcher = SuggestionFetcher(mock_provider)

    assert await fetcher.fetch(query) == []
    mock_provider.find_cities.assert_not_called()


async def test_fetch_returns_provider_hits(mock_provider: MagicMock) -> None:
    fetcher = SuggestionFetcher(mock_provider)

    hits = await fetcher.fetch("Par")

    assert len(hits) == 2
    assert hits[0] == RawSuggestion(name="Paris", country="France")
    mock_provider.find_cities.assert_awaited_once_with("Par", limit=10)


async def test_fetch_passes_configured_limit(mock_provider: MagicMock) -> None:
    fetcher = SuggestionFetcher(mock_provider, limit=5, min_query_length=1)

    await fetcher.fetch("P")

    mock_provider.find_cities.assert_awaited_once_with("P", limit=5)


async def test_fetch_failure_returns_empty(
    mock_provider: MagicMock,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Transport errors are logged, never raised."""
    mock_provider.find_cities = AsyncMock(side_effect=httpx.ConnectError("offline"))
    fetcher = SuggestionFetcher(mock_provider)

    with caplog.at_level(logging.WARNING):
        hits = await fetcher.fetch("Paris")

    assert hits == []
    assert "Error fetching city suggestions" in caplog.text


async def test_fetch_decode_failure_returns_empty(mock_provider: MagicMock) -> None:
    mock_provider.find_cities = AsyncMock(side_effect=KeyError("city"))
    fetcher = SuggestionFetcher(mock_provider)

    assert await fetcher.fetch("Paris") == []
