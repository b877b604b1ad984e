"""Tests for WeatherAPIProvider."""

from unittest.mock import MagicMock

import httpx
import pytest

from citysearch.data import WeatherSnapshot
from citysearch.providers.weatherapi import WeatherAPIProvider, _absolute_url


@pytest.fixture
def mock_response_data() -> dict:
    """Sample WeatherAPI current.json response."""
    return {
        "location": {
            "name": "Paris",
            "region": "Ile-de-France",
            "country": "France",
            "lat": 48.87,
            "lon": 2.33,
            "localtime": "2026-10-19 14:05",
        },
        "current": {
            "temp_c": 14.0,
            "condition": {
                "text": "Partly cloudy",
                "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png",
            },
        },
    }


@pytest.fixture
def provider() -> WeatherAPIProvider:
    return WeatherAPIProvider(api_key="test-key")


def _patch_get(monkeypatch: pytest.MonkeyPatch, data: dict, captured: dict | None = None) -> None:
    mock_response = MagicMock()
    mock_response.json.return_value = data
    mock_response.raise_for_status = MagicMock()

    async def mock_get(self, url, params=None, **kwargs):
        if captured is not None:
            captured.update(params or {})
        return mock_response

    monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)


def test_init_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WEATHER_API_KEY", raising=False)
    with pytest.raises(ValueError, match="key required"):
        WeatherAPIProvider()


def test_init_uses_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEATHER_API_KEY", "env-key")
    assert WeatherAPIProvider()._api_key == "env-key"


async def test_current_returns_snapshot(
    provider: WeatherAPIProvider,
    mock_response_data: dict,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_get(monkeypatch, mock_response_data)

    snapshot = await provider.current("Paris")

    assert isinstance(snapshot, WeatherSnapshot)
    assert snapshot.location_name == "Paris"
    assert snapshot.latitude == 48.87
    assert snapshot.longitude == 2.33
    assert snapshot.local_time == "2026-10-19 14:05"
    assert snapshot.temperature_c == 14.0
    assert snapshot.condition_text == "Partly cloudy"
    assert snapshot.condition_icon == "https://cdn.weatherapi.com/weather/64x64/day/116.png"


async def test_current_sends_query_params(
    provider: WeatherAPIProvider,
    mock_response_data: dict,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    captured: dict = {}
    _patch_get(monkeypatch, mock_response_data, captured)

    await provider.current("Paris")

    assert captured == {"key": "test-key", "q": "Paris", "aqi": "no"}


async def test_current_missing_location_raises(
    provider: WeatherAPIProvider,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_get(monkeypatch, {"error": {"code": 1006, "message": "No matching location found."}})

    with pytest.raises(KeyError):
        await provider.current("Nowhere")


async def test_current_raises_on_status_error(
    provider: WeatherAPIProvider,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    request = httpx.Request("GET", "https://api.weatherapi.com/v1/current.json")
    response = httpx.Response(400, request=request)

    async def mock_get(*args, **kwargs):
        return response

    monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

    with pytest.raises(httpx.HTTPStatusError):
        await provider.current("Nowhere")


def test_absolute_url() -> None:
    assert _absolute_url("//cdn.example.com/a.png") == "https://cdn.example.com/a.png"
    assert _absolute_url("https://cdn.example.com/a.png") == "https://cdn.example.com/a.png"
    assert _absolute_url("") == ""
