"""Current conditions from WeatherAPI.com."""

import os

import httpx

from citysearch.data import WeatherSnapshot

WEATHER_API_URL = "https://api.weatherapi.com/v1/current.json"


class WeatherAPIProvider:
    """Fetch current weather for a city using WeatherAPI.com.

    Args:
        api_key: WeatherAPI key (defaults to WEATHER_API_KEY env var).
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("WEATHER_API_KEY")
        if not self._api_key:
            raise ValueError(
                "WeatherAPI key required. Pass api_key or set WEATHER_API_KEY env var."
            )
        self._timeout = timeout

    async def current(self, city_name: str) -> WeatherSnapshot:
        """Return current conditions for ``city_name``."""
        params = {
            "key": self._api_key or "",
            "q": city_name,
            "aqi": "no",
        }
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(WEATHER_API_URL, params=params)
            response.raise_for_status()
            data = response.json()

        location = data["location"]
        current = data["current"]
        condition = current.get("condition", {})
        return WeatherSnapshot(
            location_name=location["name"],
            latitude=float(location["lat"]),
            longitude=float(location["lon"]),
            local_time=location.get("localtime", ""),
            temperature_c=float(current["temp_c"]),
            condition_text=condition.get("text", ""),
            condition_icon=_absolute_url(condition.get("icon", "")),
        )


def _absolute_url(url: str) -> str:
    """Give protocol-relative URLs (``//cdn...``) an https scheme."""
    if url.startswith("//"):
        return f"https:{url}"
    return url
