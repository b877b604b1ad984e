"""Background photos from the Unsplash search API."""

import os

import httpx

UNSPLASH_API_URL = "https://api.unsplash.com/search/photos"


class UnsplashProvider:
    """Find one representative photo for a search term.

    Args:
        access_key: Unsplash access key (defaults to UNSPLASH_ACCESS_KEY env var).
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        access_key: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._access_key = access_key or os.environ.get("UNSPLASH_ACCESS_KEY")
        if not self._access_key:
            raise ValueError(
                "Unsplash access key required. "
                "Pass access_key or set UNSPLASH_ACCESS_KEY env var."
            )
        self._timeout = timeout

    async def find_photo(self, query: str, *, orientation: str = "landscape") -> str | None:
        params: dict[str, str | int] = {
            "query": query,
            "orientation": orientation,
            "per_page": 1,
        }
        headers = {"Authorization": f"Client-ID {self._access_key}"}
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(UNSPLASH_API_URL, params=params, headers=headers)
            response.raise_for_status()
            data = response.json()

        results = data.get("results", [])
        if not results:
            return None
        return results[0].get("urls", {}).get("regular")
