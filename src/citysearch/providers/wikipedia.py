"""Encyclopedic summaries from the Wikipedia REST API."""

from urllib.parse import quote

import httpx

WIKIPEDIA_SUMMARY_URL = "https://en.wikipedia.org/api/rest_v1/page/summary/{title}"
USER_AGENT = "citysearch/0.1 (python-httpx)"


class WikipediaProvider:
    """Fetch the lead-section extract of a Wikipedia page.

    No credentials are needed; Wikimedia asks clients to send a descriptive
    User-Agent.

    Args:
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
    """

    def __init__(self, *, timeout: float = 10.0, user_agent: str = USER_AGENT) -> None:
        self._timeout = timeout
        self._user_agent = user_agent

    async def summary(self, title: str) -> str | None:
        url = WIKIPEDIA_SUMMARY_URL.format(title=quote(title, safe=""))
        headers = {"User-Agent": self._user_agent}
        async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
            data = response.json()

        return data.get("extract") or None
