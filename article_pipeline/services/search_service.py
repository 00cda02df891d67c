"""
Search context: turn a free-text query into pretty-printed Serper JSON.

Responsibility: One POST to the search API per query. The raw payload is passed
through unchanged (apart from pretty-printing) as context for the Researcher.
No retries, pagination, or filtering.
"""

import json
import logging

import httpx

from article_pipeline.core.config import SERPER_SEARCH_URL, Settings
from article_pipeline.core.errors import DecodeError, ProviderError

logger = logging.getLogger(__name__)


def create_search_client(settings: Settings) -> httpx.AsyncClient:
    """Build the search HTTP client with the API key as a default header."""
    headers = {
        "X-API-KEY": settings.serper_api_key,
        "Content-Type": "application/json",
    }
    return httpx.AsyncClient(headers=headers, timeout=settings.search_timeout)


class SearchContextProvider:
    """Wraps the search API call; owned by the Researcher."""

    def __init__(self, http_client: httpx.AsyncClient, search_url: str = SERPER_SEARCH_URL) -> None:
        self._http_client = http_client
        self._search_url = search_url

    async def fetch_context(self, query: str) -> str:
        """
        POST {"q": query} to the search API and return the JSON reply pretty-printed.

        Raises:
            ProviderError: On transport failure or a non-success status.
            DecodeError: If the body is not valid JSON.
        """
        logger.info("[search:fetch_context] IN  query=%r", query)
        try:
            response = await self._http_client.post(self._search_url, json={"q": query})
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("[search:fetch_context] request failed: %s", e)
            raise ProviderError("Search", e) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("[search:fetch_context] malformed body: %r", response.text[:200])
            raise DecodeError(e) from e

        context = json.dumps(data, indent=2, ensure_ascii=False)
        logger.info("[search:fetch_context] OUT context_len=%d", len(context))
        return context
