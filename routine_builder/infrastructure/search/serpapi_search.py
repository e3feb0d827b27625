from __future__ import annotations

import logging

import httpx

from routine_builder.application.exceptions import SearchUpstreamError
from routine_builder.application.ports.search import SearchPort
from routine_builder.domain.entities.search_result import SearchResult

SERPAPI_ENDPOINT = "https://serpapi.com/search.json"


class SerpApiSearch(SearchPort):
    def __init__(self, api_key: str, client: httpx.Client | None = None, endpoint: str = SERPAPI_ENDPOINT) -> None:
        if not api_key:
            raise ValueError("SERPAPI_KEY is required for SerpAPI search")
        self._api_key = api_key
        self._endpoint = endpoint
        self._client = client or httpx.Client()
        self._logger = logging.getLogger(__name__)

    def search(self, query: str, limit: int = 8) -> list[SearchResult]:
        params = {"engine": "google", "q": query, "api_key": self._api_key}
        try:
            resp = self._client.get(self._endpoint, params=params)
        except httpx.HTTPError as e:
            raise SearchUpstreamError(f"SerpAPI request failed: {e}") from e

        if not resp.is_success:
            self._logger.warning("SerpAPI returned an error", extra={"status": resp.status_code, "query": query})
            return []

        try:
            data = resp.json()
        except ValueError as e:
            raise SearchUpstreamError(f"SerpAPI returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            self._logger.warning("SerpAPI returned an unexpected body", extra={"query": query})
            return []
        items = data.get("organic_results") or data.get("organic") or []
        if not isinstance(items, list):
            return []
        return [
            SearchResult(
                title=str(i.get("title") or ""),
                snippet=str(i.get("snippet") or i.get("description") or ""),
                url=str(i.get("link") or i.get("url") or i.get("source") or ""),
            )
            for i in items[:limit]
            if isinstance(i, dict)
        ]
