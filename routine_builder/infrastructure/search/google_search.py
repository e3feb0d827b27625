from __future__ import annotations

import logging

import httpx

from routine_builder.application.exceptions import SearchUpstreamError
from routine_builder.application.ports.search import SearchPort
from routine_builder.domain.entities.search_result import SearchResult

GOOGLE_CSE_ENDPOINT = "https://www.googleapis.com/customsearch/v1"
GOOGLE_MAX_NUM = 10  # API ceiling per request


class GoogleSearch(SearchPort):
    """Google Programmable Search (Custom Search JSON API)."""

    def __init__(
        self,
        api_key: str,
        cx: str,
        client: httpx.Client | None = None,
        endpoint: str = GOOGLE_CSE_ENDPOINT,
    ) -> None:
        if not api_key or not cx:
            raise ValueError("GOOGLE_API_KEY and GOOGLE_CX are required for Google search")
        self._api_key = api_key
        self._cx = cx
        self._endpoint = endpoint
        self._client = client or httpx.Client()
        self._logger = logging.getLogger(__name__)

    def search(self, query: str, limit: int = 8) -> list[SearchResult]:
        params = {"key": self._api_key, "cx": self._cx, "q": query, "num": max(1, min(limit, GOOGLE_MAX_NUM))}
        try:
            resp = self._client.get(self._endpoint, params=params)
        except httpx.HTTPError as e:
            raise SearchUpstreamError(f"Google search request failed: {e}") from e

        if not resp.is_success:
            self._logger.warning("Google search returned an error", extra={"status": resp.status_code, "query": query})
            return []

        try:
            items = resp.json().get("items") or []
        except (ValueError, AttributeError) as e:
            raise SearchUpstreamError(f"Google search returned invalid JSON: {e}") from e

        if not isinstance(items, list):
            return []
        return [
            SearchResult(
                title=str(i.get("title") or ""),
                snippet=str(i.get("snippet") or ""),
                url=str(i.get("link") or i.get("formattedUrl") or ""),
            )
            for i in items[:limit]
            if isinstance(i, dict)
        ]
