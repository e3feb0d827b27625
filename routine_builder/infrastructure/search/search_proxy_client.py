from __future__ import annotations

import logging
from typing import Callable

import httpx

from routine_builder.application.exceptions import SearchUpstreamError
from routine_builder.application.ports.search import SearchPort
from routine_builder.core.config import Settings, load_settings
from routine_builder.domain.entities.search_result import SearchResult


class SearchProxyClient(SearchPort):
    """
    Client side of the search proxy.

    SEARCH_PROXY_URL is resolved on every call; when unset the lookup is
    skipped and no request is made. Accepts either `{"results": [...]}` or a
    bare array in the response.
    """

    def __init__(
        self,
        settings_factory: Callable[[], Settings] = load_settings,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings_factory = settings_factory
        self._client = client or httpx.Client()
        self._logger = logging.getLogger(__name__)

    def search(self, query: str, limit: int = 8) -> list[SearchResult]:
        settings = self._settings_factory()
        url = settings.SEARCH_PROXY_URL
        if not url:
            return []

        try:
            resp = self._client.post(url, json={"q": query}, timeout=settings.HTTP_TIMEOUT_SECONDS)
        except httpx.HTTPError as e:
            raise SearchUpstreamError(f"Search proxy request failed: {e}") from e

        if not resp.is_success:
            self._logger.warning("Search proxy returned an error", extra={"status": resp.status_code, "query": query})
            return []

        try:
            data = resp.json()
        except ValueError as e:
            raise SearchUpstreamError(f"Search proxy returned invalid JSON: {e}") from e

        if isinstance(data, dict):
            data = data.get("results")
        if not isinstance(data, list):
            return []
        return [SearchResult.from_payload(item) for item in data if isinstance(item, dict)][:limit]
