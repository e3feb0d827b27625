from __future__ import annotations

import logging

from routine_builder.application.exceptions import SearchNotConfiguredError
from routine_builder.application.ports.search import SearchPort
from routine_builder.domain.entities.search_result import SearchResult

MAX_SEARCH_RESULTS = 8


class ProxySearchUseCase:
    def __init__(self, backend: SearchPort | None) -> None:
        self._backend = backend
        self._logger = logging.getLogger(__name__)

    def execute(self, query: str | None) -> list[SearchResult]:
        """
        Raises:
            SearchNotConfiguredError: no backend is configured (checked before any network call)
            SearchUpstreamError: the backend call failed
        """
        q = (query or "").strip()
        if not q:
            return []
        if self._backend is None:
            raise SearchNotConfiguredError(
                "No search API key configured (SERPAPI_KEY or GOOGLE_API_KEY+GOOGLE_CX)."
            )
        results = self._backend.search(q, limit=MAX_SEARCH_RESULTS)[:MAX_SEARCH_RESULTS]
        self._logger.info("Search served", extra={"query": q, "count": len(results)})
        return results
