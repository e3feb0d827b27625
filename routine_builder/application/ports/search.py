from __future__ import annotations

from abc import ABC, abstractmethod

from routine_builder.domain.entities.search_result import SearchResult


class SearchPort(ABC):
    @abstractmethod
    def search(self, query: str, limit: int = 8) -> list[SearchResult]:
        """
        Return at most `limit` results for `query`.

        Raises:
            SearchUpstreamError: the provider call failed
        """
        raise NotImplementedError
