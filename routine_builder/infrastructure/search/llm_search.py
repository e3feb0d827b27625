from __future__ import annotations

import json
import logging
import re
from typing import Any

from routine_builder.application.exceptions import LLMContractError, LLMUpstreamError, SearchUpstreamError
from routine_builder.application.ports.llm import LLMPort
from routine_builder.application.ports.search import SearchPort
from routine_builder.application.utils.response_text import extract_reply_text
from routine_builder.domain.entities.search_result import SearchResult
from routine_builder.infrastructure.llm.prompts import build_search_prompt

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


class LlmSearch(SearchPort):
    """
    Asks the language model to act as a search engine.

    Nothing here is a real web search: URLs and snippets come from the model
    and may not exist. Only selected with SEARCH_BACKEND=llm; prefer SerpAPI
    or Google whenever a key is available.
    """

    def __init__(self, llm: LLMPort) -> None:
        self._llm = llm
        self._logger = logging.getLogger(__name__)

    def search(self, query: str, limit: int = 8) -> list[SearchResult]:
        try:
            raw = self._llm.complete_prompt(build_search_prompt(query, limit))
        except (LLMUpstreamError, LLMContractError) as e:
            raise SearchUpstreamError(f"LLM search failed: {e}") from e

        data = _parse_results(extract_reply_text(raw))
        if data is None:
            raise SearchUpstreamError("LLM search returned no parseable JSON.")

        results = [SearchResult.from_payload(item) for item in data if isinstance(item, dict)]
        results = [r for r in results if r.url.startswith(("http://", "https://"))]
        self._logger.info("LLM pseudo-search", extra={"query": query, "count": len(results)})
        return results[:limit]


def _parse_results(text: str) -> list[Any] | None:
    cleaned = _FENCE.sub("", text.strip())
    for candidate in (cleaned, _outermost(cleaned, "{", "}"), _outermost(cleaned, "[", "]")):
        if not candidate:
            continue
        try:
            data = json.loads(candidate)
        except ValueError:
            continue
        if isinstance(data, dict) and isinstance(data.get("results"), list):
            return data["results"]
        if isinstance(data, list):
            return data
    return None


def _outermost(text: str, open_ch: str, close_ch: str) -> str | None:
    start, end = text.find(open_ch), text.rfind(close_ch)
    if start == -1 or end <= start:
        return None
    return text[start : end + 1]
