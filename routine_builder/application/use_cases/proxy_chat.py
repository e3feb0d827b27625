from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from routine_builder.application.exceptions import ConfigurationError
from routine_builder.application.ports.llm import LLMPort
from routine_builder.application.ports.search import SearchPort
from routine_builder.application.utils.prompt_format import (
    SEARCH_CONTEXT_LIMIT,
    flatten_transcript,
    search_context_message,
)
from routine_builder.application.utils.response_text import extract_reply_text
from routine_builder.domain.entities.chat_message import ChatMessage
from routine_builder.domain.entities.search_result import SearchResult


@dataclass(frozen=True)
class ProxyChatResult:
    reply: str
    web_results: list[SearchResult] = field(default_factory=list)
    raw: Any = None


class ProxyChatUseCase:
    def __init__(self, llm: LLMPort | None, search: SearchPort | None = None) -> None:
        self._llm = llm
        self._search = search
        self._logger = logging.getLogger(__name__)

    def execute(self, message: str | None, messages: list[dict[str, Any]] | None) -> ProxyChatResult:
        """
        Raises:
            ValueError: neither a message nor a transcript was supplied, or a role is invalid
            ConfigurationError: no language model is configured
            LLMUpstreamError: the language model call failed
        """
        text = (message or "").strip()
        if messages:
            transcript = [ChatMessage.from_payload(m) for m in messages]
        elif text:
            transcript = [ChatMessage(role="user", content=text)]
        else:
            raise ValueError("Request must include 'message' or 'messages'.")

        if self._llm is None:
            raise ConfigurationError("OPENAI_API_KEY is not configured on the proxy.")

        query = text or _last_user_turn(transcript)
        results = self._lookup(query)

        context = search_context_message(results)
        if context is not None:
            transcript = [context] + transcript

        raw = self._llm.complete_prompt(flatten_transcript(transcript))
        reply = extract_reply_text(raw)

        self._logger.info("Chat proxied", extra={"count": len(transcript), "backend": type(self._llm).__name__})
        return ProxyChatResult(reply=reply, web_results=results, raw=raw)

    def _lookup(self, query: str) -> list[SearchResult]:
        if self._search is None or not query:
            return []
        try:
            return self._search.search(query, limit=SEARCH_CONTEXT_LIMIT)[:SEARCH_CONTEXT_LIMIT]
        except Exception as e:
            self._logger.warning("Search step failed; answering without it", extra={"query": query, "reason": str(e)})
            return []


def _last_user_turn(transcript: list[ChatMessage]) -> str:
    for m in reversed(transcript):
        if m.role == "user" and m.content.strip():
            return m.content.strip()
    return ""
