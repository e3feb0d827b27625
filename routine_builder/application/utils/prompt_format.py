from __future__ import annotations

from routine_builder.domain.entities.chat_message import ChatMessage
from routine_builder.domain.entities.search_result import SearchResult

SEARCH_CONTEXT_LIMIT = 6
SEARCH_CONTEXT_HEADER = "Web search results (top):"


def format_search_results(results: list[SearchResult], limit: int = SEARCH_CONTEXT_LIMIT) -> str:
    blocks = []
    for i, r in enumerate(results[:limit], start=1):
        blocks.append(f"{i}. {r.title or r.url}\n{r.snippet or ''}\n{r.url}")
    return "\n\n".join(blocks)


def search_context_message(results: list[SearchResult]) -> ChatMessage | None:
    if not results:
        return None
    return ChatMessage(role="system", content=f"{SEARCH_CONTEXT_HEADER}\n\n{format_search_results(results)}")


def flatten_transcript(messages: list[ChatMessage]) -> str:
    """Render a transcript as `ROLE: content` blocks separated by blank lines."""
    return "\n\n".join(f"{m.role.upper()}: {m.content}" for m in messages)
