from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SearchResult:
    title: str
    snippet: str
    url: str

    @staticmethod
    def from_payload(payload: dict[str, Any]) -> "SearchResult":
        return SearchResult(
            title=str(payload.get("title") or ""),
            snippet=str(payload.get("snippet") or payload.get("description") or ""),
            url=str(payload.get("url") or payload.get("link") or ""),
        )

    def to_payload(self) -> dict[str, str]:
        return {"title": self.title, "snippet": self.snippet, "url": self.url}
