from __future__ import annotations

from dataclasses import dataclass
from typing import Any

ROLES = ("system", "user", "assistant")


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "system", "user", "assistant"
    content: str

    @staticmethod
    def from_payload(payload: dict[str, Any]) -> "ChatMessage":
        role = str(payload.get("role") or "user").strip().lower()
        if role not in ROLES:
            raise ValueError(f"Unsupported message role: {role!r}")
        return ChatMessage(role=role, content=str(payload.get("content") or ""))

    def to_payload(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}
