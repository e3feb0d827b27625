from __future__ import annotations

from dataclasses import dataclass, field

from routine_builder.domain.entities.chat_message import ChatMessage


@dataclass
class Transcript:
    """Chat history for one routine session.

    Append-only between resets. When non-empty, the first entry is always the
    system instruction passed to ``reset``.
    """

    messages: list[ChatMessage] = field(default_factory=list)

    def reset(self, system: ChatMessage, user: ChatMessage) -> None:
        if system.role != "system":
            raise ValueError("Transcript must start with a system message.")
        self.messages = [system, user]

    def append(self, message: ChatMessage) -> None:
        if not self.messages:
            raise ValueError("Transcript has not been started.")
        self.messages.append(message)

    def clear(self) -> None:
        self.messages = []

    def to_payload(self) -> list[dict[str, str]]:
        return [m.to_payload() for m in self.messages]

    def __len__(self) -> int:
        return len(self.messages)
