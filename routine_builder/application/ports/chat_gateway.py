from __future__ import annotations

from abc import ABC, abstractmethod

from routine_builder.domain.entities.chat_message import ChatMessage


class ChatGatewayPort(ABC):
    @abstractmethod
    def complete(self, messages: list[ChatMessage]) -> str:
        """
        Send the full message list and return the assistant reply text.

        Raises:
            ConfigurationError: neither a proxy URL nor a direct API key is configured
            LLMUpstreamError: network failure or non-2xx response (body text included)
        """
        raise NotImplementedError
