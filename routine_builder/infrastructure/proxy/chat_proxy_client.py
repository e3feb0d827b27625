from __future__ import annotations

import logging
from typing import Any, Callable

import httpx

from routine_builder.application.exceptions import ConfigurationError, LLMContractError, LLMUpstreamError
from routine_builder.application.ports.chat_gateway import ChatGatewayPort
from routine_builder.application.utils.response_text import extract_reply_text
from routine_builder.core.config import Settings, load_settings
from routine_builder.domain.entities.chat_message import ChatMessage


class ChatProxyClient(ChatGatewayPort):
    """
    Sends the transcript to the chat proxy, or straight to the provider.

    Configuration is read on every call:
    - ROUTINE_PROXY_URL set: POST {"messages": [...]} to the proxy
    - otherwise: Chat Completions call with the local OPENAI_API_KEY
    - neither: ConfigurationError naming both settings
    """

    def __init__(
        self,
        settings_factory: Callable[[], Settings] = load_settings,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings_factory = settings_factory
        self._client = client or httpx.Client()
        self._logger = logging.getLogger(__name__)

    def complete(self, messages: list[ChatMessage]) -> str:
        settings = self._settings_factory()
        payload = [m.to_payload() for m in messages]

        try:
            if settings.ROUTINE_PROXY_URL:
                resp = self._client.post(
                    settings.ROUTINE_PROXY_URL,
                    json={"messages": payload},
                    timeout=settings.HTTP_TIMEOUT_SECONDS,
                )
            else:
                resp = self._direct(settings, payload)
        except httpx.HTTPError as e:
            raise LLMUpstreamError(f"Chat request failed: {e}") from e

        if not resp.is_success:
            self._logger.error("Chat request rejected", extra={"status": resp.status_code})
            raise LLMUpstreamError(f"OpenAI API error: {resp.status_code} - {resp.text}")

        try:
            data = resp.json()
        except ValueError as e:
            raise LLMContractError(f"Chat response was not JSON: {e}") from e

        return _reply_text(data)

    def _direct(self, settings: Settings, payload: list[dict[str, str]]) -> httpx.Response:
        api_key = (settings.OPENAI_API_KEY or "").strip()
        if not api_key:
            raise ConfigurationError("No OpenAI API key found. Provide ROUTINE_PROXY_URL or OPENAI_API_KEY.")
        return self._client.post(
            f"{settings.OPENAI_BASE_URL.rstrip('/')}/chat/completions",
            headers={"Authorization": f"Bearer {api_key}"},
            json={
                "model": settings.OPENAI_DIRECT_MODEL,
                "messages": payload,
                "max_tokens": settings.OPENAI_MAX_TOKENS,
                "temperature": settings.OPENAI_TEMPERATURE,
            },
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )


def _reply_text(data: Any) -> str:
    # proxy responses carry the normalized text already
    if isinstance(data, dict) and isinstance(data.get("reply"), str):
        return data["reply"]
    return extract_reply_text(data)
