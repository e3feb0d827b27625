from __future__ import annotations

from typing import Any

from openai import OpenAI

from routine_builder.application.exceptions import LLMContractError, LLMUpstreamError
from routine_builder.application.ports.llm import LLMPort
from routine_builder.core.config import Settings, settings as default_settings


class OpenAILLM(LLMPort):
    """
    OpenAI-backed adapter implementing LLMPort.

    Contract guarantees:
    - complete_prompt sends the prompt as a single Responses API input
    - the provider response is returned as a plain dict (model_dump), unmodified
    - Raises:
        LLMUpstreamError: networking/provider failures
        LLMContractError: the SDK returned something that cannot be serialized
    """

    def __init__(self, settings: Settings | None = None, client: OpenAI | None = None) -> None:
        self._settings = settings or default_settings
        self.client = client or OpenAI(
            api_key=self._settings.OPENAI_API_KEY,
            timeout=self._settings.HTTP_TIMEOUT_SECONDS,
        )

    def complete_prompt(self, prompt: str) -> dict[str, Any]:
        try:
            resp = self.client.responses.create(
                model=self._settings.OPENAI_MODEL,
                input=prompt,
                temperature=self._settings.OPENAI_TEMPERATURE,
                max_output_tokens=self._settings.OPENAI_MAX_TOKENS,
            )
        except Exception as e:
            raise LLMUpstreamError(f"OpenAI API error: {e}") from e

        try:
            return resp.model_dump(mode="json")
        except Exception as e:
            raise LLMContractError(f"Unreadable provider response: {e}") from e
