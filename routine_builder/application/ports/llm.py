from abc import ABC, abstractmethod
from typing import Any


class LLMPort(ABC):
    @abstractmethod
    def complete_prompt(self, prompt: str) -> dict[str, Any]:
        """
        Send a single flattened prompt to the language model.

        Requirements:
        - Return the provider response as a plain JSON-compatible dict, untouched
        - Text extraction is done by the caller (see utils.response_text)

        Raises:
            LLMUpstreamError: networking/provider failures
        """
        raise NotImplementedError
