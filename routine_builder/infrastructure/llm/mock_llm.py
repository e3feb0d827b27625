from typing import Any

from routine_builder.application.ports.llm import LLMPort


class MockLLM(LLMPort):
    """Offline stand-in returning a Responses-shaped payload."""

    def __init__(self) -> None:
        self.prompts: list[str] = []

    def complete_prompt(self, prompt: str) -> dict[str, Any]:
        self.prompts.append(prompt)
        last_block = prompt.rsplit("\n\n", 1)[-1]
        text = (
            "Mock routine:\n"
            "1. Morning: cleanse, treat, moisturize, protect.\n"
            "2. Evening: cleanse, treat, moisturize.\n"
            f"(Answering: {last_block[:120]})"
        )
        return {
            "id": f"mock_{len(self.prompts)}",
            "object": "response",
            "output": [
                {
                    "type": "message",
                    "role": "assistant",
                    "content": [{"type": "output_text", "text": text}],
                }
            ],
        }
