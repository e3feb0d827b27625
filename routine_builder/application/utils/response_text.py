"""Normalization of language-model responses into reply text.

Providers (and provider API generations) disagree on where the assistant text
lives. ``extract_reply_text`` tries the known shapes in a fixed order and
stops at the first one that yields text:

1. ``output_text``: a top-level convenience string (Responses API).
2. ``output[*].content[*].text``: every text part of every output item,
   concatenated in order (Responses API, raw form).
3. ``choices[0].message.content``: Chat Completions.
4. ``choices[0].text``: legacy Completions.
5. The whole response dumped as indented JSON, so the caller always gets
   something to show.
"""

from __future__ import annotations

import json
from typing import Any


def extract_reply_text(data: Any) -> str:
    for extractor in (_output_text, _output_parts, _chat_choice, _completion_choice):
        text = extractor(data)
        if text:
            return text
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def _output_text(data: Any) -> str | None:
    if isinstance(data, dict):
        value = data.get("output_text")
        if isinstance(value, str) and value.strip():
            return value
    return None


def _output_parts(data: Any) -> str | None:
    if not isinstance(data, dict) or not isinstance(data.get("output"), list):
        return None
    parts: list[str] = []
    for item in data["output"]:
        if not isinstance(item, dict):
            continue
        content = item.get("content")
        if isinstance(content, str):
            parts.append(content)
            continue
        for part in content or []:
            if isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
    text = "".join(parts)
    return text if text.strip() else None


def _first_choice(data: Any) -> dict[str, Any] | None:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        return choices[0]
    return None


def _chat_choice(data: Any) -> str | None:
    choice = _first_choice(data)
    message = (choice or {}).get("message")
    if isinstance(message, dict) and isinstance(message.get("content"), str) and message["content"].strip():
        return message["content"]
    return None


def _completion_choice(data: Any) -> str | None:
    choice = _first_choice(data)
    text = (choice or {}).get("text")
    if isinstance(text, str) and text.strip():
        return text
    return None
