from __future__ import annotations

import json

from routine_builder.domain.entities.chat_message import ChatMessage
from routine_builder.domain.entities.product import Product

SYSTEM_INSTRUCTION = ChatMessage(
    role="system",
    content=(
        "You are a helpful skincare, haircare, makeup, and fragrance assistant. "
        "Only answer questions related to the provided routine or to topics like skincare, haircare, "
        "makeup, fragrance, and related product advice. Use up-to-date, real-world information when "
        "available and include links and short citations for any factual claims about current products, "
        "releases, or formulations. If the user asks about unrelated topics, politely decline and steer "
        "them back to the subject."
    ),
)

ROUTINE_REQUEST_PREFIX = (
    "Here are the selected products in JSON. Use these only and create a short routine "
    "(steps, timing, and brief why) formatted as plain text.\n\n"
)


def build_routine_request(products: list[Product]) -> ChatMessage:
    payload = [p.routine_fields() for p in products]
    return ChatMessage(role="user", content=ROUTINE_REQUEST_PREFIX + json.dumps(payload, indent=2, ensure_ascii=False))


def routine_search_query(products: list[Product], brand_hint: str) -> str:
    names = ", ".join(p.name for p in products)
    return f"{brand_hint} {names} routine, product information, releases, or reviews".strip()


def follow_up_search_query(question: str, brand_hint: str) -> str:
    return f"{question} {brand_hint}".strip()
