from typing import Any

from pydantic import BaseModel, Field


class ChatMessageSchema(BaseModel):
    role: str
    content: str = ""


class ChatRequestSchema(BaseModel):
    message: str | None = None
    messages: list[ChatMessageSchema] | None = None


class SearchResultSchema(BaseModel):
    title: str = ""
    snippet: str = ""
    url: str = ""


class ChatResponseSchema(BaseModel):
    reply: str
    web_results: list[SearchResultSchema] = Field(default_factory=list)
    openai: Any = None


class SearchRequestSchema(BaseModel):
    q: str | None = None
    query: str | None = None

    def text(self) -> str:
        return (self.q or self.query or "").strip()


class SearchResponseSchema(BaseModel):
    results: list[SearchResultSchema] = Field(default_factory=list)


class ErrorSchema(BaseModel):
    error: str
