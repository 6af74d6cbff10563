"""Schemas for the AI chat proxy."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class AIProvider(str, Enum):
    """Supported completion providers."""

    DEEPSEEK = "deepseek"
    ALIBABA = "alibaba"


class AIMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class AIChatRequest(BaseModel):
    """Chat completion request forwarded to a provider."""

    provider: AIProvider
    api_key: str = Field(..., min_length=1)
    base_url: str | None = Field(None, description="Only honoured for deepseek")
    messages: list[AIMessage] = Field(..., min_length=1)


class AIChatResponse(BaseModel):
    content: str
