"""Completion model configuration."""

from pydantic import BaseModel, Field


class CompletionConfig(BaseModel, frozen=True):
    model: str = Field(min_length=1)
    temperature: float = Field(default=0.0, ge=0.0, le=2.0)
    max_tokens: int = Field(default=1024, ge=1)
    preamble: str | None = None
