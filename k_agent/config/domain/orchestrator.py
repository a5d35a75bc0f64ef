"""Orchestrator loop configuration."""

from pydantic import BaseModel, Field


class OrchestratorConfig(BaseModel, frozen=True):
    # None leaves the tool-call loop unbounded.
    max_tool_rounds: int | None = Field(default=None, ge=1)
