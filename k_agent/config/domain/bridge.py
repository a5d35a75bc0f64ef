"""Isolated execution bridge configuration."""

from pydantic import BaseModel, Field


class BridgeConfig(BaseModel, frozen=True):
    timeout_seconds: float | None = Field(default=None, gt=0.0)
