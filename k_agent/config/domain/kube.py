"""Cluster access configuration."""

from pydantic import BaseModel, Field


class KubeConfig(BaseModel, frozen=True):
    default_namespace: str = Field(default="default", min_length=1)
    context: str | None = None
