"""Manifest value objects — resource identity resolved from a YAML document."""

from typing import Any

from pydantic import BaseModel, Field


class ResourceTarget(BaseModel, frozen=True):
    """Where a manifest is created: group/version/kind, namespace and name."""

    group: str
    version: str = Field(min_length=1)
    kind: str = Field(min_length=1)
    namespace: str = Field(min_length=1)
    name: str | None

    @property
    def api_version(self) -> str:
        return f"{self.group}/{self.version}" if self.group else self.version


class Manifest(BaseModel, frozen=True):
    target: ResourceTarget
    body: dict[str, Any]
