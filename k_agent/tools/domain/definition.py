"""ToolDefinition value object — the model-facing description of one tool."""

from typing import Any

from pydantic import BaseModel, Field


class ToolDefinition(BaseModel, frozen=True):
    """Static metadata a completion model uses to decide when and how to call a tool."""

    name: str = Field(min_length=1)
    description: str
    parameters: dict[str, Any]

    def to_openai(self) -> dict[str, Any]:
        """Render as an OpenAI-style function tool entry for the tool catalog."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }
