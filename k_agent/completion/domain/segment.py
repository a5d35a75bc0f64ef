"""ResponseSegment value objects — the units of a single completion response."""

from typing import Literal

from pydantic import BaseModel


class ToolCallRequest(BaseModel, frozen=True):
    """A tool invocation requested by the model.

    call_id is an opaque correlation key and must reach the result turn unchanged.
    """

    call_id: str
    tool_name: str
    arguments: dict[str, object]


class TextSegment(BaseModel, frozen=True):
    kind: Literal["text"] = "text"
    text: str


class ToolCallSegment(BaseModel, frozen=True):
    kind: Literal["tool_call"] = "tool_call"
    request: ToolCallRequest


type ResponseSegment = TextSegment | ToolCallSegment
