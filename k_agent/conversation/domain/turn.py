"""Turn domain value objects — one entry each in a conversation's history."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class UserText(BaseModel, frozen=True):
    """Plain text sent by the user."""

    kind: Literal["user_text"] = "user_text"
    text: str


class UserToolResult(BaseModel, frozen=True):
    """Tool output fed back to the model, correlated by call_id."""

    kind: Literal["user_tool_result"] = "user_tool_result"
    call_id: str
    content: str


class AssistantText(BaseModel, frozen=True):
    """Free text produced by the model."""

    kind: Literal["assistant_text"] = "assistant_text"
    text: str


class AssistantToolCall(BaseModel, frozen=True):
    """A tool invocation requested by the model."""

    kind: Literal["assistant_tool_call"] = "assistant_tool_call"
    call_id: str
    tool_name: str
    arguments: dict[str, object]


# Discriminated on kind so serialized transcripts validate back to the right variant.
Turn = Annotated[
    UserText | UserToolResult | AssistantText | AssistantToolCall,
    Field(discriminator="kind"),
]
