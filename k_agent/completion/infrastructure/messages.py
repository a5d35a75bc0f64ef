"""Maps conversation turns to OpenAI-style chat messages accepted by LiteLLM."""

import json
from collections.abc import Sequence
from typing import Any

from k_agent.conversation.domain.turn import (
    AssistantText,
    AssistantToolCall,
    Turn,
    UserText,
    UserToolResult,
)


def turn_to_message(turn: Turn) -> dict[str, Any]:
    """Render one turn as a chat message dict."""
    if isinstance(turn, UserText):
        return {"role": "user", "content": turn.text}
    if isinstance(turn, UserToolResult):
        return {"role": "tool", "tool_call_id": turn.call_id, "content": turn.content}
    if isinstance(turn, AssistantText):
        return {"role": "assistant", "content": turn.text}
    if isinstance(turn, AssistantToolCall):
        return {
            "role": "assistant",
            "content": None,
            "tool_calls": [
                {
                    "id": turn.call_id,
                    "type": "function",
                    "function": {
                        "name": turn.tool_name,
                        "arguments": json.dumps(turn.arguments),
                    },
                }
            ],
        }
    raise TypeError(f"unsupported turn type: {type(turn).__name__}")


def build_messages(
    preamble: str | None, history: Sequence[Turn], prompt: Turn
) -> list[dict[str, Any]]:
    """Build the full request: optional system preamble, history, then the prompt."""
    messages: list[dict[str, Any]] = []
    if preamble:
        messages.append({"role": "system", "content": preamble})
    messages.extend(turn_to_message(turn) for turn in history)
    messages.append(turn_to_message(prompt))
    return messages
