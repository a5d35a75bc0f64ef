"""Tests for turn-to-chat-message mapping."""

import json

from k_agent.completion.infrastructure.messages import build_messages, turn_to_message
from k_agent.conversation.domain.turn import (
    AssistantText,
    AssistantToolCall,
    UserText,
    UserToolResult,
)


class TestTurnToMessage:
    def test_user_text(self) -> None:
        assert turn_to_message(UserText(text="hi")) == {"role": "user", "content": "hi"}

    def test_assistant_text(self) -> None:
        assert turn_to_message(AssistantText(text="hello")) == {
            "role": "assistant",
            "content": "hello",
        }

    def test_assistant_tool_call(self) -> None:
        message = turn_to_message(
            AssistantToolCall(
                call_id="call-1",
                tool_name="apply_manifest",
                arguments={"manifest": "kind: Pod"},
            )
        )

        assert message["role"] == "assistant"
        assert message["content"] is None
        tool_call = message["tool_calls"][0]
        assert tool_call["id"] == "call-1"
        assert tool_call["function"]["name"] == "apply_manifest"
        assert json.loads(tool_call["function"]["arguments"]) == {"manifest": "kind: Pod"}

    def test_user_tool_result_keeps_call_id(self) -> None:
        assert turn_to_message(UserToolResult(call_id="call-1", content="applied")) == {
            "role": "tool",
            "tool_call_id": "call-1",
            "content": "applied",
        }


class TestBuildMessages:
    def test_without_preamble(self) -> None:
        messages = build_messages(preamble=None, history=[], prompt=UserText(text="hi"))

        assert messages == [{"role": "user", "content": "hi"}]

    def test_prompt_is_last(self) -> None:
        messages = build_messages(
            preamble="system",
            history=[UserText(text="a")],
            prompt=UserToolResult(call_id="c", content="done"),
        )

        assert [m["role"] for m in messages] == ["system", "user", "tool"]
