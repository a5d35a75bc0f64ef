"""LiteLLMCompletionClient — completion client backed by LiteLLM chat completions."""

import json
import time
import uuid
from collections.abc import Sequence
from typing import Any

import litellm

from k_agent.completion.domain.observer import CompletionObserver
from k_agent.completion.domain.segment import (
    ResponseSegment,
    TextSegment,
    ToolCallRequest,
    ToolCallSegment,
)
from k_agent.completion.infrastructure.errors import CompletionError
from k_agent.completion.infrastructure.messages import build_messages
from k_agent.config.domain.completion import CompletionConfig
from k_agent.conversation.domain.turn import Turn
from k_agent.tools.domain.definition import ToolDefinition


class LiteLLMCompletionClient:
    """CompletionClient implementation that delegates to any LiteLLM-supported model.

    The tool catalog is fixed at construction time and sent with every request.
    Text content, when present, becomes the first segment; each tool call in
    the message follows in the order the model produced them.
    """

    def __init__(
        self,
        config: CompletionConfig,
        tools: Sequence[ToolDefinition],
        observer: CompletionObserver,
    ) -> None:
        self._config = config
        self._tools = [tool.to_openai() for tool in tools]
        self._observer = observer

    async def complete(
        self, prompt: Turn, history: Sequence[Turn]
    ) -> list[ResponseSegment]:
        """Send prompt plus history to the model and return the response segments.

        Raises:
            CompletionError: if the LLM call fails or the response cannot be read.
        """
        self._observer.completion_requested(
            model=self._config.model, history_len=len(history)
        )

        kwargs: dict[str, Any] = {
            "model": self._config.model,
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
            "messages": build_messages(
                preamble=self._config.preamble, history=history, prompt=prompt
            ),
        }
        if self._tools:
            kwargs["tools"] = self._tools

        start = time.monotonic()
        try:
            response = await litellm.acompletion(**kwargs)
        except Exception as exc:
            reason = str(exc)
            self._observer.completion_failed(model=self._config.model, reason=reason)
            raise CompletionError(reason=reason, retriable=True) from exc

        duration_ms = int((time.monotonic() - start) * 1000)

        try:
            segments = _parse_response(response)
        except CompletionError as exc:
            self._observer.completion_failed(
                model=self._config.model,
                reason=str(exc).removeprefix("Failed to complete prompt: "),
            )
            raise

        self._observer.completion_completed(
            model=self._config.model,
            duration_ms=duration_ms,
            num_segments=len(segments),
        )
        return segments


def _parse_response(response: Any) -> list[ResponseSegment]:
    choices = getattr(response, "choices", None)
    if not choices:
        raise CompletionError(reason="response has no choices")

    message = choices[0].message
    segments: list[ResponseSegment] = []

    content = getattr(message, "content", None)
    if isinstance(content, str) and content.strip():
        segments.append(TextSegment(text=content))

    for tool_call in getattr(message, "tool_calls", None) or []:
        segments.append(ToolCallSegment(request=_parse_tool_call(tool_call)))

    return segments


def _parse_tool_call(tool_call: Any) -> ToolCallRequest:
    function = tool_call.function
    name = getattr(function, "name", None)
    if not name:
        raise CompletionError(reason="tool call has no function name")

    raw_arguments = getattr(function, "arguments", None) or "{}"
    try:
        arguments = (
            json.loads(raw_arguments)
            if isinstance(raw_arguments, str)
            else dict(raw_arguments)
        )
    except (json.JSONDecodeError, TypeError, ValueError) as exc:
        raise CompletionError(
            reason=f"tool call '{name}' has undecodable arguments: {exc}"
        ) from exc

    if not isinstance(arguments, dict):
        raise CompletionError(
            reason=f"tool call '{name}' arguments are not a JSON object"
        )

    # Some providers omit ids; the result turn still needs a correlation key.
    call_id = getattr(tool_call, "id", None) or f"call_{uuid.uuid4().hex}"
    return ToolCallRequest(call_id=call_id, tool_name=name, arguments=arguments)
