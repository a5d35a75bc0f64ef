"""Orchestrator — drives the multi-turn tool-calling loop to a final answer."""

from k_agent.completion.domain.client import CompletionClient
from k_agent.completion.domain.segment import (
    ResponseSegment,
    TextSegment,
    ToolCallSegment,
)
from k_agent.conversation.domain.history import ConversationHistory
from k_agent.conversation.domain.turn import (
    AssistantText,
    AssistantToolCall,
    Turn,
    UserText,
    UserToolResult,
)
from k_agent.core.errors import KAgentError
from k_agent.orchestrator.domain.answer import NO_ACTION_TEXT, FinalAnswer
from k_agent.orchestrator.domain.observer import OrchestratorObserver
from k_agent.orchestrator.infrastructure.errors import MaxToolRoundsExceededError
from k_agent.tools.application.dispatcher import ToolDispatcher
from k_agent.tools.infrastructure.errors import ToolError


class Orchestrator:
    """Runs "ask model, act on its tool call, feed the result back" until it answers.

    Each run() owns a fresh ConversationHistory. Turns are strictly sequential:
    only the first tool call of a response is executed, and its result becomes
    the prompt of the next completion request. A response with no tool call
    ends the run with its last text; an empty response ends it with the
    no-action sentinel.

    Tool failures are fed back to the model as the tool result text. Completion
    failures abort the run.
    """

    def __init__(
        self,
        completion_client: CompletionClient,
        dispatcher: ToolDispatcher,
        observer: OrchestratorObserver,
        max_tool_rounds: int | None = None,
    ) -> None:
        self._completion_client = completion_client
        self._dispatcher = dispatcher
        self._observer = observer
        self._max_tool_rounds = max_tool_rounds

    async def run(self, initial_prompt: Turn | str) -> FinalAnswer:
        """Drive the conversation from initial_prompt to a final answer.

        Raises:
            CompletionError: if the completion client fails; never retried here.
            MaxToolRoundsExceededError: if max_tool_rounds is set and exceeded.
        """
        current: Turn = (
            UserText(text=initial_prompt)
            if isinstance(initial_prompt, str)
            else initial_prompt
        )
        history = ConversationHistory()
        tool_rounds = 0

        self._observer.run_started(prompt_kind=current.kind)
        try:
            while True:
                self._observer.completion_requested(
                    round_idx=tool_rounds, history_len=len(history)
                )
                segments = await self._completion_client.complete(
                    prompt=current, history=history.snapshot()
                )

                if not segments:
                    # Recorded so a pending tool call still ends with its result.
                    history.append(current)
                    return self._finish(
                        history=history,
                        text=NO_ACTION_TEXT,
                        tool_rounds=tool_rounds,
                        no_action=True,
                    )

                next_prompt, answer = await self._process_response(
                    segments=segments,
                    current=current,
                    history=history,
                    tool_rounds=tool_rounds,
                )
                if next_prompt is None:
                    assert answer is not None  # a non-empty, tool-free response has text
                    return self._finish(
                        history=history,
                        text=answer,
                        tool_rounds=tool_rounds,
                        no_action=False,
                    )

                current = next_prompt
                tool_rounds += 1
        except KAgentError as exc:
            self._observer.run_failed(reason=str(exc))
            raise

    async def _process_response(
        self,
        segments: list[ResponseSegment],
        current: Turn,
        history: ConversationHistory,
        tool_rounds: int,
    ) -> tuple[UserToolResult | None, str | None]:
        """Scan segments in order and return (next prompt, candidate answer).

        The prompt is appended to history once, before the first segment it
        produced. The first tool call is executed and ends the scan; any text
        seen before it is discarded as non-final.
        """
        history.append(current)
        candidate: str | None = None

        for idx, segment in enumerate(segments):
            if isinstance(segment, TextSegment):
                history.append(AssistantText(text=segment.text))
                candidate = segment.text
                continue

            assert isinstance(segment, ToolCallSegment)
            if (
                self._max_tool_rounds is not None
                and tool_rounds >= self._max_tool_rounds
            ):
                raise MaxToolRoundsExceededError(max_tool_rounds=self._max_tool_rounds)

            request = segment.request
            history.append(
                AssistantToolCall(
                    call_id=request.call_id,
                    tool_name=request.tool_name,
                    arguments=request.arguments,
                )
            )
            content, is_error = await self._invoke(
                tool_name=request.tool_name, arguments=request.arguments
            )
            self._observer.tool_call_resolved(
                call_id=request.call_id, tool_name=request.tool_name, is_error=is_error
            )

            ignored = [
                s.request.call_id
                for s in segments[idx + 1 :]
                if isinstance(s, ToolCallSegment)
            ]
            if ignored:
                self._observer.tool_calls_ignored(round_idx=tool_rounds, call_ids=ignored)

            return UserToolResult(call_id=request.call_id, content=content), None

        return None, candidate

    async def _invoke(
        self, tool_name: str, arguments: dict[str, object]
    ) -> tuple[str, bool]:
        """Invoke a tool and return (result text, is_error)."""
        try:
            return await self._dispatcher.invoke(tool_name, arguments), False
        except ToolError as exc:
            return str(exc), True

    def _finish(
        self,
        history: ConversationHistory,
        text: str,
        tool_rounds: int,
        no_action: bool,
    ) -> FinalAnswer:
        self._observer.run_completed(tool_rounds=tool_rounds, no_action=no_action)
        return FinalAnswer(
            text=text,
            no_action=no_action,
            tool_rounds=tool_rounds,
            turns=list(history.snapshot()),
        )
