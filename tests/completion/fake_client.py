"""FakeCompletionClient — scripted CompletionClient for use in tests."""

from collections.abc import Sequence
from dataclasses import dataclass

from k_agent.completion.domain.segment import ResponseSegment
from k_agent.conversation.domain.turn import Turn


@dataclass(frozen=True)
class CompletionCall:
    prompt: Turn
    history: tuple[Turn, ...]


class FakeCompletionClient:
    """Satisfies the CompletionClient protocol. Replays scripted responses in order.

    Each item in responses is either a list of segments to return or an
    Exception to raise. Every call is recorded with a copy of its history.
    Running past the end of the script fails the test loudly.
    """

    def __init__(self, responses: list[list[ResponseSegment] | Exception]) -> None:
        self._responses = list(responses)
        self.calls: list[CompletionCall] = []

    async def complete(
        self, prompt: Turn, history: Sequence[Turn]
    ) -> list[ResponseSegment]:
        self.calls.append(CompletionCall(prompt=prompt, history=tuple(history)))
        if not self._responses:
            raise AssertionError("FakeCompletionClient script exhausted")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response
