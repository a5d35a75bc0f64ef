"""CompletionClient Protocol — structural interface for completion-model backends."""

from collections.abc import Sequence
from typing import Protocol

from k_agent.completion.domain.segment import ResponseSegment
from k_agent.conversation.domain.turn import Turn


class CompletionClient(Protocol):
    """Returns the ordered segments of one model response.

    An empty list is a valid response. Implementations raise CompletionError
    on transport failures or responses they cannot interpret.
    """

    async def complete(
        self, prompt: Turn, history: Sequence[Turn]
    ) -> list[ResponseSegment]: ...
