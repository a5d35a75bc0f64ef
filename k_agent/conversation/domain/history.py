"""ConversationHistory — the ordered, append-only log threaded into every completion."""

from collections.abc import Iterator

from k_agent.conversation.domain.errors import HistoryInvariantError
from k_agent.conversation.domain.turn import AssistantToolCall, Turn, UserToolResult


class ConversationHistory:
    """Append-only sequence of turns owned by a single orchestrator run.

    Tool calls are tracked by call_id until their result is appended, so a
    result can never arrive for an unknown call or be recorded twice. Once a
    call is resolved its id may be used again by a later call.
    """

    def __init__(self) -> None:
        self._turns: list[Turn] = []
        self._pending: dict[str, AssistantToolCall] = {}
        self._resolved: set[str] = set()

    def append(self, turn: Turn) -> None:
        """Append a turn to the end of the history.

        Raises:
            HistoryInvariantError: if a tool call reuses the id of a call still
                awaiting its result, or a tool result does not answer exactly one
                pending tool call.
        """
        if isinstance(turn, AssistantToolCall):
            if turn.call_id in self._pending:
                raise HistoryInvariantError(
                    f"tool call id '{turn.call_id}' is still awaiting a result"
                )
            self._resolved.discard(turn.call_id)
            self._pending[turn.call_id] = turn
        elif isinstance(turn, UserToolResult):
            if turn.call_id in self._resolved:
                raise HistoryInvariantError(
                    f"tool call '{turn.call_id}' already has a result"
                )
            if self._pending.pop(turn.call_id, None) is None:
                raise HistoryInvariantError(
                    f"tool result '{turn.call_id}' does not match any pending tool call"
                )
            self._resolved.add(turn.call_id)

        self._turns.append(turn)

    def snapshot(self) -> tuple[Turn, ...]:
        """Return an immutable view of the turns appended so far."""
        return tuple(self._turns)

    def pending_call_ids(self) -> list[str]:
        """Return call ids of tool calls still awaiting a result, in call order."""
        return list(self._pending)

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(tuple(self._turns))
