"""Error types raised by the conversation domain."""

from k_agent.core.errors import KAgentError


class HistoryInvariantError(KAgentError):
    """Raised when an append would break call/result correlation in the history."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to append turn: {reason}")
