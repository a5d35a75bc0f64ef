"""Error types raised by completion infrastructure."""

from k_agent.core.errors import KAgentError


class CompletionError(KAgentError):
    """Raised when the completion model cannot be reached or its response cannot be read."""

    def __init__(self, reason: str, retriable: bool = False) -> None:
        super().__init__(f"Failed to complete prompt: {reason}", retriable=retriable)
