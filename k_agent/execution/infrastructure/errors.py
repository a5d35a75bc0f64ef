"""Error types raised by the isolated execution bridge."""

from k_agent.core.errors import KAgentError


class BridgeError(KAgentError):
    """Raised when the isolated worker fails to deliver an outcome."""

    def __init__(self, reason: str, retriable: bool = False) -> None:
        super().__init__(f"Failed to run isolated operation: {reason}", retriable=retriable)
