"""Base exception class for all k-agent-specific errors."""


class KAgentError(Exception):
    """Base class for all k-agent errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
