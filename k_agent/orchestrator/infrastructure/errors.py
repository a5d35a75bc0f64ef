"""Error types raised by the orchestrator."""

from k_agent.core.errors import KAgentError


class MaxToolRoundsExceededError(KAgentError):
    """Raised when the model keeps requesting tools past the configured cap."""

    def __init__(self, max_tool_rounds: int) -> None:
        self.max_tool_rounds = max_tool_rounds
        super().__init__(
            f"Failed to reach a final answer: model requested more than"
            f" {max_tool_rounds} tool call rounds"
        )
