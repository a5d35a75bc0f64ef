"""Error types raised by the tool layer.

str() of each error is the text fed back to the model as the tool result.
"""

from k_agent.core.errors import KAgentError


class ToolError(KAgentError):
    """Base class for recoverable tool-layer failures."""


class UnknownToolError(ToolError):
    """Raised when no handler is registered under the requested name."""

    def __init__(self, tool_name: str, available: list[str]) -> None:
        self.tool_name = tool_name
        names = ", ".join(sorted(available)) or "none"
        super().__init__(
            f"Failed to invoke tool: unknown tool '{tool_name}'"
            f" (available: {names})"
        )


class InvalidArgumentsError(ToolError):
    """Raised when raw arguments do not match the tool's argument model."""

    def __init__(self, tool_name: str, reason: str) -> None:
        self.tool_name = tool_name
        super().__init__(
            f"Failed to invoke tool '{tool_name}': invalid arguments: {reason}"
        )


class ToolHandlerError(ToolError):
    """Raised when the handler itself fails; wraps the handler's domain error."""

    def __init__(self, tool_name: str, detail: str) -> None:
        self.tool_name = tool_name
        self.detail = detail
        super().__init__(f"Failed to run tool '{tool_name}': {detail}")


class DuplicateToolError(KAgentError):
    """Raised when two tools are registered under the same name."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(
            f"Failed to register tool: name '{tool_name}' is already registered"
        )
