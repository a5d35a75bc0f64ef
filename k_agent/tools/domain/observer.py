"""ToolObserver port — domain events emitted while dispatching tool calls."""

from typing import Protocol


class ToolObserver(Protocol):
    def tool_invocation_started(self, tool_name: str) -> None: ...

    def tool_invocation_completed(self, tool_name: str, duration_ms: int) -> None: ...

    def tool_invocation_failed(self, tool_name: str, reason: str) -> None: ...
