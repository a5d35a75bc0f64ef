"""Structlog implementation of the ToolObserver port."""

import structlog


class StructlogToolObserver:
    """Delegates tool domain events to structlog.

    Satisfies the ToolObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def tool_invocation_started(self, tool_name: str) -> None:
        self._log.info("tool.invocation_started", tool_name=tool_name)

    def tool_invocation_completed(self, tool_name: str, duration_ms: int) -> None:
        self._log.info(
            "tool.invocation_completed", tool_name=tool_name, duration_ms=duration_ms
        )

    def tool_invocation_failed(self, tool_name: str, reason: str) -> None:
        self._log.warning("tool.invocation_failed", tool_name=tool_name, reason=reason)
