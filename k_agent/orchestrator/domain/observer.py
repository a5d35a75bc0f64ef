"""OrchestratorObserver port — domain events emitted while driving the tool-calling loop."""

from typing import Protocol


class OrchestratorObserver(Protocol):
    """Observer port for orchestrator domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def run_started(self, prompt_kind: str) -> None: ...

    def completion_requested(self, round_idx: int, history_len: int) -> None: ...

    def tool_call_resolved(
        self, call_id: str, tool_name: str, is_error: bool
    ) -> None: ...

    def tool_calls_ignored(self, round_idx: int, call_ids: list[str]) -> None: ...

    def run_completed(self, tool_rounds: int, no_action: bool) -> None: ...

    def run_failed(self, reason: str) -> None: ...
