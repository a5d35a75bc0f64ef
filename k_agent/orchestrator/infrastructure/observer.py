"""Structlog implementation of the OrchestratorObserver port."""

import structlog


class StructlogOrchestratorObserver:
    """Delegates orchestrator domain events to structlog.

    Satisfies the OrchestratorObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def run_started(self, prompt_kind: str) -> None:
        self._log.info("orchestrator.run_started", prompt_kind=prompt_kind)

    def completion_requested(self, round_idx: int, history_len: int) -> None:
        self._log.debug(
            "orchestrator.completion_requested",
            round_idx=round_idx,
            history_len=history_len,
        )

    def tool_call_resolved(self, call_id: str, tool_name: str, is_error: bool) -> None:
        self._log.info(
            "orchestrator.tool_call_resolved",
            call_id=call_id,
            tool_name=tool_name,
            is_error=is_error,
        )

    def tool_calls_ignored(self, round_idx: int, call_ids: list[str]) -> None:
        self._log.warning(
            "orchestrator.tool_calls_ignored", round_idx=round_idx, call_ids=call_ids
        )

    def run_completed(self, tool_rounds: int, no_action: bool) -> None:
        self._log.info(
            "orchestrator.run_completed", tool_rounds=tool_rounds, no_action=no_action
        )

    def run_failed(self, reason: str) -> None:
        self._log.error("orchestrator.run_failed", reason=reason)
