"""Structlog implementation of the CompletionObserver port."""

import structlog


class StructlogCompletionObserver:
    """Delegates completion domain events to structlog.

    Satisfies the CompletionObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def completion_requested(self, model: str, history_len: int) -> None:
        self._log.debug(
            "completion.requested", model=model, history_len=history_len
        )

    def completion_completed(
        self, model: str, duration_ms: int, num_segments: int
    ) -> None:
        self._log.info(
            "completion.completed",
            model=model,
            duration_ms=duration_ms,
            num_segments=num_segments,
        )

    def completion_failed(self, model: str, reason: str) -> None:
        self._log.error("completion.failed", model=model, reason=reason)
