"""CompletionObserver port — domain events emitted around completion requests."""

from typing import Protocol


class CompletionObserver(Protocol):
    def completion_requested(self, model: str, history_len: int) -> None: ...

    def completion_completed(
        self, model: str, duration_ms: int, num_segments: int
    ) -> None: ...

    def completion_failed(self, model: str, reason: str) -> None: ...
