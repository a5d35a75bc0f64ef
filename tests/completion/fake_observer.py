"""FakeCompletionObserver — records completion domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestedEvent:
    model: str
    history_len: int


@dataclass(frozen=True)
class CompletedEvent:
    model: str
    duration_ms: int
    num_segments: int


@dataclass(frozen=True)
class FailedEvent:
    model: str
    reason: str


class FakeCompletionObserver:
    def __init__(self) -> None:
        self.requested: list[RequestedEvent] = []
        self.completed: list[CompletedEvent] = []
        self.failed: list[FailedEvent] = []

    def completion_requested(self, model: str, history_len: int) -> None:
        self.requested.append(RequestedEvent(model=model, history_len=history_len))

    def completion_completed(
        self, model: str, duration_ms: int, num_segments: int
    ) -> None:
        self.completed.append(
            CompletedEvent(
                model=model, duration_ms=duration_ms, num_segments=num_segments
            )
        )

    def completion_failed(self, model: str, reason: str) -> None:
        self.failed.append(FailedEvent(model=model, reason=reason))
