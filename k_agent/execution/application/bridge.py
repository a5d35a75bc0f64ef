"""IsolatedExecutionBridge — runs an async operation on a dedicated worker thread.

Used by tool handlers that must perform blocking external I/O from inside an
event loop that cannot be re-entered. Each call spawns a fresh worker with its
own event loop; the single outcome comes back through a one-shot queue.
"""

import asyncio
import queue
import threading
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from k_agent.execution.infrastructure.errors import BridgeError


@dataclass(frozen=True)
class _Outcome[T]:
    value: T | None = None
    error: BaseException | None = None


class IsolatedExecutionBridge:
    """Single-use-per-call bridge to an isolated worker thread.

    run_isolated() blocks the calling thread until the worker delivers its
    outcome. If the worker exits without delivering, or does not finish within
    timeout_seconds, BridgeError is raised instead of hanging.
    """

    def __init__(self, timeout_seconds: float | None = None) -> None:
        self._timeout_seconds = timeout_seconds

    def run_isolated[T](self, operation: Callable[[], Awaitable[T]]) -> T:
        """Run operation() to completion on a new worker and return its result.

        An exception raised by the operation is re-raised here unchanged.

        Raises:
            BridgeError: if the worker delivers no outcome or times out.
        """
        channel: queue.Queue[_Outcome[T]] = queue.Queue(maxsize=1)
        worker = threading.Thread(
            target=_work,
            args=(operation, channel),
            name="k-agent-isolated-worker",
            daemon=True,
        )
        worker.start()
        worker.join(timeout=self._timeout_seconds)

        if worker.is_alive():
            raise BridgeError(
                reason=f"worker did not finish within {self._timeout_seconds}s",
                retriable=True,
            )

        try:
            outcome = channel.get_nowait()
        except queue.Empty:
            raise BridgeError(
                reason="worker exited without delivering an outcome"
            ) from None

        if outcome.error is not None:
            raise outcome.error
        return outcome.value  # type: ignore[return-value]

    async def run_isolated_async[T](self, operation: Callable[[], Awaitable[T]]) -> T:
        """Await run_isolated() from a coroutine without stalling its event loop."""
        return await asyncio.to_thread(self.run_isolated, operation)


def _work[T](
    operation: Callable[[], Awaitable[T]], channel: "queue.Queue[_Outcome[T]]"
) -> None:
    # asyncio.run gives the worker its own loop and closes it before the handoff.
    try:
        value = asyncio.run(_drive(operation))
    except Exception as exc:
        channel.put_nowait(_Outcome(error=exc))
        return
    channel.put_nowait(_Outcome(value=value))


async def _drive[T](operation: Callable[[], Awaitable[T]]) -> T:
    return await operation()
