"""Tests for IsolatedExecutionBridge — worker isolation and outcome handoff."""

import asyncio
import threading

import pytest

from k_agent.execution.application.bridge import IsolatedExecutionBridge
from k_agent.execution.infrastructure.errors import BridgeError


class TestRunIsolated:
    def test_returns_operation_result(self) -> None:
        bridge = IsolatedExecutionBridge()

        async def _op() -> str:
            await asyncio.sleep(0)
            return "created"

        assert bridge.run_isolated(_op) == "created"

    def test_runs_on_a_new_thread_with_its_own_loop(self) -> None:
        bridge = IsolatedExecutionBridge()
        seen: dict[str, object] = {}

        async def _op() -> None:
            seen["thread"] = threading.current_thread()
            seen["loop"] = asyncio.get_running_loop()

        bridge.run_isolated(_op)

        assert seen["thread"] is not threading.current_thread()
        assert seen["loop"] is not None

    def test_fresh_worker_per_call(self) -> None:
        bridge = IsolatedExecutionBridge()
        threads: list[threading.Thread] = []

        async def _op() -> None:
            threads.append(threading.current_thread())

        bridge.run_isolated(_op)
        bridge.run_isolated(_op)

        assert threads[0] is not threads[1]

    def test_operation_error_is_reraised_unchanged(self) -> None:
        bridge = IsolatedExecutionBridge()
        error = ValueError("apply failed")

        async def _op() -> None:
            raise error

        with pytest.raises(ValueError) as exc_info:
            bridge.run_isolated(_op)

        assert exc_info.value is error

    def test_worker_exit_without_outcome_raises_bridge_error(self) -> None:
        bridge = IsolatedExecutionBridge()

        async def _op() -> None:
            raise SystemExit(1)

        with pytest.raises(BridgeError) as exc_info:
            bridge.run_isolated(_op)

        assert "without delivering" in str(exc_info.value)

    def test_timeout_raises_retriable_bridge_error(self) -> None:
        bridge = IsolatedExecutionBridge(timeout_seconds=0.05)

        async def _op() -> None:
            await asyncio.sleep(1.0)

        with pytest.raises(BridgeError) as exc_info:
            bridge.run_isolated(_op)

        assert exc_info.value.retriable is True
        assert str(exc_info.value).startswith("Failed to ")

    def test_can_be_called_from_inside_a_running_loop(self) -> None:
        bridge = IsolatedExecutionBridge()

        async def _inner() -> int:
            return 42

        async def _outer() -> int:
            # A nested asyncio.run() here would fail; the bridge must not.
            return bridge.run_isolated(_inner)

        assert asyncio.run(_outer()) == 42


class TestRunIsolatedAsync:
    async def test_awaits_result_without_blocking_caller_loop(self) -> None:
        bridge = IsolatedExecutionBridge()
        ticks: list[int] = []

        async def _op() -> str:
            await asyncio.sleep(0.05)
            return "done"

        async def _ticker() -> None:
            for i in range(3):
                ticks.append(i)
                await asyncio.sleep(0.005)

        result, _ = await asyncio.gather(bridge.run_isolated_async(_op), _ticker())

        assert result == "done"
        assert ticks == [0, 1, 2]

    async def test_propagates_bridge_error(self) -> None:
        bridge = IsolatedExecutionBridge()

        async def _op() -> None:
            raise SystemExit(1)

        with pytest.raises(BridgeError):
            await bridge.run_isolated_async(_op)
