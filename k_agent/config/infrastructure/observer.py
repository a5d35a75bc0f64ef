"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, model: str, max_tool_rounds: int | None) -> None:
        self._log.info(
            "config.loaded", model=model, max_tool_rounds=max_tool_rounds
        )

    def config_temperature_warning(self, temperature: float) -> None:
        self._log.warning(
            "config.temperature_warning",
            temperature=temperature,
            message="Temperature > 0.0 may produce non-deterministic tool calls",
        )
