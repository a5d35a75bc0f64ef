"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, model: str, max_tool_rounds: int | None) -> None: ...

    def config_temperature_warning(self, temperature: float) -> None: ...
