"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from k_agent.config.domain.config import AgentConfig
from k_agent.config.domain.observer import ConfigObserver
from k_agent.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from k_agent.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns an AgentConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> AgentConfig:
        """Load, interpolate, validate, and return an AgentConfig.

        Raises:
            ConfigLoadError: if the file does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the file is not valid YAML, is not a mapping, or
                violates the schema.
        """
        raw = _parse_yaml(path=path)
        missing = collect_missing_vars(raw)
        if missing:
            raise MissingEnvVarsError(missing)
        cfg = _build_config(resolved=interpolate(raw))
        if cfg.completion.temperature > 0.0:
            self._observer.config_temperature_warning(cfg.completion.temperature)
        self._observer.config_loaded(
            model=cfg.completion.model,
            max_tool_rounds=cfg.orchestrator.max_tool_rounds,
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    if not path.is_file():
        raise ConfigLoadError(path=path)
    with path.open("r", encoding="utf-8") as fh:
        try:
            return yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"invalid YAML: {exc}") from exc


def _build_config(resolved: Any) -> AgentConfig:
    if not isinstance(resolved, dict):
        raise ConfigValidationError("config document must be a mapping")
    try:
        return AgentConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
