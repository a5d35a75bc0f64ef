"""ToolDispatcher — routes a named tool call to its registered handler."""

import json
import time
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ValidationError

from k_agent.tools.domain.definition import ToolDefinition
from k_agent.tools.domain.observer import ToolObserver
from k_agent.tools.domain.tool import Tool
from k_agent.tools.infrastructure.errors import (
    DuplicateToolError,
    InvalidArgumentsError,
    ToolHandlerError,
    UnknownToolError,
)


class ToolDispatcher:
    """Name-keyed registry of tools, built once at startup.

    invoke() validates raw arguments against the tool's args_model, runs the
    handler exactly once, and returns its output as text. Every failure is
    raised as a ToolError so the caller decides what to do with it.
    """

    def __init__(self, observer: ToolObserver, tools: Iterable[Tool] = ()) -> None:
        self._observer = observer
        self._tools: dict[str, Tool] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: Tool) -> None:
        """Register a tool under its name.

        Raises:
            DuplicateToolError: if a tool with the same name is already registered.
        """
        if tool.name in self._tools:
            raise DuplicateToolError(tool_name=tool.name)
        self._tools[tool.name] = tool

    def names(self) -> list[str]:
        return list(self._tools)

    def definitions(self) -> list[ToolDefinition]:
        """Return the tool catalog in registration order."""
        return [tool.definition() for tool in self._tools.values()]

    async def invoke(self, name: str, raw_arguments: Mapping[str, object] | str) -> str:
        """Invoke the tool registered under name and return its output as text.

        raw_arguments may be a mapping or its JSON-encoded string form.

        Raises:
            UnknownToolError: if no tool is registered under name.
            InvalidArgumentsError: if the arguments do not fit the tool's args_model.
            ToolHandlerError: if the handler raises.
        """
        tool = self._tools.get(name)
        if tool is None:
            error = UnknownToolError(tool_name=name, available=self.names())
            self._observer.tool_invocation_failed(tool_name=name, reason=str(error))
            raise error

        try:
            args = _parse_arguments(tool=tool, raw_arguments=raw_arguments)
        except InvalidArgumentsError as exc:
            self._observer.tool_invocation_failed(tool_name=name, reason=str(exc))
            raise

        self._observer.tool_invocation_started(tool_name=name)
        start = time.monotonic()
        try:
            output = await tool.call(args)
        except Exception as exc:
            detail = str(exc) or type(exc).__name__
            self._observer.tool_invocation_failed(tool_name=name, reason=detail)
            raise ToolHandlerError(tool_name=name, detail=detail) from exc

        duration_ms = int((time.monotonic() - start) * 1000)
        self._observer.tool_invocation_completed(tool_name=name, duration_ms=duration_ms)
        return _to_text(output)


def _parse_arguments(tool: Tool, raw_arguments: Mapping[str, object] | str) -> BaseModel:
    if isinstance(raw_arguments, str):
        try:
            decoded = json.loads(raw_arguments) if raw_arguments.strip() else {}
        except json.JSONDecodeError as exc:
            raise InvalidArgumentsError(
                tool_name=tool.name, reason=f"arguments are not valid JSON: {exc}"
            ) from exc
    else:
        decoded = dict(raw_arguments)

    if not isinstance(decoded, dict):
        raise InvalidArgumentsError(
            tool_name=tool.name,
            reason=f"expected a JSON object, got {type(decoded).__name__}",
        )

    try:
        return tool.args_model.model_validate(decoded)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        )
        raise InvalidArgumentsError(tool_name=tool.name, reason=details) from exc


def _to_text(output: object) -> str:
    """Serialize a handler's result to plain text."""
    if isinstance(output, str):
        return output
    if isinstance(output, BaseModel):
        return output.model_dump_json()
    if isinstance(output, (Mapping, list, tuple)):
        return json.dumps(output, default=str)
    return str(output)
