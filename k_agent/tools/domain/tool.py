"""Tool Protocol — structural interface for all tool handlers."""

from typing import Protocol

from pydantic import BaseModel

from k_agent.tools.domain.definition import ToolDefinition


class Tool(Protocol):
    """A named handler the model can invoke.

    description is the text shown to the model in the catalog entry returned
    by definition(). args_model is the pydantic model raw arguments are validated into before
    call() runs. call() may return any value; the dispatcher serializes it.
    """

    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def args_model(self) -> type[BaseModel]: ...

    def definition(self) -> ToolDefinition: ...

    async def call(self, args: BaseModel) -> object: ...
