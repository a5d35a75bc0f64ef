"""CLI entrypoint for k-agent — typer app with a `run` command."""

import asyncio
from pathlib import Path

import structlog
import typer

from k_agent.completion.infrastructure.litellm import LiteLLMCompletionClient
from k_agent.completion.infrastructure.observer import StructlogCompletionObserver
from k_agent.config.domain.config import AgentConfig
from k_agent.config.infrastructure.observer import StructlogConfigObserver
from k_agent.config.infrastructure.yaml_loader import YamlConfigLoader
from k_agent.core.errors import KAgentError
from k_agent.execution.application.bridge import IsolatedExecutionBridge
from k_agent.kube.application.apply_tool import ApplyManifestTool
from k_agent.kube.infrastructure.client import KubernetesResourceCreator
from k_agent.orchestrator.application.orchestrator import Orchestrator
from k_agent.orchestrator.infrastructure.observer import StructlogOrchestratorObserver
from k_agent.tools.application.dispatcher import ToolDispatcher
from k_agent.tools.infrastructure.observer import StructlogToolObserver

app = typer.Typer(add_completion=False)


@app.callback()
def main() -> None:
    """k-agent: a tool-calling agent that applies Kubernetes manifests."""


def _configure_structlog(log_format: str, verbose: bool) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        # 10 = DEBUG, 20 = INFO
        wrapper_class=structlog.make_filtering_bound_logger(10 if verbose else 20),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def build_orchestrator(config: AgentConfig) -> Orchestrator:
    """Wire the production collaborators for one agent configuration."""
    bridge = IsolatedExecutionBridge(timeout_seconds=config.bridge.timeout_seconds)
    dispatcher = ToolDispatcher(
        observer=StructlogToolObserver(),
        tools=[
            ApplyManifestTool(
                creator=KubernetesResourceCreator(context=config.kube.context),
                bridge=bridge,
                default_namespace=config.kube.default_namespace,
            )
        ],
    )
    completion_client = LiteLLMCompletionClient(
        config=config.completion,
        tools=dispatcher.definitions(),
        observer=StructlogCompletionObserver(),
    )
    return Orchestrator(
        completion_client=completion_client,
        dispatcher=dispatcher,
        observer=StructlogOrchestratorObserver(),
        max_tool_rounds=config.orchestrator.max_tool_rounds,
    )


@app.command()
def run(
    prompt: str = typer.Argument(..., help="Instruction for the agent."),
    config_path: Path = typer.Option(
        Path("k-agent.yaml"), "--config", "-c", help="Path to the YAML config file."
    ),
    log_format: str = typer.Option(
        "console", "--log-format", help="Log output format: console or json."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Emit debug events."),
) -> None:
    """Run the agent on PROMPT and print its final answer."""
    _configure_structlog(log_format=log_format, verbose=verbose)

    try:
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(config_path)
        orchestrator = build_orchestrator(config)
        answer = asyncio.run(orchestrator.run(prompt))
    except KAgentError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(answer.text)


if __name__ == "__main__":
    app()
