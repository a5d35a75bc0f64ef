"""Tests for the k-agent CLI entrypoint."""

from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from k_agent.cli.main import app, build_orchestrator
from k_agent.completion.domain.segment import TextSegment
from k_agent.config.domain.completion import CompletionConfig
from k_agent.config.domain.config import AgentConfig
from k_agent.config.domain.orchestrator import OrchestratorConfig
from k_agent.orchestrator.application.orchestrator import Orchestrator
from k_agent.tools.application.dispatcher import ToolDispatcher
from tests.completion.fake_client import FakeCompletionClient
from tests.orchestrator.fake_observer import FakeOrchestratorObserver
from tests.tools.fake_observer import FakeToolObserver

runner = CliRunner()

_CONFIG = "completion:\n  model: gpt-4o\n"


def _write_config(tmp_path: Path) -> Path:
    path = tmp_path / "k-agent.yaml"
    path.write_text(_CONFIG, encoding="utf-8")
    return path


class TestBuildOrchestrator:
    def test_registers_apply_manifest_tool(self) -> None:
        config = AgentConfig(
            completion=CompletionConfig(model="gpt-4o"),
            orchestrator=OrchestratorConfig(max_tool_rounds=4),
        )

        orchestrator = build_orchestrator(config)

        assert isinstance(orchestrator, Orchestrator)
        assert orchestrator._dispatcher.names() == ["apply_manifest"]
        assert orchestrator._max_tool_rounds == 4


class TestRunCommand:
    def test_prints_final_answer(self, tmp_path: Path) -> None:
        orchestrator = Orchestrator(
            completion_client=FakeCompletionClient(responses=[[TextSegment(text="Done.")]]),
            dispatcher=ToolDispatcher(observer=FakeToolObserver()),
            observer=FakeOrchestratorObserver(),
        )

        with patch("k_agent.cli.main.build_orchestrator", return_value=orchestrator):
            result = runner.invoke(
                app,
                ["run", "deploy nginx", "--config", str(_write_config(tmp_path))],
            )

        assert result.exit_code == 0
        assert result.stdout.strip().endswith("Done.")

    def test_missing_config_exits_with_error(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["run", "hi", "--config", str(tmp_path / "absent.yaml")]
        )

        assert result.exit_code == 1

    def test_malformed_config_exits_with_message(self, tmp_path: Path) -> None:
        path = tmp_path / "k-agent.yaml"
        path.write_text("completion:\n  model: [gpt-4o\n", encoding="utf-8")

        result = runner.invoke(app, ["run", "hi", "--config", str(path)])

        assert result.exit_code == 1
        assert "invalid YAML" in result.output
        assert isinstance(result.exception, SystemExit)

    def test_invalid_log_format_exits(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["run", "hi", "--config", str(_write_config(tmp_path)), "--log-format", "xml"],
        )

        assert result.exit_code == 1
