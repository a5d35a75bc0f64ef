"""Top-level AgentConfig aggregate — the root configuration object."""

from pydantic import BaseModel

from k_agent.config.domain.bridge import BridgeConfig
from k_agent.config.domain.completion import CompletionConfig
from k_agent.config.domain.kube import KubeConfig
from k_agent.config.domain.orchestrator import OrchestratorConfig


class AgentConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a k-agent run."""

    completion: CompletionConfig
    orchestrator: OrchestratorConfig = OrchestratorConfig()
    kube: KubeConfig = KubeConfig()
    bridge: BridgeConfig = BridgeConfig()
