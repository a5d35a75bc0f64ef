"""ApplyManifestTool — the apply_manifest tool: creates a cluster resource from YAML."""

from pydantic import BaseModel, Field

from k_agent.execution.application.bridge import IsolatedExecutionBridge
from k_agent.kube.domain.creator import ResourceCreator
from k_agent.kube.infrastructure.yaml_manifest import parse_manifest
from k_agent.tools.domain.definition import ToolDefinition

_DESCRIPTION = (
    "Create a Kubernetes resource from a single YAML manifest. "
    "The namespace defaults to the configured namespace when the manifest omits it."
)


class ApplyManifestArgs(BaseModel, frozen=True):
    manifest: str = Field(
        min_length=1, description="Full YAML content of one Kubernetes manifest."
    )


class ApplyManifestTool:
    """Satisfies the Tool protocol.

    The create request runs on the isolated execution bridge so the cluster
    client gets its own event loop, separate from the orchestrator's.
    """

    name = "apply_manifest"
    description = _DESCRIPTION
    args_model = ApplyManifestArgs

    def __init__(
        self,
        creator: ResourceCreator,
        bridge: IsolatedExecutionBridge,
        default_namespace: str = "default",
    ) -> None:
        self._creator = creator
        self._bridge = bridge
        self._default_namespace = default_namespace

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            parameters=ApplyManifestArgs.model_json_schema(),
        )

    async def call(self, args: BaseModel) -> str:
        """Parse the manifest and create it in the cluster.

        Raises:
            ManifestError: if the manifest cannot be parsed or lacks apiVersion/kind.
            ApplyError: if the create request fails.
            BridgeError: if the isolated worker delivers no outcome.
        """
        assert isinstance(args, ApplyManifestArgs)
        manifest = parse_manifest(
            text=args.manifest, default_namespace=self._default_namespace
        )
        target = manifest.target

        async def _create() -> None:
            await self._creator.create(target=target, body=manifest.body)

        await self._bridge.run_isolated_async(_create)

        subject = f"{target.kind} '{target.name}'" if target.name else target.kind
        return f"{subject} applied in namespace '{target.namespace}'"
