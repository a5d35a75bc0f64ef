"""ResourceCreator Protocol — structural interface for cluster create requests."""

from typing import Any, Protocol

from k_agent.kube.domain.manifest import ResourceTarget


class ResourceCreator(Protocol):
    """Creates one resource in the cluster.

    Called from inside the isolated worker's event loop; implementations own
    any clients they open and close them before returning.
    """

    async def create(self, target: ResourceTarget, body: dict[str, Any]) -> None: ...
