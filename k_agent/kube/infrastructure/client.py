"""KubernetesResourceCreator — creates resources through the kubernetes_asyncio dynamic client."""

from typing import Any

from kubernetes_asyncio import config
from kubernetes_asyncio.client import ApiClient
from kubernetes_asyncio.client.exceptions import ApiException
from kubernetes_asyncio.config import ConfigException
from kubernetes_asyncio.dynamic import DynamicClient

from k_agent.kube.domain.manifest import ResourceTarget
from k_agent.kube.infrastructure.errors import ApplyError


class KubernetesResourceCreator:
    """Satisfies the ResourceCreator protocol against a live cluster.

    Each create() loads credentials and opens its own ApiClient, so it is safe
    to call from a fresh event loop on every invocation.
    """

    def __init__(self, context: str | None = None) -> None:
        self._context = context

    async def create(self, target: ResourceTarget, body: dict[str, Any]) -> None:
        """Create the resource described by body at target.

        Raises:
            ApplyError: if credentials cannot be loaded or the API rejects the request.
        """
        await self._load_credentials()

        async with ApiClient() as api:
            try:
                client = await DynamicClient(api)
                resource = await client.resources.get(
                    api_version=target.api_version, kind=target.kind
                )
                if resource.namespaced:
                    await resource.create(body=body, namespace=target.namespace)
                else:
                    await resource.create(body=body)
            except ApiException as exc:
                raise ApplyError(
                    reason=f"{exc.status} {exc.reason}: {exc.body}",
                    retriable=exc.status is not None and exc.status >= 500,
                ) from exc
            except Exception as exc:
                raise ApplyError(reason=str(exc) or type(exc).__name__) from exc

    async def _load_credentials(self) -> None:
        """Load kubeconfig, falling back to the in-cluster service account."""
        try:
            await config.load_kube_config(context=self._context)
        except (ConfigException, FileNotFoundError) as kube_exc:
            try:
                config.load_incluster_config()
            except ConfigException as exc:
                raise ApplyError(
                    reason=f"no cluster credentials: {kube_exc}; {exc}"
                ) from exc
