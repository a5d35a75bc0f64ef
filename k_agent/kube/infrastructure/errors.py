"""Error types raised while applying manifests to a cluster."""

from k_agent.core.errors import KAgentError


class ManifestError(KAgentError):
    """Raised when a manifest cannot be parsed or lacks its resource identity."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to read manifest: {reason}")


class ApplyError(KAgentError):
    """Raised when the cluster rejects or cannot receive a create request."""

    def __init__(self, reason: str, retriable: bool = False) -> None:
        super().__init__(f"Failed to apply manifest: {reason}", retriable=retriable)
