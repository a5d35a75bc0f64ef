"""YAML manifest parser — resolves a ResourceTarget from apiVersion, kind and metadata."""

from typing import Any

import yaml

from k_agent.kube.domain.manifest import Manifest, ResourceTarget
from k_agent.kube.infrastructure.errors import ManifestError


def parse_api_version(api_version: str) -> tuple[str, str]:
    """Split an apiVersion into (group, version); the core group is ""."""
    group, sep, version = api_version.partition("/")
    if not sep:
        return "", api_version
    return group, version


def parse_manifest(text: str, default_namespace: str) -> Manifest:
    """Parse a single YAML manifest and resolve its target resource.

    metadata.namespace falls back to default_namespace when absent.

    Raises:
        ManifestError: if the text is not a YAML mapping or lacks apiVersion/kind.
    """
    try:
        body: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestError(reason=f"invalid YAML: {exc}") from exc

    if not isinstance(body, dict):
        raise ManifestError(reason="document is not a mapping")

    api_version = body.get("apiVersion")
    if not isinstance(api_version, str) or not api_version:
        raise ManifestError(reason="apiVersion is missing")

    kind = body.get("kind")
    if not isinstance(kind, str) or not kind:
        raise ManifestError(reason="kind is missing")

    metadata = body.get("metadata") or {}
    if not isinstance(metadata, dict):
        raise ManifestError(reason="metadata is not a mapping")

    group, version = parse_api_version(api_version)
    if not version:
        raise ManifestError(reason=f"apiVersion '{api_version}' has no version")

    return Manifest(
        target=ResourceTarget(
            group=group,
            version=version,
            kind=kind,
            namespace=metadata.get("namespace") or default_namespace,
            name=metadata.get("name"),
        ),
        body=body,
    )
