"""Public helper functions available to translators."""

from collections.abc import Mapping

from oamtranslate.core.constants import DEPLOYMENT_KIND, SERVICE_KIND
from oamtranslate.pacts.types import DeploymentChild, OpaqueChild, ServiceChild


def full_name(manifest) -> str:
    """Return 'Kind/name' string for use in warning messages."""
    if not isinstance(manifest, Mapping):
        return f"{type(manifest).__name__}/?"
    meta = manifest.get("metadata") or {}
    name = meta.get("name", "?") if isinstance(meta, Mapping) else "?"
    return f"{manifest.get('kind', '?')}/{name}"


def _pod_containers(manifest: Mapping):
    """Return spec.template.spec.containers, or None if the path is malformed.

    Missing keys along the path mean "no containers"; a present key of the
    wrong type means the manifest cannot be interpreted.
    """
    node = manifest
    for key in ("spec", "template", "spec"):
        node = node.get(key)
        if node is None:
            return []
        if not isinstance(node, Mapping):
            return None
    containers = node.get("containers")
    if containers is None:
        return []
    if not isinstance(containers, list):
        return None
    return containers


def _classify_deployment(manifest: Mapping):
    """Build a DeploymentChild, or an OpaqueChild if the pod template is deformed."""
    containers = _pod_containers(manifest)
    if containers is None:
        return OpaqueChild(manifest, reason="pod template is not a mapping or containers is not a list")
    for c in containers:
        if not isinstance(c, Mapping):
            return OpaqueChild(manifest, reason="container entry is not a mapping")
        if c.get("ports") is not None and not isinstance(c["ports"], list):
            return OpaqueChild(manifest, reason=f"ports of container '{c.get('name', '?')}' is not a list")
    return DeploymentChild(manifest, tuple(containers))


def classify_child(value):
    """Return the variant for a rendered child. Never raises."""
    if not isinstance(value, Mapping):
        return OpaqueChild(value, reason="not a manifest")
    kind = value.get("kind")
    if kind == DEPLOYMENT_KIND:
        return _classify_deployment(value)
    if kind == SERVICE_KIND:
        return ServiceChild(value)
    return OpaqueChild(value)


def to_manifests(objects) -> list[dict]:
    """Expand a translator result into plain manifest dicts."""
    manifests: list[dict] = []
    for obj in objects or []:
        if hasattr(obj, "to_manifest"):
            manifests.append(obj.to_manifest())
        else:
            manifests.append(obj)
    return manifests
