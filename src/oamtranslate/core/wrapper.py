"""Wrapper Builder: package every child into one KubernetesApplication."""

from collections.abc import Mapping

from oamtranslate.core.payload import serialize_child
from oamtranslate.pacts.types import (
    ResourceTemplate, TranslateContext, WorkloadIdentity, WrappedApplication,
)


def _child_kind(child) -> str:
    """Return the child's kind, as it appears in the serialized payload."""
    if hasattr(child, "to_manifest"):
        child = child.to_manifest()
    if isinstance(child, Mapping):
        return str(child.get("kind") or "")
    return ""


def build_wrapped_application(workload: WorkloadIdentity, children: list | None,
                              ctx: TranslateContext) -> WrappedApplication | None:
    """Wrap children in a KubernetesApplication. Returns None for no children.

    Each child becomes a resource template named '<workload>-<kind>' carrying
    only the correlation label and the child's frozen JSON payload. A child
    that cannot be serialized fails the whole call.
    """
    if not children:
        return None

    templates = []
    for i, child in enumerate(children):
        payload = serialize_child(child, workload=workload.name, index=i)
        templates.append(ResourceTemplate(
            name=f"{workload.name}-{_child_kind(child).lower()}",
            labels=ctx.correlation_labels(workload),
            payload=payload,
        ))

    return WrappedApplication(
        name=workload.name,
        selector=ctx.correlation_labels(workload),
        templates=tuple(templates),
    )


class KubeAppWrapper:
    """Translator: replace the children with a single KubernetesApplication."""
    name = "kube-app-wrapper"

    def translate(self, workload: WorkloadIdentity, children: list | None,
                  ctx: TranslateContext) -> list | None:
        app = build_wrapped_application(workload, children, ctx)
        if app is None:
            return None
        return [app]
