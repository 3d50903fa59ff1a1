"""Public data types for translators, the sacred contracts."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from oamtranslate.core.constants import (
    DEFAULT_LABEL_KEY, KUBEAPP_API_VERSION, KUBEAPP_KIND,
)


@dataclass(frozen=True)
class WorkloadIdentity:
    """The logical owner of a set of rendered children."""
    name: str
    namespace: str = ""
    uid: str = ""


@dataclass
class TranslateContext:
    """Shared state passed to all translators during a translation run.

    deadline is carried for callers that enforce timeouts; translators never
    consult it.
    """
    label_key: str = DEFAULT_LABEL_KEY
    warnings: list = field(default_factory=list)
    deadline: float | None = None

    def correlation_labels(self, workload: WorkloadIdentity) -> dict[str, str]:
        """Return a fresh {label_key: uid} mapping for the workload."""
        return {self.label_key: workload.uid}


# ---------------------------------------------------------------------------
# Child variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DeploymentChild:
    """A Deployment manifest whose pod template could be interpreted."""
    manifest: dict = field(hash=False)
    containers: tuple = field(default=(), hash=False)

    def exposes_ports(self) -> bool:
        """True when at least one container declares at least one port."""
        return any(c.get("ports") for c in self.containers)


@dataclass(frozen=True)
class ServiceChild:
    """A Service manifest."""
    manifest: dict = field(hash=False)

    def exposes_ports(self) -> bool:
        return False


@dataclass(frozen=True)
class OpaqueChild:
    """Anything that is not a recognized variant. Never exposes ports."""
    value: object = field(hash=False)
    reason: str = ""

    def exposes_ports(self) -> bool:
        return False


# ---------------------------------------------------------------------------
# Wrapper output
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ResourceTemplate:
    """One wrapped child: derived name, propagated labels, frozen payload."""
    name: str
    labels: Mapping = field(hash=False)
    payload: bytes

    def __post_init__(self):
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    def decode(self) -> dict:
        """Return a fresh manifest parsed from the frozen payload."""
        return json.loads(self.payload)

    def to_manifest(self) -> dict:
        return {
            "metadata": {"name": self.name, "labels": dict(self.labels)},
            "spec": {"template": self.decode()},
        }


@dataclass(frozen=True)
class WrappedApplication:
    """A KubernetesApplication aggregating every child as a resource template."""
    name: str
    selector: Mapping = field(hash=False)
    templates: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "selector", MappingProxyType(dict(self.selector)))
        object.__setattr__(self, "templates", tuple(self.templates))

    def to_manifest(self) -> dict:
        """Render as a KubernetesApplication document."""
        return {
            "apiVersion": KUBEAPP_API_VERSION,
            "kind": KUBEAPP_KIND,
            "metadata": {"name": self.name},
            "spec": {
                "resourceSelector": {"matchLabels": dict(self.selector)},
                "resourceTemplates": [t.to_manifest() for t in self.templates],
            },
        }
