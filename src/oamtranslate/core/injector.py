"""Service Injector: expose the first declared container port as a LoadBalancer Service."""

from collections.abc import Mapping

from oamtranslate.core.constants import (
    MAX_PORT, MIN_PORT, SERVICE_API_VERSION, SERVICE_KIND, SERVICE_TYPE_LOAD_BALANCER,
)
from oamtranslate.core.errors import StructuralViolationError
from oamtranslate.pacts.helpers import classify_child, full_name
from oamtranslate.pacts.types import (
    DeploymentChild, OpaqueChild, TranslateContext, WorkloadIdentity,
)


def _find_exposed_port(workload: WorkloadIdentity, children: list,
                       ctx: TranslateContext) -> int | None:
    """Return the first declared port of the first container of the first
    Deployment that declares any port, in input order.
    """
    for i, child in enumerate(children):
        variant = classify_child(child)
        if isinstance(variant, OpaqueChild) and variant.reason and isinstance(child, Mapping):
            ctx.warnings.append(f"{full_name(child)} skipped for service injection: {variant.reason}")
            continue
        if not isinstance(variant, DeploymentChild) or not variant.exposes_ports():
            continue
        container = next(c for c in variant.containers if c.get("ports"))
        return _container_port(container["ports"][0], child, workload, i)
    return None


def _container_port(port, deployment: Mapping, workload: WorkloadIdentity, index: int) -> int:
    """Validate the selected port declaration and return its number."""
    value = port.get("containerPort") if isinstance(port, Mapping) else None
    if isinstance(value, bool) or not isinstance(value, int) or not MIN_PORT <= value <= MAX_PORT:
        raise StructuralViolationError(
            f"{full_name(deployment)}: first declared port {port!r} "
            f"has no valid containerPort",
            workload=workload.name, index=index,
        )
    return value


def build_service(workload: WorkloadIdentity, port: int, ctx: TranslateContext) -> dict:
    """Build the LoadBalancer Service exposing port on the workload's pods."""
    return {
        "apiVersion": SERVICE_API_VERSION,
        "kind": SERVICE_KIND,
        "metadata": {
            "name": workload.name,
            "labels": ctx.correlation_labels(workload),
        },
        "spec": {
            "selector": ctx.correlation_labels(workload),
            "type": SERVICE_TYPE_LOAD_BALANCER,
            "ports": [{"name": workload.name, "port": port, "targetPort": port}],
        },
    }


def inject_service(workload: WorkloadIdentity, children: list | None,
                   ctx: TranslateContext) -> list | None:
    """Append a Service for the first exposed port; children are left untouched.

    Returns None for no children and the original sequence when nothing
    exposes a port.
    """
    if not children:
        return None
    port = _find_exposed_port(workload, children, ctx)
    if port is None:
        return children
    return [*children, build_service(workload, port, ctx)]


class ServiceInjector:
    """Translator: append a Service derived from container port declarations."""
    name = "service-injector"

    def translate(self, workload: WorkloadIdentity, children: list | None,
                  ctx: TranslateContext) -> list | None:
        return inject_service(workload, children, ctx)
