import copy

import pytest

from conftest import deployment, service
from oamtranslate import (
    ServiceInjector, StructuralViolationError, TranslateContext, inject_service,
)


@pytest.mark.parametrize("children", [None, []])
def test_no_children_is_noop(workload, ctx, children):
    assert inject_service(workload, children, ctx) is None
    assert ServiceInjector().translate(workload, children, ctx) is None


def test_deployment_without_ports_is_returned_unchanged(workload, ctx):
    children = [deployment()]
    assert inject_service(workload, children, ctx) is children


def test_container_without_ports_is_returned_unchanged(workload, ctx):
    children = [deployment([])]
    assert inject_service(workload, children, ctx) is children


@pytest.mark.parametrize("children, want", [
    # one deployment, one container, one port
    ([deployment([3000])], [deployment([3000]), service(3000)]),
    # first declared port wins
    ([deployment([3000, 3001])], [deployment([3000, 3001]), service(3000)]),
    # first deployment wins even with a lower port on the second
    (
        [deployment([4000]), deployment([3000])],
        [deployment([4000]), deployment([3000]), service(4000)],
    ),
    # first deployment, first container, first port
    (
        [deployment([3000, 3001], [4000, 4001]), deployment([5000, 5001], [6000, 6001])],
        [
            deployment([3000, 3001], [4000, 4001]),
            deployment([5000, 5001], [6000, 6001]),
            service(3000),
        ],
    ),
    # declaration order, not numeric order
    ([deployment([9000, 80])], [deployment([9000, 80]), service(9000)]),
])
def test_inject_service(workload, ctx, children, want):
    assert ServiceInjector().translate(workload, children, ctx) == want


def test_skips_containers_without_ports(workload, ctx):
    children = [deployment([], [8080, 8081])]
    assert inject_service(workload, children, ctx)[-1] == service(8080)


def test_skips_deployments_without_ports(workload, ctx):
    children = [deployment(), service(1234), deployment([], [7000])]
    result = inject_service(workload, children, ctx)
    assert result == [*children, service(7000)]


def test_only_considers_deployments(workload, ctx):
    statefulset = deployment([5432])
    statefulset["kind"] = "StatefulSet"
    children = [statefulset]
    assert inject_service(workload, children, ctx) is children


def test_appends_without_mutating_children(workload, ctx):
    children = [deployment([3000]), deployment([4000])]
    before = copy.deepcopy(children)
    result = inject_service(workload, children, ctx)

    assert children == before
    assert result is not children
    assert len(children) == 2
    assert result[0] is children[0] and result[1] is children[1]


def test_injection_is_idempotent(workload, ctx):
    children = [deployment([3000, 3001], [4000])]
    assert inject_service(workload, children, ctx) == inject_service(workload, copy.deepcopy(children), ctx)


def test_uses_context_label_key(workload):
    ctx = TranslateContext(label_key="example.com/owner")
    svc = inject_service(workload, [deployment([3000])], ctx)[-1]

    assert svc["metadata"]["labels"] == {"example.com/owner": workload.uid}
    assert svc["spec"]["selector"] == {"example.com/owner": workload.uid}


def test_malformed_deployment_is_skipped(workload, ctx):
    broken = deployment([3000])
    broken["spec"]["template"]["spec"]["containers"] = "not-a-list"
    children = [broken, deployment([4000])]

    result = inject_service(workload, children, ctx)
    assert result[-1] == service(4000)
    assert any("Deployment/test-workload" in w for w in ctx.warnings)


def test_opaque_children_are_skipped(workload, ctx):
    children = ["raw text", 42, {"kind": "ConfigMap"}, deployment([3000])]
    assert inject_service(workload, children, ctx)[-1] == service(3000)
    assert ctx.warnings == []


@pytest.mark.parametrize("port", [
    {"name": "http"},
    {"containerPort": "http"},
    {"containerPort": True},
    {"containerPort": 0},
    {"containerPort": 70000},
    "3000",
])
def test_selected_port_must_be_well_formed(workload, ctx, port):
    d = deployment([3000])
    d["spec"]["template"]["spec"]["containers"][0]["ports"] = [port]

    with pytest.raises(StructuralViolationError) as exc_info:
        inject_service(workload, [deployment(), d], ctx)
    assert exc_info.value.index == 1
