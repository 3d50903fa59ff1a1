"""Shared builders for rendered workload children."""

import pytest

from oamtranslate import DEFAULT_LABEL_KEY, TranslateContext, WorkloadIdentity

WORKLOAD_NAME = "test-workload"
WORKLOAD_NAMESPACE = "test-namespace"
WORKLOAD_UID = "a-very-unique-identifier"

CONTAINER_NAME = "test-container"
PORT_NAME = "test-port"


def deployment(*container_ports, name=WORKLOAD_NAME) -> dict:
    """Build a Deployment; each positional arg is the port list of one container."""
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {"name": name},
        "spec": {
            "selector": {"matchLabels": {DEFAULT_LABEL_KEY: WORKLOAD_UID}},
            "template": {
                "metadata": {"labels": {DEFAULT_LABEL_KEY: WORKLOAD_UID}},
                "spec": {
                    "containers": [
                        {
                            "name": CONTAINER_NAME,
                            "ports": [{"name": PORT_NAME, "containerPort": p} for p in ports],
                        }
                        for ports in container_ports
                    ],
                },
            },
        },
    }


def service(port: int) -> dict:
    """Build the Service the injector is expected to produce for port."""
    return {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": {
            "name": WORKLOAD_NAME,
            "labels": {DEFAULT_LABEL_KEY: WORKLOAD_UID},
        },
        "spec": {
            "selector": {DEFAULT_LABEL_KEY: WORKLOAD_UID},
            "type": "LoadBalancer",
            "ports": [{"name": WORKLOAD_NAME, "port": port, "targetPort": port}],
        },
    }


@pytest.fixture
def workload():
    return WorkloadIdentity(name=WORKLOAD_NAME, namespace=WORKLOAD_NAMESPACE, uid=WORKLOAD_UID)


@pytest.fixture
def ctx():
    return TranslateContext()
