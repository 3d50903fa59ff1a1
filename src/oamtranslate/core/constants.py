"""Shared constants: kinds, API versions, well-known labels."""

# Default correlation label key, value is the workload UID
DEFAULT_LABEL_KEY = "workload.oam.crossplane.io"

DEPLOYMENT_KIND = "Deployment"
SERVICE_KIND = "Service"
SERVICE_API_VERSION = "v1"

KUBEAPP_KIND = "KubernetesApplication"
KUBEAPP_API_VERSION = "workload.crossplane.io/v1alpha1"

SERVICE_TYPE_LOAD_BALANCER = "LoadBalancer"

# Valid range for a containerPort
MIN_PORT, MAX_PORT = 1, 65535
