"""Scalar constants.

Kubernetes API identifiers used when talking to the worker and hub clusters.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_NAME: Final = "slicequota"

# ============================================================================
# Kubernetes resources
# ============================================================================

SLICE_RESOURCE: Final = "slice.networking.kubeslice.io"
WORKER_SLICE_CONFIG_RESOURCE: Final = "workersliceconfig.worker.kubeslice.io"
POD_METRICS_PATH_TEMPLATE: Final = "/apis/metrics.k8s.io/v1beta1/namespaces/{namespace}/pods"

# ============================================================================
# Status payload keys
# ============================================================================

CLUSTER_RESOURCE_QUOTA_STATUS_KEY: Final = "clusterResourceQuotaStatus"
WORKER_SLICE_RESOURCE_QUOTA_STATUS_KEY: Final = "workerSliceResourceQuotaStatus"

__all__ = [
    "APP_NAME",
    "CLUSTER_RESOURCE_QUOTA_STATUS_KEY",
    "POD_METRICS_PATH_TEMPLATE",
    "SLICE_RESOURCE",
    "WORKER_SLICE_CONFIG_RESOURCE",
    "WORKER_SLICE_RESOURCE_QUOTA_STATUS_KEY",
]
