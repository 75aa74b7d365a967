"""Timeout constants for slice usage reconciliation.

All timeout and backoff values for kubectl requests, metrics fetches and
hub publishing.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = "30s"
METRICS_REQUEST_TIMEOUT: Final = "15s"

# Process-level command timeout (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 45

# ============================================================================
# Async operation timeouts (float, in seconds)
# ============================================================================

METRICS_FETCH_TIMEOUT: Final = 20.0
RECONCILE_TIMEOUT: Final = 120.0

# ============================================================================
# Publish retry
# ============================================================================

PUBLISH_RETRY_BACKOFF: Final = 0.5
PUBLISH_RETRY_BACKOFF_MAX: Final = 8.0

__all__ = [
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "METRICS_FETCH_TIMEOUT",
    "METRICS_REQUEST_TIMEOUT",
    "PUBLISH_RETRY_BACKOFF",
    "PUBLISH_RETRY_BACKOFF_MAX",
    "RECONCILE_TIMEOUT",
]
