"""Constants module for slicequota.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Kubernetes identifiers and payload keys (Final)
- timeouts.py: Timeout and backoff values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
"""

from slicequota.constants.defaults import (
    DRIFT_THRESHOLD_PERCENT_DEFAULT,
    MAX_CONCURRENT_FETCHES_DEFAULT,
    NAMESPACE_SELECTOR_LABEL_DEFAULT,
    PUBLISH_RETRY_ATTEMPTS_DEFAULT,
    SLICE_NAMESPACE_DEFAULT,
)
from slicequota.constants.enums import FailurePolicy, ReconcileOutcome
from slicequota.constants.limits import (
    DRIFT_THRESHOLD_MAX,
    DRIFT_THRESHOLD_MIN,
    MAX_CONCURRENT_FETCHES_MAX,
    MAX_CONCURRENT_FETCHES_MIN,
)
from slicequota.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    METRICS_FETCH_TIMEOUT,
    RECONCILE_TIMEOUT,
)
from slicequota.constants.values import APP_NAME

__all__ = [
    # Application
    "APP_NAME",
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    # Defaults
    "DRIFT_THRESHOLD_MAX",
    "DRIFT_THRESHOLD_MIN",
    "DRIFT_THRESHOLD_PERCENT_DEFAULT",
    "KUBECTL_COMMAND_TIMEOUT",
    "MAX_CONCURRENT_FETCHES_DEFAULT",
    "MAX_CONCURRENT_FETCHES_MAX",
    "MAX_CONCURRENT_FETCHES_MIN",
    "METRICS_FETCH_TIMEOUT",
    "NAMESPACE_SELECTOR_LABEL_DEFAULT",
    "PUBLISH_RETRY_ATTEMPTS_DEFAULT",
    "RECONCILE_TIMEOUT",
    "SLICE_NAMESPACE_DEFAULT",
    # Enums
    "FailurePolicy",
    "ReconcileOutcome",
]
