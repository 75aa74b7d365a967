"""Slice usage reconciliation: aggregate, decide, publish."""

from slicequota.controllers.slice.aggregator import (
    UsageAggregation,
    UsageAggregator,
    iter_container_samples,
    sum_samples,
)
from slicequota.controllers.slice.controller import SliceUsageController
from slicequota.controllers.slice.decision import (
    UpdateDecision,
    calculate_percentage_diff,
    exceeds_drift,
)
from slicequota.controllers.slice.factory import build_slice_usage_controller
from slicequota.controllers.slice.interfaces import (
    HubClientProvider,
    MetricsProvider,
    NamespaceEnumerator,
    SliceStore,
)
from slicequota.controllers.slice.publisher import StatusPublisher

__all__ = [
    "HubClientProvider",
    "MetricsProvider",
    "NamespaceEnumerator",
    "SliceStore",
    "SliceUsageController",
    "StatusPublisher",
    "UpdateDecision",
    "UsageAggregation",
    "UsageAggregator",
    "build_slice_usage_controller",
    "calculate_percentage_diff",
    "exceeds_drift",
    "iter_container_samples",
    "sum_samples",
]
