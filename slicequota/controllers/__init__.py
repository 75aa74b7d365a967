"""Controllers module for slicequota.

This module provides the slice usage reconciler and the base classes and
kubectl plumbing it is built on.
"""

from __future__ import annotations

# Base classes
from slicequota.controllers.base import (
    AsyncControllerMixin,
    BaseController,
    KubectlError,
    KubectlRunner,
    ReconcileResult,
)

# Slice domain
from slicequota.controllers.slice import (
    SliceUsageController,
    StatusPublisher,
    UpdateDecision,
    UsageAggregator,
    build_slice_usage_controller,
)

__all__ = [
    # Base
    "AsyncControllerMixin",
    "BaseController",
    "KubectlError",
    "KubectlRunner",
    "ReconcileResult",
    # Slice domain
    "SliceUsageController",
    "StatusPublisher",
    "UpdateDecision",
    "UsageAggregator",
    "build_slice_usage_controller",
]
