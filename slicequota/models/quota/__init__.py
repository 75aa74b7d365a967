"""Slice quota models."""

from slicequota.models.quota.slice_info import SliceInfo
from slicequota.models.quota.usage_info import (
    ContainerSample,
    ContainerUsageInfo,
    NamespaceUsage,
    PodMetricInfo,
    SliceResourceQuotaStatus,
)

__all__ = [
    "ContainerSample",
    "ContainerUsageInfo",
    "NamespaceUsage",
    "PodMetricInfo",
    "SliceInfo",
    "SliceResourceQuotaStatus",
]
