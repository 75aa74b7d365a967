"""Pod metrics parser - parses metrics.k8s.io PodMetricsList payloads."""

from __future__ import annotations

import logging
from typing import Any

from slicequota.models.quota.usage_info import ContainerUsageInfo, PodMetricInfo
from slicequota.utils.resource_parser import cpu_to_millicores, memory_to_bytes

logger = logging.getLogger(__name__)


class PodMetricsParser:
    """Parses PodMetrics items into PodMetricInfo models."""

    def parse_container(self, container: dict[str, Any]) -> ContainerUsageInfo:
        """Parse one entry of ``PodMetrics.containers``.

        Missing usage fields count as zero; malformed quantities raise
        ValueError so a bad sample never silently becomes zero.
        """
        usage = container.get("usage") or {}
        return ContainerUsageInfo(
            name=str(container.get("name", "")),
            cpu_millicores=cpu_to_millicores(usage.get("cpu", 0)),
            memory_bytes=memory_to_bytes(usage.get("memory", 0)),
        )

    def parse_pod_metrics(self, item: dict[str, Any]) -> PodMetricInfo:
        """Parse a single PodMetrics item."""
        metadata = item.get("metadata", {})
        return PodMetricInfo(
            pod=str(metadata.get("name", "")),
            containers=tuple(
                self.parse_container(container)
                for container in item.get("containers") or []
            ),
        )

    def parse_pod_metrics_list(self, data: dict[str, Any]) -> list[PodMetricInfo]:
        """Parse a PodMetricsList document.

        Raises:
            ValueError: If the document is not a PodMetricsList-shaped mapping
                or carries a malformed quantity.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected PodMetricsList mapping, got {type(data).__name__}")
        items = data.get("items") or []
        if not isinstance(items, list):
            raise ValueError("PodMetricsList items must be a list")
        pods = [self.parse_pod_metrics(item) for item in items]
        logger.debug("Parsed %s pod metrics", len(pods))
        return pods
