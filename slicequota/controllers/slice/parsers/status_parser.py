"""Status parser - converts quota status between models and API payloads."""

from __future__ import annotations

from typing import Any

from slicequota.constants.values import (
    CLUSTER_RESOURCE_QUOTA_STATUS_KEY,
    WORKER_SLICE_RESOURCE_QUOTA_STATUS_KEY,
)
from slicequota.models.quota.slice_info import SliceInfo
from slicequota.models.quota.usage_info import NamespaceUsage, SliceResourceQuotaStatus
from slicequota.utils.resource_parser import (
    cpu_to_millicores,
    format_cpu_millicores,
    format_memory_bytes,
    memory_to_bytes,
)


class StatusParser:
    """Builds and reads the ``workerSliceResourceQuotaStatus`` shape."""

    @staticmethod
    def _resource_payload(cpu_millicores: int, memory_bytes: int) -> dict[str, str]:
        return {
            "cpu": format_cpu_millicores(cpu_millicores),
            "memory": format_memory_bytes(memory_bytes),
        }

    def to_payload(self, status: SliceResourceQuotaStatus) -> dict[str, Any]:
        """Render a status as the hub/slice status sub-record."""
        return {
            CLUSTER_RESOURCE_QUOTA_STATUS_KEY: {
                "namespaceResourceQuotaStatus": [
                    {
                        "namespace": usage.namespace,
                        "resourceUsage": self._resource_payload(
                            usage.cpu_millicores, usage.memory_bytes
                        ),
                    }
                    for usage in status.namespace_usages
                ],
                "resourcesUsage": self._resource_payload(
                    status.total_cpu_millicores, status.total_memory_bytes
                ),
            }
        }

    def from_payload(self, payload: dict[str, Any] | None) -> SliceResourceQuotaStatus | None:
        """Parse a status sub-record; ``None`` when nothing was published yet.

        Raises:
            ValueError: If a quantity in the payload is malformed.
        """
        if not payload:
            return None
        cluster_status = payload.get(CLUSTER_RESOURCE_QUOTA_STATUS_KEY) or {}
        usages = tuple(
            NamespaceUsage(
                namespace=str(entry.get("namespace", "")),
                cpu_millicores=cpu_to_millicores(
                    (entry.get("resourceUsage") or {}).get("cpu", 0)
                ),
                memory_bytes=memory_to_bytes(
                    (entry.get("resourceUsage") or {}).get("memory", 0)
                ),
            )
            for entry in cluster_status.get("namespaceResourceQuotaStatus") or []
        )
        totals = cluster_status.get("resourcesUsage") or {}
        return SliceResourceQuotaStatus(
            namespace_usages=usages,
            total_cpu_millicores=cpu_to_millicores(totals.get("cpu", 0)),
            total_memory_bytes=memory_to_bytes(totals.get("memory", 0)),
        )

    def parse_slice(self, item: dict[str, Any]) -> SliceInfo:
        """Parse a Slice object as returned by ``kubectl get -o json``."""
        metadata = item.get("metadata", {})
        status = item.get("status") or {}
        slice_config = status.get("sliceConfig") or {}
        return SliceInfo(
            name=str(metadata.get("name", "")),
            namespace=str(metadata.get("namespace", "")),
            resource_version=metadata.get("resourceVersion"),
            resource_quota_status=self.from_payload(
                slice_config.get(WORKER_SLICE_RESOURCE_QUOTA_STATUS_KEY)
            ),
            config_updated_on=int(status.get("configUpdatedOn") or 0),
        )

    def slice_status_patch(self, slice_info: SliceInfo) -> dict[str, Any]:
        """Build the merge patch that writes the slice's usage status."""
        metadata: dict[str, Any] = {}
        if slice_info.resource_version:
            metadata["resourceVersion"] = slice_info.resource_version
        quota_status = (
            self.to_payload(slice_info.resource_quota_status)
            if slice_info.resource_quota_status is not None
            else None
        )
        patch: dict[str, Any] = {
            "status": {
                "configUpdatedOn": slice_info.config_updated_on,
                "sliceConfig": {WORKER_SLICE_RESOURCE_QUOTA_STATUS_KEY: quota_status},
            }
        }
        if metadata:
            patch["metadata"] = metadata
        return patch
