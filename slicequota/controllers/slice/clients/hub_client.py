"""Hub client - publishes worker slice usage to the hub cluster."""

from __future__ import annotations

import json
import logging
from typing import Any

from slicequota.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from slicequota.constants.values import (
    WORKER_SLICE_CONFIG_RESOURCE,
    WORKER_SLICE_RESOURCE_QUOTA_STATUS_KEY,
)
from slicequota.controllers.slice.parsers.status_parser import StatusParser
from slicequota.errors import ClientConstructionError, PublishError
from slicequota.models.quota.usage_info import SliceResourceQuotaStatus

logger = logging.getLogger(__name__)


class KubectlHubClient:
    """Writes resource usage into the hub's WorkerSliceConfig status.

    The WorkerSliceConfig for a slice on this worker is named
    ``<slice>-<cluster>`` and lives in the hub project namespace.
    """

    def __init__(
        self,
        run_kubectl_func: Any,
        project_namespace: str,
        cluster_name: str,
    ) -> None:
        """Initialize the hub client.

        Args:
            run_kubectl_func: Async function running kubectl against the hub
            project_namespace: Hub namespace holding WorkerSliceConfigs
            cluster_name: Name of this worker cluster on the hub

        Raises:
            ClientConstructionError: If namespace or cluster name is empty.
        """
        if not project_namespace:
            raise ClientConstructionError("Hub project namespace is required")
        if not cluster_name:
            raise ClientConstructionError("Worker cluster name is required")
        self._run_kubectl = run_kubectl_func
        self.project_namespace = project_namespace
        self.cluster_name = cluster_name
        self._parser = StatusParser()

    def worker_slice_config_name(self, slice_name: str) -> str:
        return f"{slice_name}-{self.cluster_name}"

    def _build_args(self, slice_name: str, status: SliceResourceQuotaStatus) -> tuple[str, ...]:
        patch = {
            "status": {
                WORKER_SLICE_RESOURCE_QUOTA_STATUS_KEY: self._parser.to_payload(status),
            }
        }
        return (
            "patch",
            WORKER_SLICE_CONFIG_RESOURCE,
            self.worker_slice_config_name(slice_name),
            "-n",
            self.project_namespace,
            "--subresource=status",
            "--type=merge",
            "-p",
            json.dumps(patch, separators=(",", ":")),
            f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}",
        )

    async def update_resource_usage(
        self, slice_name: str, status: SliceResourceQuotaStatus
    ) -> None:
        """Publish ``status`` for ``slice_name`` to the hub.

        Raises:
            PublishError: If the patch is rejected or kubectl fails.
        """
        try:
            await self._run_kubectl(self._build_args(slice_name, status))
        except Exception as exc:
            raise PublishError(
                f"Hub rejected resource usage for slice {slice_name}: {exc}"
            ) from exc
        logger.debug(
            "Published resource usage slice=%s worker_slice_config=%s",
            slice_name,
            self.worker_slice_config_name(slice_name),
        )
