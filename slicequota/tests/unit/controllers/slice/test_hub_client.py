"""Tests for KubectlHubClient."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from slicequota.controllers.slice.clients.hub_client import KubectlHubClient
from slicequota.errors import ClientConstructionError, PublishError
from slicequota.models.quota.usage_info import NamespaceUsage, SliceResourceQuotaStatus


@pytest.fixture
def status() -> SliceResourceQuotaStatus:
    return SliceResourceQuotaStatus.from_namespace_usages(
        [NamespaceUsage(namespace="a", cpu_millicores=80, memory_bytes=15 * 1024**2)]
    )


def test_requires_project_namespace() -> None:
    with pytest.raises(ClientConstructionError):
        KubectlHubClient(AsyncMock(), project_namespace="", cluster_name="worker-1")


def test_requires_cluster_name() -> None:
    with pytest.raises(ClientConstructionError):
        KubectlHubClient(AsyncMock(), project_namespace="kubeslice-acme", cluster_name="")


def test_worker_slice_config_name() -> None:
    client = KubectlHubClient(AsyncMock(), "kubeslice-acme", "worker-1")
    assert client.worker_slice_config_name("prod-slice") == "prod-slice-worker-1"


@pytest.mark.asyncio
async def test_update_resource_usage_patches_status(status: SliceResourceQuotaStatus) -> None:
    run_kubectl = AsyncMock(return_value="")
    client = KubectlHubClient(run_kubectl, "kubeslice-acme", "worker-1")

    await client.update_resource_usage("prod-slice", status)

    args = run_kubectl.await_args.args[0]
    assert args[:5] == (
        "patch",
        "workersliceconfig.worker.kubeslice.io",
        "prod-slice-worker-1",
        "-n",
        "kubeslice-acme",
    )
    assert "--subresource=status" in args
    patch = json.loads(args[args.index("-p") + 1])
    usage = patch["status"]["workerSliceResourceQuotaStatus"]["clusterResourceQuotaStatus"]
    assert usage["resourcesUsage"] == {"cpu": "80m", "memory": "15Mi"}


@pytest.mark.asyncio
async def test_update_resource_usage_failure(status: SliceResourceQuotaStatus) -> None:
    client = KubectlHubClient(
        AsyncMock(side_effect=RuntimeError("forbidden")), "kubeslice-acme", "worker-1"
    )

    with pytest.raises(PublishError, match="forbidden"):
        await client.update_resource_usage("prod-slice", status)
