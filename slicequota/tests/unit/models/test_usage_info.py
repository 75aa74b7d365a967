"""Tests for quota usage models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from slicequota.models.quota.slice_info import SliceInfo
from slicequota.models.quota.usage_info import (
    ContainerUsageInfo,
    NamespaceUsage,
    PodMetricInfo,
    SliceResourceQuotaStatus,
)


class TestNamespaceUsage:
    """Tests for NamespaceUsage."""

    def test_defaults_to_zero(self) -> None:
        usage = NamespaceUsage(namespace="a")
        assert usage.cpu_millicores == 0
        assert usage.memory_bytes == 0

    def test_rejects_negative_values(self) -> None:
        with pytest.raises(ValidationError):
            NamespaceUsage(namespace="a", cpu_millicores=-1)

    def test_is_frozen(self) -> None:
        usage = NamespaceUsage(namespace="a", cpu_millicores=5)
        with pytest.raises(ValidationError):
            usage.cpu_millicores = 10


class TestSliceResourceQuotaStatus:
    """Tests for SliceResourceQuotaStatus."""

    def test_from_namespace_usages_sums_totals(self) -> None:
        status = SliceResourceQuotaStatus.from_namespace_usages(
            [
                NamespaceUsage(namespace="a", cpu_millicores=50, memory_bytes=10),
                NamespaceUsage(namespace="b", cpu_millicores=30, memory_bytes=5),
            ]
        )
        assert status.total_cpu_millicores == 80
        assert status.total_memory_bytes == 15
        assert status.namespaces() == ["a", "b"]

    def test_empty_status(self) -> None:
        status = SliceResourceQuotaStatus.from_namespace_usages([])
        assert status.namespace_usages == ()
        assert status.total_cpu_millicores == 0

    def test_is_frozen(self) -> None:
        status = SliceResourceQuotaStatus()
        with pytest.raises(ValidationError):
            status.total_cpu_millicores = 1


class TestPodMetricInfo:
    """Tests for PodMetricInfo."""

    def test_containers_default_empty(self) -> None:
        assert PodMetricInfo(pod="p").containers == ()

    def test_holds_container_usage(self) -> None:
        pod = PodMetricInfo(
            pod="p",
            containers=(ContainerUsageInfo(name="c", cpu_millicores=1, memory_bytes=2),),
        )
        assert pod.containers[0].name == "c"


class TestSliceInfo:
    """Tests for SliceInfo."""

    def test_defaults(self) -> None:
        slice_info = SliceInfo(name="prod-slice")
        assert slice_info.resource_quota_status is None
        assert slice_info.config_updated_on == 0
        assert slice_info.resource_version is None

    def test_model_copy_replaces_status_without_touching_original(self) -> None:
        original = SliceInfo(name="s")
        status = SliceResourceQuotaStatus(total_cpu_millicores=1)
        updated = original.model_copy(update={"resource_quota_status": status})
        assert original.resource_quota_status is None
        assert updated.resource_quota_status == status
