"""Tests for the quota status parser."""

from __future__ import annotations

import pytest

from slicequota.controllers.slice.parsers.status_parser import StatusParser
from slicequota.models.quota.slice_info import SliceInfo
from slicequota.models.quota.usage_info import NamespaceUsage, SliceResourceQuotaStatus

MI = 1024**2


@pytest.fixture
def parser() -> StatusParser:
    return StatusParser()


@pytest.fixture
def status() -> SliceResourceQuotaStatus:
    return SliceResourceQuotaStatus.from_namespace_usages(
        [
            NamespaceUsage(namespace="a", cpu_millicores=50, memory_bytes=10 * MI),
            NamespaceUsage(namespace="b", cpu_millicores=30, memory_bytes=5 * MI),
        ]
    )


class TestStatusPayload:
    """Tests for StatusParser payload conversion."""

    def test_to_payload(self, parser: StatusParser, status: SliceResourceQuotaStatus) -> None:
        assert parser.to_payload(status) == {
            "clusterResourceQuotaStatus": {
                "namespaceResourceQuotaStatus": [
                    {"namespace": "a", "resourceUsage": {"cpu": "50m", "memory": "10Mi"}},
                    {"namespace": "b", "resourceUsage": {"cpu": "30m", "memory": "5Mi"}},
                ],
                "resourcesUsage": {"cpu": "80m", "memory": "15Mi"},
            }
        }

    def test_from_payload_reads_back(
        self, parser: StatusParser, status: SliceResourceQuotaStatus
    ) -> None:
        assert parser.from_payload(parser.to_payload(status)) == status

    def test_from_payload_empty(self, parser: StatusParser) -> None:
        assert parser.from_payload(None) is None
        assert parser.from_payload({}) is None

    def test_from_payload_invalid_quantity(self, parser: StatusParser) -> None:
        with pytest.raises(ValueError):
            parser.from_payload(
                {"clusterResourceQuotaStatus": {"resourcesUsage": {"cpu": "bogus"}}}
            )


class TestSliceObjects:
    """Tests for Slice object parsing and patching."""

    def test_parse_slice_without_status(self, parser: StatusParser) -> None:
        slice_info = parser.parse_slice(
            {
                "metadata": {
                    "name": "prod-slice",
                    "namespace": "kubeslice-system",
                    "resourceVersion": "42",
                }
            }
        )
        assert slice_info == SliceInfo(
            name="prod-slice",
            namespace="kubeslice-system",
            resource_version="42",
        )

    def test_parse_slice_with_status(
        self, parser: StatusParser, status: SliceResourceQuotaStatus
    ) -> None:
        slice_info = parser.parse_slice(
            {
                "metadata": {"name": "prod-slice", "namespace": "kubeslice-system"},
                "status": {
                    "configUpdatedOn": 1700000000,
                    "sliceConfig": {
                        "workerSliceResourceQuotaStatus": parser.to_payload(status),
                    },
                },
            }
        )
        assert slice_info.resource_quota_status == status
        assert slice_info.config_updated_on == 1700000000

    def test_slice_status_patch(
        self, parser: StatusParser, status: SliceResourceQuotaStatus
    ) -> None:
        slice_info = SliceInfo(
            name="prod-slice",
            resource_version="7",
            resource_quota_status=status,
            config_updated_on=1700000100,
        )

        patch = parser.slice_status_patch(slice_info)

        assert patch["metadata"] == {"resourceVersion": "7"}
        assert patch["status"]["configUpdatedOn"] == 1700000100
        assert patch["status"]["sliceConfig"]["workerSliceResourceQuotaStatus"] == (
            parser.to_payload(status)
        )

    def test_slice_status_patch_without_version(self, parser: StatusParser) -> None:
        patch = parser.slice_status_patch(SliceInfo(name="s"))
        assert "metadata" not in patch
        assert patch["status"]["sliceConfig"]["workerSliceResourceQuotaStatus"] is None
