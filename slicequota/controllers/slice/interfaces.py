"""Collaborator interfaces for slice usage reconciliation.

Each capability is its own protocol so tests can fake one without the
others and the aggregation and decision logic runs without a cluster.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from slicequota.models.quota.slice_info import SliceInfo
from slicequota.models.quota.usage_info import PodMetricInfo, SliceResourceQuotaStatus


@runtime_checkable
class NamespaceEnumerator(Protocol):
    """Lists the namespaces labeled as members of a slice."""

    async def list_namespaces(self, slice_name: str) -> list[str]:
        """Return member namespace names, sorted and unique.

        Raises:
            NamespaceListError: If the namespaces cannot be listed.
        """
        ...


@runtime_checkable
class MetricsProvider(Protocol):
    """Reads per-pod, per-container usage for one namespace."""

    async def fetch(self, namespace: str) -> list[PodMetricInfo]:
        """Return pod metrics for ``namespace``.

        Raises:
            MetricsUnavailable: If metrics for the namespace cannot be read.
        """
        ...


@runtime_checkable
class HubClientProvider(Protocol):
    """Forwards slice usage to the hub."""

    async def update_resource_usage(
        self, slice_name: str, status: SliceResourceQuotaStatus
    ) -> None:
        """Publish ``status`` for ``slice_name``.

        Raises:
            PublishError: If the hub does not accept the update.
        """
        ...


@runtime_checkable
class SliceStore(Protocol):
    """Reads and writes the slice's status sub-record."""

    async def get_slice(self, name: str) -> SliceInfo:
        """Return the slice with its stored quota status.

        Raises:
            SliceStoreError: If the slice cannot be read.
        """
        ...

    async def update_status(self, slice_info: SliceInfo) -> SliceInfo:
        """Replace the slice's status and return the stored slice.

        Raises:
            SliceConflictError: If the slice changed since it was read.
            SliceStoreError: On any other write failure.
        """
        ...
