"""Resource usage models for slice quota status."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ContainerUsageInfo(BaseModel):
    """Usage reported for one container of a pod."""

    model_config = ConfigDict(frozen=True)

    name: str
    cpu_millicores: int = Field(default=0, ge=0)
    memory_bytes: int = Field(default=0, ge=0)


class PodMetricInfo(BaseModel):
    """Metrics sample for one pod, as returned by a metrics provider."""

    model_config = ConfigDict(frozen=True)

    pod: str
    containers: tuple[ContainerUsageInfo, ...] = ()


class ContainerSample(BaseModel):
    """Flattened container sample tagged with its namespace and pod."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    pod: str
    container: str
    cpu_millicores: int = Field(default=0, ge=0)
    memory_bytes: int = Field(default=0, ge=0)


class NamespaceUsage(BaseModel):
    """Summed usage of every container in one namespace."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    cpu_millicores: int = Field(default=0, ge=0)
    memory_bytes: int = Field(default=0, ge=0)


class SliceResourceQuotaStatus(BaseModel):
    """Slice-level usage: the ordered per-namespace breakdown plus totals.

    Replaced wholesale on each publish; never merged field by field.
    """

    model_config = ConfigDict(frozen=True)

    namespace_usages: tuple[NamespaceUsage, ...] = ()
    total_cpu_millicores: int = Field(default=0, ge=0)
    total_memory_bytes: int = Field(default=0, ge=0)

    @classmethod
    def from_namespace_usages(
        cls, namespace_usages: list[NamespaceUsage] | tuple[NamespaceUsage, ...]
    ) -> SliceResourceQuotaStatus:
        """Build a status whose totals are the sums of the breakdown."""
        usages = tuple(namespace_usages)
        return cls(
            namespace_usages=usages,
            total_cpu_millicores=sum(usage.cpu_millicores for usage in usages),
            total_memory_bytes=sum(usage.memory_bytes for usage in usages),
        )

    def namespaces(self) -> list[str]:
        """Return namespace names in breakdown order."""
        return [usage.namespace for usage in self.namespace_usages]
