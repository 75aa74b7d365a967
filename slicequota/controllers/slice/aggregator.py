"""Usage aggregator - sums container usage into namespace and slice totals."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from slicequota.constants.defaults import MAX_CONCURRENT_FETCHES_DEFAULT
from slicequota.constants.enums import FailurePolicy
from slicequota.constants.timeouts import METRICS_FETCH_TIMEOUT
from slicequota.controllers.slice.interfaces import MetricsProvider
from slicequota.errors import MetricsUnavailable
from slicequota.models.quota.usage_info import (
    ContainerSample,
    NamespaceUsage,
    PodMetricInfo,
    SliceResourceQuotaStatus,
)

logger = logging.getLogger(__name__)


def iter_container_samples(
    namespace: str, pod_metrics: Iterable[PodMetricInfo]
) -> Iterator[ContainerSample]:
    """Flatten pod metrics into one sample per container."""
    for pod in pod_metrics:
        for container in pod.containers:
            yield ContainerSample(
                namespace=namespace,
                pod=pod.pod,
                container=container.name,
                cpu_millicores=container.cpu_millicores,
                memory_bytes=container.memory_bytes,
            )


def sum_samples(namespace: str, samples: Iterable[ContainerSample]) -> NamespaceUsage:
    """Sum samples into a NamespaceUsage. No samples yields zero usage."""
    cpu = 0
    memory = 0
    for sample in samples:
        cpu += sample.cpu_millicores
        memory += sample.memory_bytes
    return NamespaceUsage(namespace=namespace, cpu_millicores=cpu, memory_bytes=memory)


@dataclass
class UsageAggregation:
    """Result of one aggregation round over a slice's namespaces."""

    namespace_usages: list[NamespaceUsage] = field(default_factory=list)
    failed_namespaces: dict[str, str] = field(default_factory=dict)

    @property
    def total_cpu_millicores(self) -> int:
        return sum(usage.cpu_millicores for usage in self.namespace_usages)

    @property
    def total_memory_bytes(self) -> int:
        return sum(usage.memory_bytes for usage in self.namespace_usages)

    @property
    def is_empty(self) -> bool:
        """True when both slice totals are zero."""
        return self.total_cpu_millicores == 0 and self.total_memory_bytes == 0

    @property
    def is_partial(self) -> bool:
        return bool(self.failed_namespaces)

    def to_status(self) -> SliceResourceQuotaStatus:
        """Build the quota status carrying this breakdown and its totals."""
        return SliceResourceQuotaStatus.from_namespace_usages(self.namespace_usages)


class UsageAggregator:
    """Fetches namespace metrics concurrently and sums them.

    Every namespace fetch is bounded by ``fetch_timeout`` and at most
    ``max_concurrent`` fetches run at once. A timeout counts as
    MetricsUnavailable for that namespace.

    Failure handling follows ``policy``:
    - STRICT: the first namespace failure cancels outstanding fetches and
      raises MetricsUnavailable.
    - BEST_EFFORT: a failed namespace contributes zero and is listed in
      ``UsageAggregation.failed_namespaces``.
    """

    def __init__(
        self,
        metrics_provider: MetricsProvider,
        max_concurrent: int = MAX_CONCURRENT_FETCHES_DEFAULT,
        fetch_timeout: float = METRICS_FETCH_TIMEOUT,
    ) -> None:
        self._metrics_provider = metrics_provider
        self.max_concurrent = max(1, max_concurrent)
        self.fetch_timeout = fetch_timeout

    async def _fetch_namespace_usage(
        self, namespace: str, semaphore: asyncio.Semaphore
    ) -> NamespaceUsage:
        async with semaphore:
            try:
                pod_metrics = await asyncio.wait_for(
                    self._metrics_provider.fetch(namespace),
                    timeout=self.fetch_timeout,
                )
            except asyncio.TimeoutError as exc:
                raise MetricsUnavailable(
                    namespace, f"fetch timed out after {self.fetch_timeout}s"
                ) from exc
        return sum_samples(namespace, iter_container_samples(namespace, pod_metrics))

    async def aggregate(
        self,
        namespaces: Iterable[str],
        policy: FailurePolicy = FailurePolicy.STRICT,
    ) -> UsageAggregation:
        """Aggregate usage for ``namespaces``, preserving their order.

        Raises:
            MetricsUnavailable: Under STRICT, when any namespace fails.
        """
        ordered = list(dict.fromkeys(namespaces))
        if not ordered:
            return UsageAggregation()

        semaphore = asyncio.Semaphore(self.max_concurrent)
        tasks = {
            namespace: asyncio.create_task(self._fetch_namespace_usage(namespace, semaphore))
            for namespace in ordered
        }
        usages: dict[str, NamespaceUsage] = {}
        failed: dict[str, str] = {}
        try:
            for future in asyncio.as_completed(tasks.values()):
                try:
                    usage = await future
                except MetricsUnavailable as exc:
                    if policy is FailurePolicy.STRICT:
                        logger.warning(
                            "Metrics fetch failed namespace=%s policy=%s reason=%s",
                            exc.namespace,
                            policy.value,
                            exc.reason,
                        )
                        raise
                    logger.warning(
                        "Metrics fetch failed, counting namespace as zero "
                        "namespace=%s policy=%s reason=%s",
                        exc.namespace,
                        policy.value,
                        exc.reason,
                    )
                    failed[exc.namespace] = exc.reason
                    continue
                usages[usage.namespace] = usage
        finally:
            for task in tasks.values():
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks.values(), return_exceptions=True)

        aggregation = UsageAggregation(
            namespace_usages=[
                usages.get(namespace, NamespaceUsage(namespace=namespace))
                for namespace in ordered
            ],
            failed_namespaces=failed,
        )
        logger.debug(
            "Aggregated usage namespaces=%s failed=%s cpu_m=%s memory_bytes=%s",
            len(ordered),
            len(failed),
            aggregation.total_cpu_millicores,
            aggregation.total_memory_bytes,
        )
        return aggregation
