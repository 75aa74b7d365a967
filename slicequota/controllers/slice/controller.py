"""Slice usage controller - one reconciliation pass per invocation.

A pass enumerates the slice's namespaces, aggregates their usage, decides
whether the change is worth reporting and, if so, publishes the new status.
Failures are reported as requeue-requesting results; rescheduling belongs to
the enclosing control loop.
"""

from __future__ import annotations

import asyncio
import logging
import time

from slicequota.constants.enums import FailurePolicy, ReconcileOutcome
from slicequota.constants.timeouts import RECONCILE_TIMEOUT
from slicequota.controllers.base.base_controller import BaseController, ReconcileResult
from slicequota.controllers.slice.aggregator import UsageAggregator
from slicequota.controllers.slice.decision import UpdateDecision
from slicequota.controllers.slice.interfaces import NamespaceEnumerator, SliceStore
from slicequota.controllers.slice.publisher import StatusPublisher
from slicequota.errors import SliceUsageError
from slicequota.models.quota.slice_info import SliceInfo

logger = logging.getLogger(__name__)


class SliceUsageController(BaseController):
    """Aggregates namespace usage for a slice and publishes it to the hub.

    The breakdown aggregated for the decision is the one that gets
    published, so the published totals always match the breakdown and
    metrics are fetched once per pass.
    """

    def __init__(
        self,
        namespace_enumerator: NamespaceEnumerator,
        aggregator: UsageAggregator,
        decision: UpdateDecision,
        publisher: StatusPublisher,
        slice_store: SliceStore,
        reconcile_timeout: float | None = RECONCILE_TIMEOUT,
    ) -> None:
        super().__init__()
        self._namespace_enumerator = namespace_enumerator
        self._aggregator = aggregator
        self._decision = decision
        self._publisher = publisher
        self._slice_store = slice_store
        self.reconcile_timeout = reconcile_timeout

    async def check_connection(self) -> bool:
        """Probe the worker cluster with a namespace listing."""
        try:
            await self._namespace_enumerator.list_namespaces("")
        except SliceUsageError as exc:
            logger.warning("Cluster connection check failed: %s", exc)
            return False
        return True

    async def reconcile(self, name: str) -> ReconcileResult:
        """Load the slice from the store and run one pass at the current time."""
        self._start_timer()
        try:
            slice_info = await self._slice_store.get_slice(name)
        except SliceUsageError as exc:
            logger.warning("Failed to load slice slice=%s error=%s", name, exc)
            return ReconcileResult.failure(exc, self._elapsed_ms())
        return await self.reconcile_usage(
            slice_info,
            current_time=int(time.time()),
            config_updated_on=slice_info.config_updated_on,
        )

    async def reconcile_usage(
        self,
        slice_info: SliceInfo,
        current_time: int,
        config_updated_on: int,
    ) -> ReconcileResult:
        """Run one reconciliation pass for ``slice_info``.

        Args:
            slice_info: Slice identity and its currently stored status.
            current_time: Epoch seconds recorded on publish.
            config_updated_on: Epoch seconds of the last config update.

        Returns:
            Success (published, unchanged or no data), or a failure with
            ``requeue`` set. The stored status is untouched on failure.
        """
        self._start_timer()
        try:
            if self.reconcile_timeout is None:
                result = await self._run_pass(slice_info, current_time, config_updated_on)
            else:
                result = await asyncio.wait_for(
                    self._run_pass(slice_info, current_time, config_updated_on),
                    timeout=self.reconcile_timeout,
                )
        except asyncio.TimeoutError:
            logger.warning(
                "Reconcile timed out slice=%s timeout=%ss",
                slice_info.name,
                self.reconcile_timeout,
            )
            return ReconcileResult.failure(
                TimeoutError(f"Reconcile timed out after {self.reconcile_timeout}s"),
                self._elapsed_ms(),
            )
        except SliceUsageError as exc:
            logger.warning(
                "Reconcile failed slice=%s kind=%s error=%s",
                slice_info.name,
                type(exc).__name__,
                exc,
            )
            return ReconcileResult.failure(exc, self._elapsed_ms())

        result.duration_ms = self._elapsed_ms()
        return result

    async def _run_pass(
        self,
        slice_info: SliceInfo,
        current_time: int,
        config_updated_on: int,
    ) -> ReconcileResult:
        log_prefix = f"slice={slice_info.name}"

        namespaces = await self._namespace_enumerator.list_namespaces(slice_info.name)
        logger.info(
            "Reconciling resource usage %s namespaces=%s config_updated_on=%s",
            log_prefix,
            namespaces,
            config_updated_on,
        )

        aggregation = await self._aggregator.aggregate(namespaces, FailurePolicy.STRICT)
        cpu = aggregation.total_cpu_millicores
        memory = aggregation.total_memory_bytes
        logger.info("Slice usage %s cpu_m=%s memory_bytes=%s", log_prefix, cpu, memory)

        if aggregation.is_empty:
            # Transient empty reads must not clear a previously published status.
            logger.info("No usage data yet %s, skipping update", log_prefix)
            return ReconcileResult(success=True, outcome=ReconcileOutcome.NO_DATA)

        if not self._decision.should_update(slice_info.resource_quota_status, cpu, memory):
            logger.debug("Usage within drift threshold %s", log_prefix)
            return ReconcileResult(success=True, outcome=ReconcileOutcome.UNCHANGED)

        status = aggregation.to_status()
        stored = await self._publisher.publish(slice_info, status, current_time)
        return ReconcileResult(
            success=True,
            outcome=ReconcileOutcome.PUBLISHED,
            data=stored,
        )
