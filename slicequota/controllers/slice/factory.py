"""Builds a fully wired SliceUsageController from settings.

The factory owns collaborator construction: if any collaborator cannot be
built, ClientConstructionError is raised before a pass can run.
"""

from __future__ import annotations

import logging

from slicequota.controllers.base.kubectl_runner import KubectlRunner
from slicequota.controllers.slice.aggregator import UsageAggregator
from slicequota.controllers.slice.clients.hub_client import KubectlHubClient
from slicequota.controllers.slice.clients.slice_store import KubectlSliceStore
from slicequota.controllers.slice.controller import SliceUsageController
from slicequota.controllers.slice.decision import UpdateDecision
from slicequota.controllers.slice.fetchers.metrics_fetcher import PodMetricsFetcher
from slicequota.controllers.slice.fetchers.namespace_fetcher import NamespaceFetcher
from slicequota.controllers.slice.publisher import StatusPublisher
from slicequota.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)


def build_slice_usage_controller(
    settings: AppSettings,
    worker_runner: KubectlRunner | None = None,
    hub_runner: KubectlRunner | None = None,
) -> SliceUsageController:
    """Build a controller talking to the worker and hub clusters via kubectl.

    Args:
        settings: Validated application settings.
        worker_runner: Optional runner for the worker cluster.
        hub_runner: Optional runner for the hub cluster.

    Raises:
        ClientConstructionError: If kubectl is missing or hub settings are
            incomplete.
    """
    if worker_runner is None:
        worker_runner = KubectlRunner(
            context=settings.kube_context,
            timeout_seconds=settings.kubectl_command_timeout_seconds,
        )
    if hub_runner is None:
        hub_runner = KubectlRunner(
            context=settings.hub_context,
            timeout_seconds=settings.kubectl_command_timeout_seconds,
        )

    hub_client = KubectlHubClient(
        hub_runner.run,
        project_namespace=settings.hub_project_namespace,
        cluster_name=settings.cluster_name,
    )
    slice_store = KubectlSliceStore(worker_runner.run, namespace=settings.slice_namespace)
    namespace_fetcher = NamespaceFetcher(
        worker_runner.run,
        selector_label=settings.namespace_selector_label,
    )
    aggregator = UsageAggregator(
        PodMetricsFetcher(worker_runner.run),
        max_concurrent=settings.max_concurrent_fetches,
        fetch_timeout=settings.metrics_fetch_timeout_seconds,
    )
    decision = UpdateDecision(
        threshold_percent=settings.drift_threshold_percent,
        legacy_memory_drift_uses_cpu=settings.legacy_memory_drift_uses_cpu,
    )
    if settings.legacy_memory_drift_uses_cpu:
        logger.warning("Memory drift compares against the CPU candidate (legacy parity mode)")
    publisher = StatusPublisher(
        hub_client,
        slice_store,
        retry_attempts=settings.publish_retry_attempts,
        retry_backoff=settings.publish_retry_backoff_seconds,
    )
    return SliceUsageController(
        namespace_enumerator=namespace_fetcher,
        aggregator=aggregator,
        decision=decision,
        publisher=publisher,
        slice_store=slice_store,
        reconcile_timeout=settings.reconcile_timeout_seconds,
    )
