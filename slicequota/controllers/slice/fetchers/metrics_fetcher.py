"""Pod metrics fetcher - reads metrics.k8s.io usage for a namespace."""

from __future__ import annotations

import json
import logging
from typing import Any

from slicequota.constants.timeouts import METRICS_REQUEST_TIMEOUT
from slicequota.constants.values import POD_METRICS_PATH_TEMPLATE
from slicequota.controllers.slice.parsers.pod_metrics_parser import PodMetricsParser
from slicequota.errors import MetricsUnavailable
from slicequota.models.quota.usage_info import PodMetricInfo

logger = logging.getLogger(__name__)


class PodMetricsFetcher:
    """Fetches pod metrics through the aggregated metrics API."""

    def __init__(
        self,
        run_kubectl_func: Any,
        request_timeout: str = METRICS_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
            request_timeout: kubectl ``--request-timeout`` value
        """
        self._run_kubectl = run_kubectl_func
        self._request_timeout = request_timeout
        self._parser = PodMetricsParser()

    def _build_args(self, namespace: str) -> tuple[str, ...]:
        return (
            "get",
            "--raw",
            POD_METRICS_PATH_TEMPLATE.format(namespace=namespace),
            f"--request-timeout={self._request_timeout}",
        )

    async def fetch(self, namespace: str) -> list[PodMetricInfo]:
        """Fetch and parse pod metrics for ``namespace``.

        Raises:
            MetricsUnavailable: If the metrics API call fails or its payload
                cannot be parsed.
        """
        try:
            output = await self._run_kubectl(self._build_args(namespace))
        except Exception as exc:
            raise MetricsUnavailable(namespace, str(exc)) from exc

        if not output:
            return []

        try:
            return self._parser.parse_pod_metrics_list(json.loads(output))
        except (json.JSONDecodeError, ValueError) as exc:
            raise MetricsUnavailable(namespace, f"invalid metrics payload: {exc}") from exc
