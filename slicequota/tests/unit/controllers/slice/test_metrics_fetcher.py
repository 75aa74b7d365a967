"""Tests for PodMetricsFetcher."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from slicequota.controllers.slice.fetchers.metrics_fetcher import PodMetricsFetcher
from slicequota.errors import MetricsUnavailable


@pytest.mark.asyncio
async def test_fetch_reads_metrics_api_for_namespace() -> None:
    payload = {
        "items": [
            {
                "metadata": {"name": "web-1"},
                "containers": [{"name": "app", "usage": {"cpu": "25m", "memory": "4Mi"}}],
            }
        ]
    }
    run_kubectl = AsyncMock(return_value=json.dumps(payload))
    fetcher = PodMetricsFetcher(run_kubectl, request_timeout="5s")

    pods = await fetcher.fetch("team-a")

    assert [pod.pod for pod in pods] == ["web-1"]
    assert pods[0].containers[0].cpu_millicores == 25
    assert run_kubectl.await_args.args[0] == (
        "get",
        "--raw",
        "/apis/metrics.k8s.io/v1beta1/namespaces/team-a/pods",
        "--request-timeout=5s",
    )


@pytest.mark.asyncio
async def test_fetch_empty_output_means_no_pods() -> None:
    fetcher = PodMetricsFetcher(AsyncMock(return_value=""))

    assert await fetcher.fetch("team-a") == []


@pytest.mark.asyncio
async def test_fetch_kubectl_failure_names_namespace() -> None:
    fetcher = PodMetricsFetcher(AsyncMock(side_effect=RuntimeError("metrics api down")))

    with pytest.raises(MetricsUnavailable) as exc_info:
        await fetcher.fetch("team-a")

    assert exc_info.value.namespace == "team-a"
    assert "metrics api down" in exc_info.value.reason


@pytest.mark.asyncio
async def test_fetch_invalid_payload() -> None:
    fetcher = PodMetricsFetcher(AsyncMock(return_value="<html>"))

    with pytest.raises(MetricsUnavailable, match="invalid metrics payload"):
        await fetcher.fetch("team-a")


@pytest.mark.asyncio
async def test_fetch_malformed_quantity() -> None:
    payload = {
        "items": [
            {
                "metadata": {"name": "p"},
                "containers": [{"name": "c", "usage": {"memory": "12Zi"}}],
            }
        ]
    }
    fetcher = PodMetricsFetcher(AsyncMock(return_value=json.dumps(payload)))

    with pytest.raises(MetricsUnavailable):
        await fetcher.fetch("team-a")
