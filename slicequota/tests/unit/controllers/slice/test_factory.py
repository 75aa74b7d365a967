"""Tests for the controller factory."""

from __future__ import annotations

import pytest

from slicequota.controllers.base import kubectl_runner
from slicequota.controllers.base.kubectl_runner import KubectlRunner
from slicequota.controllers.slice.controller import SliceUsageController
from slicequota.controllers.slice.factory import build_slice_usage_controller
from slicequota.errors import ClientConstructionError
from slicequota.models.state.app_settings import AppSettings


@pytest.fixture(autouse=True)
def kubectl_on_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(kubectl_runner.shutil, "which", lambda binary: f"/usr/bin/{binary}")


def test_builds_wired_controller() -> None:
    settings = AppSettings(
        kube_context="worker-1",
        hub_context="hub",
        hub_project_namespace="kubeslice-acme",
        cluster_name="worker-1",
        max_concurrent_fetches=8,
        reconcile_timeout_seconds=30,
    )

    controller = build_slice_usage_controller(settings)

    assert isinstance(controller, SliceUsageController)
    assert controller.reconcile_timeout == 30
    assert controller._aggregator.max_concurrent == 8
    assert controller._decision.threshold_percent == settings.drift_threshold_percent


def test_uses_supplied_runners() -> None:
    settings = AppSettings(hub_project_namespace="kubeslice-acme", cluster_name="worker-1")
    worker = KubectlRunner(context="worker-1")
    hub = KubectlRunner(context="hub")

    controller = build_slice_usage_controller(settings, worker_runner=worker, hub_runner=hub)

    assert controller._publisher._hub_client.cluster_name == "worker-1"


def test_missing_hub_settings_fail_construction() -> None:
    with pytest.raises(ClientConstructionError):
        build_slice_usage_controller(AppSettings())


def test_missing_kubectl_fails_construction(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(kubectl_runner.shutil, "which", lambda binary: None)
    settings = AppSettings(hub_project_namespace="kubeslice-acme", cluster_name="worker-1")

    with pytest.raises(ClientConstructionError):
        build_slice_usage_controller(settings)


def test_legacy_memory_drift_flag_is_passed_through() -> None:
    settings = AppSettings(
        hub_project_namespace="kubeslice-acme",
        cluster_name="worker-1",
        legacy_memory_drift_uses_cpu=True,
    )

    controller = build_slice_usage_controller(settings)

    assert controller._decision.legacy_memory_drift_uses_cpu is True
