"""Base controller building blocks."""

from slicequota.controllers.base.base_controller import (
    AsyncControllerMixin,
    BaseController,
    ReconcileResult,
)
from slicequota.controllers.base.kubectl_runner import KubectlError, KubectlRunner

__all__ = [
    "AsyncControllerMixin",
    "BaseController",
    "KubectlError",
    "KubectlRunner",
    "ReconcileResult",
]
