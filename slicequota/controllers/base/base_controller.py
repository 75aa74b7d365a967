"""Base controller with async reconcile patterns.

This module provides the foundation for reconcilers driven by an external
control loop: a pass runs once, reports a result, and leaves rescheduling
to the caller.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from slicequota.constants.enums import ReconcileOutcome

logger = logging.getLogger(__name__)


@dataclass
class ReconcileResult:
    """Result wrapper for one reconciliation pass."""

    success: bool
    outcome: ReconcileOutcome = ReconcileOutcome.UNCHANGED
    requeue: bool = False
    data: Any | None = None
    error: str | None = None
    error_kind: str | None = None
    duration_ms: float = 0.0

    @property
    def updated(self) -> bool:
        """True when the pass published a new status."""
        return self.outcome == ReconcileOutcome.PUBLISHED

    @classmethod
    def failure(cls, error: BaseException, duration_ms: float = 0.0) -> ReconcileResult:
        """Build a failed result that asks the control loop to requeue."""
        return cls(
            success=False,
            outcome=ReconcileOutcome.FAILED,
            requeue=True,
            error=str(error) or type(error).__name__,
            error_kind=type(error).__name__,
            duration_ms=duration_ms,
        )


class AsyncControllerMixin:
    """Mixin providing pass timing for controllers."""

    def __init__(self) -> None:
        """Initialize the async controller mixin."""
        self._load_start_time: float | None = None

    def _start_timer(self) -> None:
        self._load_start_time = time.monotonic()

    def _elapsed_ms(self) -> float:
        if self._load_start_time is None:
            return 0.0
        return (time.monotonic() - self._load_start_time) * 1000


class BaseController(AsyncControllerMixin, ABC):
    """Base controller class for single-pass reconcilers.

    Subclasses implement the abstract methods; they must not retry
    internally beyond what their own collaborators do.
    """

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def reconcile(self, name: str) -> ReconcileResult:
        """Run one reconciliation pass for the named object.

        Returns:
            The pass result; failures set ``requeue``.
        """
        ...
