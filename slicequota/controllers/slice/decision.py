"""Update decision - percentage-drift hysteresis for slice usage.

Only decides whether a new aggregate is worth reporting; the reported value
itself is never damped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from slicequota.constants.defaults import DRIFT_THRESHOLD_PERCENT_DEFAULT
from slicequota.models.quota.usage_info import SliceResourceQuotaStatus

logger = logging.getLogger(__name__)


def calculate_percentage_diff(observed: int, candidate: int) -> int | None:
    """Signed percentage change from ``observed`` to ``candidate``.

    Uses integer arithmetic truncated toward zero:
    ``((candidate - observed) * 100) / observed``.

    Returns:
        The drift in whole percent, or None when ``observed`` is zero and
        the drift is undefined.
    """
    if observed == 0:
        return None
    delta = (candidate - observed) * 100
    magnitude = abs(delta) // abs(observed)
    return magnitude if (delta >= 0) == (observed > 0) else -magnitude


def exceeds_drift(observed: int, candidate: int, threshold_percent: int) -> bool:
    """True when ``candidate`` drifted more than ``threshold_percent`` from ``observed``.

    From a zero baseline any non-zero candidate counts as drift; zero
    against zero does not.
    """
    drift = calculate_percentage_diff(observed, candidate)
    if drift is None:
        return candidate != 0
    return abs(drift) > threshold_percent


@dataclass(frozen=True)
class UpdateDecision:
    """Decides whether new slice totals warrant publishing.

    Attributes:
        threshold_percent: Drift band; updates trigger strictly above it.
        legacy_memory_drift_uses_cpu: Compare the memory baseline against the
            CPU candidate. The original operator did this; it is kept only for
            parity and is off by default.
    """

    threshold_percent: int = DRIFT_THRESHOLD_PERCENT_DEFAULT
    legacy_memory_drift_uses_cpu: bool = False

    def should_update(
        self,
        previous: SliceResourceQuotaStatus | None,
        cpu_millicores: int,
        memory_bytes: int,
    ) -> bool:
        """Return True when the new totals should be published."""
        if previous is None:
            logger.debug("No previous status, first observation is always published")
            return True

        memory_candidate = cpu_millicores if self.legacy_memory_drift_uses_cpu else memory_bytes

        cpu_drifted = exceeds_drift(
            previous.total_cpu_millicores, cpu_millicores, self.threshold_percent
        )
        memory_drifted = exceeds_drift(
            previous.total_memory_bytes, memory_candidate, self.threshold_percent
        )
        logger.debug(
            "Drift check cpu_prev=%s cpu_new=%s cpu_drifted=%s "
            "memory_prev=%s memory_candidate=%s memory_drifted=%s legacy=%s",
            previous.total_cpu_millicores,
            cpu_millicores,
            cpu_drifted,
            previous.total_memory_bytes,
            memory_candidate,
            memory_drifted,
            self.legacy_memory_drift_uses_cpu,
        )
        return cpu_drifted or memory_drifted
