"""Limit and threshold constants.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Drift thresholds
# ============================================================================

DRIFT_THRESHOLD_MIN: Final = 0
DRIFT_THRESHOLD_MAX: Final = 100

# ============================================================================
# Controller limits
# ============================================================================

MAX_CONCURRENT_FETCHES_MIN: Final = 1
MAX_CONCURRENT_FETCHES_MAX: Final = 32
PUBLISH_RETRY_ATTEMPTS_MIN: Final = 1
PUBLISH_RETRY_ATTEMPTS_MAX: Final = 10

__all__ = [
    "DRIFT_THRESHOLD_MAX",
    "DRIFT_THRESHOLD_MIN",
    "MAX_CONCURRENT_FETCHES_MAX",
    "MAX_CONCURRENT_FETCHES_MIN",
    "PUBLISH_RETRY_ATTEMPTS_MAX",
    "PUBLISH_RETRY_ATTEMPTS_MIN",
]
