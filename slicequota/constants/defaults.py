"""Default values for settings.

All default values used in the Settings model.
"""

from typing import Final

# ============================================================================
# Cluster defaults
# ============================================================================

SLICE_NAMESPACE_DEFAULT: Final = "kubeslice-system"
NAMESPACE_SELECTOR_LABEL_DEFAULT: Final = "kubeslice.io/slice"

# ============================================================================
# Reconciliation defaults
# ============================================================================

DRIFT_THRESHOLD_PERCENT_DEFAULT: Final = 5
MAX_CONCURRENT_FETCHES_DEFAULT: Final = 4
PUBLISH_RETRY_ATTEMPTS_DEFAULT: Final = 3

__all__ = [
    "DRIFT_THRESHOLD_PERCENT_DEFAULT",
    "MAX_CONCURRENT_FETCHES_DEFAULT",
    "NAMESPACE_SELECTOR_LABEL_DEFAULT",
    "PUBLISH_RETRY_ATTEMPTS_DEFAULT",
    "SLICE_NAMESPACE_DEFAULT",
]
