"""All enum definitions.

This module consolidates all enumerations used throughout the package.
"""

from enum import Enum

# =============================================================================
# Aggregation Enums
# =============================================================================

class FailurePolicy(Enum):
    """How the aggregator treats a namespace whose metrics cannot be read."""

    STRICT = "strict"
    BEST_EFFORT = "best_effort"


# =============================================================================
# Reconcile Enums
# =============================================================================

class ReconcileOutcome(Enum):
    """Outcome of one reconciliation pass."""

    NO_DATA = "no_data"
    UNCHANGED = "unchanged"
    PUBLISHED = "published"
    FAILED = "failed"


__all__ = [
    "FailurePolicy",
    "ReconcileOutcome",
]
