"""Exceptions raised during slice usage reconciliation.

Every failure a pass can report derives from SliceUsageError, so the
controller converts exactly these into retryable results and lets anything
else propagate.
"""

from __future__ import annotations


class SliceUsageError(Exception):
    """Base exception for reconciliation failures."""


class NamespaceListError(SliceUsageError):
    """Slice member namespaces could not be listed."""


class MetricsUnavailable(SliceUsageError):
    """Pod metrics for one namespace could not be read."""

    def __init__(self, namespace: str, reason: str = "") -> None:
        self.namespace = namespace
        self.reason = reason
        message = f"Metrics unavailable for namespace {namespace}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PublishError(SliceUsageError):
    """The hub rejected or never acknowledged a status update."""


class ClientConstructionError(SliceUsageError):
    """A collaborator could not be built, so the pass must not run."""


class SliceStoreError(SliceUsageError):
    """The slice could not be read from or written to the worker cluster."""


class SliceConflictError(SliceStoreError):
    """The slice changed since it was read (resourceVersion mismatch)."""
