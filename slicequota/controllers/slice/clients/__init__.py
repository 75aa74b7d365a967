"""kubectl-backed hub and slice persistence clients."""

from slicequota.controllers.slice.clients.hub_client import KubectlHubClient
from slicequota.controllers.slice.clients.slice_store import KubectlSliceStore

__all__ = ["KubectlHubClient", "KubectlSliceStore"]
