"""Namespace fetcher - lists namespaces labeled as slice members."""

from __future__ import annotations

import json
import logging
from typing import Any

from slicequota.constants.defaults import NAMESPACE_SELECTOR_LABEL_DEFAULT
from slicequota.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from slicequota.errors import NamespaceListError

logger = logging.getLogger(__name__)


class NamespaceFetcher:
    """Fetches slice member namespaces from the worker cluster."""

    def __init__(
        self,
        run_kubectl_func: Any,
        selector_label: str = NAMESPACE_SELECTOR_LABEL_DEFAULT,
    ) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
            selector_label: Label key whose value names the slice
        """
        self._run_kubectl = run_kubectl_func
        self.selector_label = selector_label

    def _build_args(self, slice_name: str) -> tuple[str, ...]:
        return (
            "get",
            "namespaces",
            "-l",
            f"{self.selector_label}={slice_name}",
            "-o",
            "json",
            f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}",
        )

    async def list_namespaces(self, slice_name: str) -> list[str]:
        """Return sorted member namespace names for ``slice_name``.

        Raises:
            NamespaceListError: If kubectl fails or returns invalid JSON.
        """
        try:
            output = await self._run_kubectl(self._build_args(slice_name))
        except Exception as exc:
            raise NamespaceListError(
                f"Failed to list namespaces for slice {slice_name}: {exc}"
            ) from exc

        if not output:
            return []

        try:
            data = json.loads(output)
        except json.JSONDecodeError as exc:
            raise NamespaceListError(
                f"Invalid namespace list for slice {slice_name}: {exc}"
            ) from exc

        names = {
            str(item.get("metadata", {}).get("name", "")).strip()
            for item in data.get("items", [])
        }
        return sorted(name for name in names if name)
