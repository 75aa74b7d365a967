"""Slice store - reads and writes Slice status on the worker cluster."""

from __future__ import annotations

import json
import logging
from typing import Any

from slicequota.constants.defaults import SLICE_NAMESPACE_DEFAULT
from slicequota.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from slicequota.constants.values import SLICE_RESOURCE
from slicequota.controllers.base.kubectl_runner import KubectlError
from slicequota.controllers.slice.parsers.status_parser import StatusParser
from slicequota.errors import SliceConflictError, SliceStoreError
from slicequota.models.quota.slice_info import SliceInfo

logger = logging.getLogger(__name__)


class KubectlSliceStore:
    """Slice persistence through kubectl with resourceVersion concurrency.

    Status writes are merge patches on the status subresource that carry the
    resourceVersion that was read; the API server rejects the write with a
    conflict when another writer got there first.
    """

    def __init__(
        self,
        run_kubectl_func: Any,
        namespace: str = SLICE_NAMESPACE_DEFAULT,
    ) -> None:
        self._run_kubectl = run_kubectl_func
        self.namespace = namespace
        self._parser = StatusParser()

    def _parse_output(self, name: str, output: str) -> SliceInfo:
        try:
            return self._parser.parse_slice(json.loads(output))
        except (json.JSONDecodeError, ValueError) as exc:
            raise SliceStoreError(f"Invalid slice object for {name}: {exc}") from exc

    async def get_slice(self, name: str) -> SliceInfo:
        """Read the slice and its stored quota status.

        Raises:
            SliceStoreError: If the slice is missing or unreadable.
        """
        try:
            output = await self._run_kubectl(
                (
                    "get",
                    SLICE_RESOURCE,
                    name,
                    "-n",
                    self.namespace,
                    "-o",
                    "json",
                    f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}",
                )
            )
        except Exception as exc:
            raise SliceStoreError(f"Failed to read slice {name}: {exc}") from exc
        return self._parse_output(name, output)

    async def update_status(self, slice_info: SliceInfo) -> SliceInfo:
        """Write the slice's quota status and timestamp in one patch.

        Raises:
            SliceConflictError: If the slice changed since it was read.
            SliceStoreError: On any other write failure.
        """
        patch = self._parser.slice_status_patch(slice_info)
        try:
            output = await self._run_kubectl(
                (
                    "patch",
                    SLICE_RESOURCE,
                    slice_info.name,
                    "-n",
                    slice_info.namespace or self.namespace,
                    "--subresource=status",
                    "--type=merge",
                    "-p",
                    json.dumps(patch, separators=(",", ":")),
                    "-o",
                    "json",
                    f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}",
                )
            )
        except KubectlError as exc:
            if exc.is_conflict:
                raise SliceConflictError(
                    f"Slice {slice_info.name} was modified concurrently: {exc}"
                ) from exc
            raise SliceStoreError(f"Failed to update slice {slice_info.name}: {exc}") from exc
        except Exception as exc:
            raise SliceStoreError(f"Failed to update slice {slice_info.name}: {exc}") from exc

        if not output:
            return slice_info
        return self._parse_output(slice_info.name, output)
