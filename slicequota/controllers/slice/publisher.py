"""Status publisher - replaces a slice's quota status and reports it to the hub."""

from __future__ import annotations

import asyncio
import logging

from slicequota.constants.defaults import PUBLISH_RETRY_ATTEMPTS_DEFAULT
from slicequota.constants.timeouts import PUBLISH_RETRY_BACKOFF, PUBLISH_RETRY_BACKOFF_MAX
from slicequota.controllers.slice.interfaces import HubClientProvider, SliceStore
from slicequota.errors import PublishError
from slicequota.models.quota.slice_info import SliceInfo
from slicequota.models.quota.usage_info import SliceResourceQuotaStatus

logger = logging.getLogger(__name__)


class StatusPublisher:
    """Publishes a new quota status for a slice.

    The hub is updated first; the slice is only rewritten once the hub has
    accepted the status, so a failed publish leaves the stored status and
    timestamp as they were.
    """

    def __init__(
        self,
        hub_client: HubClientProvider,
        slice_store: SliceStore,
        retry_attempts: int = PUBLISH_RETRY_ATTEMPTS_DEFAULT,
        retry_backoff: float = PUBLISH_RETRY_BACKOFF,
    ) -> None:
        self._hub_client = hub_client
        self._slice_store = slice_store
        self.retry_attempts = max(1, retry_attempts)
        self.retry_backoff = max(0.0, retry_backoff)

    def _backoff_for_attempt(self, attempt: int) -> float:
        return min(PUBLISH_RETRY_BACKOFF_MAX, self.retry_backoff * (2 ** (attempt - 1)))

    async def _send_to_hub(self, slice_name: str, status: SliceResourceQuotaStatus) -> None:
        for attempt in range(1, self.retry_attempts + 1):
            try:
                await self._hub_client.update_resource_usage(slice_name, status)
                return
            except PublishError as exc:
                if attempt >= self.retry_attempts:
                    logger.warning(
                        "Hub publish failed slice=%s attempts=%s error=%s",
                        slice_name,
                        attempt,
                        exc,
                    )
                    raise
                delay = self._backoff_for_attempt(attempt)
                logger.warning(
                    "Hub publish failed (attempt %s/%s, slice=%s), retrying in %.2fs: %s",
                    attempt,
                    self.retry_attempts,
                    slice_name,
                    delay,
                    exc,
                )
                if delay > 0:
                    await asyncio.sleep(delay)

    async def publish(
        self,
        slice_info: SliceInfo,
        status: SliceResourceQuotaStatus,
        current_time: int,
    ) -> SliceInfo:
        """Publish ``status`` for ``slice_info`` and persist the slice.

        Args:
            slice_info: Slice as last read; not modified in place.
            status: Complete replacement status.
            current_time: Epoch seconds recorded as ``config_updated_on``.

        Returns:
            The slice as stored after the update.

        Raises:
            PublishError: When the hub rejects the status after all retries.
            SliceStoreError: When the slice cannot be written.
        """
        await self._send_to_hub(slice_info.name, status)

        updated = slice_info.model_copy(
            update={
                "resource_quota_status": status,
                "config_updated_on": current_time,
            }
        )
        stored = await self._slice_store.update_status(updated)
        logger.info(
            "Published slice usage slice=%s namespaces=%s cpu_m=%s memory_bytes=%s",
            slice_info.name,
            len(status.namespace_usages),
            status.total_cpu_millicores,
            status.total_memory_bytes,
        )
        return stored
