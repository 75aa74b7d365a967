"""Slice model as read from and written to the worker cluster."""

from __future__ import annotations

from pydantic import BaseModel, Field

from slicequota.models.quota.usage_info import SliceResourceQuotaStatus


class SliceInfo(BaseModel):
    """A slice and the quota status this worker last published for it."""

    name: str
    namespace: str = ""
    resource_version: str | None = None
    resource_quota_status: SliceResourceQuotaStatus | None = None
    config_updated_on: int = Field(default=0, ge=0)
