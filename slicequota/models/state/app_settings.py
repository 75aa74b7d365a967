"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from slicequota.constants.defaults import (
    DRIFT_THRESHOLD_PERCENT_DEFAULT,
    MAX_CONCURRENT_FETCHES_DEFAULT,
    NAMESPACE_SELECTOR_LABEL_DEFAULT,
    PUBLISH_RETRY_ATTEMPTS_DEFAULT,
    SLICE_NAMESPACE_DEFAULT,
)
from slicequota.constants.limits import (
    DRIFT_THRESHOLD_MAX,
    DRIFT_THRESHOLD_MIN,
    MAX_CONCURRENT_FETCHES_MAX,
    MAX_CONCURRENT_FETCHES_MIN,
    PUBLISH_RETRY_ATTEMPTS_MAX,
    PUBLISH_RETRY_ATTEMPTS_MIN,
)
from slicequota.constants.timeouts import (
    KUBECTL_COMMAND_TIMEOUT,
    METRICS_FETCH_TIMEOUT,
    PUBLISH_RETRY_BACKOFF,
    RECONCILE_TIMEOUT,
)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    # Cluster access
    kube_context: str | None = None
    hub_context: str | None = None
    slice_namespace: str = SLICE_NAMESPACE_DEFAULT
    hub_project_namespace: str = ""
    cluster_name: str = ""
    namespace_selector_label: str = NAMESPACE_SELECTOR_LABEL_DEFAULT

    # Update decision
    drift_threshold_percent: int = Field(
        default=DRIFT_THRESHOLD_PERCENT_DEFAULT,
        ge=DRIFT_THRESHOLD_MIN,
        le=DRIFT_THRESHOLD_MAX,
    )
    # Compare the memory baseline against the CPU candidate, as the
    # original operator did. Off by default.
    legacy_memory_drift_uses_cpu: bool = False

    # Aggregation
    max_concurrent_fetches: int = Field(
        default=MAX_CONCURRENT_FETCHES_DEFAULT,
        ge=MAX_CONCURRENT_FETCHES_MIN,
        le=MAX_CONCURRENT_FETCHES_MAX,
    )
    metrics_fetch_timeout_seconds: float = Field(default=METRICS_FETCH_TIMEOUT, gt=0)
    kubectl_command_timeout_seconds: int = Field(default=KUBECTL_COMMAND_TIMEOUT, gt=0)

    # Publishing
    publish_retry_attempts: int = Field(
        default=PUBLISH_RETRY_ATTEMPTS_DEFAULT,
        ge=PUBLISH_RETRY_ATTEMPTS_MIN,
        le=PUBLISH_RETRY_ATTEMPTS_MAX,
    )
    publish_retry_backoff_seconds: float = Field(default=PUBLISH_RETRY_BACKOFF, ge=0)

    reconcile_timeout_seconds: float = Field(default=RECONCILE_TIMEOUT, gt=0)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
