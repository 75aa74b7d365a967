"""Tests for base controller module."""

from __future__ import annotations

import pytest

from slicequota.constants.enums import ReconcileOutcome
from slicequota.controllers.base.base_controller import (
    AsyncControllerMixin,
    BaseController,
    ReconcileResult,
)
from slicequota.errors import PublishError


class TestReconcileResult:
    """Tests for ReconcileResult dataclass."""

    def test_defaults(self) -> None:
        """Test ReconcileResult default values."""
        result = ReconcileResult(success=True)
        assert result.outcome == ReconcileOutcome.UNCHANGED
        assert result.requeue is False
        assert result.data is None
        assert result.error is None
        assert result.error_kind is None
        assert result.duration_ms == 0.0
        assert result.updated is False

    def test_updated_when_published(self) -> None:
        result = ReconcileResult(success=True, outcome=ReconcileOutcome.PUBLISHED)
        assert result.updated is True

    def test_failure_requests_requeue(self) -> None:
        """Test failed results carry the error and ask for a requeue."""
        result = ReconcileResult.failure(PublishError("hub down"), duration_ms=12.5)
        assert result.success is False
        assert result.outcome == ReconcileOutcome.FAILED
        assert result.requeue is True
        assert result.error == "hub down"
        assert result.error_kind == "PublishError"
        assert result.duration_ms == 12.5

    def test_failure_without_message_uses_kind(self) -> None:
        result = ReconcileResult.failure(PublishError())
        assert result.error == "PublishError"


class TestAsyncControllerMixin:
    """Tests for AsyncControllerMixin class."""

    @pytest.fixture
    def mixin(self) -> AsyncControllerMixin:
        """Create mixin instance for testing."""
        return AsyncControllerMixin()

    def test_mixin_init(self, mixin: AsyncControllerMixin) -> None:
        """Test AsyncControllerMixin initialization."""
        assert mixin._load_start_time is None
        assert mixin._elapsed_ms() == 0.0

    def test_elapsed_after_start(self, mixin: AsyncControllerMixin) -> None:
        mixin._start_timer()
        assert mixin._load_start_time is not None
        assert mixin._elapsed_ms() >= 0.0


class TestBaseController:
    """Tests for BaseController abstract class."""

    def test_base_controller_is_abstract(self) -> None:
        """Test that BaseController is abstract and cannot be instantiated directly."""
        with pytest.raises(TypeError):
            BaseController()

    def test_base_controller_inherits_from_async_mixin(self) -> None:
        """Test that BaseController inherits from AsyncControllerMixin."""

        class ConcreteController(BaseController):
            async def check_connection(self) -> bool:
                return True

            async def reconcile(self, name: str) -> ReconcileResult:
                return ReconcileResult(success=True)

        controller = ConcreteController()
        assert isinstance(controller, AsyncControllerMixin)
