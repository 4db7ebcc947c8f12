"""Tests for the evaluation-cycle Celery task wiring."""

import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.cost_tracker.application.exceptions import InvalidCostSnapshotError
from app.cost_tracker.domain.entities.alert import Alert
from app.cost_tracker.domain.entities.notification_record import NotificationRecord
from app.cost_tracker.domain.value_objects.cost_snapshot import CostSnapshot
from app.cost_tracker.infrastructure.locks import LockError
from app.cost_tracker.infrastructure.tasks import alert_tasks

TASKS = "app.cost_tracker.infrastructure.tasks.alert_tasks"


@pytest.fixture
def mock_session() -> AsyncMock:
    """Create a mock database session."""
    return AsyncMock()


@pytest.fixture
def mock_redis() -> AsyncMock:
    """Create a mock Redis client."""
    return AsyncMock()


@pytest.fixture
def mock_gateway() -> AsyncMock:
    """Create a mock notification gateway."""
    return AsyncMock()


@pytest.fixture
def patched_infrastructure(
    mock_session: AsyncMock,
    mock_redis: AsyncMock,
    mock_gateway: AsyncMock,
):
    """Replace Redis, the database and the gateway with mocks."""
    session_factory = MagicMock()
    session_factory.return_value.__aenter__.return_value = mock_session

    with (
        patch(f"{TASKS}.create_redis_client", return_value=mock_redis),
        patch(f"{TASKS}.create_notification_gateway", return_value=mock_gateway),
        patch(f"{TASKS}.get_async_session_local", return_value=session_factory),
        patch(f"{TASKS}.dispose_engine", new_callable=AsyncMock) as mock_dispose,
        patch(f"{TASKS}.create_evaluation_lock") as mock_create_lock,
    ):
        mock_create_lock.return_value = asyncio.Lock()
        yield {
            "dispose_engine": mock_dispose,
            "create_lock": mock_create_lock,
        }


class TestCheckThresholdsAsync:
    """Tests for the shared async task body."""

    @pytest.mark.asyncio
    async def test_runs_cycle_with_explicit_snapshot(
        self,
        patched_infrastructure: dict,
        mock_redis: AsyncMock,
        mock_gateway: AsyncMock,
    ) -> None:
        """Test a full cycle against an explicit payload."""
        # Arrange
        alert_repository = AsyncMock()
        alert_repository.get_all_active.return_value = [
            Alert(id=1, name="EC2", threshold_amount=Decimal("100"), service_name="EC2")
        ]
        notification_repository = AsyncMock()
        notification_repository.insert.return_value = NotificationRecord(
            id=1, alert_id=1, triggered_amount=Decimal("150")
        )

        # Act
        with (
            patch(f"{TASKS}.SqlAlertRepository", return_value=alert_repository),
            patch(
                f"{TASKS}.SqlNotificationRepository",
                return_value=notification_repository,
            ),
        ):
            result = await alert_tasks._check_thresholds_async(
                [{"service": "EC2", "cost": 150}]
            )

        # Assert
        assert result["breaches"] == 1
        assert result["records_written"] == 1
        assert isinstance(result["timestamp"], str)
        mock_gateway.close.assert_awaited_once()
        mock_redis.aclose.assert_awaited_once()
        patched_infrastructure["dispose_engine"].assert_awaited_once()

    @pytest.mark.asyncio
    async def test_loads_recorded_costs_when_no_payload(
        self,
        patched_infrastructure: dict,
    ) -> None:
        """Test that the beat task reads month-to-date cost records."""
        # Arrange
        provider = AsyncMock()
        provider.get_current_snapshot.return_value = CostSnapshot.empty()
        alert_repository = AsyncMock()
        alert_repository.get_all_active.return_value = []

        # Act
        with (
            patch(f"{TASKS}.SqlCostSnapshotProvider", return_value=provider),
            patch(f"{TASKS}.SqlAlertRepository", return_value=alert_repository),
        ):
            result = await alert_tasks._check_thresholds_async()

        # Assert
        provider.get_current_snapshot.assert_awaited_once()
        assert result["alerts_checked"] == 0

    @pytest.mark.asyncio
    async def test_busy_lock_skips_cycle(
        self,
        patched_infrastructure: dict,
        mock_redis: AsyncMock,
    ) -> None:
        """Test that a cycle already holding the lock makes this one skip."""
        # Arrange
        busy_lock = MagicMock()
        busy_lock.__aenter__.side_effect = LockError("Unable to acquire lock")
        patched_infrastructure["create_lock"].return_value = busy_lock

        # Act
        result = await alert_tasks._check_thresholds_async([])

        # Assert
        assert result["skipped"] is True
        mock_redis.aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_malformed_payload_raises_before_connecting(self) -> None:
        """Test that payload validation happens before Redis is touched."""
        with patch(f"{TASKS}.create_redis_client") as mock_create_client:
            with pytest.raises(InvalidCostSnapshotError):
                await alert_tasks._check_thresholds_async([{"service": "EC2"}])

        mock_create_client.assert_not_called()
