"""Tests for the alerts API router.

Covers alert creation, listing, activation toggling and the
notification feed.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.cost_tracker.application.dto.alert_dto import (
    AlertDTO,
    CreateAlertResponse,
    NotificationDTO,
)
from app.cost_tracker.application.exceptions import (
    AlertNotFoundError,
    AlertPersistenceError,
    AlertStoreUnavailableError,
    InvalidAlertError,
)
from app.cost_tracker.domain.entities.alert import AlertType
from app.cost_tracker.infrastructure.db.session import get_db_session
from app.cost_tracker.presentation.api.alerts import router


@pytest.fixture
def mock_session() -> AsyncMock:
    """Create a mock database session."""
    return AsyncMock()


@pytest.fixture
def app(mock_session: AsyncMock) -> FastAPI:
    """Create a test FastAPI app with the alerts router."""
    app = FastAPI()
    app.include_router(router, prefix="/api")

    async def override_session() -> AsyncGenerator[AsyncMock, None]:
        yield mock_session

    app.dependency_overrides[get_db_session] = override_session
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app)


@pytest.fixture
def mock_alert_dto() -> AlertDTO:
    """Create a mock AlertDTO for testing."""
    return AlertDTO(
        id=1,
        alert_name="EC2 budget",
        threshold_amount=Decimal("100.00"),
        service_name="Amazon EC2",
        alert_type=AlertType.THRESHOLD,
        is_active=True,
        created_at=datetime.now(timezone.utc),
    )


class TestCreateAlert:
    """Tests for POST /api/alerts."""

    def test_create_alert_success(
        self,
        client: TestClient,
        mock_session: AsyncMock,
    ) -> None:
        """Test successful alert creation."""
        with patch(
            "app.cost_tracker.presentation.api.alerts.CreateAlertUseCase"
        ) as mock_use_case_class:
            mock_use_case = AsyncMock()
            mock_use_case.execute.return_value = CreateAlertResponse(alert_id=42)
            mock_use_case_class.return_value = mock_use_case

            response = client.post(
                "/api/alerts",
                json={
                    "alertName": "EC2 budget",
                    "thresholdAmount": 100,
                    "serviceName": "Amazon EC2",
                    "alertType": "threshold",
                },
            )

            assert response.status_code == 201
            assert response.json() == {"success": True, "alertId": 42}
            mock_session.commit.assert_awaited_once()

            request = mock_use_case.execute.await_args.args[0]
            assert request.alert_name == "EC2 budget"
            assert request.threshold_amount == Decimal("100")

    def test_create_alert_defaults_to_threshold_type(self, client: TestClient) -> None:
        """Test that alertType may be omitted."""
        with patch(
            "app.cost_tracker.presentation.api.alerts.CreateAlertUseCase"
        ) as mock_use_case_class:
            mock_use_case = AsyncMock()
            mock_use_case.execute.return_value = CreateAlertResponse(alert_id=1)
            mock_use_case_class.return_value = mock_use_case

            response = client.post(
                "/api/alerts",
                json={"alertName": "S3", "thresholdAmount": 5, "serviceName": "S3"},
            )

            assert response.status_code == 201
            request = mock_use_case.execute.await_args.args[0]
            assert request.alert_type == AlertType.THRESHOLD

    @pytest.mark.parametrize(
        "payload",
        [
            {"thresholdAmount": 100, "serviceName": "EC2"},
            {"alertName": "x", "thresholdAmount": -5, "serviceName": "EC2"},
            {"alertName": "x", "thresholdAmount": 0, "serviceName": "EC2"},
            {"alertName": "x", "thresholdAmount": 10, "serviceName": ""},
            {"alertName": "x", "thresholdAmount": 10, "serviceName": "EC2", "alertType": "daily"},
        ],
    )
    def test_create_alert_validation_error(
        self, client: TestClient, payload: dict
    ) -> None:
        """Test 422 response for invalid payloads."""
        response = client.post("/api/alerts", json=payload)

        assert response.status_code == 422

    def test_create_alert_store_failure(
        self,
        client: TestClient,
        mock_session: AsyncMock,
    ) -> None:
        """Test 500 response when the alert cannot be stored."""
        with patch(
            "app.cost_tracker.presentation.api.alerts.CreateAlertUseCase"
        ) as mock_use_case_class:
            mock_use_case = AsyncMock()
            mock_use_case.execute.side_effect = AlertPersistenceError("db down")
            mock_use_case_class.return_value = mock_use_case

            response = client.post(
                "/api/alerts",
                json={"alertName": "x", "thresholdAmount": 10, "serviceName": "EC2"},
            )

            assert response.status_code == 500
            assert response.json()["detail"] == "Failed to save alert: db down"
            mock_session.commit.assert_not_awaited()

    def test_create_alert_commit_failure(
        self,
        client: TestClient,
        mock_session: AsyncMock,
    ) -> None:
        """Test 500 response when the transaction cannot be committed."""
        mock_session.commit.side_effect = ConnectionError("connection reset")

        with patch(
            "app.cost_tracker.presentation.api.alerts.CreateAlertUseCase"
        ) as mock_use_case_class:
            mock_use_case = AsyncMock()
            mock_use_case.execute.return_value = CreateAlertResponse(alert_id=1)
            mock_use_case_class.return_value = mock_use_case

            response = client.post(
                "/api/alerts",
                json={"alertName": "x", "thresholdAmount": 10, "serviceName": "EC2"},
            )

            assert response.status_code == 500
            assert "connection reset" in response.json()["detail"]
            mock_session.rollback.assert_awaited_once()

    @pytest.mark.parametrize(
        "payload",
        [
            {"alertName": "   ", "thresholdAmount": 100, "serviceName": "EC2"},
            {"alertName": "EC2 budget", "thresholdAmount": 100, "serviceName": " \t "},
        ],
    )
    def test_create_alert_blank_name_rejected(
        self,
        client: TestClient,
        mock_session: AsyncMock,
        payload: dict,
    ) -> None:
        """Test 422 response for whitespace-only names."""
        response = client.post("/api/alerts", json=payload)

        assert response.status_code == 422
        mock_session.commit.assert_not_awaited()

    def test_create_alert_invalid_definition(self, client: TestClient) -> None:
        """Test 422 response when the alert invariants reject the definition."""
        with patch(
            "app.cost_tracker.presentation.api.alerts.CreateAlertUseCase"
        ) as mock_use_case_class:
            mock_use_case = AsyncMock()
            mock_use_case.execute.side_effect = InvalidAlertError(
                "Alert name cannot be empty"
            )
            mock_use_case_class.return_value = mock_use_case

            response = client.post(
                "/api/alerts",
                json={"alertName": "x", "thresholdAmount": 10, "serviceName": "EC2"},
            )

            assert response.status_code == 422
            assert response.json()["detail"] == "Invalid alert: Alert name cannot be empty"


class TestListAlerts:
    """Tests for GET /api/alerts."""

    def test_list_alerts(self, client: TestClient, mock_alert_dto: AlertDTO) -> None:
        """Test listing every alert with camelCase fields."""
        with patch(
            "app.cost_tracker.presentation.api.alerts.ListAlertsUseCase"
        ) as mock_use_case_class:
            mock_use_case = AsyncMock()
            mock_use_case.execute.return_value = [mock_alert_dto]
            mock_use_case_class.return_value = mock_use_case

            response = client.get("/api/alerts")

            assert response.status_code == 200
            data = response.json()
            assert data["success"] is True
            assert len(data["data"]) == 1
            alert = data["data"][0]
            assert alert["alertName"] == "EC2 budget"
            assert alert["thresholdAmount"] == 100.0
            assert alert["serviceName"] == "Amazon EC2"
            assert alert["alertType"] == "threshold"
            assert alert["isActive"] is True

    def test_list_alerts_store_failure(self, client: TestClient) -> None:
        """Test 500 response with a message when alerts cannot be read."""
        with patch(
            "app.cost_tracker.presentation.api.alerts.ListAlertsUseCase"
        ) as mock_use_case_class:
            mock_use_case = AsyncMock()
            mock_use_case.execute.side_effect = AlertStoreUnavailableError("db down")
            mock_use_case_class.return_value = mock_use_case

            response = client.get("/api/alerts")

            assert response.status_code == 500
            assert response.json()["detail"] == "Alert store unavailable: db down"


class TestListNotifications:
    """Tests for GET /api/alerts/notifications."""

    def test_list_notifications(self, client: TestClient) -> None:
        """Test the notification feed shape."""
        notification = NotificationDTO(
            id=3,
            alert_id=1,
            alert_name="EC2 budget",
            service_name="Amazon EC2",
            triggered_amount=Decimal("150.25"),
            triggered_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        )

        with patch(
            "app.cost_tracker.presentation.api.alerts.GetRecentNotificationsUseCase"
        ) as mock_use_case_class:
            mock_use_case = AsyncMock()
            mock_use_case.execute.return_value = [notification]
            mock_use_case_class.return_value = mock_use_case

            response = client.get("/api/alerts/notifications")

            assert response.status_code == 200
            data = response.json()
            assert data["success"] is True
            assert data["data"][0]["alertId"] == 1
            assert data["data"][0]["alertName"] == "EC2 budget"
            assert data["data"][0]["triggeredAmount"] == 150.25
            assert mock_use_case_class.call_args.kwargs["page_size"] == 10

    def test_list_notifications_empty(self, client: TestClient) -> None:
        """Test an empty feed."""
        with patch(
            "app.cost_tracker.presentation.api.alerts.GetRecentNotificationsUseCase"
        ) as mock_use_case_class:
            mock_use_case = AsyncMock()
            mock_use_case.execute.return_value = []
            mock_use_case_class.return_value = mock_use_case

            response = client.get("/api/alerts/notifications")

            assert response.status_code == 200
            assert response.json() == {"success": True, "data": []}

    def test_list_notifications_store_failure(self, client: TestClient) -> None:
        """Test 500 response with a message when notifications cannot be read."""
        with patch(
            "app.cost_tracker.presentation.api.alerts.GetRecentNotificationsUseCase"
        ) as mock_use_case_class:
            mock_use_case = AsyncMock()
            mock_use_case.execute.side_effect = AlertStoreUnavailableError("db down")
            mock_use_case_class.return_value = mock_use_case

            response = client.get("/api/alerts/notifications")

            assert response.status_code == 500
            assert response.json()["detail"] == "Alert store unavailable: db down"


class TestUpdateAlert:
    """Tests for PATCH /api/alerts/{alert_id}."""

    def test_deactivate_alert(
        self,
        client: TestClient,
        mock_session: AsyncMock,
        mock_alert_dto: AlertDTO,
    ) -> None:
        """Test soft-disabling an alert."""
        with patch(
            "app.cost_tracker.presentation.api.alerts.SetAlertActiveUseCase"
        ) as mock_use_case_class:
            mock_use_case = AsyncMock()
            mock_use_case.execute.return_value = mock_alert_dto.model_copy(
                update={"is_active": False}
            )
            mock_use_case_class.return_value = mock_use_case

            response = client.patch("/api/alerts/1", json={"isActive": False})

            assert response.status_code == 200
            assert response.json()["isActive"] is False
            mock_use_case.execute.assert_awaited_once_with(1, False)
            mock_session.commit.assert_awaited_once()

    def test_update_unknown_alert(self, client: TestClient) -> None:
        """Test 404 response for a missing alert."""
        with patch(
            "app.cost_tracker.presentation.api.alerts.SetAlertActiveUseCase"
        ) as mock_use_case_class:
            mock_use_case = AsyncMock()
            mock_use_case.execute.side_effect = AlertNotFoundError(999)
            mock_use_case_class.return_value = mock_use_case

            response = client.patch("/api/alerts/999", json={"isActive": True})

            assert response.status_code == 404
            assert "not found" in response.json()["detail"].lower()

    def test_update_alert_store_failure(self, client: TestClient) -> None:
        """Test 500 response when the alert cannot be read."""
        with patch(
            "app.cost_tracker.presentation.api.alerts.SetAlertActiveUseCase"
        ) as mock_use_case_class:
            mock_use_case = AsyncMock()
            mock_use_case.execute.side_effect = AlertStoreUnavailableError("db down")
            mock_use_case_class.return_value = mock_use_case

            response = client.patch("/api/alerts/1", json={"isActive": False})

            assert response.status_code == 500
            assert "db down" in response.json()["detail"]
