"""Tests for the health router."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.cost_tracker.infrastructure.db.session import get_db_session
from app.cost_tracker.presentation.api.health import router


@pytest.fixture
def mock_session() -> AsyncMock:
    """Create a mock database session."""
    return AsyncMock()


@pytest.fixture
def client(mock_session: AsyncMock) -> TestClient:
    """Create a test client with the session dependency overridden."""
    app = FastAPI()
    app.include_router(router, prefix="/api")

    async def override_session() -> AsyncGenerator[AsyncMock, None]:
        yield mock_session

    app.dependency_overrides[get_db_session] = override_session
    return TestClient(app)


def test_health(client: TestClient) -> None:
    """Test the liveness endpoint."""
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_ready_when_database_answers(client: TestClient, mock_session: AsyncMock) -> None:
    """Test readiness with a reachable database."""
    response = client.get("/api/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready"}
    mock_session.execute.assert_awaited_once()


def test_not_ready_when_database_fails(client: TestClient, mock_session: AsyncMock) -> None:
    """Test 503 when the database is unreachable."""
    mock_session.execute.side_effect = ConnectionError("refused")

    response = client.get("/api/ready")

    assert response.status_code == 503
