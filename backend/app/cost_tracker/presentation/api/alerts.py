"""Cost alert API endpoints.

- POST /api/alerts - Create new alert
- GET /api/alerts - List all alerts
- GET /api/alerts/notifications - Most recent fired notifications
- PATCH /api/alerts/{alert_id} - Enable or disable an alert
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.cost_tracker.application.dto.alert_dto import (
    AlertDTO,
    AlertListDTO,
    CreateAlertRequest,
    CreateAlertResponse,
    NotificationListDTO,
    UpdateAlertRequest,
)
from app.cost_tracker.application.exceptions import (
    AlertNotFoundError,
    AlertPersistenceError,
    AlertStoreUnavailableError,
    InvalidAlertError,
)
from app.cost_tracker.application.use_cases.create_alert import (
    CreateAlertUseCase,
    ListAlertsUseCase,
    SetAlertActiveUseCase,
)
from app.cost_tracker.application.use_cases.get_notifications import (
    GetRecentNotificationsUseCase,
)
from app.cost_tracker.infrastructure.db.session import get_db_session
from app.cost_tracker.infrastructure.repositories.sql_alert_repository import SqlAlertRepository
from app.cost_tracker.infrastructure.repositories.sql_notification_repository import (
    SqlNotificationRepository,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def _commit(session: AsyncSession) -> None:
    try:
        await session.commit()
    except Exception as e:
        await session.rollback()
        logger.error(f"Failed to commit alert change: {e}")
        raise AlertPersistenceError(str(e)) from e


@router.post(
    "/alerts",
    response_model=CreateAlertResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_alert(
    request: CreateAlertRequest,
    session: AsyncSession = Depends(get_db_session),
) -> CreateAlertResponse:
    """Create a new cost alert.

    The alert starts active and is picked up by the next evaluation cycle.

    Args:
        request: Alert name, threshold, service and type.
        session: Database session (injected).

    Returns:
        CreateAlertResponse carrying the new alert ID.

    Raises:
        HTTPException: 422 if the alert definition is invalid.
        HTTPException: 500 if the alert could not be stored.
    """
    use_case = CreateAlertUseCase(alert_repository=SqlAlertRepository(session))

    try:
        result = await use_case.execute(request)
        await _commit(session)
        return result
    except InvalidAlertError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.message,
        ) from e
    except AlertPersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message,
        ) from e


@router.get("/alerts", response_model=AlertListDTO)
async def list_alerts(
    session: AsyncSession = Depends(get_db_session),
) -> AlertListDTO:
    """List every alert, active and inactive, ordered by ID."""
    use_case = ListAlertsUseCase(alert_repository=SqlAlertRepository(session))

    try:
        return AlertListDTO(data=await use_case.execute())
    except AlertStoreUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message,
        ) from e


# Declared before /alerts/{alert_id} so "notifications" is not parsed as an ID
@router.get("/alerts/notifications", response_model=NotificationListDTO)
async def list_notifications(
    session: AsyncSession = Depends(get_db_session),
) -> NotificationListDTO:
    """Return the most recent fired notifications, newest first.

    Each entry carries the name and service of the alert that fired.
    """
    use_case = GetRecentNotificationsUseCase(
        notification_repository=SqlNotificationRepository(session),
        page_size=get_settings().notifications_page_size,
    )

    try:
        return NotificationListDTO(data=await use_case.execute())
    except AlertStoreUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message,
        ) from e


@router.patch("/alerts/{alert_id}", response_model=AlertDTO)
async def update_alert(
    alert_id: Annotated[int, Path(description="Alert ID")],
    request: UpdateAlertRequest,
    session: AsyncSession = Depends(get_db_session),
) -> AlertDTO:
    """Enable or disable an alert.

    Alerts are never deleted; a disabled alert is skipped by evaluation
    but its notification history is kept.

    Raises:
        HTTPException: 404 if alert not found.
        HTTPException: 500 if the store cannot be read or the update
            could not be stored.
    """
    use_case = SetAlertActiveUseCase(alert_repository=SqlAlertRepository(session))

    try:
        result = await use_case.execute(alert_id, request.is_active)
        await _commit(session)
        return result
    except AlertNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        ) from e
    except (AlertPersistenceError, AlertStoreUnavailableError) as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message,
        ) from e
