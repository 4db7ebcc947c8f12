"""SQLAlchemy implementation of NotificationRepository.

insert() commits immediately: the dispatcher relies on the record being
durable before it attempts to send an email.
"""

from decimal import Decimal
from typing import List

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.cost_tracker.domain.entities.notification_record import NotificationRecord
from app.cost_tracker.domain.repositories.notification_repository import (
    NotificationRepository,
)
from app.cost_tracker.infrastructure.db.models import (
    AlertNotificationModel,
    CostAlertModel,
)


class SqlNotificationRepository(NotificationRepository):
    """SQLAlchemy-based implementation of the NotificationRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with a database session.

        Args:
            session: An async SQLAlchemy session.
        """
        self._session = session

    async def insert(self, alert_id: int, triggered_amount: Decimal) -> NotificationRecord:
        """Insert and commit a notification record.

        On failure the session is rolled back so later breaches in the same
        cycle can still be written.
        """
        model = AlertNotificationModel(
            alert_id=alert_id,
            triggered_amount=triggered_amount,
        )
        try:
            self._session.add(model)
            await self._session.commit()
            await self._session.refresh(model)
        except Exception:
            await self._session.rollback()
            raise
        return self._to_entity(model)

    async def get_recent(self, limit: int) -> List[NotificationRecord]:
        """Retrieve the newest records joined with alert name and service."""
        stmt = (
            select(
                AlertNotificationModel,
                CostAlertModel.alert_name,
                CostAlertModel.service_name,
            )
            .join(CostAlertModel, AlertNotificationModel.alert_id == CostAlertModel.id)
            .order_by(desc(AlertNotificationModel.triggered_at), desc(AlertNotificationModel.id))
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [
            self._to_entity(model, alert_name=alert_name, service_name=service_name)
            for model, alert_name, service_name in result.all()
        ]

    def _to_entity(
        self,
        model: AlertNotificationModel,
        alert_name: str | None = None,
        service_name: str | None = None,
    ) -> NotificationRecord:
        """Convert an AlertNotificationModel to a NotificationRecord."""
        return NotificationRecord(
            id=model.id,
            alert_id=model.alert_id,
            triggered_amount=Decimal(str(model.triggered_amount)),
            triggered_at=model.triggered_at,
            alert_name=alert_name,
            service_name=service_name,
        )
