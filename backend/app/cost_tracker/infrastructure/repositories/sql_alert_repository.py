"""SQLAlchemy implementation of AlertRepository.

Provides async database operations for Alert entities using
SQLAlchemy 2.0 async patterns with asyncpg driver.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.cost_tracker.domain.entities.alert import Alert
from app.cost_tracker.domain.repositories.alert_repository import AlertRepository
from app.cost_tracker.infrastructure.db.models import CostAlertModel


class SqlAlertRepository(AlertRepository):
    """SQLAlchemy-based implementation of the AlertRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with a database session.

        Args:
            session: An async SQLAlchemy session.
        """
        self._session = session

    async def get_by_id(self, alert_id: int) -> Optional[Alert]:
        """Retrieve an alert by its database ID."""
        stmt = select(CostAlertModel).where(CostAlertModel.id == alert_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> List[Alert]:
        """Retrieve every alert ordered by ID."""
        stmt = select(CostAlertModel).order_by(CostAlertModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def get_all_active(self) -> List[Alert]:
        """Retrieve all active alerts ordered by ID."""
        stmt = (
            select(CostAlertModel)
            .where(CostAlertModel.is_active.is_(True))
            .order_by(CostAlertModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def save(self, alert: Alert) -> Alert:
        """Persist an alert entity.

        Creates a new record if alert.id is None, otherwise updates the
        mutable fields of the existing one.
        """
        if alert.id is None:
            model = self._to_model(alert)
            self._session.add(model)
            await self._session.flush()
            await self._session.refresh(model)
            return self._to_entity(model)

        stmt = select(CostAlertModel).where(CostAlertModel.id == alert.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            raise ValueError(f"Alert with id {alert.id} not found")

        model.alert_name = alert.name
        model.threshold_amount = alert.threshold_amount
        model.service_name = alert.service_name
        model.alert_type = alert.alert_type
        model.is_active = alert.is_active
        # created_at is immutable

        await self._session.flush()
        return self._to_entity(model)

    def _to_entity(self, model: CostAlertModel) -> Alert:
        """Convert a CostAlertModel to an Alert domain entity."""
        return Alert(
            id=model.id,
            name=model.alert_name,
            threshold_amount=Decimal(str(model.threshold_amount)),
            service_name=model.service_name,
            alert_type=model.alert_type,
            is_active=model.is_active,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Alert) -> CostAlertModel:
        """Convert an Alert domain entity to a CostAlertModel."""
        return CostAlertModel(
            id=entity.id,
            alert_name=entity.name,
            threshold_amount=entity.threshold_amount,
            service_name=entity.service_name,
            alert_type=entity.alert_type,
            is_active=entity.is_active,
            created_at=entity.created_at,
        )
