"""SQLAlchemy implementation of CostSnapshotProvider.

Builds the month-to-date snapshot from the cost_records table that the
ingestion job populates.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.cost_tracker.application.interfaces.cost_snapshot_provider import (
    CostSnapshotProvider,
)
from app.cost_tracker.domain.value_objects.cost_snapshot import CostSnapshot, ServiceCost
from app.cost_tracker.infrastructure.db.models import CostRecordModel


class SqlCostSnapshotProvider(CostSnapshotProvider):
    """Month-to-date spend per service from cost_records."""

    def __init__(self, session: AsyncSession, today: Optional[date] = None) -> None:
        """Initialize the provider.

        Args:
            session: An async SQLAlchemy session.
            today: Override for the current UTC date (testing).
        """
        self._session = session
        self._today = today

    async def get_current_snapshot(self) -> CostSnapshot:
        today = self._today or datetime.now(timezone.utc).date()
        month_start = today.replace(day=1)

        stmt = (
            select(
                CostRecordModel.service_name,
                func.sum(CostRecordModel.cost_amount).label("total_cost"),
            )
            .where(
                CostRecordModel.date >= month_start,
                CostRecordModel.date <= today,
            )
            .group_by(CostRecordModel.service_name)
            .order_by(CostRecordModel.service_name)
        )
        result = await self._session.execute(stmt)

        return CostSnapshot(
            tuple(
                ServiceCost(service=service_name, cost=Decimal(str(total_cost)))
                for service_name, total_cost in result.all()
                if total_cost is not None
            )
        )
