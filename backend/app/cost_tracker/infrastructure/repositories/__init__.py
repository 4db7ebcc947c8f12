"""Infrastructure repository implementations.

This module exports concrete repository implementations that fulfill
the abstract interfaces defined in the domain and application layers.
"""

from app.cost_tracker.infrastructure.repositories.sql_alert_repository import (
    SqlAlertRepository,
)
from app.cost_tracker.infrastructure.repositories.sql_cost_snapshot_provider import (
    SqlCostSnapshotProvider,
)
from app.cost_tracker.infrastructure.repositories.sql_notification_repository import (
    SqlNotificationRepository,
)

__all__ = [
    "SqlAlertRepository",
    "SqlCostSnapshotProvider",
    "SqlNotificationRepository",
]
