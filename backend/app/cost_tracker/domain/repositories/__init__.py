"""Domain repository interfaces for the cost tracker.

These abstract interfaces keep the domain independent of SQLAlchemy and let
tests substitute in-memory fakes or AsyncMock repositories. Concrete
implementations live in app.cost_tracker.infrastructure.repositories.
"""

from app.cost_tracker.domain.repositories.alert_repository import AlertRepository
from app.cost_tracker.domain.repositories.notification_repository import (
    NotificationRepository,
)

__all__ = [
    "AlertRepository",
    "NotificationRepository",
]
