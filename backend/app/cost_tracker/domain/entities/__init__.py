"""Domain entities for the cost tracker."""

from app.cost_tracker.domain.entities.alert import ANY_SERVICE, Alert, AlertType
from app.cost_tracker.domain.entities.notification_record import NotificationRecord

__all__ = [
    "ANY_SERVICE",
    "Alert",
    "AlertType",
    "NotificationRecord",
]
