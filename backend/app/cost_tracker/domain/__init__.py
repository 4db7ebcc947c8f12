# Domain layer - pure business rules, no framework dependencies

from app.cost_tracker.domain.entities import ANY_SERVICE, Alert, AlertType, NotificationRecord
from app.cost_tracker.domain.services import BreachEvent, ThresholdEvaluator
from app.cost_tracker.domain.value_objects import CostSnapshot, EmailAddress, ServiceCost

__all__ = [
    # Entities
    "ANY_SERVICE",
    "Alert",
    "AlertType",
    "NotificationRecord",
    # Value objects
    "CostSnapshot",
    "EmailAddress",
    "ServiceCost",
    # Services
    "BreachEvent",
    "ThresholdEvaluator",
]
