"""Alert entity representing a persisted cost-threshold rule."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional

# Alert.service_name value that matches total spend across every service
ANY_SERVICE = "*"


class AlertType(Enum):
    """Classification of cost alerts."""

    THRESHOLD = "threshold"
    PERCENTAGE_CHANGE = "percentage_change"


@dataclass
class Alert:
    """Domain entity representing a cost alert definition.

    Alerts are never hard-deleted. Deactivating an alert keeps the row
    (and its notification history) but excludes it from evaluation.

    Attributes:
        id: Database identifier (None for unsaved entities).
        name: Human-readable label.
        threshold_amount: Cost ceiling in the currency of the cost records.
        service_name: Service identifier to watch, or ANY_SERVICE.
        alert_type: Classification of the alert.
        is_active: Whether the alert takes part in evaluation cycles.
        created_at: Timestamp when the alert was created.
    """

    id: Optional[int]
    name: str
    threshold_amount: Decimal
    service_name: str
    alert_type: AlertType = AlertType.THRESHOLD
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate alert invariants after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Alert name cannot be empty")
        if not self.service_name or not self.service_name.strip():
            raise ValueError("Alert service name cannot be empty")
        if self.threshold_amount <= 0:
            raise ValueError("Alert threshold must be positive")

    @property
    def watches_all_services(self) -> bool:
        """True if the alert is compared against total spend."""
        return self.service_name == ANY_SERVICE

    def activate(self) -> None:
        """Include the alert in evaluation cycles."""
        self.is_active = True

    def deactivate(self) -> None:
        """Exclude the alert from evaluation cycles (soft disable)."""
        self.is_active = False
