"""NotificationRecord entity: the durable proof that a breach was detected."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class NotificationRecord:
    """Immutable log entry written once per dispatched breach.

    The record exists independently of whether the email notification
    for the breach was delivered.

    Attributes:
        id: Database identifier (None for unsaved entities).
        alert_id: ID of the alert that fired.
        triggered_amount: Observed cost that caused the breach.
        triggered_at: Server timestamp of detection.
        alert_name: Name of the alert, populated on joined reads.
        service_name: Service of the alert, populated on joined reads.
    """

    id: Optional[int]
    alert_id: int
    triggered_amount: Decimal
    triggered_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    alert_name: Optional[str] = None
    service_name: Optional[str] = None
