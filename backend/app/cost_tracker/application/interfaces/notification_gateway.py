"""Notification gateway interface for sending cost-alert messages."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from app.cost_tracker.domain.value_objects.email_address import EmailAddress


@dataclass(frozen=True)
class CostAlertMessage:
    """Content of a cost-alert notification.

    Attributes:
        service_name: Service whose spend breached the alert.
        amount: Observed cost.
        threshold: Alert threshold that was exceeded.
        alert_name: Label of the alert, if known.
        triggered_at: When the breach was detected.
    """

    service_name: str
    amount: Decimal
    threshold: Decimal
    alert_name: Optional[str] = None
    triggered_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def subject(self) -> str:
        return f"AWS Cost Alert: {self.service_name}"

    @property
    def text_body(self) -> str:
        lines = [
            "Cost Alert Triggered",
            "",
            f"Service: {self.service_name}",
            f"Current Cost: ${self.amount:,.2f}",
            f"Threshold: ${self.threshold:,.2f}",
            f"Time: {self.triggered_at:%Y-%m-%d %H:%M:%S} UTC",
        ]
        if self.alert_name:
            lines.insert(2, f"Alert: {self.alert_name}")
        lines += ["", "Consider optimizing your AWS usage to reduce costs."]
        return "\n".join(lines)

    @property
    def html_body(self) -> str:
        alert_line = (
            f"<p><strong>Alert:</strong> {self.alert_name}</p>" if self.alert_name else ""
        )
        return f"""
    <h2>Cost Alert Triggered</h2>
    {alert_line}
    <p><strong>Service:</strong> {self.service_name}</p>
    <p><strong>Current Cost:</strong> ${self.amount:,.2f}</p>
    <p><strong>Threshold:</strong> ${self.threshold:,.2f}</p>
    <p><strong>Time:</strong> {self.triggered_at:%Y-%m-%d %H:%M:%S} UTC</p>
    <p>Consider optimizing your AWS usage to reduce costs.</p>
    """


class NotificationGateway(ABC):
    """Abstract base class for notification delivery.

    Implementations raise NotificationDeliveryError (or let transport
    errors propagate) when a message cannot be delivered; callers decide
    whether that is fatal.
    """

    @abstractmethod
    async def send_cost_alert(
        self, destination: EmailAddress, message: CostAlertMessage
    ) -> None:
        """Send a cost-alert notification.

        Args:
            destination: Validated recipient address.
            message: Alert content.

        Raises:
            NotificationDeliveryError: If the provider rejects the message.
        """
        ...

    async def close(self) -> None:
        """Release any held resources."""
        return None
