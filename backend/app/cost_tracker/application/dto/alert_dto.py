"""Data Transfer Objects for alert-related API requests and responses.

These DTOs represent the external contract for alert operations exposed
through the API layer. Field names are camelCase on the wire to match the
dashboard client; Python code uses the snake_case attribute names.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from app.cost_tracker.domain.entities.alert import Alert, AlertType


class _CamelModel(BaseModel):
    """Base model accepting and emitting camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CreateAlertRequest(_CamelModel):
    """Request payload for creating a new cost alert."""

    alert_name: str = Field(
        min_length=1,
        max_length=255,
        description="Human-readable alert label",
    )
    threshold_amount: Decimal = Field(
        gt=0,
        max_digits=15,
        decimal_places=2,
        description="Cost ceiling; the alert fires when spend strictly exceeds it",
    )
    service_name: str = Field(
        min_length=1,
        max_length=255,
        description="Service to watch (e.g. 'Amazon EC2'), or '*' for total spend",
    )
    alert_type: AlertType = Field(
        default=AlertType.THRESHOLD,
        description="Alert classification; only 'threshold' alerts are evaluated",
    )

    @field_validator("alert_name", "service_name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class CreateAlertResponse(_CamelModel):
    """Response for a successfully created alert."""

    success: bool = True
    alert_id: int = Field(description="ID assigned to the new alert")


class UpdateAlertRequest(_CamelModel):
    """Request payload for enabling or disabling an alert."""

    is_active: bool = Field(description="Whether the alert takes part in evaluation")


class AlertDTO(_CamelModel):
    """Alert data for API responses."""

    id: int = Field(description="Unique alert identifier")
    alert_name: str = Field(description="Human-readable alert label")
    threshold_amount: Decimal = Field(description="Cost ceiling")
    service_name: str = Field(description="Watched service or '*'")
    alert_type: AlertType = Field(description="Alert classification")
    is_active: bool = Field(description="Whether the alert is evaluated")
    created_at: datetime = Field(description="When the alert was created (UTC)")

    @field_serializer("threshold_amount")
    def _serialize_amount(self, value: Decimal) -> float:
        return float(value)

    @classmethod
    def from_entity(cls, alert: Alert) -> "AlertDTO":
        return cls(
            id=alert.id,  # type: ignore[arg-type]
            alert_name=alert.name,
            threshold_amount=alert.threshold_amount,
            service_name=alert.service_name,
            alert_type=alert.alert_type,
            is_active=alert.is_active,
            created_at=alert.created_at,
        )


class AlertListDTO(_CamelModel):
    """List of alerts for API responses."""

    success: bool = True
    data: list[AlertDTO] = Field(default_factory=list)


class NotificationDTO(_CamelModel):
    """A fired notification joined with the alert that produced it."""

    id: int = Field(description="Notification record identifier")
    alert_id: int = Field(description="ID of the alert that fired")
    alert_name: Optional[str] = Field(default=None, description="Alert label")
    service_name: Optional[str] = Field(default=None, description="Alert service")
    triggered_amount: Decimal = Field(description="Observed cost at breach time")
    triggered_at: datetime = Field(description="When the breach was detected (UTC)")

    @field_serializer("triggered_amount")
    def _serialize_amount(self, value: Decimal) -> float:
        return float(value)


class NotificationListDTO(_CamelModel):
    """Most recent notifications, newest first."""

    success: bool = True
    data: list[NotificationDTO] = Field(default_factory=list)


class CycleSummaryDTO(BaseModel):
    """Outcome of one evaluation cycle, returned by the scheduler task."""

    alerts_checked: int = 0
    breaches: int = 0
    records_written: int = 0
    notifications_sent: int = 0
    notification_failures: int = 0
    write_failures: int = 0
    errors: list[str] = Field(default_factory=list)
    timestamp: datetime
