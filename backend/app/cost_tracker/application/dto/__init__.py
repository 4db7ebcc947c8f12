"""Data transfer objects for application layer."""

from app.cost_tracker.application.dto.alert_dto import (
    AlertDTO,
    AlertListDTO,
    CreateAlertRequest,
    CreateAlertResponse,
    CycleSummaryDTO,
    NotificationDTO,
    NotificationListDTO,
    UpdateAlertRequest,
)

__all__ = [
    # Alert DTOs
    "CreateAlertRequest",
    "CreateAlertResponse",
    "UpdateAlertRequest",
    "AlertDTO",
    "AlertListDTO",
    # Notification DTOs
    "NotificationDTO",
    "NotificationListDTO",
    # Scheduler
    "CycleSummaryDTO",
]
