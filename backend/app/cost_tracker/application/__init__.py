"""Application layer - use cases and orchestration.

This layer contains:
- DTOs: Data Transfer Objects for API input/output
- Interfaces: Ports for the notification gateway and cost snapshot source
- Use Cases: Alert management, breach dispatch and evaluation cycles
- Exceptions: Application-level error types
"""

from app.cost_tracker.application.dto import (
    AlertDTO,
    AlertListDTO,
    CreateAlertRequest,
    CreateAlertResponse,
    CycleSummaryDTO,
    NotificationDTO,
    NotificationListDTO,
    UpdateAlertRequest,
)
from app.cost_tracker.application.exceptions import (
    AlertNotFoundError,
    AlertPersistenceError,
    AlertStoreUnavailableError,
    InvalidAlertError,
    ApplicationError,
    InvalidCostSnapshotError,
    NotificationDeliveryError,
)
from app.cost_tracker.application.use_cases import (
    AlertDispatcher,
    CheckThresholdsUseCase,
    CreateAlertUseCase,
    DispatchErrorKind,
    DispatchResult,
    GetRecentNotificationsUseCase,
    ListAlertsUseCase,
    SetAlertActiveUseCase,
)

__all__ = [
    # DTOs
    "CreateAlertRequest",
    "CreateAlertResponse",
    "UpdateAlertRequest",
    "AlertDTO",
    "AlertListDTO",
    "NotificationDTO",
    "NotificationListDTO",
    "CycleSummaryDTO",
    # Use Cases
    "AlertDispatcher",
    "CheckThresholdsUseCase",
    "CreateAlertUseCase",
    "ListAlertsUseCase",
    "SetAlertActiveUseCase",
    "GetRecentNotificationsUseCase",
    "DispatchErrorKind",
    "DispatchResult",
    # Exceptions
    "ApplicationError",
    "AlertNotFoundError",
    "AlertPersistenceError",
    "AlertStoreUnavailableError",
    "InvalidAlertError",
    "InvalidCostSnapshotError",
    "NotificationDeliveryError",
]
