"""Application use cases for orchestrating domain logic."""

from app.cost_tracker.application.use_cases.check_thresholds import (
    CheckThresholdsUseCase,
    parse_cost_snapshot,
)
from app.cost_tracker.application.use_cases.create_alert import (
    CreateAlertUseCase,
    ListAlertsUseCase,
    SetAlertActiveUseCase,
)
from app.cost_tracker.application.use_cases.dispatch_alert import (
    AlertDispatcher,
    DispatchError,
    DispatchErrorKind,
    DispatchResult,
)
from app.cost_tracker.application.use_cases.get_notifications import (
    GetRecentNotificationsUseCase,
)

__all__ = [
    "AlertDispatcher",
    "CheckThresholdsUseCase",
    "CreateAlertUseCase",
    "DispatchError",
    "DispatchErrorKind",
    "DispatchResult",
    "GetRecentNotificationsUseCase",
    "ListAlertsUseCase",
    "SetAlertActiveUseCase",
    "parse_cost_snapshot",
]
