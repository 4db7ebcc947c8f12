"""Application-layer exceptions for use case error handling.

These exceptions represent errors that can occur during use case
execution. The presentation layer maps them to HTTP responses; the
scheduler reports them in the task result.

Per-breach dispatch outcomes are not exceptions: see DispatchResult.
"""


class ApplicationError(Exception):
    """Base class for all application-layer exceptions."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class AlertNotFoundError(ApplicationError):
    """Raised when a requested alert does not exist."""

    def __init__(self, alert_id: int) -> None:
        super().__init__(
            message=f"Alert with ID {alert_id} not found",
            code="ALERT_NOT_FOUND"
        )
        self.alert_id = alert_id


class AlertPersistenceError(ApplicationError):
    """Raised when an alert cannot be written to the store."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            message=f"Failed to save alert: {detail}",
            code="ALERT_PERSISTENCE_FAILED"
        )
        self.detail = detail


class InvalidAlertError(ApplicationError):
    """Raised when an alert definition violates the alert invariants."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            message=f"Invalid alert: {detail}",
            code="INVALID_ALERT"
        )
        self.detail = detail


class AlertStoreUnavailableError(ApplicationError):
    """Raised when the alert store cannot be read.

    At the start of an evaluation cycle this aborts the whole cycle; no
    partial alert list is used.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(
            message=f"Alert store unavailable: {detail}",
            code="ALERT_STORE_UNAVAILABLE"
        )
        self.detail = detail


class InvalidCostSnapshotError(ApplicationError):
    """Raised when a cost snapshot payload is malformed."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            message=f"Invalid cost snapshot: {detail}",
            code="INVALID_COST_SNAPSHOT"
        )
        self.detail = detail


class NotificationDeliveryError(ApplicationError):
    """Raised by notification gateways when a message cannot be delivered."""

    def __init__(self, destination: str, detail: str) -> None:
        super().__init__(
            message=f"Failed to notify {destination}: {detail}",
            code="NOTIFICATION_DELIVERY_FAILED"
        )
        self.destination = destination
        self.detail = detail
