"""External service adapters (notification gateways)."""

from app.core.config import Settings
from app.cost_tracker.application.interfaces.notification_gateway import NotificationGateway
from app.cost_tracker.infrastructure.external.postmark_gateway import (
    LoggingNotificationGateway,
    PostmarkNotificationGateway,
)


def create_notification_gateway(settings: Settings) -> NotificationGateway:
    """Build the gateway for the configured environment.

    Returns a Postmark gateway when an API token is set, otherwise a
    gateway that only logs.
    """
    if settings.postmark_api_token:
        return PostmarkNotificationGateway(
            api_token=settings.postmark_api_token,
            from_email=settings.alert_from_email,
            timeout=settings.notification_timeout_seconds,
        )
    return LoggingNotificationGateway()


__all__ = [
    "LoggingNotificationGateway",
    "PostmarkNotificationGateway",
    "create_notification_gateway",
]
