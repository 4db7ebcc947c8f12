"""Use case for reading the fired-notification feed."""

import logging

from app.cost_tracker.application.dto.alert_dto import NotificationDTO
from app.cost_tracker.application.exceptions import AlertStoreUnavailableError
from app.cost_tracker.domain.repositories.notification_repository import (
    NotificationRepository,
)

logger = logging.getLogger(__name__)


class GetRecentNotificationsUseCase:
    """Application service returning the latest notifications, newest first.

    Each entry is joined with the name and service of the alert that fired.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        page_size: int = 10,
    ) -> None:
        """Initialize the use case with required dependencies.

        Args:
            notification_repository: Repository for notification records.
            page_size: Maximum number of notifications returned.
        """
        self._notification_repository = notification_repository
        self._page_size = page_size

    async def execute(self) -> list[NotificationDTO]:
        """Execute the notification lookup.

        Returns:
            Up to ``page_size`` NotificationDTO objects, newest first.

        Raises:
            AlertStoreUnavailableError: If the records cannot be read.
        """
        try:
            records = await self._notification_repository.get_recent(self._page_size)
        except Exception as e:
            logger.error(f"Failed to load notifications: {e}")
            raise AlertStoreUnavailableError(str(e)) from e
        return [
            NotificationDTO(
                id=record.id,  # type: ignore[arg-type]
                alert_id=record.alert_id,
                alert_name=record.alert_name,
                service_name=record.service_name,
                triggered_amount=record.triggered_amount,
                triggered_at=record.triggered_at,
            )
            for record in records
        ]
