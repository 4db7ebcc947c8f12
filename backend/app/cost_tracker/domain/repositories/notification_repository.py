"""Abstract repository interface for NotificationRecord entities."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List

from ..entities.notification_record import NotificationRecord


class NotificationRepository(ABC):
    """Append-only store of fired alert notifications."""

    @abstractmethod
    async def insert(self, alert_id: int, triggered_amount: Decimal) -> NotificationRecord:
        """Durably record a breach.

        Implementations must make the record durable before returning,
        since a notification may be sent right after.

        Args:
            alert_id: ID of the alert that fired.
            triggered_amount: Observed cost at breach time.

        Returns:
            The stored NotificationRecord with its ID and timestamp.
        """
        pass

    @abstractmethod
    async def get_recent(self, limit: int) -> List[NotificationRecord]:
        """Retrieve the most recent records joined with alert metadata.

        Args:
            limit: Maximum number of records to return.

        Returns:
            Records ordered newest first.
        """
        pass
