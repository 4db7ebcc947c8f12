"""Abstract repository interface for Alert entities."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.alert import Alert


class AlertRepository(ABC):
    """Abstract repository for Alert persistence operations.

    "Active" alerts are those with is_active == True. Alerts are never
    physically deleted; deactivation goes through save().
    """

    @abstractmethod
    async def get_by_id(self, alert_id: int) -> Optional[Alert]:
        """Retrieve an alert by its database ID.

        Args:
            alert_id: The unique identifier of the alert.

        Returns:
            The Alert entity if found, None otherwise.
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[Alert]:
        """Retrieve every alert, active or not, ordered by ID."""
        pass

    @abstractmethod
    async def get_all_active(self) -> List[Alert]:
        """Retrieve all active alerts.

        Called at the start of every evaluation cycle; results must not
        be cached across cycles.

        Returns:
            List of Alert entities with is_active == True, ordered by ID.
        """
        pass

    @abstractmethod
    async def save(self, alert: Alert) -> Alert:
        """Persist an alert entity.

        For new alerts (id is None), this creates a new record.
        For existing alerts, this updates the mutable fields.

        Args:
            alert: The Alert entity to save.

        Returns:
            The saved Alert entity with its ID populated.
        """
        pass
