"""Use cases for managing cost alert definitions.

Implements alert creation, listing and soft enable/disable via
AlertRepository. Alerts are never deleted.
"""

import logging

from app.cost_tracker.application.dto.alert_dto import (
    AlertDTO,
    CreateAlertRequest,
    CreateAlertResponse,
)
from app.cost_tracker.application.exceptions import (
    AlertNotFoundError,
    AlertPersistenceError,
    AlertStoreUnavailableError,
    InvalidAlertError,
)
from app.cost_tracker.domain.entities.alert import Alert
from app.cost_tracker.domain.repositories.alert_repository import AlertRepository

logger = logging.getLogger(__name__)


class CreateAlertUseCase:
    """Application service for creating cost alerts.

    This use case builds a new Alert entity from the request and persists
    it. Store failures surface as AlertPersistenceError.
    """

    def __init__(self, alert_repository: AlertRepository) -> None:
        """Initialize the use case with required dependencies.

        Args:
            alert_repository: Repository for alert persistence.
        """
        self._alert_repository = alert_repository

    async def execute(self, request: CreateAlertRequest) -> CreateAlertResponse:
        """Execute the alert creation.

        Args:
            request: CreateAlertRequest with alert configuration.

        Returns:
            CreateAlertResponse carrying the new alert ID.

        Raises:
            InvalidAlertError: If the definition violates the alert invariants.
            AlertPersistenceError: If the alert could not be stored.
        """
        try:
            alert = Alert(
                id=None,  # Will be assigned by the database
                name=request.alert_name.strip(),
                threshold_amount=request.threshold_amount,
                service_name=request.service_name.strip(),
                alert_type=request.alert_type,
                is_active=True,
            )
        except ValueError as e:
            raise InvalidAlertError(str(e)) from e

        try:
            saved_alert = await self._alert_repository.save(alert)
        except Exception as e:
            logger.error(f"Failed to create alert '{alert.name}': {e}")
            raise AlertPersistenceError(str(e)) from e

        logger.info(
            f"Created alert {saved_alert.id} '{saved_alert.name}' for "
            f"{saved_alert.service_name} above ${saved_alert.threshold_amount}"
        )
        return CreateAlertResponse(alert_id=saved_alert.id)  # type: ignore[arg-type]


class ListAlertsUseCase:
    """Application service returning every alert, active or not."""

    def __init__(self, alert_repository: AlertRepository) -> None:
        self._alert_repository = alert_repository

    async def execute(self) -> list[AlertDTO]:
        try:
            alerts = await self._alert_repository.get_all()
        except Exception as e:
            logger.error(f"Failed to list alerts: {e}")
            raise AlertStoreUnavailableError(str(e)) from e
        return [AlertDTO.from_entity(alert) for alert in alerts]


class SetAlertActiveUseCase:
    """Application service for soft-enabling or soft-disabling an alert."""

    def __init__(self, alert_repository: AlertRepository) -> None:
        """Initialize the use case with required dependencies.

        Args:
            alert_repository: Repository for alert operations.
        """
        self._alert_repository = alert_repository

    async def execute(self, alert_id: int, is_active: bool) -> AlertDTO:
        """Toggle an alert's participation in evaluation cycles.

        Args:
            alert_id: ID of the alert to update.
            is_active: New activation state.

        Returns:
            AlertDTO for the updated alert.

        Raises:
            AlertNotFoundError: If no alert has the given ID.
            AlertStoreUnavailableError: If the alert cannot be read.
            AlertPersistenceError: If the update could not be stored.
        """
        try:
            alert = await self._alert_repository.get_by_id(alert_id)
        except Exception as e:
            logger.error(f"Failed to load alert {alert_id}: {e}")
            raise AlertStoreUnavailableError(str(e)) from e
        if alert is None:
            raise AlertNotFoundError(alert_id)

        if is_active:
            alert.activate()
        else:
            alert.deactivate()

        try:
            saved_alert = await self._alert_repository.save(alert)
        except Exception as e:
            raise AlertPersistenceError(str(e)) from e

        logger.info(
            f"Alert {alert_id} {'activated' if is_active else 'deactivated'}"
        )
        return AlertDTO.from_entity(saved_alert)
