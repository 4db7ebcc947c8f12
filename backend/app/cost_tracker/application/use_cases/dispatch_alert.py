"""Alert dispatcher: durable record first, best-effort notification second.

For every breach:
1. Insert a NotificationRecord. This must succeed before anything else
   happens; a failure here is fatal for that breach only.
2. If a notification target is configured, send an email. Any failure
   (bad address, provider rejection, network error, timeout) is logged and
   reported in the result but never undoes step 1 or raises.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.cost_tracker.application.interfaces.notification_gateway import (
    CostAlertMessage,
    NotificationGateway,
)
from app.cost_tracker.domain.entities.notification_record import NotificationRecord
from app.cost_tracker.domain.repositories.notification_repository import (
    NotificationRepository,
)
from app.cost_tracker.domain.services.threshold_evaluator import BreachEvent
from app.cost_tracker.domain.value_objects.email_address import EmailAddress

logger = logging.getLogger(__name__)


class DispatchErrorKind(Enum):
    """Why a dispatch did not fully succeed."""

    DURABLE_WRITE_FAILED = "durable_write_failed"
    NOTIFICATION_SEND_FAILED = "notification_send_failed"


@dataclass(frozen=True)
class DispatchError:
    """A classified dispatch failure.

    Attributes:
        kind: Failure classification.
        message: Human-readable cause.
    """

    kind: DispatchErrorKind
    message: str

    @property
    def is_fatal(self) -> bool:
        """Only a lost durable write loses the breach."""
        return self.kind == DispatchErrorKind.DURABLE_WRITE_FAILED


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of dispatching one breach.

    Attributes:
        breach: The breach that was dispatched.
        record: Stored notification record, None if the write failed.
        notified: True if an email was delivered.
        error: Failure classification, None on full success or when no
            notification target is configured.
    """

    breach: BreachEvent
    record: Optional[NotificationRecord] = None
    notified: bool = False
    error: Optional[DispatchError] = None

    @property
    def recorded(self) -> bool:
        return self.record is not None

    @property
    def is_fatal(self) -> bool:
        return self.error is not None and self.error.is_fatal


class AlertDispatcher:
    """Application service turning breach events into records and emails.

    No deduplication is applied: the same alert breaching in consecutive
    cycles produces one record (and up to one email) per cycle.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        notification_gateway: Optional[NotificationGateway] = None,
        notification_target: Optional[str] = None,
        send_timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize the dispatcher with its collaborators.

        Args:
            notification_repository: Store for durable notification records.
            notification_gateway: Email gateway; None disables notifications.
            notification_target: Operator address to notify; None or empty
                disables notifications.
            send_timeout_seconds: Upper bound on a single send attempt.
        """
        self._notification_repository = notification_repository
        self._notification_gateway = notification_gateway
        self._notification_target = notification_target or None
        self._send_timeout_seconds = send_timeout_seconds

    @property
    def notifications_enabled(self) -> bool:
        return self._notification_gateway is not None and self._notification_target is not None

    async def dispatch(self, breach: BreachEvent) -> DispatchResult:
        """Record a breach, then try to notify about it.

        Never raises for store or gateway failures; they are returned as
        a classified DispatchError.

        Args:
            breach: Breach event produced by the ThresholdEvaluator.

        Returns:
            DispatchResult describing what happened.
        """
        alert = breach.alert

        # Step 1: durable write
        try:
            record = await self._notification_repository.insert(
                alert_id=alert.id,  # type: ignore[arg-type]
                triggered_amount=breach.observed_cost,
            )
        except Exception as e:
            logger.error(
                f"Failed to record breach for alert {alert.id} "
                f"({alert.service_name} at ${breach.observed_cost}): {e}"
            )
            return DispatchResult(
                breach=breach,
                error=DispatchError(
                    kind=DispatchErrorKind.DURABLE_WRITE_FAILED,
                    message=str(e),
                ),
            )

        logger.warning(
            f"ALERT TRIGGERED: '{alert.name}' {alert.service_name} "
            f"cost ${breach.observed_cost} > threshold ${alert.threshold_amount}"
        )

        # Step 2: best-effort notification
        if not self.notifications_enabled:
            logger.debug(f"No notification target configured, alert {alert.id} recorded only")
            return DispatchResult(breach=breach, record=record)

        try:
            await self._send(breach, record)
        except Exception as e:
            reason = str(e) or e.__class__.__name__
            logger.error(f"Email notification for alert {alert.id} failed: {reason}")
            return DispatchResult(
                breach=breach,
                record=record,
                error=DispatchError(
                    kind=DispatchErrorKind.NOTIFICATION_SEND_FAILED,
                    message=reason,
                ),
            )

        logger.info(f"Email notification sent for alert {alert.id}")
        return DispatchResult(breach=breach, record=record, notified=True)

    async def _send(self, breach: BreachEvent, record: NotificationRecord) -> None:
        destination = EmailAddress(self._notification_target)  # type: ignore[arg-type]
        message = CostAlertMessage(
            service_name=breach.alert.service_name,
            amount=breach.observed_cost,
            threshold=breach.alert.threshold_amount,
            alert_name=breach.alert.name,
            triggered_at=record.triggered_at,
        )
        try:
            await asyncio.wait_for(
                self._notification_gateway.send_cost_alert(destination, message),  # type: ignore[union-attr]
                timeout=self._send_timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise TimeoutError(
                f"Notification send timed out after {self._send_timeout_seconds}s"
            ) from e

