"""Celery tasks running threshold evaluation cycles."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from redis.exceptions import LockNotOwnedError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.cost_tracker.application.interfaces.notification_gateway import (
    NotificationGateway,
)
from app.cost_tracker.application.use_cases.check_thresholds import (
    CheckThresholdsUseCase,
    parse_cost_snapshot,
)
from app.cost_tracker.application.use_cases.dispatch_alert import AlertDispatcher
from app.cost_tracker.domain.services.service_names import get_service_name_normalizer
from app.cost_tracker.domain.services.threshold_evaluator import ThresholdEvaluator
from app.cost_tracker.domain.value_objects.cost_snapshot import CostSnapshot
from app.cost_tracker.infrastructure.db.session import (
    dispose_engine,
    get_async_session_local,
)
from app.cost_tracker.infrastructure.external import create_notification_gateway
from app.cost_tracker.infrastructure.locks import (
    LockError,
    create_evaluation_lock,
    create_redis_client,
)
from app.cost_tracker.infrastructure.repositories import (
    SqlAlertRepository,
    SqlCostSnapshotProvider,
    SqlNotificationRepository,
)
from app.cost_tracker.infrastructure.tasks.celery_app import celery_app

logger = logging.getLogger(__name__)


def build_check_thresholds_use_case(
    session: AsyncSession,
    settings: Settings,
    gateway: NotificationGateway,
    cycle_lock: Optional[Any] = None,
) -> CheckThresholdsUseCase:
    """Wire a CheckThresholdsUseCase onto one database session."""
    dispatcher = AlertDispatcher(
        notification_repository=SqlNotificationRepository(session),
        notification_gateway=gateway,
        notification_target=settings.notification_email,
        send_timeout_seconds=settings.notification_timeout_seconds,
    )
    evaluator = ThresholdEvaluator(
        normalize=get_service_name_normalizer(settings.service_name_matching)
    )
    return CheckThresholdsUseCase(
        alert_repository=SqlAlertRepository(session),
        dispatcher=dispatcher,
        evaluator=evaluator,
        cycle_lock=cycle_lock,
    )


def _skipped_result(reason: str) -> dict[str, Any]:
    return {
        "skipped": True,
        "reason": reason,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


async def _check_thresholds_async(
    current_costs: Optional[list[dict[str, Any]]] = None,
) -> dict[str, Any]:
    """Run one evaluation cycle.

    Args:
        current_costs: Explicit ``[{"service", "cost"}]`` payload. When None
            the month-to-date totals from ``cost_records`` are used.

    Returns:
        The cycle summary as a JSON-compatible dict.
    """
    settings = get_settings()

    # Reject a malformed payload before touching Redis or the database
    snapshot: Optional[CostSnapshot] = None
    if current_costs is not None:
        snapshot = parse_cost_snapshot(current_costs)

    redis_client = create_redis_client(str(settings.redis_url))
    gateway = create_notification_gateway(settings)
    session_factory = get_async_session_local()

    try:
        async with session_factory() as session:
            if snapshot is None:
                snapshot = await SqlCostSnapshotProvider(session).get_current_snapshot()

            lock = create_evaluation_lock(
                redis_client, settings.evaluation_lock_timeout_seconds
            )
            use_case = build_check_thresholds_use_case(
                session, settings, gateway, cycle_lock=lock
            )
            summary = await use_case.execute(snapshot)
            return summary.model_dump(mode="json")
    except LockNotOwnedError:
        logger.error(
            "Evaluation lock expired before the cycle finished; "
            "consider raising EVALUATION_LOCK_TIMEOUT_SECONDS"
        )
        raise
    except LockError:
        logger.warning("Another evaluation cycle is in progress, skipping")
        return _skipped_result("evaluation cycle already in progress")
    finally:
        await gateway.close()
        await redis_client.aclose()
        # Each task runs in a fresh event loop; pooled connections must not outlive it
        await dispose_engine()


@celery_app.task(
    bind=True,
    name="app.cost_tracker.infrastructure.tasks.alert_tasks.check_alerts",
)
def check_alerts(self) -> dict:
    """Evaluate all active alerts against month-to-date service costs.

    Runs on the beat schedule (every 5 minutes by default).

    Returns:
        Summary of the evaluation cycle.
    """
    logger.info("Starting check_alerts task")
    try:
        return asyncio.run(_check_thresholds_async())
    except Exception as e:
        logger.exception(f"check_alerts failed: {e}")
        raise


@celery_app.task(
    bind=True,
    name="app.cost_tracker.infrastructure.tasks.alert_tasks.check_thresholds",
)
def check_thresholds(self, current_costs: list[dict[str, Any]]) -> dict:
    """Evaluate all active alerts against an explicit cost snapshot.

    Args:
        current_costs: ``[{"service": "Amazon S3", "cost": 12.5}, ...]``.

    Returns:
        Summary of the evaluation cycle.
    """
    logger.info("Starting check_thresholds task")
    try:
        return asyncio.run(_check_thresholds_async(current_costs or []))
    except Exception as e:
        logger.exception(f"check_thresholds failed: {e}")
        raise
