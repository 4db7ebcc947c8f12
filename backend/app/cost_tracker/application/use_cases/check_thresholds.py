"""Use case running one evaluation cycle.

Orchestrates:
- Loading active alerts fresh from AlertRepository
- Evaluating them against a CostSnapshot via ThresholdEvaluator
- Dispatching each breach via AlertDispatcher
"""

import logging
from contextlib import AbstractAsyncContextManager, nullcontext
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from app.cost_tracker.application.dto.alert_dto import CycleSummaryDTO
from app.cost_tracker.application.exceptions import (
    AlertStoreUnavailableError,
    InvalidCostSnapshotError,
)
from app.cost_tracker.application.use_cases.dispatch_alert import (
    AlertDispatcher,
    DispatchErrorKind,
    DispatchResult,
)
from app.cost_tracker.domain.repositories.alert_repository import AlertRepository
from app.cost_tracker.domain.services.threshold_evaluator import ThresholdEvaluator
from app.cost_tracker.domain.value_objects.cost_snapshot import CostSnapshot

logger = logging.getLogger(__name__)


def parse_cost_snapshot(current_costs: Optional[Iterable[Any]]) -> CostSnapshot:
    """Build a CostSnapshot from a raw payload.

    Args:
        current_costs: ``[{"service": str, "cost": number}]`` or None.

    Returns:
        The parsed snapshot.

    Raises:
        InvalidCostSnapshotError: If the payload is malformed.
    """
    if isinstance(current_costs, CostSnapshot):
        return current_costs
    if isinstance(current_costs, (str, bytes)):
        raise InvalidCostSnapshotError("expected a list of service costs")
    try:
        return CostSnapshot.from_payload(current_costs)
    except (TypeError, ValueError) as e:
        raise InvalidCostSnapshotError(str(e)) from e


class CheckThresholdsUseCase:
    """Application service for a single evaluation cycle.

    Cycles are serialised through ``cycle_lock``. Any async context manager
    works: an ``asyncio.Lock`` for in-process callers or a Redis lock when
    several workers share one deployment.
    """

    def __init__(
        self,
        alert_repository: AlertRepository,
        dispatcher: AlertDispatcher,
        evaluator: Optional[ThresholdEvaluator] = None,
        cycle_lock: Optional[AbstractAsyncContextManager[Any]] = None,
    ) -> None:
        """Initialize the use case with required dependencies.

        Args:
            alert_repository: Repository the active alerts are loaded from.
            dispatcher: Dispatcher handling each breach.
            evaluator: Threshold evaluator (default: exact service matching).
            cycle_lock: Lock held for the duration of the cycle.
        """
        self._alert_repository = alert_repository
        self._dispatcher = dispatcher
        self._evaluator = evaluator or ThresholdEvaluator()
        self._cycle_lock = cycle_lock

    async def execute(self, current_costs: Optional[Iterable[Any]]) -> CycleSummaryDTO:
        """Run one evaluation cycle against a cost snapshot.

        Args:
            current_costs: CostSnapshot or raw ``[{"service", "cost"}]`` payload.

        Returns:
            CycleSummaryDTO with counts and per-breach error messages.

        Raises:
            InvalidCostSnapshotError: If the snapshot payload is malformed.
            AlertStoreUnavailableError: If active alerts cannot be loaded.
        """
        snapshot = parse_cost_snapshot(current_costs)

        lock = self._cycle_lock if self._cycle_lock is not None else nullcontext()
        async with lock:
            return await self._run_cycle(snapshot)

    async def _run_cycle(self, snapshot: CostSnapshot) -> CycleSummaryDTO:
        try:
            alerts = await self._alert_repository.get_all_active()
        except Exception as e:
            logger.error(f"Evaluation cycle aborted, cannot load alerts: {e}")
            raise AlertStoreUnavailableError(str(e)) from e

        logger.info(
            f"Checking {len(alerts)} active alerts against {len(snapshot)} service costs"
        )

        breaches = self._evaluator.evaluate(alerts, snapshot)
        results: list[DispatchResult] = []
        # One breach at a time over the shared session; failures stay per breach
        for breach in breaches:
            results.append(await self._dispatcher.dispatch(breach))

        summary = self._summarize(len(alerts), results)
        logger.info(
            f"Evaluation cycle complete: {summary.alerts_checked} checked, "
            f"{summary.breaches} breached, {summary.records_written} recorded, "
            f"{summary.notifications_sent} emails sent"
        )
        return summary

    @staticmethod
    def _summarize(alerts_checked: int, results: list[DispatchResult]) -> CycleSummaryDTO:
        summary = CycleSummaryDTO(
            alerts_checked=alerts_checked,
            breaches=len(results),
            timestamp=datetime.now(timezone.utc),
        )
        for result in results:
            if result.recorded:
                summary.records_written += 1
            if result.notified:
                summary.notifications_sent += 1
            if result.error is None:
                continue
            if result.error.kind == DispatchErrorKind.DURABLE_WRITE_FAILED:
                summary.write_failures += 1
            else:
                summary.notification_failures += 1
            summary.errors.append(
                f"Alert {result.breach.alert.id}: "
                f"{result.error.kind.value}: {result.error.message}"
            )
        return summary
