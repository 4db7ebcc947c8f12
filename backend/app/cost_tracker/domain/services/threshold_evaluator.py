"""Threshold evaluator domain service.

Decides which active alerts are breached by a cost snapshot:
- Only active, threshold-type alerts are considered
- Observed cost is looked up by service name; a missing service costs zero
- A breach requires observed cost strictly greater than the threshold
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from app.cost_tracker.domain.entities.alert import Alert, AlertType
from app.cost_tracker.domain.services.service_names import exact_service_name
from app.cost_tracker.domain.value_objects.cost_snapshot import (
    CostSnapshot,
    ServiceNameNormalizer,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BreachEvent:
    """An alert paired with the observed cost that breached it.

    Attributes:
        alert: The breached alert.
        observed_cost: Cost seen for the alert's service in this cycle.
    """

    alert: Alert
    observed_cost: Decimal

    @property
    def excess(self) -> Decimal:
        """Amount by which the observed cost exceeds the threshold."""
        return self.observed_cost - self.alert.threshold_amount


class ThresholdEvaluator:
    """Domain service comparing alerts against a cost snapshot.

    This service implements pure domain logic: it never writes to a store
    and never sends notifications.

    Attributes:
        normalize: Function applied to both snapshot and alert service names
            before matching.
    """

    def __init__(self, normalize: ServiceNameNormalizer = exact_service_name) -> None:
        """Initialize the evaluator.

        Args:
            normalize: Service-name normalizer (default: exact match).
        """
        self._normalize = normalize

    def is_breached(self, alert: Alert, observed_cost: Decimal) -> bool:
        """Strict comparison: a cost equal to the threshold does not breach."""
        return observed_cost > alert.threshold_amount

    def evaluate(
        self,
        alerts: Iterable[Alert],
        snapshot: CostSnapshot | None,
    ) -> list[BreachEvent]:
        """Determine which alerts are breached by the snapshot.

        Args:
            alerts: Alerts to check, in the order breaches should be reported.
            snapshot: Current cost snapshot. None is treated as empty.

        Returns:
            Breach events in input alert order.
        """
        if snapshot is None:
            snapshot = CostSnapshot.empty()

        costs = snapshot.by_service(self._normalize)
        total = snapshot.total
        breaches: list[BreachEvent] = []

        for alert in alerts:
            if not alert.is_active:
                continue

            if alert.alert_type != AlertType.THRESHOLD:
                logger.debug(
                    f"Skipping alert {alert.id}: {alert.alert_type.value} alerts "
                    f"are not evaluated against snapshots"
                )
                continue

            observed = self._observed_cost(alert, costs, total)

            if self.is_breached(alert, observed):
                breaches.append(BreachEvent(alert=alert, observed_cost=observed))

        return breaches

    def _observed_cost(
        self,
        alert: Alert,
        costs: dict[str, Decimal],
        total: Decimal,
    ) -> Decimal:
        if alert.watches_all_services:
            return total
        return costs.get(self._normalize(alert.service_name), Decimal("0"))
