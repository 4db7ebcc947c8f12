"""Domain value objects for the cost tracker.

- ServiceCost / CostSnapshot: Per-service spend for one evaluation cycle
- EmailAddress: Validated notification target
"""

from app.cost_tracker.domain.value_objects.cost_snapshot import (
    CostSnapshot,
    ServiceCost,
    ServiceNameNormalizer,
)
from app.cost_tracker.domain.value_objects.email_address import EmailAddress

__all__ = ["CostSnapshot", "EmailAddress", "ServiceCost", "ServiceNameNormalizer"]
