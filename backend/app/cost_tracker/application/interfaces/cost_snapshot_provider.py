"""Port for the cost-ingestion side that produces cost snapshots."""

from abc import ABC, abstractmethod

from app.cost_tracker.domain.value_objects.cost_snapshot import CostSnapshot


class CostSnapshotProvider(ABC):
    """Source of the latest known spend per service."""

    @abstractmethod
    async def get_current_snapshot(self) -> CostSnapshot:
        """Return the snapshot for the current evaluation window."""
        ...
