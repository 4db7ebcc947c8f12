# Ports for external integrations (NotificationGateway, CostSnapshotProvider)

from .cost_snapshot_provider import CostSnapshotProvider
from .notification_gateway import CostAlertMessage, NotificationGateway

__all__ = [
    "CostAlertMessage",
    "CostSnapshotProvider",
    "NotificationGateway",
]
