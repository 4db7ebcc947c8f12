"""Database infrastructure components.

This module exports SQLAlchemy models, session management utilities,
and the Base class for ORM model definitions.
"""

from app.cost_tracker.infrastructure.db.models import (
    AlertNotificationModel,
    Base,
    CostAlertModel,
    CostRecordModel,
)
from app.cost_tracker.infrastructure.db.session import (
    dispose_engine,
    get_async_session_local,
    get_db_session,
    get_engine,
)

__all__ = [
    # Base class
    "Base",
    # Models
    "CostAlertModel",
    "AlertNotificationModel",
    "CostRecordModel",
    # Session utilities
    "dispose_engine",
    "get_engine",
    "get_async_session_local",
    "get_db_session",
]
