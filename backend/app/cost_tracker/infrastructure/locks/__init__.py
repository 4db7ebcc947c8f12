"""Distributed locks used by the scheduler."""

from app.cost_tracker.infrastructure.locks.redis_cycle_lock import (
    EVALUATION_LOCK_NAME,
    LockError,
    create_evaluation_lock,
    create_redis_client,
)

__all__ = [
    "EVALUATION_LOCK_NAME",
    "LockError",
    "create_evaluation_lock",
    "create_redis_client",
]
