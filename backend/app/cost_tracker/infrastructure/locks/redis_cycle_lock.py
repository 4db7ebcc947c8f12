"""Redis-backed lock serialising evaluation cycles across workers."""

from redis.asyncio import Redis
from redis.asyncio.lock import Lock
from redis.exceptions import LockError

EVALUATION_LOCK_NAME = "cost_tracker:evaluation_cycle"

__all__ = ["EVALUATION_LOCK_NAME", "LockError", "create_evaluation_lock", "create_redis_client"]


def create_redis_client(redis_url: str) -> Redis:
    """Create an async Redis client for lock coordination."""
    return Redis.from_url(redis_url, decode_responses=True)


def create_evaluation_lock(
    client: Redis,
    timeout_seconds: float,
    blocking_timeout_seconds: float = 5.0,
) -> Lock:
    """Build the "evaluation in progress" lock.

    Usable as ``async with lock:``. Entering raises LockError when another
    cycle still holds the lock after ``blocking_timeout_seconds``.

    Args:
        client: Async Redis client.
        timeout_seconds: Lock expiry, so a crashed worker cannot hold it forever.
        blocking_timeout_seconds: How long to wait for a running cycle.

    Returns:
        A redis-py asyncio Lock.
    """
    return client.lock(
        EVALUATION_LOCK_NAME,
        timeout=timeout_seconds,
        blocking_timeout=blocking_timeout_seconds,
    )
