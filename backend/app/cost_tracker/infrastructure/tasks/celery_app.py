"""Celery application configuration."""

from celery import Celery
from celery.signals import setup_logging as celery_setup_logging

from app.core.config import get_settings
from app.core.logging import setup_logging

settings = get_settings()

celery_app = Celery(
    "cost_tracker",
    broker=str(settings.celery_broker_url),
    backend=str(settings.celery_result_backend),
    include=["app.cost_tracker.infrastructure.tasks.alert_tasks"],
)

# Celery configuration
celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_time_limit=300,  # 5 minutes max per task
    worker_prefetch_multiplier=1,  # One cycle at a time per worker process
    # Beat schedule for periodic tasks
    beat_schedule={
        "check-alerts-every-5m": {
            "task": "app.cost_tracker.infrastructure.tasks.alert_tasks.check_alerts",
            "schedule": settings.alert_check_interval_seconds,
        },
    },
)


@celery_setup_logging.connect
def _configure_worker_logging(**kwargs) -> None:
    """Use the application log format in worker processes."""
    setup_logging(level="DEBUG" if settings.debug else "INFO")

