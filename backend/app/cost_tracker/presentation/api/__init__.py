# FastAPI routers - alerts, health
from app.cost_tracker.presentation.api import alerts, health

__all__ = ["alerts", "health"]
