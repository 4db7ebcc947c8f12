"""Domain services implementing core business rules.

These are pure domain services with no infrastructure dependencies:
- ThresholdEvaluator / BreachEvent: which alerts a snapshot breaches
- Service-name normalizers: exact and consolidated matching
"""

from app.cost_tracker.domain.services.service_names import (
    ServiceNameMatching,
    exact_service_name,
    get_service_name_normalizer,
    normalize_service_name,
)
from app.cost_tracker.domain.services.threshold_evaluator import (
    BreachEvent,
    ThresholdEvaluator,
)

__all__ = [
    "BreachEvent",
    "ServiceNameMatching",
    "ThresholdEvaluator",
    "exact_service_name",
    "get_service_name_normalizer",
    "normalize_service_name",
]
