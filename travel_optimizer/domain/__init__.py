"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    InvalidCriterionError,
    ScheduleFormatError,
    ScheduleLoadError,
    TravelOptimizerError,
)
from .models import (
    Criterion,
    Leg,
    Location,
    OptimalSchedule,
    PruningPolicy,
    RawTravelRequest,
    SearchState,
    TravelPlan,
    TravelRequest,
)

__all__ = [
    # Models
    "Location",
    "Criterion",
    "PruningPolicy",
    "Leg",
    "RawTravelRequest",
    "TravelRequest",
    "SearchState",
    "OptimalSchedule",
    "TravelPlan",
    # Errors
    "TravelOptimizerError",
    "InvalidCriterionError",
    "ScheduleFormatError",
    "ScheduleLoadError",
    "ConfigurationError",
]
