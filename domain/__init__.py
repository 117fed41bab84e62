"""
Domain layer for the FitTrack API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    PlanDay,
    PlanExercise,
    PlanLevel,
    TrainingPlan,
    User,
    UserStats,
)

__all__ = [
    "User",
    "UserStats",
    "TrainingPlan",
    "PlanDay",
    "PlanExercise",
    "PlanLevel",
]
