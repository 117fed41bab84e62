"""
Domain models for the FitTrack API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services):
- User / UserStats: registered accounts and their usage counters
- TrainingPlan / PlanDay / PlanExercise: seeded structured training plans

Usage:
    >>> from domain.models import User, UserStats

    >>> user = User(id="u1", username="alice", email="a@x.com", password_hash="...")
    >>> user.profile()
    {'username': 'alice', 'email': 'a@x.com', 'stats': {'totalCalories': 0, 'totalMinutes': 0, 'totalWorkouts': 0}}
"""

from domain.models.user import User, UserStats
from domain.models.training_plan import (
    PlanDay,
    PlanExercise,
    PlanLevel,
    TrainingPlan,
)

__all__ = [
    "User",
    "UserStats",
    "TrainingPlan",
    "PlanDay",
    "PlanExercise",
    "PlanLevel",
]
