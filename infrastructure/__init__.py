"""
Infrastructure Layer for the FitTrack API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseUserRepository,
    SupabaseTrainingPlanRepository,
)

__all__ = [
    "SupabaseUserRepository",
    "SupabaseTrainingPlanRepository",
]
