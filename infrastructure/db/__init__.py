"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into services
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseUserRepository,
        SupabaseTrainingPlanRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    user_repo = SupabaseUserRepository(client)
    plan_repo = SupabaseTrainingPlanRepository(client)
"""

from infrastructure.db.user_repository import SupabaseUserRepository
from infrastructure.db.training_plan_repository import SupabaseTrainingPlanRepository

__all__ = [
    # Credential store
    "SupabaseUserRepository",

    # Seeded training plans
    "SupabaseTrainingPlanRepository",
]
