"""
API package for the FitTrack API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_user_repo,
    get_training_plan_repo,
    get_exercise_catalog,
    get_jwt_secret,
    get_auth_service,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_user_repo",
    "get_training_plan_repo",
    "get_exercise_catalog",
    # Authentication
    "get_jwt_secret",
    "get_auth_service",
    "get_current_user",
]
