"""
FastAPI Dependency Providers for the FitTrack API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings, Supabase client and the exercise catalog are cached per-process (lru_cache)
- Repository providers create new instances per-request
- The auth provider is the access gate for protected routes

Usage in routers:
    from api.deps import get_auth_service, get_current_user
    from application.use_cases import AuthService

    @router.get("/profile")
    def profile(
        user_id: str = Depends(get_current_user),
        auth: AuthService = Depends(get_auth_service),
    ):
        return auth.get_profile(user_id).profile()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_user_repo] = lambda: FakeUserRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    UserRepository,
    TrainingPlanRepository,
)

# Concrete implementations
from infrastructure import (
    SupabaseUserRepository,
    SupabaseTrainingPlanRepository,
)

from application.exceptions import AuthError
from application.use_cases import AuthService
from backend.auth import authenticate_bearer, http_error
from backend.core.exercise_catalog import (
    ExerciseCatalog,
    get_exercise_catalog as _get_exercise_catalog,
)
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_user_repo(
    client: Client = Depends(get_supabase_client_required),
) -> UserRepository:
    """
    Get UserRepository implementation.

    Returns a SupabaseUserRepository instance with injected client.
    The return type is the Protocol to enable easy faking.

    Args:
        client: Supabase client (injected)

    Returns:
        UserRepository: Credential store
    """
    return SupabaseUserRepository(client)


def get_training_plan_repo(
    client: Client = Depends(get_supabase_client_required),
) -> TrainingPlanRepository:
    """
    Get TrainingPlanRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        TrainingPlanRepository: Repository for seeded training plans
    """
    return SupabaseTrainingPlanRepository(client)


def get_exercise_catalog() -> ExerciseCatalog:
    """
    Get the process-wide exercise catalog.

    The dataset is loaded once; this never touches the database.

    Returns:
        ExerciseCatalog: Read-only exercise queries
    """
    return _get_exercise_catalog()


# =============================================================================
# Authentication Providers
# =============================================================================


def get_jwt_secret(settings: Settings = Depends(get_settings)) -> str:
    """
    Get the token signing secret.

    Startup refuses to run without it; this guard covers apps built
    without the lifespan check (e.g. in tests).

    Raises:
        HTTPException: 503 if JWT_SECRET is not configured
    """
    if not settings.jwt_secret:
        raise HTTPException(
            status_code=503,
            detail="Authentication not available. JWT_SECRET not configured.",
        )
    return settings.jwt_secret


def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repo),
    jwt_secret: str = Depends(get_jwt_secret),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    """
    Get the AuthService use case wired to the credential store.

    Returns:
        AuthService: Signup, login and profile use case
    """
    return AuthService(
        user_repo=user_repo,
        jwt_secret=jwt_secret,
        token_expiry_days=settings.jwt_expiry_days,
    )


async def get_current_user(
    authorization: Optional[str] = Header(None),
    jwt_secret: str = Depends(get_jwt_secret),
) -> str:
    """
    Get the current authenticated user ID.

    Access gate for protected routes: the route body only runs when a
    valid bearer token was presented.

    Args:
        authorization: Bearer token header
        jwt_secret: Signing secret (injected)

    Returns:
        str: User ID from the token subject

    Raises:
        HTTPException: 401 if the header is missing or not Bearer,
            400 if the token is invalid or expired
    """
    try:
        return authenticate_bearer(authorization, jwt_secret)
    except AuthError as e:
        raise http_error(e)


# =============================================================================
# Exports
# =============================================================================

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
