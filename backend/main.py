"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Startup is fail-fast: the lifespan handler refuses to start (and uvicorn
never accepts connections) when JWT_SECRET or the Supabase credentials are
missing, or when the database can't be reached.

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from supabase import create_client

from backend.core.exercise_catalog import get_exercise_catalog
from backend.passwords import dummy_password_hash
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _verify_startup_config(settings)
        _verify_store(settings)
        dummy_password_hash()
        catalog = get_exercise_catalog()
        logger.info(f"FitTrack API ready ({len(catalog)} exercises, env={settings.environment})")
        yield

    # Create FastAPI app
    app = FastAPI(
        title="FitTrack API",
        description="Exercise lookup, training plans and account authentication API",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Configure CORS middleware
    _configure_cors(app, settings)

    # Include API routers
    _include_routers(app)

    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            profiles_sample_rate=0.1,
            enable_tracing=True,
        )
        logger.info("Sentry initialized for fittrack-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Credentialed requests can't be combined with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        health_router,
        auth_router,
        exercises_router,
        plans_router,
    )

    # Health router (no prefix - / and /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(auth_router)
    app.include_router(exercises_router)
    app.include_router(plans_router)


def _verify_startup_config(settings: Settings) -> None:
    """Refuse to start without the signing secret and database credentials."""
    missing = settings.missing_required_settings()
    if missing:
        logger.critical(f"Missing required configuration: {', '.join(missing)}")
        raise RuntimeError(
            f"Refusing to start: missing required configuration {', '.join(missing)}"
        )


def _verify_store(settings: Settings) -> None:
    """Refuse to start when the users table can't be queried."""
    try:
        client = create_client(settings.supabase_url, settings.supabase_key)
        client.table("users").select("id").limit(1).execute()
    except Exception as e:
        logger.critical(f"Database unreachable at startup: {type(e).__name__}")
        raise RuntimeError("Refusing to start: database unreachable") from e


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
