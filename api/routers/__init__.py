"""
Router package for the FitTrack API.

This package contains all API routers organized by domain:
- health: Root banner and health check
- auth: Signup, login and profile (bearer token issuance)
- exercises: Static exercise lookup (pagination, body parts)
- plans: Seeded training plans
"""

from api.routers.health import router as health_router
from api.routers.auth import router as auth_router
from api.routers.exercises import router as exercises_router
from api.routers.plans import router as plans_router

__all__ = [
    "health_router",
    "auth_router",
    "exercises_router",
    "plans_router",
]
