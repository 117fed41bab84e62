"""
Application Use Cases for the FitTrack API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Dependencies are injected via
constructors for testability.

Usage:
    from application.use_cases import AuthService

    auth = AuthService(user_repo=user_repo, jwt_secret=settings.jwt_secret)
    result = auth.signup("alice", "a@x.com", "secret1")
    user = auth.get_profile(result.user_id)
"""

from application.use_cases.auth_service import (
    AuthResult,
    AuthService,
    MIN_PASSWORD_LENGTH,
)

__all__ = [
    "AuthService",
    "AuthResult",
    "MIN_PASSWORD_LENGTH",
]
