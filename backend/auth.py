"""
Authentication module for bearer token validation.

Provides the request-level access gate used by FastAPI dependencies
(see api.deps.get_current_user) and the mapping from application errors
to HTTP responses.

Gate outcomes:
- No Authorization header, malformed header, or non-Bearer scheme: 401 Unauthenticated
- Bearer token that fails verification or has expired: 400 InvalidToken
- Valid token: the user ID from its ``sub`` claim
"""
import logging
from typing import Optional

from fastapi import HTTPException

from application.exceptions import AuthError, UnauthenticatedError
from backend.tokens import verify_token

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header.

    The scheme is matched case-insensitively.

    Raises:
        UnauthenticatedError: Header missing, malformed, or not Bearer
    """
    if not authorization:
        raise UnauthenticatedError("Missing Authorization header")

    parts = authorization.split()
    if len(parts) != 2:
        raise UnauthenticatedError("Invalid authorization header format")

    scheme, token = parts
    if scheme.lower() != BEARER_SCHEME:
        raise UnauthenticatedError("Authorization scheme must be Bearer")
    return token


def authenticate_bearer(authorization: Optional[str], secret: str) -> str:
    """
    Validate a bearer Authorization header and return the user ID.

    Args:
        authorization: Raw Authorization header value
        secret: Token signing secret

    Returns:
        Authenticated user ID

    Raises:
        UnauthenticatedError: No usable bearer credential
        InvalidTokenError: Token present but invalid or expired
    """
    token = extract_bearer_token(authorization)
    user_id = verify_token(token, secret)
    logger.debug(f"Bearer token validated for user: {user_id}")
    return user_id


def http_error(error: AuthError) -> HTTPException:
    """
    Convert an application error to the HTTPException the API returns.

    Unauthenticated responses carry a ``WWW-Authenticate: Bearer`` challenge.
    """
    headers = None
    if isinstance(error, UnauthenticatedError):
        headers = {"WWW-Authenticate": "Bearer"}
    return HTTPException(
        status_code=error.status_code,
        detail=error.to_detail(),
        headers=headers,
    )
