"""
Auth router for account signup, login, and profile retrieval.

Endpoints:
- POST /api/auth/signup - Create an account, returns a bearer token (201)
- POST /api/auth/login - Exchange email/password for a bearer token
- GET /api/auth/profile - Profile of the token's user (Bearer required)

Handlers are plain ``def`` so FastAPI runs them in its threadpool; password
hashing and the database round-trip never block the event loop.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from api.deps import get_auth_service, get_current_user
from application.exceptions import AuthError, StorageError
from application.use_cases import AuthService
from backend.auth import http_error

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/auth",
    tags=["Auth"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class SignupRequest(BaseModel):
    """Request model for account signup.

    Fields are optional here so that missing values are reported as a
    ValidationError by the use case rather than a 422.
    """
    username: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Password (at least 6 characters)")


class LoginRequest(BaseModel):
    """Request model for login."""
    email: Optional[str] = None
    password: Optional[str] = None


class TokenResponse(BaseModel):
    """Bearer token returned by signup and login."""
    token: str


class StatsResponse(BaseModel):
    """Usage counters in the profile response."""
    totalCalories: int = 0
    totalMinutes: int = 0
    totalWorkouts: int = 0


class ProfileResponse(BaseModel):
    """Public profile; never includes the password hash."""
    username: str
    email: str
    stats: StatsResponse


def _storage_failure(action: str) -> HTTPException:
    logger.exception(f"Unexpected error during {action}")
    return http_error(StorageError())


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def signup(
    request: SignupRequest,
    auth: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Create an account and return a bearer token for it.

    Fails with 400 ValidationError on missing fields or a password shorter
    than 6 characters, 400 DuplicateEmail if the email is taken, and 500
    StorageError if the account could not be saved.
    """
    try:
        result = auth.signup(request.username, request.email, request.password)
    except AuthError as e:
        raise http_error(e)
    except Exception:
        raise _storage_failure("signup")
    return TokenResponse(token=result.token)


@router.post("/login", response_model=TokenResponse)
def login(
    request: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Exchange email and password for a bearer token.

    Unknown email and wrong password both return 400 InvalidCredentials.
    """
    try:
        result = auth.login(request.email, request.password)
    except AuthError as e:
        raise http_error(e)
    except Exception:
        raise _storage_failure("login")
    return TokenResponse(token=result.token)


@router.get("/profile", response_model=ProfileResponse)
def profile(
    user_id: str = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
) -> ProfileResponse:
    """
    Get the authenticated user's profile.

    Returns 404 NotFound if the account behind a valid token no longer exists.
    """
    try:
        user = auth.get_profile(user_id)
    except AuthError as e:
        raise http_error(e)
    except Exception:
        raise _storage_failure("profile lookup")
    return ProfileResponse(**user.profile())
