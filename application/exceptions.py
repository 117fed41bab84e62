"""
Application-layer exceptions.

These exceptions are raised by the auth use case, the token service and the
repository adapters, and are mapped to HTTP responses by the routers.
Each class carries the status code and error kind it maps to.
"""
from typing import Any, Dict, List, Optional


class AuthError(Exception):
    """Base class for errors surfaced by the authentication flow."""

    status_code: int = 500
    kind: str = "AuthError"
    default_message: str = "Authentication error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_detail(self) -> Dict[str, Any]:
        """Body placed under ``detail`` in the HTTP error response."""
        return {"error": self.kind, "message": self.message}


class ValidationError(AuthError):
    """Raised when request input is missing or malformed."""

    status_code = 400
    kind = "ValidationError"
    default_message = "Invalid input"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_detail(self) -> Dict[str, Any]:
        detail = super().to_detail()
        if self.errors:
            detail["errors"] = self.errors
        return detail


class DuplicateEmailError(AuthError):
    """Raised when signing up with an email that already has an account."""

    status_code = 400
    kind = "DuplicateEmail"
    default_message = "A user with this email already exists"


class InvalidCredentialsError(AuthError):
    """Raised on login failure.

    Unknown email and wrong password share this error so responses
    don't reveal which accounts exist.
    """

    status_code = 400
    kind = "InvalidCredentials"
    default_message = "Invalid email or password"


class UnauthenticatedError(AuthError):
    """Raised when no usable bearer credential was presented."""

    status_code = 401
    kind = "Unauthenticated"
    default_message = "Missing or malformed Authorization header"


class InvalidTokenError(AuthError):
    """Raised when a bearer token fails signature, payload or expiry checks."""

    status_code = 400
    kind = "InvalidToken"
    default_message = "Token is invalid or expired"


class NotFoundError(AuthError):
    """Raised when a referenced resource no longer exists."""

    status_code = 404
    kind = "NotFound"
    default_message = "Resource not found"


class StorageError(AuthError):
    """Raised when the persistence layer fails.

    The message is generic; the underlying cause is logged server-side
    and kept on ``__cause__``.
    """

    status_code = 500
    kind = "StorageError"
    default_message = "Storage failure"
