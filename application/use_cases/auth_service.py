"""
Authentication Use Case.

This use case handles account signup, login, and profile retrieval:
- signup: validate -> check uniqueness -> hash -> persist -> issue token
- login: lookup -> verify hash -> issue token
- get_profile: resolve the token subject to a public profile snapshot

Errors are raised as application exceptions (see application.exceptions)
and mapped to HTTP responses by the auth router.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from application.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from application.ports import UserRepository
from backend.passwords import dummy_password_hash, hash_password, verify_password
from backend.tokens import JWT_EXPIRY_DAYS, issue_token
from domain.models import User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


@dataclass
class AuthResult:
    """Result of a successful signup or login."""
    token: str
    user_id: str


class AuthService:
    """
    Use case for account authentication.

    Password hashing and verification are injectable so tests can swap
    in cheaper functions; production uses Argon2 via backend.passwords.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        jwt_secret: str,
        *,
        token_expiry_days: int = JWT_EXPIRY_DAYS,
        hasher: Callable[[str], str] = hash_password,
        verifier: Callable[[str, str], bool] = verify_password,
        dummy_hash: Callable[[], str] = dummy_password_hash,
    ):
        """
        Initialize with required dependencies.

        Args:
            user_repo: Credential store
            jwt_secret: Signing secret for issued tokens
            token_expiry_days: Lifetime of issued tokens
            hasher: Password hashing function
            verifier: Password verification function (plain, hash) -> bool
            dummy_hash: Returns a hash to verify against when the email is unknown
        """
        self._user_repo = user_repo
        self._jwt_secret = jwt_secret
        self._token_expiry_days = token_expiry_days
        self._hash = hasher
        self._verify = verifier
        self._dummy_hash = dummy_hash

    def signup(
        self,
        username: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> AuthResult:
        """
        Register a new account and issue a token for it.

        Args:
            username: Display name
            email: Email address (must not be registered yet)
            password: Plaintext password, at least MIN_PASSWORD_LENGTH chars

        Returns:
            AuthResult with the issued token

        Raises:
            ValidationError: Missing fields or short password
            DuplicateEmailError: Email already registered
            StorageError: Persistence failed
        """
        username = (username or "").strip()
        email = (email or "").strip()
        password = password or ""

        errors = _validate_signup(username, email, password)
        if errors:
            raise ValidationError(errors[0], errors=errors)

        # Early exit only; the store's unique index is the real guard.
        if self._user_repo.find_by_email(email) is not None:
            raise DuplicateEmailError()

        password_hash = self._hash(password)
        record = self._user_repo.create(username, email, password_hash)
        user = User.from_record(record)

        logger.info(f"Created user {user.id}")
        return AuthResult(token=self._issue(user.id), user_id=user.id)

    def login(
        self,
        email: Optional[str],
        password: Optional[str],
    ) -> AuthResult:
        """
        Authenticate with email and password.

        Unknown email and wrong password raise the same error after
        the same amount of hashing work.

        Raises:
            InvalidCredentialsError: Credentials did not match an account
            StorageError: Lookup failed
        """
        email = (email or "").strip()
        password = password or ""
        if not email or not password:
            raise InvalidCredentialsError()

        record = self._user_repo.find_by_email(email)
        if record is None:
            self._verify(password, self._dummy_hash())
            logger.info("Login failed: unknown email")
            raise InvalidCredentialsError()

        user = User.from_record(record)
        if not self._verify(password, user.password_hash):
            logger.info(f"Login failed: wrong password for user {user.id}")
            raise InvalidCredentialsError()

        return AuthResult(token=self._issue(user.id), user_id=user.id)

    def get_profile(self, user_id: str) -> User:
        """
        Resolve an authenticated user ID to its account.

        The account may have been removed after the token was issued.

        Raises:
            NotFoundError: No user with this ID
            StorageError: Lookup failed
        """
        record = self._user_repo.find_by_id(user_id)
        if record is None:
            raise NotFoundError("User not found")
        return User.from_record(record)

    def _issue(self, user_id: str) -> str:
        return issue_token(
            user_id,
            self._jwt_secret,
            expiry_days=self._token_expiry_days,
        )


def _validate_signup(username: str, email: str, password: str) -> List[str]:
    errors = []
    if not username:
        errors.append("username is required")
    if not email:
        errors.append("email is required")
    if not password:
        errors.append("password is required")
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors.append(f"password must be at least {MIN_PASSWORD_LENGTH} characters")
    return errors
