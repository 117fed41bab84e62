"""
Bearer token issuance and verification.

Tokens are HS256 JWTs carrying the user ID as ``sub`` and expiring
JWT_EXPIRY_DAYS after issuance. They are stateless: nothing is persisted,
verification is a signature and expiry check against the configured secret.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from application.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

# Token configuration
JWT_EXPIRY_DAYS = 30
JWT_ALGORITHM = "HS256"
JWT_ISSUER = "fittrack"


def issue_token(
    subject: str,
    secret: str,
    *,
    expiry_days: int = JWT_EXPIRY_DAYS,
    now: Optional[datetime] = None,
) -> str:
    """
    Issue a signed bearer token for a user.

    Args:
        subject: User ID the token is bound to
        secret: Signing secret
        expiry_days: Token lifetime in days
        now: Issuance time (defaults to the current UTC time)

    Returns:
        Encoded JWT string
    """
    if not secret:
        raise RuntimeError("JWT secret is not configured")

    issued_at = now or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(days=expiry_days)

    payload = {
        "sub": str(subject),
        "iat": int(issued_at.timestamp()),
        "exp": int(expiry.timestamp()),
        "iss": JWT_ISSUER,
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def verify_token(token: str, secret: str) -> str:
    """
    Verify a bearer token and return its subject.

    Bad signatures, malformed payloads, a wrong issuer and expiry all
    raise the same InvalidTokenError.

    Args:
        token: Encoded JWT string
        secret: Signing secret

    Returns:
        The user ID from the ``sub`` claim

    Raises:
        InvalidTokenError: If the token does not verify
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[JWT_ALGORITHM],
            issuer=JWT_ISSUER,
            options={"require": ["sub", "exp", "iat"]},
        )
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired token")
        raise InvalidTokenError()
    except jwt.InvalidTokenError as e:
        logger.info(f"Rejected invalid token: {type(e).__name__}")
        raise InvalidTokenError()

    subject = payload.get("sub")
    if not subject or not isinstance(subject, str):
        raise InvalidTokenError()
    return subject
