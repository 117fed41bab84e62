"""
Password hashing.

Uses pwdlib's recommended hasher (Argon2id), which salts every hash and
embeds its cost parameters in the encoded string.
"""
import logging
from functools import lru_cache

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

logger = logging.getLogger(__name__)

password_hash = PasswordHash.recommended()


def hash_password(password: str) -> str:
    """Hash a plaintext password."""
    return password_hash.hash(password)


@lru_cache
def dummy_password_hash() -> str:
    """
    Hash of a throwaway password, computed once.

    Login verifies against it when the email is unknown so both failure
    paths pay for one hash verification.
    """
    return password_hash.hash("fittrack-unknown-account")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plaintext password against a stored hash."""
    try:
        return password_hash.verify(plain_password, hashed_password)
    except UnknownHashError:
        logger.error("Stored password hash has an unrecognized format")
        return False
