"""
Supabase implementation of UserRepository.

This module provides the concrete Supabase implementation of the credential
store over the ``users`` table. Email uniqueness is enforced by the
``users_email_key`` unique index (see supabase/migrations), and a unique
violation reported by PostgREST is translated to DuplicateEmailError.
"""
import logging
import uuid
from typing import Optional, Dict, Any

from postgrest.exceptions import APIError
from supabase import Client

from application.exceptions import DuplicateEmailError, StorageError

logger = logging.getLogger(__name__)

USERS_TABLE = "users"

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class SupabaseUserRepository:
    """
    Supabase implementation of UserRepository protocol.

    All failures other than "not found" are raised as StorageError after
    being logged; the caller never sees driver details.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Find a user by exact email match.

        Args:
            email: Email address as submitted

        Returns:
            User dictionary or None if not found
        """
        try:
            result = (
                self._client.table(USERS_TABLE)
                .select("*")
                .eq("email", email)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.exception("Error fetching user by email")
            raise StorageError() from e

        if result.data:
            return result.data[0]
        return None

    def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Find a user by ID.

        Args:
            user_id: User ID (UUID string)

        Returns:
            User dictionary or None if not found or not a valid UUID
        """
        try:
            uuid.UUID(str(user_id))
        except ValueError:
            return None

        try:
            result = (
                self._client.table(USERS_TABLE)
                .select("*")
                .eq("id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.exception(f"Error fetching user {user_id}")
            raise StorageError() from e

        if result.data:
            return result.data[0]
        return None

    def create(
        self,
        username: str,
        email: str,
        password_hash: str,
    ) -> Dict[str, Any]:
        """
        Insert a new user with zeroed statistics.

        Args:
            username: Display name
            email: Email address (unique)
            password_hash: Salted password hash

        Returns:
            The created user dictionary

        Raises:
            DuplicateEmailError: If the unique index rejects the email
            StorageError: If the insert fails otherwise
        """
        row = {
            "username": username,
            "email": email,
            "password_hash": password_hash,
            "total_calories": 0,
            "total_minutes": 0,
            "total_workouts": 0,
        }
        try:
            result = self._client.table(USERS_TABLE).insert(row).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                logger.info("Signup rejected by unique email index")
                raise DuplicateEmailError() from e
            logger.exception("Error creating user")
            raise StorageError() from e
        except Exception as e:
            logger.exception("Error creating user")
            raise StorageError() from e

        if not result.data:
            logger.error("User insert returned no row")
            raise StorageError()
        return result.data[0]
