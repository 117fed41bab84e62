"""
User Repository Interface (Port).

This module defines the abstract interface for the credential store:
user records with their password hash and usage statistics.
Implementations may use Supabase or other backends.
"""
from typing import Protocol, Optional, Dict, Any


class UserRepository(Protocol):
    """
    Abstract interface for persisting user accounts.

    User records are dictionaries with the keys:
    id, username, email, password_hash, total_calories, total_minutes,
    total_workouts, created_at.

    Only the auth use case talks to this repository; the password hash
    must never leave it through an API response.
    """

    def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Find a user by email (exact, case-sensitive match).

        Args:
            email: Email address as submitted

        Returns:
            User dictionary or None if not found

        Raises:
            StorageError: If the backend query fails
        """
        ...

    def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Find a user by its store-assigned identifier.

        Args:
            user_id: User ID (UUID string)

        Returns:
            User dictionary or None if not found or the ID is not a valid UUID

        Raises:
            StorageError: If the backend query fails
        """
        ...

    def create(
        self,
        username: str,
        email: str,
        password_hash: str,
    ) -> Dict[str, Any]:
        """
        Insert a new user with zeroed statistics.

        Uniqueness of email is enforced by the store itself, so two
        concurrent signups for one email cannot both succeed.

        Args:
            username: Display name
            email: Email address (unique)
            password_hash: Salted one-way hash of the password

        Returns:
            The created user dictionary, including its new ID

        Raises:
            DuplicateEmailError: If the email is already registered
            StorageError: If the insert fails for any other reason
        """
        ...
