"""
Training Plan Repository Interface (Port).

This module defines the abstract interface for the seeded training plans
collection. Plans are read-only through the API; the only write path is
the idempotent seed used by the CLI.
"""
from typing import Protocol, Optional, List, Dict, Any


class TrainingPlanRepository(Protocol):
    """
    Abstract interface for querying structured training plans.

    Plan dictionaries carry: id, title, description, level, goal,
    duration_weeks, sessions_per_week and days (list of day dicts with
    day, focus and exercises).
    """

    def list_plans(self, level: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List plans ordered by title.

        Args:
            level: Optional level filter (beginner, intermediate, advanced)

        Returns:
            List of plan dictionaries

        Raises:
            StorageError: If the backend query fails
        """
        ...

    def get_plan(self, plan_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a single plan by its slug.

        Args:
            plan_id: Plan slug (e.g., "full-body-beginner")

        Returns:
            Plan dictionary or None if not found

        Raises:
            StorageError: If the backend query fails
        """
        ...

    def upsert_plans(self, plans: List[Dict[str, Any]]) -> int:
        """
        Insert or replace plans keyed by id.

        Args:
            plans: Plan dictionaries to write

        Returns:
            Number of plans written

        Raises:
            StorageError: If the backend write fails
        """
        ...
