"""
Supabase implementation of TrainingPlanRepository.

Plans live in the ``training_plans`` table with the day structure stored in
a JSONB ``days`` column.
"""
import logging
from typing import Optional, List, Dict, Any

from supabase import Client

from application.exceptions import StorageError

logger = logging.getLogger(__name__)

PLANS_TABLE = "training_plans"


class SupabaseTrainingPlanRepository:
    """Supabase implementation of TrainingPlanRepository protocol."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def list_plans(self, level: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List plans ordered by title, optionally filtered by level.

        Args:
            level: Optional level filter

        Returns:
            List of plan dictionaries
        """
        try:
            query = self._client.table(PLANS_TABLE).select("*")
            if level:
                query = query.eq("level", level)
            result = query.order("title").execute()
            return result.data or []
        except Exception as e:
            logger.exception("Error listing training plans")
            raise StorageError() from e

    def get_plan(self, plan_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a plan by slug.

        Args:
            plan_id: Plan slug

        Returns:
            Plan dictionary or None if not found
        """
        try:
            result = (
                self._client.table(PLANS_TABLE)
                .select("*")
                .eq("id", plan_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.exception(f"Error fetching training plan {plan_id}")
            raise StorageError() from e

        if result.data:
            return result.data[0]
        return None

    def upsert_plans(self, plans: List[Dict[str, Any]]) -> int:
        """
        Insert or replace plans keyed by id.

        Args:
            plans: Plan dictionaries

        Returns:
            Number of plans written
        """
        if not plans:
            return 0
        try:
            result = (
                self._client.table(PLANS_TABLE)
                .upsert(plans, on_conflict="id")
                .execute()
            )
        except Exception as e:
            logger.exception("Error upserting training plans")
            raise StorageError() from e

        written = len(result.data or [])
        logger.info(f"Upserted {written} training plans")
        return written
