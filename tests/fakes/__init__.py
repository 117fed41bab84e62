"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeUserRepository, create_user_repo

    repo = create_user_repo(users=[{"username": "alice", "email": "a@x.com", ...}])
"""
from typing import Optional, Dict, Any, List

from tests.fakes.user_repository import FakeUserRepository, FailingUserRepository
from tests.fakes.training_plan_repository import FakeTrainingPlanRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_user_repo(
    *,
    users: Optional[List[Dict[str, Any]]] = None,
) -> FakeUserRepository:
    """
    Create a FakeUserRepository with optional pre-created users.

    Args:
        users: Optional user records (id assigned when missing)

    Returns:
        Pre-populated FakeUserRepository
    """
    repo = FakeUserRepository()
    if users:
        repo.seed(users)
    return repo


def create_training_plan_repo(
    *,
    seeded: bool = False,
    plans: Optional[List[Dict[str, Any]]] = None,
) -> FakeTrainingPlanRepository:
    """
    Create a FakeTrainingPlanRepository.

    Args:
        seeded: Load the bundled seed plans
        plans: Extra plans to add

    Returns:
        Pre-populated FakeTrainingPlanRepository
    """
    repo = FakeTrainingPlanRepository()
    if seeded:
        from backend.core.training_plans import load_seed_plans
        repo.upsert_plans(load_seed_plans())
    if plans:
        repo.upsert_plans(plans)
    return repo


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Fake implementations
    "FakeUserRepository",
    "FailingUserRepository",
    "FakeTrainingPlanRepository",
    # Factory functions
    "create_user_repo",
    "create_training_plan_repo",
]
