"""
Training plans router.

Read-only access to the seeded training plans:
- GET /api/plans - List plans, optionally filtered by level
- GET /api/plans/{plan_id} - Get one plan
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from api.deps import get_training_plan_repo
from application.exceptions import AuthError, NotFoundError, StorageError
from application.ports import TrainingPlanRepository
from backend.auth import http_error
from domain.models import PlanLevel, TrainingPlan

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/plans",
    tags=["Training Plans"],
)


@router.get("", response_model=List[TrainingPlan])
def list_plans(
    level: Optional[PlanLevel] = Query(None, description="Filter by experience level"),
    repo: TrainingPlanRepository = Depends(get_training_plan_repo),
) -> List[TrainingPlan]:
    """List training plans ordered by title."""
    try:
        plans = repo.list_plans(level=level.value if level else None)
    except AuthError as e:
        raise http_error(e)
    except Exception:
        logger.exception("Failed to list training plans")
        raise http_error(StorageError())
    return [TrainingPlan.model_validate(p) for p in plans]


@router.get("/{plan_id}", response_model=TrainingPlan)
def get_plan(
    plan_id: str = Path(..., min_length=1, max_length=100, description="Plan slug"),
    repo: TrainingPlanRepository = Depends(get_training_plan_repo),
) -> TrainingPlan:
    """Get a training plan by slug."""
    try:
        plan = repo.get_plan(plan_id)
    except AuthError as e:
        raise http_error(e)
    except Exception:
        logger.exception(f"Failed to fetch training plan {plan_id}")
        raise http_error(StorageError())

    if plan is None:
        raise http_error(NotFoundError(f"Training plan '{plan_id}' not found"))
    return TrainingPlan.model_validate(plan)
