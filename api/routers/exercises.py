"""
Exercises router for static exercise lookup.

This router provides read-only endpoints over the exercise dataset loaded
at startup:
- Paginated exercise listing
- Distinct body parts
- Exercises for one body part
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Path, Query

from api.deps import get_exercise_catalog
from backend.core.exercise_catalog import ExerciseCatalog

router = APIRouter(
    tags=["Exercises"],
)


# =============================================================================
# Lookup Endpoints
# =============================================================================


@router.get("/exercises", response_model=List[Dict[str, Any]])
def list_exercises(
    page: Optional[str] = Query(None, description="1-based page number (default 1)"),
    limit: Optional[str] = Query(None, description="Page size (default 100)"),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> List[Dict[str, Any]]:
    """
    List exercises one page at a time.

    Values are parsed leniently ("2abc" is page 2); unparsable or zero
    values fall back to the defaults instead of failing the request.
    """
    return catalog.page(page, limit)


@router.get("/bodyparts", response_model=List[str])
def list_body_parts(
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> List[str]:
    """List the distinct body parts present in the dataset."""
    return catalog.body_parts()


@router.get("/exercises/bodypart/{part}", response_model=List[Dict[str, Any]])
def list_exercises_by_body_part(
    part: str = Path(..., description="Body part, matched case-insensitively"),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> List[Dict[str, Any]]:
    """List all exercises for a body part. Unknown parts return an empty list."""
    return catalog.by_body_part(part)
