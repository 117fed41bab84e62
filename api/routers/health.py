"""
Health check router.

This router provides the root banner and a liveness endpoint for
monitoring and load balancers.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from api.deps import get_exercise_catalog
from backend.core.exercise_catalog import ExerciseCatalog

router = APIRouter(
    tags=["Health"],
)


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    """Plain-text banner confirming the server is up."""
    return "Server is running! You can now access /exercises and /bodyparts"


@router.get("/health")
def health(catalog: ExerciseCatalog = Depends(get_exercise_catalog)):
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator and the number of loaded exercises
    """
    return {"status": "ok", "exercises_loaded": len(catalog)}
