"""
Structured training plan model.

Plans are seeded from a YAML dictionary and served read-only. Validating the
seed through these models keeps malformed plans out of the store.
"""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field, model_validator


class PlanLevel(str, Enum):
    """Experience level a plan targets."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class PlanExercise(BaseModel):
    """One prescribed exercise within a plan day."""

    name: str = Field(..., min_length=1)
    sets: int = Field(..., ge=1)
    reps: Union[int, str] = Field(..., description="Reps per set, or a scheme like '8-12' or 'AMRAP'")
    rest_seconds: Optional[int] = Field(default=None, ge=0)


class PlanDay(BaseModel):
    """A single training day."""

    day: int = Field(..., ge=1)
    focus: str = Field(..., min_length=1)
    exercises: List[PlanExercise] = Field(default_factory=list)


class TrainingPlan(BaseModel):
    """
    A multi-week training plan.

    Examples:
        >>> plan = TrainingPlan(
        ...     id="full-body-beginner",
        ...     title="Full Body Foundations",
        ...     level="beginner",
        ...     goal="general_fitness",
        ...     duration_weeks=4,
        ...     sessions_per_week=3,
        ...     days=[PlanDay(day=1, focus="Full body", exercises=[])],
        ... )
        >>> plan.level
        <PlanLevel.BEGINNER: 'beginner'>
    """

    id: str = Field(..., pattern=r"^[a-z0-9][a-z0-9-]*$", description="Plan slug")
    title: str = Field(..., min_length=1)
    description: str = ""
    level: PlanLevel
    goal: str = Field(..., min_length=1)
    duration_weeks: int = Field(..., ge=1, le=52)
    sessions_per_week: int = Field(..., ge=1, le=7)
    days: List[PlanDay] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_days(self) -> "TrainingPlan":
        """Days must be numbered uniquely and not exceed sessions per week."""
        numbers = [d.day for d in self.days]
        if len(numbers) != len(set(numbers)):
            raise ValueError(f"Plan '{self.id}' has duplicate day numbers")
        if len(self.days) > self.sessions_per_week:
            raise ValueError(
                f"Plan '{self.id}' lists {len(self.days)} days but only "
                f"{self.sessions_per_week} sessions per week"
            )
        return self
