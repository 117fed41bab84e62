"""
User aggregate and its usage statistics.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserStats(BaseModel):
    """
    Usage counters kept on each user record.

    Serialized with camelCase keys for API clients:

        >>> UserStats().model_dump(by_alias=True)
        {'totalCalories': 0, 'totalMinutes': 0, 'totalWorkouts': 0}
    """

    model_config = ConfigDict(populate_by_name=True)

    total_calories: int = Field(default=0, ge=0, alias="totalCalories")
    total_minutes: int = Field(default=0, ge=0, alias="totalMinutes")
    total_workouts: int = Field(default=0, ge=0, alias="totalWorkouts")


class User(BaseModel):
    """
    A registered account.

    ``password_hash`` is excluded from every dump so the model can be
    serialized without leaking it.
    """

    id: str = Field(..., description="Store-assigned identifier")
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password_hash: str = Field(..., exclude=True, repr=False)
    stats: UserStats = Field(default_factory=UserStats)
    created_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "User":
        """Build a User from a flat repository row."""
        return cls(
            id=str(record["id"]),
            username=record["username"],
            email=record["email"],
            password_hash=record["password_hash"],
            stats=UserStats(
                total_calories=record.get("total_calories") or 0,
                total_minutes=record.get("total_minutes") or 0,
                total_workouts=record.get("total_workouts") or 0,
            ),
            created_at=record.get("created_at"),
        )

    def profile(self) -> Dict[str, Any]:
        """Public profile snapshot returned by the API."""
        return {
            "username": self.username,
            "email": self.email,
            "stats": self.stats.model_dump(by_alias=True),
        }
