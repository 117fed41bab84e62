"""
Unit tests for domain models (User, TrainingPlan).
"""

import pytest
from pydantic import ValidationError

from domain.models import PlanDay, PlanLevel, TrainingPlan, User, UserStats


def _record(**overrides):
    record = {
        "id": "6f1c2d9e-3b7a-4c1e-9f0a-1b2c3d4e5f60",
        "username": "alice",
        "email": "a@x.com",
        "password_hash": "$argon2id$v=19$m=65536,t=3,p=4$abc$def",
        "total_calories": 120,
        "total_minutes": 45,
        "total_workouts": 2,
        "created_at": "2026-01-01T00:00:00+00:00",
    }
    record.update(overrides)
    return record


@pytest.mark.unit
class TestUser:

    def test_from_record(self):
        user = User.from_record(_record())

        assert user.username == "alice"
        assert user.stats.total_calories == 120
        assert user.created_at is not None

    def test_null_stats_default_to_zero(self):
        user = User.from_record(_record(total_calories=None, total_minutes=None, total_workouts=None))
        assert user.stats == UserStats()

    def test_profile_uses_camel_case_stats(self):
        profile = User.from_record(_record()).profile()

        assert profile == {
            "username": "alice",
            "email": "a@x.com",
            "stats": {"totalCalories": 120, "totalMinutes": 45, "totalWorkouts": 2},
        }

    def test_password_hash_never_dumped(self):
        user = User.from_record(_record())

        assert "password_hash" not in user.model_dump()
        assert "argon2" not in user.model_dump_json()
        assert "argon2" not in repr(user)

    def test_stats_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            UserStats(total_calories=-1)


def _plan(**overrides):
    values = dict(
        id="full-body-beginner",
        title="Full Body",
        level="beginner",
        goal="general_fitness",
        duration_weeks=4,
        sessions_per_week=3,
        days=[{"day": 1, "focus": "Full body", "exercises": [{"name": "Squat", "sets": 3, "reps": "8-12"}]}],
    )
    values.update(overrides)
    return values


@pytest.mark.unit
class TestTrainingPlan:

    def test_valid_plan(self):
        plan = TrainingPlan.model_validate(_plan())

        assert plan.level is PlanLevel.BEGINNER
        assert plan.days[0].exercises[0].reps == "8-12"

    def test_numeric_reps(self):
        plan = TrainingPlan.model_validate(
            _plan(days=[{"day": 1, "focus": "x", "exercises": [{"name": "Squat", "sets": 3, "reps": 5}]}])
        )
        assert plan.days[0].exercises[0].reps == 5

    @pytest.mark.parametrize("plan_id", ["Full Body", "-leading-dash", ""])
    def test_id_must_be_slug(self, plan_id):
        with pytest.raises(ValidationError):
            TrainingPlan.model_validate(_plan(id=plan_id))

    def test_unknown_level(self):
        with pytest.raises(ValidationError):
            TrainingPlan.model_validate(_plan(level="elite"))

    def test_duplicate_day_numbers(self):
        days = [PlanDay(day=1, focus="a"), PlanDay(day=1, focus="b")]
        with pytest.raises(ValidationError, match="duplicate day"):
            TrainingPlan.model_validate(_plan(days=days))

    def test_more_days_than_sessions(self):
        days = [PlanDay(day=i, focus="x") for i in range(1, 5)]
        with pytest.raises(ValidationError, match="sessions per week"):
            TrainingPlan.model_validate(_plan(sessions_per_week=3, days=days))

    @pytest.mark.parametrize("weeks", [0, 53])
    def test_duration_bounds(self, weeks):
        with pytest.raises(ValidationError):
            TrainingPlan.model_validate(_plan(duration_weeks=weeks))
