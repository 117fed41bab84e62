"""
Unit tests for training plan seed loading (backend/core/training_plans.py).
"""

import pytest
import yaml
from pydantic import ValidationError

from backend.core.training_plans import SEED_PLANS_PATH, load_seed_plans, seed_training_plans
from tests.fakes import FakeTrainingPlanRepository


def _plan(plan_id="test-plan", **overrides):
    plan = {
        "id": plan_id,
        "title": "Test Plan",
        "level": "beginner",
        "goal": "strength",
        "duration_weeks": 4,
        "sessions_per_week": 2,
        "days": [
            {"day": 1, "focus": "Upper", "exercises": [{"name": "Push-up", "sets": 3, "reps": 10}]},
        ],
    }
    plan.update(overrides)
    return plan


def _write(tmp_path, plans):
    path = tmp_path / "plans.yaml"
    path.write_text(yaml.safe_dump(plans))
    return path


@pytest.mark.unit
class TestLoadSeedPlans:

    def test_bundled_seed_is_valid(self):
        plans = load_seed_plans()

        assert SEED_PLANS_PATH.exists()
        assert len(plans) >= 4
        assert len({p["id"] for p in plans}) == len(plans)

    def test_bundled_seed_covers_every_level(self):
        levels = {p["level"] for p in load_seed_plans()}
        assert levels == {"beginner", "intermediate", "advanced"}

    def test_loads_custom_file(self, tmp_path):
        plans = load_seed_plans(_write(tmp_path, [_plan()]))

        assert plans[0]["id"] == "test-plan"
        assert plans[0]["level"] == "beginner"
        assert plans[0]["days"][0]["exercises"][0]["rest_seconds"] is None

    def test_rejects_non_list(self, tmp_path):
        with pytest.raises(ValueError, match="list of plans"):
            load_seed_plans(_write(tmp_path, {"id": "x"}))

    def test_rejects_duplicate_ids(self, tmp_path):
        with pytest.raises(ValueError, match="Duplicate plan ids"):
            load_seed_plans(_write(tmp_path, [_plan("same"), _plan("same")]))

    def test_rejects_invalid_plan(self, tmp_path):
        with pytest.raises(ValidationError):
            load_seed_plans(_write(tmp_path, [_plan(level="elite")]))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_seed_plans(tmp_path / "missing.yaml")


@pytest.mark.unit
class TestSeedTrainingPlans:

    def test_seed_writes_all_plans(self):
        repo = FakeTrainingPlanRepository()

        written = seed_training_plans(repo)

        assert written == len(load_seed_plans())
        assert repo.count == written

    def test_seed_is_idempotent(self, tmp_path):
        repo = FakeTrainingPlanRepository()
        path = _write(tmp_path, [_plan("a"), _plan("b")])

        seed_training_plans(repo, path)
        seed_training_plans(repo, path)

        assert repo.count == 2
