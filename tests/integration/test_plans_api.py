"""
Integration tests for the /api/plans endpoints.

Uses FakeTrainingPlanRepository seeded from the bundled YAML dictionary.
"""
import pytest
from fastapi.testclient import TestClient

from api.deps import get_training_plan_repo
from application.exceptions import StorageError
from backend.main import app
from tests.fakes import create_training_plan_repo


@pytest.fixture
def plan_repo():
    return create_training_plan_repo(seeded=True)


@pytest.fixture
def client(plan_repo):
    """TestClient with the seeded fake plan repository."""
    app.dependency_overrides[get_training_plan_repo] = lambda: plan_repo

    yield TestClient(app)

    app.dependency_overrides.clear()


class _BrokenPlanRepository:
    def list_plans(self, level=None):
        raise StorageError()

    def get_plan(self, plan_id):
        raise StorageError()

    def upsert_plans(self, plans):
        raise StorageError()


@pytest.mark.integration
class TestListPlans:
    """Tests for GET /api/plans."""

    def test_lists_all_plans_sorted_by_title(self, client, plan_repo):
        response = client.get("/api/plans")

        assert response.status_code == 200
        titles = [p["title"] for p in response.json()]
        assert len(titles) == plan_repo.count
        assert titles == sorted(titles)

    def test_filter_by_level(self, client):
        response = client.get("/api/plans", params={"level": "beginner"})

        assert response.status_code == 200
        plans = response.json()
        assert plans
        assert all(p["level"] == "beginner" for p in plans)

    def test_unknown_level_is_rejected(self, client):
        response = client.get("/api/plans", params={"level": "elite"})
        assert response.status_code == 422

    def test_storage_failure_returns_500(self):
        app.dependency_overrides[get_training_plan_repo] = lambda: _BrokenPlanRepository()
        try:
            response = TestClient(app).get("/api/plans")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json()["detail"]["error"] == "StorageError"


@pytest.mark.integration
class TestGetPlan:
    """Tests for GET /api/plans/{plan_id}."""

    def test_get_plan(self, client):
        response = client.get("/api/plans/full-body-beginner")

        assert response.status_code == 200
        plan = response.json()
        assert plan["id"] == "full-body-beginner"
        assert plan["days"][0]["exercises"]

    def test_missing_plan_returns_404(self, client):
        response = client.get("/api/plans/does-not-exist")

        assert response.status_code == 404
        detail = response.json()["detail"]
        assert detail["error"] == "NotFound"
        assert "does-not-exist" in detail["message"]
