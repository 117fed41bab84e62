"""
Tests for repository protocol definitions.

These tests verify that:
1. Protocol definitions define the expected methods
2. Supabase adapters and in-memory fakes provide every protocol method
"""
import inspect

import pytest

from application.ports import TrainingPlanRepository, UserRepository
from infrastructure import SupabaseTrainingPlanRepository, SupabaseUserRepository
from tests.fakes import FakeTrainingPlanRepository, FakeUserRepository

# All tests in this module are pure logic tests (no TestClient) - mark as unit
pytestmark = pytest.mark.unit


def _protocol_methods(protocol):
    return sorted(
        name for name, member in vars(protocol).items()
        if callable(member) and not name.startswith("_")
    )


class TestProtocolMethods:

    def test_user_repository_methods(self):
        assert _protocol_methods(UserRepository) == ["create", "find_by_email", "find_by_id"]

    def test_training_plan_repository_methods(self):
        assert _protocol_methods(TrainingPlanRepository) == [
            "get_plan",
            "list_plans",
            "upsert_plans",
        ]


@pytest.mark.parametrize(
    "protocol,implementation",
    [
        (UserRepository, SupabaseUserRepository),
        (UserRepository, FakeUserRepository),
        (TrainingPlanRepository, SupabaseTrainingPlanRepository),
        (TrainingPlanRepository, FakeTrainingPlanRepository),
    ],
)
def test_implementation_satisfies_protocol(protocol, implementation):
    for name in _protocol_methods(protocol):
        method = getattr(implementation, name, None)
        assert callable(method), f"{implementation.__name__} is missing {name}"

        expected = list(inspect.signature(getattr(protocol, name)).parameters)
        actual = list(inspect.signature(method).parameters)
        assert actual == expected, f"{implementation.__name__}.{name} signature differs"
