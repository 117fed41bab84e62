"""
Test Fixtures and Helpers for Fake Repositories.

Helpers for overriding FastAPI dependencies with fake implementations.

Usage:
    from tests.fakes.conftest import override_dependency, reset_overrides

    def test_something():
        reset_overrides()
        repo = override_dependency(get_user_repo, FakeUserRepository())

        # Test code here...

        reset_overrides()
"""

from typing import Any, Callable

from api import deps
from backend.main import app
from backend.settings import Settings

TEST_JWT_SECRET = "test-signing-secret"

# Type for dependency getters
RepoGetter = Callable[..., Any]


def make_settings(**overrides: Any) -> Settings:
    """Settings for tests: no .env file, fixed signing secret."""
    values = {"environment": "test", "jwt_secret": TEST_JWT_SECRET}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def reset_overrides() -> None:
    """
    Reset all FastAPI dependency overrides.

    Call this in test setup/teardown to ensure clean state.
    """
    app.dependency_overrides.clear()


def override_dependency(getter: RepoGetter, implementation: Any) -> Any:
    """
    Override a FastAPI dependency with a fake instance.

    Args:
        getter: The dependency getter function (e.g., get_user_repo)
        implementation: The fake instance to return

    Returns:
        The implementation, for seeding data etc.
    """
    app.dependency_overrides[getter] = lambda: implementation
    return implementation


def override_settings(**overrides: Any) -> Settings:
    """Serve test settings (and so the test signing secret) to the app."""
    settings = make_settings(**overrides)
    return override_dependency(deps.get_settings, settings)
