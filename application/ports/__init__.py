"""
Repository Interfaces (Ports) for the FitTrack API.

This package defines abstract interfaces that decouple application logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import UserRepository

    class AuthService:
        def __init__(self, user_repo: UserRepository):
            self.user_repo = user_repo
"""

# Credential store
from application.ports.user_repository import UserRepository

# Seeded training plans
from application.ports.training_plan_repository import TrainingPlanRepository

__all__ = [
    "UserRepository",
    "TrainingPlanRepository",
]
