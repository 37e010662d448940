"""User goals service."""

from dataclasses import dataclass
from typing import Protocol

from nutrihive.domain.entries import DEFAULT_GOALS, UserGoals


class UserGoalsRepository(Protocol):
    """Persistence interface for user goals."""

    def get_goals(self, user_id: str) -> UserGoals | None:
        """Return the user's goals if stored."""

    def set_goals(self, user_id: str, goals: UserGoals) -> None:
        """Store the user's goals."""


@dataclass
class GoalsService:
    """Service for reading and updating nutrition goals."""

    repository: UserGoalsRepository

    def get_goals(self, user_id: str) -> UserGoals:
        """Return stored goals, saving the defaults on first access."""
        goals = self.repository.get_goals(user_id)
        if goals is not None:
            return goals
        self.repository.set_goals(user_id, DEFAULT_GOALS)
        return DEFAULT_GOALS

    def set_goals(self, user_id: str, goals: UserGoals) -> None:
        """Persist a user's goals."""
        self.repository.set_goals(user_id, goals)
