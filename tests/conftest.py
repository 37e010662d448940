"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from nutrihive.config import Settings
from nutrihive.containers import AppContainer, assemble_container
from nutrihive.domain.entries import FoodEntry, MealType, UserGoals
from nutrihive.services.entries import FoodEntryRepository, FoodEntryService
from nutrihive.services.goals import GoalsService, UserGoalsRepository

# Wednesday evening, so seven whole days back stay on distinct dates.
NOW = datetime(2024, 5, 15, 20, 0, tzinfo=UTC)


def make_entry(  # noqa: PLR0913
    food_name: str = "apple",
    calories: float = 500,
    protein: float = 20,
    carbs: float = 60,
    fat: float = 15,
    timestamp: datetime = NOW,
    meal_type: MealType = MealType.LUNCH,
    fiber: float = 0.0,
    user_id: str = "user-1",
) -> FoodEntry:
    """Build a food entry with explicit nutrition values."""
    return FoodEntry(
        id=uuid4().hex,
        user_id=user_id,
        food_name=food_name,
        quantity=1,
        meal_type=meal_type,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        fiber=fiber,
        timestamp=timestamp,
    )


def daily_entries(
    days: range, calories: float, now: datetime = NOW, **kwargs: object
) -> list[FoodEntry]:
    """Build one entry per day, one hour before ``now`` on each day back."""
    return [
        make_entry(
            calories=calories,
            timestamp=now - timedelta(days=offset, hours=1),
            **kwargs,
        )
        for offset in days
    ]


@dataclass
class InMemoryFoodEntryRepository(FoodEntryRepository):
    """In-memory food entry repository for tests."""

    entries: list[FoodEntry] = field(default_factory=list)

    def add_entry(self, entry: FoodEntry) -> FoodEntry:
        self.entries.append(entry)
        return entry

    def list_entries(self, user_id: str) -> list[FoodEntry]:
        return [entry for entry in self.entries if entry.user_id == user_id]

    def get_entry(self, user_id: str, entry_id: str) -> FoodEntry | None:
        for entry in self.entries:
            if entry.user_id == user_id and entry.id == entry_id:
                return entry
        return None


@dataclass
class InMemoryGoalsRepository(UserGoalsRepository):
    """In-memory goals repository for tests."""

    goals: dict[str, UserGoals] = field(default_factory=dict)

    def get_goals(self, user_id: str) -> UserGoals | None:
        return self.goals.get(user_id)

    def set_goals(self, user_id: str, goals: UserGoals) -> None:
        self.goals[user_id] = goals


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def entry_repository() -> InMemoryFoodEntryRepository:
    return InMemoryFoodEntryRepository()


@pytest.fixture
def goals_repository() -> InMemoryGoalsRepository:
    return InMemoryGoalsRepository()


@pytest.fixture
def entry_service(entry_repository: InMemoryFoodEntryRepository) -> FoodEntryService:
    return FoodEntryService(entry_repository)


@pytest.fixture
def goals_service(goals_repository: InMemoryGoalsRepository) -> GoalsService:
    return GoalsService(goals_repository)


@pytest.fixture
def container(
    settings: Settings,
    entry_service: FoodEntryService,
    goals_service: GoalsService,
) -> AppContainer:
    return assemble_container(
        settings, entry_service=entry_service, goals_service=goals_service
    )
