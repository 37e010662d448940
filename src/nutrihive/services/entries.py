"""Food entry logging service."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from nutrihive.domain.entries import FoodEntry, MealType
from nutrihive.services.estimator import NutritionEstimator, coerce_quantity

_logger = logging.getLogger(__name__)


class FoodEntryRepository(Protocol):
    """Persistence interface for food entries."""

    def add_entry(self, entry: FoodEntry) -> FoodEntry:
        """Store an entry and return it."""

    def list_entries(self, user_id: str) -> list[FoodEntry]:
        """Return all entries for a user in insertion order."""

    def get_entry(self, user_id: str, entry_id: str) -> FoodEntry | None:
        """Return an entry by id, if present."""


@dataclass
class FoodEntryService:
    """Estimate nutrition for logged foods and persist the entries."""

    repository: FoodEntryRepository
    estimator: NutritionEstimator = field(default_factory=NutritionEstimator)

    def log_food(  # noqa: PLR0913
        self,
        user_id: str,
        food_name: str,
        quantity: object = 1,
        meal_type: MealType = MealType.SNACK,
        fiber: float = 0.0,
        timestamp: datetime | None = None,
    ) -> FoodEntry:
        """Create an entry with estimated nutrition and store it."""
        name = food_name.strip()
        if not name:
            raise ValueError("Food name cannot be empty")
        if fiber < 0:
            raise ValueError(f"Fiber cannot be negative, got {fiber}")

        factor = coerce_quantity(quantity)
        nutrition = self.estimator.estimate(name, factor)
        entry = FoodEntry(
            id=uuid4().hex,
            user_id=user_id,
            food_name=name,
            quantity=factor,
            meal_type=meal_type,
            calories=nutrition.calories,
            protein=nutrition.protein,
            carbs=nutrition.carbs,
            fat=nutrition.fat,
            fiber=fiber,
            timestamp=_aware(timestamp or datetime.now(tz=UTC)),
        )
        stored = self.repository.add_entry(entry)
        if not self.estimator.is_known(name):
            _logger.info("Using default nutrition estimate for %r", name)
        _logger.info(
            "Logged food entry: user=%s food=%s meal=%s",
            user_id,
            name,
            meal_type.value,
        )
        return stored

    def list_entries(self, user_id: str) -> list[FoodEntry]:
        """Return all entries for a user."""
        return self.repository.list_entries(user_id)

    def get_entry(self, user_id: str, entry_id: str) -> FoodEntry | None:
        """Return a single entry for a user."""
        return self.repository.get_entry(user_id, entry_id)


def _aware(timestamp: datetime) -> datetime:
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=UTC)
    return timestamp
