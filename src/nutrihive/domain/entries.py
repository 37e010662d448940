"""Domain models for logged food entries and user goals."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class MealType(Enum):
    """Meal slot a food entry was logged under."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class GoalType(Enum):
    """Body-weight goal chosen by the user."""

    MAINTENANCE = "maintenance"
    WEIGHT_LOSS = "weight_loss"
    WEIGHT_GAIN = "weight_gain"


@dataclass(frozen=True)
class NutritionValues:
    """Calories and macronutrients for a food portion."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class FoodEntry:
    """A single logged food with its estimated nutrition."""

    id: str
    user_id: str
    food_name: str
    quantity: float
    meal_type: MealType
    calories: float
    protein: float
    carbs: float
    fat: float
    timestamp: datetime
    fiber: float = 0.0


@dataclass(frozen=True)
class UserGoals:
    """Daily nutrition targets and optional body-weight goal."""

    calories: float = 2000
    protein: float = 50
    carbs: float = 250
    fat: float = 70
    weight: float | None = None
    target_weight: float | None = None
    goal: GoalType = GoalType.MAINTENANCE

    def __post_init__(self) -> None:
        for name in ("calories", "protein", "carbs", "fat", "weight", "target_weight"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"Goal field '{name}' cannot be negative, got {value}")


DEFAULT_GOALS = UserGoals()
