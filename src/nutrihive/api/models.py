"""Pydantic models for API request payloads."""

from datetime import datetime

from pydantic import BaseModel, Field

from nutrihive.domain.entries import GoalType, MealType, UserGoals


class EstimateRequest(BaseModel):
    """Food name and quantity to estimate."""

    food_name: str = Field(min_length=1)
    quantity: float | str | None = 1


class FoodEntryCreate(BaseModel):
    """Payload for logging a food entry."""

    food_name: str = Field(min_length=1)
    quantity: float | str | None = 1
    meal_type: MealType = MealType.SNACK
    fiber: float = Field(default=0.0, ge=0)
    timestamp: datetime | None = None


class GoalsUpdate(BaseModel):
    """Payload for replacing a user's goals."""

    calories: float = Field(default=2000, ge=0)
    protein: float = Field(default=50, ge=0)
    carbs: float = Field(default=250, ge=0)
    fat: float = Field(default=70, ge=0)
    weight: float | None = Field(default=None, gt=0)
    target_weight: float | None = Field(default=None, gt=0)
    goal: GoalType = GoalType.MAINTENANCE

    def to_goals(self) -> UserGoals:
        """Convert the payload to domain goals."""
        return UserGoals(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            weight=self.weight,
            target_weight=self.target_weight,
            goal=self.goal,
        )
