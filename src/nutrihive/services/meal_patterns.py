"""Meal timing and food diversity analysis."""

from collections.abc import Sequence
from dataclasses import dataclass

from nutrihive.domain.entries import FoodEntry
from nutrihive.domain.insights import FoodCategory, MealPattern
from nutrihive.services.estimator import round_half_up

MAX_MEAL_GAP_HOURS = 4
EXPECTED_UNIQUE_FOODS = 15
EXPECTED_CATEGORIES = 5
UNIQUE_FOOD_WEIGHT = 0.6
CATEGORY_WEIGHT = 0.4

CATEGORY_KEYWORDS: tuple[tuple[FoodCategory, tuple[str, ...]], ...] = (
    (FoodCategory.PROTEIN, ("chicken", "fish", "eggs", "meat", "tofu", "beans")),
    (FoodCategory.VEGETABLE, ("broccoli", "spinach", "carrot", "lettuce", "pepper")),
    (FoodCategory.FRUIT, ("apple", "banana", "orange", "berry", "melon")),
    (FoodCategory.GRAIN, ("rice", "bread", "pasta", "oats", "quinoa")),
    (FoodCategory.DAIRY, ("milk", "yogurt", "cheese")),
)

_SECONDS_PER_HOUR = 3600


@dataclass(frozen=True)
class MealPatternAnalyzer:
    """Measure gaps between meals and variety of logged foods."""

    def analyze_meal_pattern(self, history: Sequence[FoodEntry]) -> MealPattern:
        """Return meal count, long-gap flag and average gap in hours."""
        times = sorted(entry.timestamp for entry in history)
        gap_exceeds = any(
            (later - earlier).total_seconds() / _SECONDS_PER_HOUR > MAX_MEAL_GAP_HOURS
            for earlier, later in zip(times, times[1:], strict=False)
        )
        average_gap = 0.0
        if len(times) > 1:
            span_hours = (times[-1] - times[0]).total_seconds() / _SECONDS_PER_HOUR
            average_gap = round_half_up(span_hours / (len(times) - 1), 1)
        return MealPattern(
            total_meals=len(times),
            gap_exceeds_4h=gap_exceeds,
            average_gap_hours=average_gap,
        )

    def calculate_food_diversity(self, history: Sequence[FoodEntry]) -> float:
        """Return a variety score between 0 and 1."""
        unique_foods = {entry.food_name.lower() for entry in history}
        categories = self.categorize_foods(history)
        unique_score = min(len(unique_foods) / EXPECTED_UNIQUE_FOODS, 1)
        category_score = min(len(categories) / EXPECTED_CATEGORIES, 1)
        return unique_score * UNIQUE_FOOD_WEIGHT + category_score * CATEGORY_WEIGHT

    def categorize_foods(
        self, history: Sequence[FoodEntry]
    ) -> dict[FoodCategory, int]:
        """Count entries per food category by keyword substring."""
        found: dict[FoodCategory, int] = {}
        for entry in history:
            name = entry.food_name.lower()
            for category, keywords in CATEGORY_KEYWORDS:
                if any(keyword in name for keyword in keywords):
                    found[category] = found.get(category, 0) + 1
        return found
