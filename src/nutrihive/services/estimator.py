"""Static-table nutrition estimates."""

import math
from dataclasses import dataclass

from nutrihive.domain.entries import NutritionValues

_NUTRITION_TABLE: dict[str, NutritionValues] = {
    "apple": NutritionValues(calories=52, protein=0.3, carbs=14, fat=0.2),
    "banana": NutritionValues(calories=89, protein=1.1, carbs=23, fat=0.3),
    "chicken breast": NutritionValues(calories=165, protein=31, carbs=0, fat=3.6),
    "rice": NutritionValues(calories=130, protein=2.7, carbs=28, fat=0.3),
    "eggs": NutritionValues(calories=155, protein=13, carbs=1.1, fat=11),
    "bread": NutritionValues(calories=265, protein=9, carbs=49, fat=3.2),
    "milk": NutritionValues(calories=42, protein=3.4, carbs=5, fat=1),
    "yogurt": NutritionValues(calories=59, protein=3.5, carbs=4.7, fat=3.3),
    "pasta": NutritionValues(calories=131, protein=5, carbs=25, fat=1),
    "salmon": NutritionValues(calories=208, protein=20, carbs=0, fat=13),
    "broccoli": NutritionValues(calories=34, protein=2.8, carbs=7, fat=0.4),
    "spinach": NutritionValues(calories=23, protein=2.9, carbs=3.6, fat=0.4),
}

_DEFAULT_NUTRITION = NutritionValues(calories=100, protein=5, carbs=15, fat=3)


@dataclass(frozen=True)
class NutritionEstimator:
    """Estimate nutrition for a food name and quantity.

    Unknown foods get a fixed baseline estimate instead of an error.
    """

    def estimate(self, food_name: str, quantity: object = 1) -> NutritionValues:
        """Return base nutrition scaled by quantity and rounded."""
        base = _NUTRITION_TABLE.get(food_name.lower(), _DEFAULT_NUTRITION)
        factor = coerce_quantity(quantity)
        return NutritionValues(
            calories=round_half_up(base.calories * factor),
            protein=round_half_up(base.protein * factor, 1),
            carbs=round_half_up(base.carbs * factor, 1),
            fat=round_half_up(base.fat * factor, 1),
        )

    def is_known(self, food_name: str) -> bool:
        """Return True when the food has its own table entry."""
        return food_name.lower() in _NUTRITION_TABLE

    def known_foods(self) -> list[str]:
        """Return the food names in the lookup table."""
        return sorted(_NUTRITION_TABLE)


def coerce_quantity(quantity: object) -> float:
    """Parse a quantity, falling back to 1 for negative or unparsable input."""
    try:
        value = float(quantity)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1.0
    if math.isnan(value) or math.isinf(value) or value < 0:
        return 1.0
    return value


def round_half_up(value: float, digits: int = 0) -> float | int:
    """Round to the given digits with halves rounded upward.

    With ``digits`` 0 the result is an ``int``.
    """
    factor = 10**digits
    rounded = math.floor(value * factor + 0.5) / factor
    if digits == 0:
        return int(rounded)
    return rounded
