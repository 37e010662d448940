"""Meal-level adjustment suggestions and healthier swaps."""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import UTC, tzinfo

from nutrihive.domain.entries import FoodEntry, GoalType, UserGoals
from nutrihive.domain.insights import (
    Adjustment,
    AdjustmentType,
    Imbalance,
    ImbalanceType,
    Swap,
)
from nutrihive.services.progress import to_local

MIN_MEAL_PROTEIN_G = 15
MIN_MEAL_FIBER_G = 5
WEIGHT_LOSS_MEAL_CALORIE_LIMIT = 600
LATE_MEAL_HOUR = 21

VEGETABLE_KEYWORDS = ("salad", "vegetable", "broccoli", "spinach", "carrot")

COMPONENT_EXAMPLES: dict[str, list[str]] = {
    "protein": [
        "chicken breast (31g protein)",
        "eggs (12g protein)",
        "lentils (9g protein)",
    ],
    "vegetables": [
        "side salad (50 cal)",
        "steamed broccoli (30 cal)",
        "carrot sticks (25 cal)",
    ],
    "fiber": [
        "apple with skin (4g fiber)",
        "chia seeds (10g fiber)",
        "beans (8g fiber)",
    ],
}


@dataclass(frozen=True)
class SwapRule:
    """Foods to replace and what to replace them with."""

    category: str
    from_items: tuple[str, ...]
    to_items: tuple[str, ...]
    benefit: str


SWAP_RULES: tuple[SwapRule, ...] = (
    SwapRule(
        category="high_calorie",
        from_items=("white bread", "regular pasta", "fried foods", "sugary drinks"),
        to_items=(
            "whole grain bread",
            "zucchini noodles",
            "grilled/baked",
            "water/herbal tea",
        ),
        benefit="Saves ~150 calories",
    ),
    SwapRule(
        category="low_protein",
        from_items=("cereal alone", "plain salad", "fruit snack"),
        to_items=("cereal + milk", "salad + chicken", "fruit + yogurt"),
        benefit="Adds ~15g protein",
    ),
    SwapRule(
        category="low_fiber",
        from_items=("white rice", "juice", "mashed potatoes"),
        to_items=("brown rice/quinoa", "whole fruit", "sweet potato with skin"),
        benefit="Adds ~5g fiber",
    ),
)

_SWAP_TIP = "Taste difference? Try gradually mixing with current choice"


@dataclass(frozen=True)
class MealAdjustmentEngine:
    """Suggest changes to a single meal from static templates."""

    tz: tzinfo = UTC

    def suggest_meal_adjustments(
        self,
        meal: FoodEntry,
        goals: UserGoals,
        imbalances: Sequence[Imbalance],
    ) -> list[Adjustment]:
        """Return adjustments for the meal given the user's goals and imbalances."""
        adjustments: list[Adjustment] = []

        missing = self.identify_missing_components(meal)
        if missing:
            adjustments.append(
                Adjustment(
                    type=AdjustmentType.ADD_COMPONENTS,
                    message=f"Add to your meal: {', '.join(missing)}",
                    examples=[
                        example
                        for component in missing
                        for example in COMPONENT_EXAMPLES.get(component, [])
                    ],
                    benefit="More balanced nutrition and sustained energy",
                )
            )

        if (
            goals.goal is GoalType.WEIGHT_LOSS
            and meal.calories > WEIGHT_LOSS_MEAL_CALORIE_LIMIT
        ):
            adjustments.append(
                Adjustment(
                    type=AdjustmentType.REDUCE_PORTION,
                    message="Consider smaller portion size for weight loss",
                    current=f"{meal.calories:g} calories",
                    target="400-500 calories",
                    tip="Use smaller plate, eat slowly, drink water first",
                )
            )

        if to_local(meal.timestamp, self.tz).hour > LATE_MEAL_HOUR:
            adjustments.append(
                Adjustment(
                    type=AdjustmentType.TIMING_ADJUSTMENT,
                    message="Eating late may affect sleep and digestion",
                    suggestion="Try eating dinner before 8 PM",
                    tip="If hungry late, try herbal tea or small protein snack",
                )
            )

        for imbalance in imbalances:
            specific = _nutrient_adjustment(imbalance.type, meal)
            if specific is not None:
                adjustments.append(specific)

        return adjustments

    def identify_missing_components(self, meal: FoodEntry) -> list[str]:
        """Return the meal components that look absent."""
        components = []
        if meal.protein < MIN_MEAL_PROTEIN_G:
            components.append("protein")
        name = meal.food_name.lower()
        if not any(keyword in name for keyword in VEGETABLE_KEYWORDS):
            components.append("vegetables")
        if (meal.fiber or 0) < MIN_MEAL_FIBER_G:
            components.append("fiber")
        return components

    def generate_smart_swaps(self, item_name: str) -> Swap | None:
        """Return healthier options for the first matching swap rule."""
        name = item_name.lower()
        for rule in SWAP_RULES:
            if any(candidate in name for candidate in rule.from_items):
                return Swap(
                    unhealthy=item_name,
                    healthy_options=list(rule.to_items),
                    benefit=rule.benefit,
                    tip=_SWAP_TIP,
                )
        return None


ADJUSTMENT_TEMPLATES: dict[ImbalanceType, Adjustment] = {
    ImbalanceType.LOW_PROTEIN: Adjustment(
        type=AdjustmentType.INCREASE_PROTEIN,
        message="This meal has only {protein}g protein",
        suggestion="Add a protein source",
        examples=["handful of nuts", "hard boiled egg", "scoop of protein powder"],
    ),
    ImbalanceType.HIGH_CARB_RATIO: Adjustment(
        type=AdjustmentType.BALANCE_CARBS,
        message="High carb meal detected",
        suggestion="Add healthy fats or protein to slow digestion",
        examples=["Add avocado to sandwich", "Include nuts with pasta"],
    ),
    ImbalanceType.LOW_FOOD_DIVERSITY: Adjustment(
        type=AdjustmentType.ADD_VARIETY,
        message="Try adding a different colored vegetable",
        suggestion="Add one new color to your plate",
        examples=[
            "Red (tomatoes)",
            "Purple (cabbage)",
            "Orange (sweet potato)",
            "Green (asparagus)",
        ],
    ),
}


def _nutrient_adjustment(
    imbalance_type: ImbalanceType, meal: FoodEntry
) -> Adjustment | None:
    template = ADJUSTMENT_TEMPLATES.get(imbalance_type)
    if template is None:
        return None
    return replace(
        template,
        message=template.message.format(protein=f"{meal.protein:g}"),
        examples=list(template.examples),
    )
