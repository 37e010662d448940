"""Tests for meal adjustments and smart swaps."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from nutrihive.domain.entries import GoalType, UserGoals
from nutrihive.domain.insights import AdjustmentType, Imbalance, ImbalanceType, Severity
from nutrihive.services.adjustments import MealAdjustmentEngine
from tests.conftest import make_entry

LUNCH_TIME = datetime(2024, 5, 15, 12, 30, tzinfo=UTC)


def _imbalance(imbalance_type: ImbalanceType) -> Imbalance:
    return Imbalance(type=imbalance_type, severity=Severity.MEDIUM, message="")


def test_missing_components_for_low_protein_meal() -> None:
    meal = make_entry(food_name="bread", protein=9, fiber=2, timestamp=LUNCH_TIME)

    missing = MealAdjustmentEngine().identify_missing_components(meal)

    assert missing == ["protein", "vegetables", "fiber"]


def test_complete_meal_has_no_missing_components() -> None:
    meal = make_entry(
        food_name="chicken salad", protein=30, fiber=6, timestamp=LUNCH_TIME
    )

    assert MealAdjustmentEngine().identify_missing_components(meal) == []


def test_add_components_adjustment_lists_examples() -> None:
    meal = make_entry(
        food_name="chicken salad", protein=10, fiber=6, timestamp=LUNCH_TIME
    )

    adjustments = MealAdjustmentEngine().suggest_meal_adjustments(
        meal, UserGoals(), []
    )

    assert len(adjustments) == 1
    assert adjustments[0].type == AdjustmentType.ADD_COMPONENTS
    assert adjustments[0].message == "Add to your meal: protein"
    assert "eggs (12g protein)" in adjustments[0].examples


def test_reduce_portion_only_for_weight_loss() -> None:
    meal = make_entry(
        food_name="chicken salad",
        calories=800,
        protein=40,
        fiber=8,
        timestamp=LUNCH_TIME,
    )
    engine = MealAdjustmentEngine()

    loss = engine.suggest_meal_adjustments(
        meal, UserGoals(goal=GoalType.WEIGHT_LOSS), []
    )
    maintain = engine.suggest_meal_adjustments(meal, UserGoals(), [])

    assert [item.type for item in loss] == [AdjustmentType.REDUCE_PORTION]
    assert loss[0].current == "800 calories"
    assert loss[0].target == "400-500 calories"
    assert maintain == []


def test_late_meal_gets_timing_adjustment() -> None:
    meal = make_entry(
        food_name="chicken salad",
        protein=40,
        fiber=8,
        timestamp=datetime(2024, 5, 15, 22, 15, tzinfo=UTC),
    )

    adjustments = MealAdjustmentEngine().suggest_meal_adjustments(
        meal, UserGoals(), []
    )

    assert [item.type for item in adjustments] == [AdjustmentType.TIMING_ADJUSTMENT]


def test_nine_pm_is_not_late() -> None:
    meal = make_entry(
        food_name="chicken salad",
        protein=40,
        fiber=8,
        timestamp=datetime(2024, 5, 15, 21, 59, tzinfo=UTC),
    )

    assert MealAdjustmentEngine().suggest_meal_adjustments(meal, UserGoals(), []) == []


def test_late_meal_uses_local_hour() -> None:
    meal = make_entry(
        food_name="chicken salad",
        protein=40,
        fiber=8,
        timestamp=datetime(2024, 5, 16, 3, 0, tzinfo=UTC),
    )
    engine = MealAdjustmentEngine(tz=ZoneInfo("America/New_York"))

    adjustments = engine.suggest_meal_adjustments(meal, UserGoals(), [])

    assert [item.type for item in adjustments] == [AdjustmentType.TIMING_ADJUSTMENT]


def test_imbalance_specific_adjustments() -> None:
    meal = make_entry(
        food_name="chicken salad", protein=20, fiber=8, timestamp=LUNCH_TIME
    )
    imbalances = [
        _imbalance(ImbalanceType.LOW_PROTEIN),
        _imbalance(ImbalanceType.LOW_FAT),
        _imbalance(ImbalanceType.HIGH_CARB_RATIO),
        _imbalance(ImbalanceType.LOW_FOOD_DIVERSITY),
    ]

    adjustments = MealAdjustmentEngine().suggest_meal_adjustments(
        meal, UserGoals(), imbalances
    )

    assert [item.type for item in adjustments] == [
        AdjustmentType.INCREASE_PROTEIN,
        AdjustmentType.BALANCE_CARBS,
        AdjustmentType.ADD_VARIETY,
    ]
    assert adjustments[0].message == "This meal has only 20g protein"


def test_smart_swap_for_white_bread() -> None:
    swap = MealAdjustmentEngine().generate_smart_swaps("White Bread toast")

    assert swap is not None
    assert swap.unhealthy == "White Bread toast"
    assert swap.healthy_options[0] == "whole grain bread"
    assert swap.benefit == "Saves ~150 calories"


def test_smart_swap_benefit_follows_category() -> None:
    swap = MealAdjustmentEngine().generate_smart_swaps("white rice")

    assert swap is not None
    assert swap.benefit == "Adds ~5g fiber"
    assert swap.healthy_options == [
        "brown rice/quinoa",
        "whole fruit",
        "sweet potato with skin",
    ]


def test_smart_swap_without_match() -> None:
    assert MealAdjustmentEngine().generate_smart_swaps("steak") is None
