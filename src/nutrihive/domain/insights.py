"""Domain models for imbalance detection and meal adjustments."""

from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    """How urgently an imbalance should be addressed."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class ImbalanceType(Enum):
    """Kinds of intake imbalance the detector reports."""

    LOW_PROTEIN = "LOW_PROTEIN"
    HIGH_CARB_RATIO = "HIGH_CARB_RATIO"
    LOW_FAT = "LOW_FAT"
    IRREGULAR_MEAL_TIMING = "IRREGULAR_MEAL_TIMING"
    LOW_FOOD_DIVERSITY = "LOW_FOOD_DIVERSITY"


class AdjustmentType(Enum):
    """Kinds of meal adjustment suggestions."""

    ADD_COMPONENTS = "ADD_COMPONENTS"
    REDUCE_PORTION = "REDUCE_PORTION"
    TIMING_ADJUSTMENT = "TIMING_ADJUSTMENT"
    INCREASE_PROTEIN = "INCREASE_PROTEIN"
    BALANCE_CARBS = "BALANCE_CARBS"
    ADD_VARIETY = "ADD_VARIETY"


class FoodCategory(Enum):
    """Food groups used for diversity scoring."""

    PROTEIN = "protein"
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    GRAIN = "grain"
    DAIRY = "dairy"


@dataclass(frozen=True)
class NutrientTotals:
    """Aggregate intake over an analysis period."""

    total_protein: float
    total_carbs: float
    total_fat: float
    total_calories: float
    weight: float


@dataclass(frozen=True)
class Imbalance:
    """A flagged deviation from a reference intake range."""

    type: ImbalanceType
    severity: Severity
    message: str
    symptoms: list[str] = field(default_factory=list)
    solutions: list[str] = field(default_factory=list)
    foods: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    impact: str | None = None
    recommendation: str | None = None


@dataclass(frozen=True)
class MealPattern:
    """Timing summary for a sequence of meals."""

    total_meals: int
    gap_exceeds_4h: bool
    average_gap_hours: float


@dataclass(frozen=True)
class Adjustment:
    """A suggested change to a single meal."""

    type: AdjustmentType
    message: str
    suggestion: str | None = None
    examples: list[str] = field(default_factory=list)
    benefit: str | None = None
    current: str | None = None
    target: str | None = None
    tip: str | None = None


@dataclass(frozen=True)
class Swap:
    """Healthier alternatives for a food item."""

    unhealthy: str
    healthy_options: list[str]
    benefit: str
    tip: str
