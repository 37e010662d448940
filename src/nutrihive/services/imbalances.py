"""Nutrient imbalance detection against fixed reference ranges."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from nutrihive.domain.entries import FoodEntry
from nutrihive.domain.insights import (
    Imbalance,
    ImbalanceType,
    NutrientTotals,
    Severity,
)
from nutrihive.services.estimator import round_half_up
from nutrihive.services.meal_patterns import MealPatternAnalyzer


@dataclass(frozen=True)
class ReferenceRange:
    """Recommended range for a nutrient measure."""

    min: float | None = None
    max: float | None = None
    ideal: float | None = None


NUTRIENT_RANGES: dict[str, ReferenceRange] = {
    "protein_per_kg": ReferenceRange(min=0.8, max=2.0, ideal=1.2),
    "carb_ratio": ReferenceRange(min=0.45, max=0.65, ideal=0.5),
    "fat_ratio": ReferenceRange(min=0.20, max=0.35, ideal=0.3),
    "fiber_grams": ReferenceRange(min=25, max=35, ideal=30),
}

NUTRIENT_SYMPTOMS: dict[str, list[str]] = {
    "low_protein": ["fatigue", "muscle loss", "weak immune"],
    "low_carbs": ["low energy", "brain fog", "mood swings"],
    "low_fat": ["dry skin", "hormone imbalance", "vitamin deficiency"],
    "low_fiber": ["digestive issues", "constipation", "high cholesterol"],
}

MIN_DIVERSITY_SCORE = 0.6

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImbalanceDetector:
    """Flag intake that falls outside reference ranges.

    Every check runs independently and the output keeps a fixed order:
    protein, carb ratio, fat ratio, meal timing, food diversity. Ratio
    checks are skipped when total calories are zero, and the protein check
    is skipped without a positive body weight.
    """

    pattern_analyzer: MealPatternAnalyzer = field(default_factory=MealPatternAnalyzer)

    def detect_imbalances(
        self, totals: NutrientTotals, history: Sequence[FoodEntry]
    ) -> list[Imbalance]:
        """Return imbalances for the period totals and its meal history."""
        imbalances: list[Imbalance] = []

        protein_range = NUTRIENT_RANGES["protein_per_kg"]
        if totals.weight > 0:
            protein_per_kg = totals.total_protein / totals.weight
            if protein_per_kg < protein_range.min:
                imbalances.append(_low_protein(protein_per_kg, protein_range))

        if totals.total_calories > 0:
            carb_ratio = totals.total_carbs / totals.total_calories
            fat_ratio = totals.total_fat / totals.total_calories
            carb_range = NUTRIENT_RANGES["carb_ratio"]
            fat_range = NUTRIENT_RANGES["fat_ratio"]
            if carb_ratio > carb_range.max:
                imbalances.append(_high_carb_ratio(carb_ratio, carb_range))
            if fat_ratio < fat_range.min:
                imbalances.append(_low_fat(fat_ratio, fat_range))
        else:
            _logger.debug("Skipping ratio checks: no calories in period")

        pattern = self.pattern_analyzer.analyze_meal_pattern(history)
        if pattern.gap_exceeds_4h:
            imbalances.append(
                Imbalance(
                    type=ImbalanceType.IRREGULAR_MEAL_TIMING,
                    severity=Severity.LOW,
                    message="Long gaps between meals detected",
                    impact="May cause overeating and energy dips",
                    recommendation="Try eating every 3-4 hours",
                    examples=[
                        "Breakfast: 8 AM",
                        "Lunch: 12 PM",
                        "Snack: 4 PM",
                        "Dinner: 7 PM",
                    ],
                )
            )

        diversity = self.pattern_analyzer.calculate_food_diversity(history)
        if diversity < MIN_DIVERSITY_SCORE:
            imbalances.append(
                Imbalance(
                    type=ImbalanceType.LOW_FOOD_DIVERSITY,
                    severity=Severity.MEDIUM,
                    message=f"Low food variety score: {_percent(diversity)}%",
                    impact="May miss essential nutrients and vitamins",
                    recommendation=(
                        "Try incorporating more colorful vegetables "
                        "and different protein sources"
                    ),
                    examples=[
                        "Red (tomatoes)",
                        "Green (broccoli)",
                        "Orange (carrots)",
                        "Purple (eggplant)",
                    ],
                )
            )

        return imbalances


def _low_protein(protein_per_kg: float, reference: ReferenceRange) -> Imbalance:
    return Imbalance(
        type=ImbalanceType.LOW_PROTEIN,
        severity=Severity.HIGH,
        message=(
            f"Protein intake too low ({protein_per_kg:.1f}g/kg "
            f"vs recommended {reference.min:.1f}g/kg)"
        ),
        symptoms=list(NUTRIENT_SYMPTOMS["low_protein"]),
        solutions=[
            "Add lean meat",
            "Include eggs",
            "Try Greek yogurt",
            "Use protein powder",
        ],
        foods=["chicken breast", "eggs", "lentils", "tofu", "greek yogurt"],
    )


def _high_carb_ratio(carb_ratio: float, reference: ReferenceRange) -> Imbalance:
    return Imbalance(
        type=ImbalanceType.HIGH_CARB_RATIO,
        severity=Severity.MEDIUM,
        message=(
            f"High carb ratio ({_percent(carb_ratio)}% "
            f"vs ideal {_percent(reference.ideal)}%)"
        ),
        impact="May cause energy crashes and weight gain",
        recommendation="Replace some carbs with healthy fats or protein",
        examples=["Swap rice for quinoa", "Add avocado instead of bread"],
    )


def _low_fat(fat_ratio: float, reference: ReferenceRange) -> Imbalance:
    return Imbalance(
        type=ImbalanceType.LOW_FAT,
        severity=Severity.MEDIUM,
        message=(
            f"Low fat intake ({_percent(fat_ratio)}% "
            f"vs recommended {_percent(reference.min)}%)"
        ),
        symptoms=list(NUTRIENT_SYMPTOMS["low_fat"]),
        solutions=["Add nuts/seeds", "Use olive oil", "Include fatty fish"],
        foods=["avocado", "salmon", "nuts", "olive oil", "chia seeds"],
    )


def _percent(ratio: float) -> int:
    return round_half_up(ratio * 100)
