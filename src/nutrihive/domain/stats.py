"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyTotals:
    """Daily total macros."""

    day: date
    calories: float
    protein: float
    carbs: float
    fat: float
    entry_count: int = 0


@dataclass(frozen=True)
class NutrientProgress:
    """Share of a daily goal reached, capped at 100 percent."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class DashboardSummary:
    """Today's totals with goal progress and recommendations."""

    totals: DailyTotals
    progress: NutrientProgress
    recommendations: list[str]
