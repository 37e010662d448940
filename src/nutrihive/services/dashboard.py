"""Daily dashboard: today's totals, goal progress and recommendations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from nutrihive.domain.entries import UserGoals
from nutrihive.domain.stats import DailyTotals, DashboardSummary, NutrientProgress
from nutrihive.services.entries import FoodEntryService
from nutrihive.services.goals import GoalsService
from nutrihive.services.progress import ProgressAggregator, to_local

LOW_CALORIE_SHARE = 0.8
LOW_PROTEIN_SHARE = 0.7
HIGH_CARB_SHARE = 1.2
HIGH_FAT_SHARE = 1.3


@dataclass
class DashboardService:
    """Service for the per-day overview."""

    entry_service: FoodEntryService
    goals_service: GoalsService
    aggregator: ProgressAggregator = field(default_factory=ProgressAggregator)

    def get_today(self, user_id: str, now: datetime | None = None) -> DashboardSummary:
        """Return today's totals in the configured timezone."""
        current = now or datetime.now(tz=UTC)
        today = to_local(current, self.aggregator.tz).date()
        entries = self.entry_service.list_entries(user_id)
        totals = self.aggregator.day_totals(entries, today)
        goals = self.goals_service.get_goals(user_id)
        return DashboardSummary(
            totals=totals,
            progress=NutrientProgress(
                calories=progress_percentage(totals.calories, goals.calories),
                protein=progress_percentage(totals.protein, goals.protein),
                carbs=progress_percentage(totals.carbs, goals.carbs),
                fat=progress_percentage(totals.fat, goals.fat),
            ),
            recommendations=daily_recommendations(totals, goals),
        )


def progress_percentage(current: float, goal: float) -> float:
    """Return percent of goal reached, capped at 100."""
    if goal <= 0:
        return 0.0
    return min(current / goal * 100, 100.0)


def daily_recommendations(totals: DailyTotals, goals: UserGoals) -> list[str]:
    """Return rule-based tips comparing a day's intake with the goals."""
    recommendations = []
    if totals.calories < goals.calories * LOW_CALORIE_SHARE:
        recommendations.append(
            "Consider adding a healthy snack to meet your calorie goals"
        )
    if totals.protein < goals.protein * LOW_PROTEIN_SHARE:
        recommendations.append(
            "Your protein intake is low. "
            "Add lean protein sources like chicken, fish, or legumes"
        )
    if totals.carbs > goals.carbs * HIGH_CARB_SHARE:
        recommendations.append(
            "Your carb intake is high. "
            "Consider balancing with more protein and vegetables"
        )
    if totals.fat > goals.fat * HIGH_FAT_SHARE:
        recommendations.append(
            "Monitor your fat intake. "
            "Try incorporating more lean proteins and vegetables"
        )
    if not recommendations:
        recommendations.append(
            "Great job! Your nutrition is well balanced. Keep it up!"
        )
    return recommendations
