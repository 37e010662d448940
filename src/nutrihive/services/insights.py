"""Insights: the full analytics pass over a user's recent history."""

import logging
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

from nutrihive.domain.entries import FoodEntry, GoalType, UserGoals
from nutrihive.domain.insights import Adjustment, Imbalance, MealPattern, NutrientTotals
from nutrihive.domain.trends import GoalProjection, TrendSummary, WeeklyCycle
from nutrihive.services.adjustments import MealAdjustmentEngine
from nutrihive.services.entries import FoodEntryService
from nutrihive.services.goals import GoalsService
from nutrihive.services.imbalances import ImbalanceDetector
from nutrihive.services.meal_patterns import MealPatternAnalyzer
from nutrihive.services.trends import MIN_TREND_ENTRIES, TrendPredictionEngine

TIME_RANGES: dict[str, int] = {"7d": 7, "30d": 30, "90d": 90}
DEFAULT_TIME_RANGE = "7d"
WEIGHT_LOSS_TARGET_SHARE = 0.9

_logger = logging.getLogger(__name__)


@dataclass
class InsightsReport:
    """Analytics for one time range of a user's history."""

    time_range: str
    entry_count: int
    totals: NutrientTotals
    imbalances: list[Imbalance]
    food_diversity: float
    meal_pattern: MealPattern
    trends: TrendSummary | None = None
    weekly_cycle: WeeklyCycle | None = None
    goal_projection: GoalProjection | None = None


@dataclass
class InsightsService:
    """Run imbalance, pattern and trend analytics for a user."""

    entry_service: FoodEntryService
    goals_service: GoalsService
    default_weight_kg: float = 70.0
    detector: ImbalanceDetector = field(default_factory=ImbalanceDetector)
    pattern_analyzer: MealPatternAnalyzer = field(default_factory=MealPatternAnalyzer)
    trend_engine: TrendPredictionEngine = field(default_factory=TrendPredictionEngine)
    adjustment_engine: MealAdjustmentEngine = field(
        default_factory=MealAdjustmentEngine
    )

    def get_insights(
        self,
        user_id: str,
        time_range: str = DEFAULT_TIME_RANGE,
        now: datetime | None = None,
    ) -> InsightsReport:
        """Return analytics for the entries logged in the time range."""
        resolved_range = time_range if time_range in TIME_RANGES else DEFAULT_TIME_RANGE
        current = now or datetime.now(tz=UTC)
        goals = self.goals_service.get_goals(user_id)
        history = self.entry_service.list_entries(user_id)
        days = TIME_RANGES[resolved_range]
        entries = self.trend_engine.entries_in_window(history, days, now=current)
        totals = self.period_totals(entries, goals)
        report = InsightsReport(
            time_range=resolved_range,
            entry_count=len(entries),
            totals=totals,
            imbalances=self.detector.detect_imbalances(totals, entries),
            food_diversity=self.pattern_analyzer.calculate_food_diversity(entries),
            meal_pattern=self.pattern_analyzer.analyze_meal_pattern(entries),
        )
        if len(entries) < MIN_TREND_ENTRIES:
            _logger.debug(
                "Skipping trends for user=%s: %s entries", user_id, len(entries)
            )
            return report

        projection_goals = _with_target_weight(goals)
        report.trends = self.trend_engine.analyze_trends(
            history, projection_goals, now=current, cycle_days=days
        )
        report.weekly_cycle = report.trends.weekly_cycle
        report.goal_projection = report.trends.goal_progress
        return report

    def adjust_meal(
        self,
        user_id: str,
        entry_id: str,
        time_range: str = DEFAULT_TIME_RANGE,
        now: datetime | None = None,
    ) -> list[Adjustment] | None:
        """Return adjustments for one entry, or None when it does not exist."""
        entry = self.entry_service.get_entry(user_id, entry_id)
        if entry is None:
            return None
        report = self.get_insights(user_id, time_range, now=now)
        goals = self.goals_service.get_goals(user_id)
        return self.adjustment_engine.suggest_meal_adjustments(
            entry, goals, report.imbalances
        )

    def period_totals(
        self, entries: list[FoodEntry], goals: UserGoals
    ) -> NutrientTotals:
        """Sum intake over the entries and attach the body weight."""
        return NutrientTotals(
            total_protein=sum(entry.protein for entry in entries),
            total_carbs=sum(entry.carbs for entry in entries),
            total_fat=sum(entry.fat for entry in entries),
            total_calories=sum(entry.calories for entry in entries),
            weight=goals.weight or self.default_weight_kg,
        )


def _with_target_weight(goals: UserGoals) -> UserGoals:
    if goals.weight is None or goals.target_weight is not None:
        return goals
    if goals.goal is GoalType.WEIGHT_LOSS:
        return replace(goals, target_weight=goals.weight * WEIGHT_LOSS_TARGET_SHARE)
    return replace(goals, target_weight=goals.weight)
