"""Trend prediction over logged food history.

Averages are computed over per-day totals, so a day with three meals
counts once. Windows are time based: the current window covers the last
seven days up to ``now`` and the previous window the seven days before it.
Every method returns ``None`` (or an empty mapping) instead of raising when
there is not enough history.
"""

import logging
import math
import statistics
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta

from nutrihive.domain.entries import FoodEntry, GoalType, UserGoals
from nutrihive.domain.stats import DailyTotals
from nutrihive.domain.trends import (
    DayCycle,
    GoalProjection,
    MacroTrend,
    Milestone,
    TrendDirection,
    TrendReport,
    TrendSummary,
    WeekendEffect,
    WeeklyCycle,
)
from nutrihive.services.estimator import round_half_up
from nutrihive.services.progress import ProgressAggregator, to_local

SHORT_PERIOD_DAYS = 7
MEDIUM_PERIOD_DAYS = 30
LONG_PERIOD_DAYS = 90

MIN_TREND_ENTRIES = 7
MIN_MACRO_DAYS = 3
MIN_GOAL_ENTRIES = 14

# Tunable: daily calorie change that counts as a real trend.
TREND_THRESHOLD_KCAL = 50
PREDICTION_DAYS_AHEAD = 7

CONSISTENT_CV = 0.2
MODERATE_CV = 0.4
MACRO_DEVIATION_TOLERANCE = 15

HIGH_DAY_FACTOR = 1.1
LOW_DAY_FACTOR = 0.9
WEEKEND_EFFECT_FACTOR = 1.15

CALORIES_PER_KG = 7700
MILESTONE_STEPS = 5
HIGH_CONFIDENCE_DAYS = 25

MACROS = ("protein", "carbs", "fat")
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")
WEEKEND_DAYS = ("Saturday", "Sunday")
DAY_NAMES = WEEKDAYS + WEEKEND_DAYS

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrendPredictionEngine:
    """Compute calorie, macro, weekly and goal trends from history."""

    aggregator: ProgressAggregator = field(default_factory=ProgressAggregator)

    def analyze_trends(
        self,
        history: Sequence[FoodEntry],
        goals: UserGoals,
        now: datetime | None = None,
        cycle_days: int | None = None,
    ) -> TrendSummary:
        """Return every trend analysis for the history.

        ``cycle_days`` limits the weekly cycle to a recent window; the calorie,
        macro and goal analyses pick their own windows from the full history.
        """
        return TrendSummary(
            calorie_trend=self.predict_calorie_trend(history, goals, now=now),
            macro_trends=self.predict_macro_trends(history, goals, now=now),
            weekly_cycle=self.detect_weekly_cycles(
                history, window_days=cycle_days, now=now
            ),
            goal_progress=self.predict_goal_progress(history, goals, now=now),
        )

    def predict_calorie_trend(
        self,
        history: Sequence[FoodEntry],
        goals: UserGoals,
        now: datetime | None = None,
    ) -> TrendReport | None:
        """Compare the last seven days with the seven days before them."""
        if len(history) < MIN_TREND_ENTRIES:
            _logger.debug("Calorie trend needs %s entries", MIN_TREND_ENTRIES)
            return None

        current = self.entries_in_window(history, SHORT_PERIOD_DAYS, now=now)
        previous = self.entries_in_window(
            history, SHORT_PERIOD_DAYS, offset_days=SHORT_PERIOD_DAYS, now=now
        )
        if not current:
            _logger.debug("Calorie trend has no entries in the current window")
            return None

        current_avg = self._average_daily(current, "calories")
        previous_avg = (
            self._average_daily(previous, "calories") if previous else current_avg
        )
        trend = current_avg - previous_avg
        prediction = linear_prediction(
            [previous_avg, current_avg], PREDICTION_DAYS_AHEAD
        )

        return TrendReport(
            current_average=round_half_up(current_avg),
            previous_average=round_half_up(previous_avg),
            trend=round_half_up(trend),
            direction=_direction(trend),
            prediction=round_half_up(prediction),
            days_to_goal=_days_to_goal(goals.calories, current_avg, trend, prediction),
            recommendation=_calorie_recommendation(trend, goals.goal),
        )

    def predict_macro_trends(
        self,
        history: Sequence[FoodEntry],
        goals: UserGoals,
        now: datetime | None = None,
    ) -> dict[str, MacroTrend]:
        """Return seven-day statistics per macro with at least three logged days."""
        recent = self.entries_in_window(history, SHORT_PERIOD_DAYS, now=now)
        daily = self.aggregator.daily_totals(recent)
        trends: dict[str, MacroTrend] = {}
        for macro in MACROS:
            values = [getattr(day, macro) for day in daily]
            if len(values) < MIN_MACRO_DAYS:
                continue
            average = statistics.fmean(values)
            std_dev = statistics.pstdev(values)
            variation = std_dev / average if average > 0 else 0.0
            goal = getattr(goals, macro)
            deviation = (
                round_half_up((average - goal) / goal * 100) if goal > 0 else None
            )
            trends[macro] = MacroTrend(
                average=round_half_up(average),
                goal=goal,
                deviation=deviation,
                standard_deviation=round(std_dev, 1),
                consistency=_consistency(variation),
                slope=round(least_squares_slope(values), 2),
                suggestion=_macro_suggestion(macro, average, goal, deviation),
            )
        return trends

    def detect_weekly_cycles(
        self,
        history: Sequence[FoodEntry],
        window_days: int | None = None,
        now: datetime | None = None,
    ) -> WeeklyCycle:
        """Return per-weekday averages and the weekend effect.

        With ``window_days`` only that many recent days are considered,
        otherwise the whole history is.
        """
        if window_days is not None:
            history = self.entries_in_window(history, window_days, now=now)
        daily = self.aggregator.daily_totals(history)
        overall = _mean([day.calories for day in daily])

        by_weekday: dict[str, list[DailyTotals]] = {}
        for day in daily:
            by_weekday.setdefault(DAY_NAMES[day.day.weekday()], []).append(day)

        days: dict[str, DayCycle] = {}
        raw_averages: dict[str, float] = {}
        for name in DAY_NAMES:
            totals = by_weekday.get(name)
            if not totals:
                continue
            avg_calories = _mean([day.calories for day in totals])
            raw_averages[name] = avg_calories
            days[name] = DayCycle(
                average_calories=round_half_up(avg_calories),
                average_protein=round_half_up(_mean([day.protein for day in totals])),
                is_high_day=avg_calories > overall * HIGH_DAY_FACTOR,
                is_low_day=avg_calories < overall * LOW_DAY_FACTOR,
            )

        return WeeklyCycle(days=days, weekend_effect=_weekend_effect(raw_averages))

    def predict_goal_progress(
        self,
        history: Sequence[FoodEntry],
        goals: UserGoals,
        now: datetime | None = None,
    ) -> GoalProjection | None:
        """Project weeks until the target weight from the 30-day calorie deficit."""
        current_time = _resolve_now(now)
        recent = self.entries_in_window(history, MEDIUM_PERIOD_DAYS, now=current_time)
        if len(recent) < MIN_GOAL_ENTRIES:
            _logger.debug("Goal projection needs %s recent entries", MIN_GOAL_ENTRIES)
            return None

        current_weight = goals.weight
        goal_weight = goals.target_weight
        if not current_weight or not goal_weight or goal_weight >= current_weight:
            return None

        deficit = goals.calories - self._average_daily(recent, "calories")
        if deficit <= 0:
            return None
        kg_per_week = deficit * 7 / CALORIES_PER_KG
        if kg_per_week <= 0:
            return None

        weeks_to_goal = (current_weight - goal_weight) / kg_per_week
        today = to_local(current_time, self.aggregator.tz).date()
        logged_days = len(self.aggregator.daily_totals(recent))

        return GoalProjection(
            current_weight=current_weight,
            goal_weight=goal_weight,
            predicted_loss_per_week=round(kg_per_week, 2),
            weeks_to_goal=round_half_up(weeks_to_goal),
            expected_date=_add_weeks(today, weeks_to_goal),
            confidence=_confidence(logged_days),
            milestones=generate_milestones(
                current_weight, goal_weight, kg_per_week, today
            ),
        )

    def entries_in_window(
        self,
        history: Sequence[FoodEntry],
        days: int,
        offset_days: int = 0,
        now: datetime | None = None,
    ) -> list[FoodEntry]:
        """Return entries in ``(end - days, end]`` where end is ``now - offset``."""
        end = _resolve_now(now) - timedelta(days=offset_days)
        start = end - timedelta(days=days)
        return [
            entry
            for entry in history
            if start < to_local(entry.timestamp, UTC) <= end
        ]

    def _average_daily(self, entries: Sequence[FoodEntry], nutrient: str) -> float:
        daily = self.aggregator.daily_totals(entries)
        return _mean([getattr(day, nutrient) for day in daily])


def least_squares_slope(values: Sequence[float]) -> float:
    """Return the regression slope of values against their index."""
    n = len(values)
    if n < 2:
        return 0.0
    sum_x = n * (n - 1) / 2
    sum_xx = (n - 1) * n * (2 * n - 1) / 6
    sum_y = sum(values)
    sum_xy = sum(index * value for index, value in enumerate(values))
    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return 0.0
    return (n * sum_xy - sum_x * sum_y) / denominator


def linear_prediction(values: Sequence[float], days_ahead: int) -> float:
    """Extrapolate the last value along the regression slope."""
    if not values:
        return 0.0
    if len(values) < 2:
        return values[0]
    return values[-1] + least_squares_slope(values) * days_ahead


def generate_milestones(
    current: float, goal: float, weekly_loss: float, start: date
) -> list[Milestone]:
    """Split the weight to lose into roughly equal whole-kilogram steps."""
    total = current - goal
    if total <= 0 or weekly_loss <= 0:
        return []
    step = max(1, math.floor(total / MILESTONE_STEPS))
    milestones = []
    index = 1
    while index * step <= total:
        kg_to_lose = index * step
        weeks_to_reach = round_half_up(kg_to_lose / weekly_loss)
        milestones.append(
            Milestone(
                milestone=f"{round(current - kg_to_lose, 1):g}kg",
                kg_to_lose=kg_to_lose,
                weeks_to_reach=weeks_to_reach,
                expected_date=_add_weeks(start, weeks_to_reach),
                celebration="First milestone!" if index == 1 else f"Milestone {index}",
            )
        )
        index += 1
    return milestones


def _resolve_now(now: datetime | None) -> datetime:
    return to_local(now, UTC) if now else datetime.now(tz=UTC)


def _mean(values: Sequence[float]) -> float:
    return statistics.fmean(values) if values else 0.0


def _add_weeks(start: date, weeks: float) -> date:
    return start + timedelta(days=round_half_up(weeks * 7))


def _direction(trend: float) -> TrendDirection:
    if trend > TREND_THRESHOLD_KCAL:
        return TrendDirection.INCREASING
    if trend < -TREND_THRESHOLD_KCAL:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


def _days_to_goal(
    goal_calories: float, current_avg: float, trend: float, prediction: float
) -> str:
    gap = goal_calories - current_avg
    if goal_calories - prediction <= 0 or gap <= 0:
        return "On track with goal"
    if trend == 0:
        return "Cannot estimate time to goal at the current rate"
    days = round_half_up(gap / abs(trend))
    return f"At current rate, you'll reach goal in {days} days"


def _calorie_recommendation(trend: float, goal: GoalType) -> str:
    if goal is GoalType.WEIGHT_LOSS:
        if trend > TREND_THRESHOLD_KCAL:
            return "Calories trending up. For weight loss, aim to reverse this trend."
        if trend < -TREND_THRESHOLD_KCAL:
            return "Good progress! Calories trending down."
    if goal is GoalType.WEIGHT_GAIN:
        if trend < -TREND_THRESHOLD_KCAL:
            return "Calories trending down. For weight gain, add a snack or two."
        if trend > TREND_THRESHOLD_KCAL:
            return "Good progress! Calories trending up."
    return "Calories stable. Continue monitoring."


def _consistency(variation: float) -> str:
    if variation < CONSISTENT_CV:
        return "Consistent"
    if variation < MODERATE_CV:
        return "Moderate"
    return "Variable"


def _macro_suggestion(
    macro: str, average: float, goal: float, deviation: int | None
) -> str:
    if deviation is None:
        return f"Set a {macro} goal to track progress"
    if deviation < -MACRO_DEVIATION_TOLERANCE:
        return f"Increase {macro} by about {round_half_up(goal - average)}g per day"
    if deviation > MACRO_DEVIATION_TOLERANCE:
        return f"Reduce {macro} by about {round_half_up(average - goal)}g per day"
    return f"{macro.capitalize()} intake is close to your goal"


def _weekend_effect(averages: dict[str, float]) -> WeekendEffect:
    weekday = [averages[name] for name in WEEKDAYS if averages.get(name, 0) > 0]
    weekend = [averages[name] for name in WEEKEND_DAYS if averages.get(name, 0) > 0]
    if not weekday or not weekend:
        return WeekendEffect(detected=False)
    weekday_avg = _mean(weekday)
    weekend_avg = _mean(weekend)
    if weekend_avg <= weekday_avg * WEEKEND_EFFECT_FACTOR:
        return WeekendEffect(detected=False)
    return WeekendEffect(
        detected=True,
        difference=round_half_up((weekend_avg - weekday_avg) / weekday_avg * 100),
        suggestion="Weekend eating is higher. Try planning one healthy weekend meal.",
    )


def _confidence(logged_days: int) -> str:
    if logged_days >= HIGH_CONFIDENCE_DAYS:
        return "high"
    if logged_days >= MIN_GOAL_ENTRIES:
        return "medium"
    return "low"
