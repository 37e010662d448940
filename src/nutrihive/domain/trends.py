"""Domain models for trend analysis and goal projection."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class TrendDirection(Enum):
    """Direction of a calorie trend between two windows."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


@dataclass(frozen=True)
class TrendReport:
    """Calorie trend between the last week and the week before."""

    current_average: int
    previous_average: int
    trend: int
    direction: TrendDirection
    prediction: int
    days_to_goal: str
    recommendation: str


@dataclass(frozen=True)
class MacroTrend:
    """Seven-day statistics for one macronutrient."""

    average: int
    goal: float
    deviation: int | None
    standard_deviation: float
    consistency: str
    slope: float
    suggestion: str


@dataclass(frozen=True)
class DayCycle:
    """Average intake for one weekday."""

    average_calories: int
    average_protein: int
    is_high_day: bool
    is_low_day: bool


@dataclass(frozen=True)
class WeekendEffect:
    """Whether weekend intake is notably higher than weekday intake."""

    detected: bool
    difference: int | None = None
    suggestion: str | None = None


@dataclass(frozen=True)
class WeeklyCycle:
    """Per-weekday averages plus the weekend effect."""

    days: dict[str, DayCycle]
    weekend_effect: WeekendEffect


@dataclass(frozen=True)
class Milestone:
    """Intermediate weight target on the way to the goal."""

    milestone: str
    kg_to_lose: float
    weeks_to_reach: int
    expected_date: date
    celebration: str


@dataclass(frozen=True)
class GoalProjection:
    """Projected time to reach a target weight."""

    current_weight: float
    goal_weight: float
    predicted_loss_per_week: float
    weeks_to_goal: int
    expected_date: date
    confidence: str
    milestones: list[Milestone] = field(default_factory=list)


@dataclass(frozen=True)
class TrendSummary:
    """All trend analytics for a history."""

    calorie_trend: TrendReport | None
    macro_trends: dict[str, MacroTrend]
    weekly_cycle: WeeklyCycle
    goal_progress: GoalProjection | None
