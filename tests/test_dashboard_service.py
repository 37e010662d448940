"""Tests for the daily dashboard."""

from datetime import timedelta

from nutrihive.containers import AppContainer
from nutrihive.domain.entries import UserGoals
from nutrihive.domain.stats import DailyTotals
from nutrihive.services.dashboard import daily_recommendations, progress_percentage
from tests.conftest import NOW, InMemoryFoodEntryRepository, make_entry


def _totals(**values: float) -> DailyTotals:
    base = {"calories": 2000, "protein": 50, "carbs": 250, "fat": 70}
    base.update(values)
    return DailyTotals(day=NOW.date(), **base)


def test_progress_percentage() -> None:
    assert progress_percentage(1000, 2000) == 50
    assert progress_percentage(3000, 2000) == 100
    assert progress_percentage(10, 0) == 0


def test_balanced_day_recommendation() -> None:
    assert daily_recommendations(_totals(), UserGoals()) == [
        "Great job! Your nutrition is well balanced. Keep it up!"
    ]


def test_recommendations_for_unbalanced_day() -> None:
    recommendations = daily_recommendations(
        _totals(calories=1000, protein=20, carbs=400, fat=100), UserGoals()
    )

    assert len(recommendations) == 4
    assert recommendations[0].startswith("Consider adding a healthy snack")
    assert recommendations[1].startswith("Your protein intake is low")
    assert recommendations[2].startswith("Your carb intake is high")
    assert recommendations[3].startswith("Monitor your fat intake")


def test_get_today_counts_only_today(
    container: AppContainer, entry_repository: InMemoryFoodEntryRepository
) -> None:
    entry_repository.add_entry(make_entry(calories=500, protein=30, timestamp=NOW))
    entry_repository.add_entry(
        make_entry(calories=700, timestamp=NOW - timedelta(days=1))
    )

    summary = container.dashboard_service.get_today("user-1", now=NOW)

    assert summary.totals.calories == 500
    assert summary.totals.entry_count == 1
    assert summary.progress.calories == 25
    assert summary.progress.protein == 60
