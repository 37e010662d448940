"""Per-day aggregation of food entries."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta, tzinfo

from nutrihive.domain.entries import FoodEntry
from nutrihive.domain.stats import DailyTotals


@dataclass
class PeriodSummary:
    """Aggregated totals for a period."""

    daily: list[DailyTotals]
    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fat: float


@dataclass(frozen=True)
class ProgressAggregator:
    """Group raw entries into per-day totals in a local timezone."""

    tz: tzinfo = UTC

    def daily_totals(self, entries: Iterable[FoodEntry]) -> list[DailyTotals]:
        """Return totals for each day that has entries, oldest first."""
        grouped: dict[date, DailyTotals] = {}
        for entry in entries:
            day = self.local_day(entry.timestamp)
            current = grouped.get(day) or _empty_day(day)
            grouped[day] = DailyTotals(
                day=day,
                calories=current.calories + entry.calories,
                protein=current.protein + entry.protein,
                carbs=current.carbs + entry.carbs,
                fat=current.fat + entry.fat,
                entry_count=current.entry_count + 1,
            )
        return [grouped[day] for day in sorted(grouped)]

    def day_totals(self, entries: Iterable[FoodEntry], day: date) -> DailyTotals:
        """Return totals for a single local day, zero when nothing was logged."""
        matching = [
            entry for entry in entries if self.local_day(entry.timestamp) == day
        ]
        totals = self.daily_totals(matching)
        return totals[0] if totals else _empty_day(day)

    def summarize(
        self,
        entries: Iterable[FoodEntry],
        days: int = 7,
        now: datetime | None = None,
    ) -> PeriodSummary:
        """Return the last *days* local days with averages over logged days."""
        today = to_local(now or datetime.now(tz=UTC), self.tz).date()
        start = today - timedelta(days=days - 1)
        daily = [
            totals
            for totals in self.daily_totals(entries)
            if start <= totals.day <= today
        ]
        logged_days = max(len(daily), 1)
        return PeriodSummary(
            daily=daily,
            avg_calories=sum(day.calories for day in daily) / logged_days,
            avg_protein=sum(day.protein for day in daily) / logged_days,
            avg_carbs=sum(day.carbs for day in daily) / logged_days,
            avg_fat=sum(day.fat for day in daily) / logged_days,
        )

    def local_day(self, timestamp: datetime) -> date:
        """Return the calendar day of a timestamp in the aggregator timezone."""
        return to_local(timestamp, self.tz).date()


def _empty_day(day: date) -> DailyTotals:
    return DailyTotals(day=day, calories=0, protein=0, carbs=0, fat=0)


def to_local(timestamp: datetime, tz: tzinfo) -> datetime:
    """Convert a timestamp to *tz*, treating naive values as UTC."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return timestamp.astimezone(tz)
