"""Tests for per-day aggregation."""

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

from nutrihive.services.progress import ProgressAggregator, to_local
from tests.conftest import NOW, make_entry


def test_daily_totals_groups_by_day() -> None:
    aggregator = ProgressAggregator()
    entries = [
        make_entry(calories=300, protein=10, timestamp=NOW),
        make_entry(calories=200, protein=5, timestamp=NOW - timedelta(hours=2)),
        make_entry(calories=400, protein=20, timestamp=NOW - timedelta(days=1)),
    ]

    daily = aggregator.daily_totals(entries)

    assert [day.day for day in daily] == [date(2024, 5, 14), date(2024, 5, 15)]
    assert daily[1].calories == 500
    assert daily[1].protein == 15
    assert daily[1].entry_count == 2
    assert daily[0].calories == 400


def test_daily_totals_uses_local_timezone() -> None:
    aggregator = ProgressAggregator(tz=ZoneInfo("America/New_York"))
    # 02:00 UTC is still the previous evening in New York.
    entry = make_entry(timestamp=datetime(2024, 5, 15, 2, 0, tzinfo=UTC))

    daily = aggregator.daily_totals([entry])

    assert daily[0].day == date(2024, 5, 14)


def test_day_totals_returns_zero_for_empty_day() -> None:
    aggregator = ProgressAggregator()

    totals = aggregator.day_totals([make_entry()], date(2024, 1, 1))

    assert totals.calories == 0
    assert totals.entry_count == 0


def test_summarize_averages_over_logged_days() -> None:
    aggregator = ProgressAggregator()
    entries = [
        make_entry(calories=1800, timestamp=NOW),
        make_entry(calories=2200, timestamp=NOW - timedelta(days=2)),
        make_entry(calories=5000, timestamp=NOW - timedelta(days=30)),
    ]

    summary = aggregator.summarize(entries, days=7, now=NOW)

    assert len(summary.daily) == 2
    assert summary.avg_calories == 2000


def test_summarize_without_entries() -> None:
    summary = ProgressAggregator().summarize([], days=7, now=NOW)

    assert summary.daily == []
    assert summary.avg_calories == 0


def test_to_local_treats_naive_as_utc() -> None:
    naive = datetime(2024, 5, 15, 12, 0)

    assert to_local(naive, UTC) == datetime(2024, 5, 15, 12, 0, tzinfo=UTC)


def test_summarize_treats_naive_now_as_utc() -> None:
    aggregator = ProgressAggregator(tz=ZoneInfo("Asia/Tokyo"))
    # 20:00 UTC is already the next morning in Tokyo.
    entry = make_entry(timestamp=datetime(2024, 5, 15, 20, 0, tzinfo=UTC))

    summary = aggregator.summarize([entry], days=1, now=datetime(2024, 5, 15, 21, 0))

    assert [day.day for day in summary.daily] == [date(2024, 5, 16)]
