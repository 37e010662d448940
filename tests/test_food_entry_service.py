"""Tests for the food entry service."""

import logging
from datetime import UTC, datetime

import pytest

from nutrihive.domain.entries import MealType
from nutrihive.services.entries import FoodEntryService
from tests.conftest import InMemoryFoodEntryRepository


def test_log_food_estimates_and_stores(
    entry_service: FoodEntryService,
    entry_repository: InMemoryFoodEntryRepository,
) -> None:
    logged_at = datetime(2024, 5, 15, 8, 0, tzinfo=UTC)

    entry = entry_service.log_food(
        "user-1",
        "  Apple ",
        quantity=2,
        meal_type=MealType.BREAKFAST,
        timestamp=logged_at,
    )

    assert entry.food_name == "Apple"
    assert entry.calories == 104
    assert entry.quantity == 2
    assert entry.meal_type == MealType.BREAKFAST
    assert entry.timestamp == logged_at
    assert entry_repository.entries == [entry]


def test_log_food_coerces_invalid_quantity(entry_service: FoodEntryService) -> None:
    entry = entry_service.log_food("user-1", "banana", quantity="lots")

    assert entry.quantity == 1
    assert entry.calories == 89


def test_log_food_treats_naive_timestamp_as_utc(
    entry_service: FoodEntryService,
) -> None:
    entry = entry_service.log_food(
        "user-1", "rice", timestamp=datetime(2024, 5, 15, 12, 0)
    )

    assert entry.timestamp.tzinfo is UTC


def test_log_food_rejects_empty_name(entry_service: FoodEntryService) -> None:
    with pytest.raises(ValueError, match="empty"):
        entry_service.log_food("user-1", "   ")


def test_log_food_rejects_negative_fiber(entry_service: FoodEntryService) -> None:
    with pytest.raises(ValueError, match="Fiber"):
        entry_service.log_food("user-1", "rice", fiber=-1)


def test_log_food_logs_unknown_food(
    entry_service: FoodEntryService,
    caplog: pytest.LogCaptureFixture,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(logging.getLogger("nutrihive"), "propagate", True)
    with caplog.at_level(logging.INFO, logger="nutrihive.services.entries"):
        entry = entry_service.log_food("user-1", "mystery stew")

    assert entry.calories == 100
    assert "default nutrition estimate" in caplog.text


def test_get_and_list_entries(entry_service: FoodEntryService) -> None:
    first = entry_service.log_food("user-1", "apple")
    entry_service.log_food("user-2", "banana")

    assert entry_service.list_entries("user-1") == [first]
    assert entry_service.get_entry("user-1", first.id) == first
    assert entry_service.get_entry("user-2", first.id) is None
