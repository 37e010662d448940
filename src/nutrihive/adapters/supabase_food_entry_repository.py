"""Supabase repository for food entries."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutrihive.domain.entries import FoodEntry, MealType
from nutrihive.services.entries import FoodEntryRepository

_COLUMNS = (
    "id, user_id, food_name, quantity, meal_type, calories, protein, carbs, fat, "
    "fiber, logged_at"
)


@dataclass
class SupabaseFoodEntryRepository(FoodEntryRepository):
    """Supabase implementation for food entries."""

    client: Client

    def add_entry(self, entry: FoodEntry) -> FoodEntry:
        """Insert a food entry row."""
        response = (
            self.client.table("food_entries")
            .insert(
                {
                    "id": entry.id,
                    "user_id": entry.user_id,
                    "food_name": entry.food_name,
                    "quantity": entry.quantity,
                    "meal_type": entry.meal_type.value,
                    "calories": entry.calories,
                    "protein": entry.protein,
                    "carbs": entry.carbs,
                    "fat": entry.fat,
                    "fiber": entry.fiber,
                    "logged_at": entry.timestamp.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        return _parse_row(response.data[0])

    def list_entries(self, user_id: str) -> list[FoodEntry]:
        """Return a user's entries, oldest first."""
        response = (
            self.client.table("food_entries")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_entry(self, user_id: str, entry_id: str) -> FoodEntry | None:
        """Return one entry by id."""
        response = (
            self.client.table("food_entries")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .eq("id", entry_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> FoodEntry:
    logged_at_raw = row.get("logged_at")
    logged_at = (
        datetime.fromisoformat(logged_at_raw)
        if isinstance(logged_at_raw, str) and logged_at_raw
        else datetime.min.replace(tzinfo=UTC)
    )
    if logged_at.tzinfo is None:
        logged_at = logged_at.replace(tzinfo=UTC)
    return FoodEntry(
        id=str(row.get("id", "")),
        user_id=str(row.get("user_id", "")),
        food_name=str(row.get("food_name", "")),
        quantity=float(row.get("quantity") or 1.0),
        meal_type=MealType(row.get("meal_type") or MealType.SNACK.value),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fat=float(row.get("fat") or 0.0),
        fiber=float(row.get("fiber") or 0.0),
        timestamp=logged_at,
    )
