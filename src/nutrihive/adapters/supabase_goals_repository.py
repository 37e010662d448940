"""Supabase repository for user goals."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutrihive.domain.entries import GoalType, UserGoals
from nutrihive.services.goals import UserGoalsRepository


@dataclass
class SupabaseGoalsRepository(UserGoalsRepository):
    """Supabase implementation for user goals."""

    client: Client

    def get_goals(self, user_id: str) -> UserGoals | None:
        """Return the stored goals for a user."""
        response = (
            self.client.table("user_goals")
            .select("calories, protein, carbs, fat, weight, target_weight, goal")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserGoals(
            calories=float(row.get("calories") or 0.0),
            protein=float(row.get("protein") or 0.0),
            carbs=float(row.get("carbs") or 0.0),
            fat=float(row.get("fat") or 0.0),
            weight=_optional_float(row.get("weight")),
            target_weight=_optional_float(row.get("target_weight")),
            goal=GoalType(row.get("goal") or GoalType.MAINTENANCE.value),
        )

    def set_goals(self, user_id: str, goals: UserGoals) -> None:
        """Insert or replace the user's goals."""
        self.client.table("user_goals").upsert(
            {
                "user_id": user_id,
                "calories": goals.calories,
                "protein": goals.protein,
                "carbs": goals.carbs,
                "fat": goals.fat,
                "weight": goals.weight,
                "target_weight": goals.target_weight,
                "goal": goals.goal.value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
