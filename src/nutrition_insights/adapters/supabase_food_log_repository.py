"""Supabase repository for logged food entries."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from nutrition_insights.domain.food_log import FoodLogEntry, MealSlot, safe_amount
from nutrition_insights.services.food_logs import FoodLogRepository

_COLUMNS = (
    "name, calories, protein_g, carbs_g, fat_g, fiber_g, logged_at, meal_slot, "
    "nutrients"
)


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for reading food log entries."""

    client: Client

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return entries logged in the time range, oldest first."""
        response = (
            self.client.table("food_log_entries")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> FoodLogEntry:
    logged_at_raw = row.get("logged_at")
    logged_at = (
        datetime.fromisoformat(logged_at_raw)
        if isinstance(logged_at_raw, str) and logged_at_raw
        else datetime.min.replace(tzinfo=UTC)
    )
    fiber_raw = row.get("fiber_g")
    return FoodLogEntry(
        name=str(row.get("name") or ""),
        calories=safe_amount(row.get("calories")),
        protein=safe_amount(row.get("protein_g")),
        carbs=safe_amount(row.get("carbs_g")),
        fat=safe_amount(row.get("fat_g")),
        fiber=safe_amount(fiber_raw) if fiber_raw is not None else None,
        timestamp=logged_at,
        meal_slot=MealSlot.parse(row.get("meal_slot")),
        explicit_nutrients=_parse_nutrients(row.get("nutrients")),
    )


def _parse_nutrients(raw: object) -> dict[str, float]:
    if not isinstance(raw, dict):
        return {}
    return {
        str(key): safe_amount(value) for key, value in raw.items() if value is not None
    }
