"""Domain models for logged food entries."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum


class MealSlot(Enum):
    """Meal slot a food entry was logged under."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @classmethod
    def parse(cls, raw: object) -> "MealSlot":
        """Parse a stored slot name, falling back to snack."""
        if isinstance(raw, str):
            cleaned = raw.strip().lower()
            if cleaned == "snacks":
                return cls.SNACK
            for slot in cls:
                if slot.value == cleaned:
                    return slot
        return cls.SNACK


MEAL_SLOT_ORDER: tuple[MealSlot, ...] = (
    MealSlot.BREAKFAST,
    MealSlot.LUNCH,
    MealSlot.DINNER,
    MealSlot.SNACK,
)


@dataclass(frozen=True)
class FoodLogEntry:
    """Snapshot of a single logged food."""

    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    timestamp: datetime
    meal_slot: MealSlot
    fiber: float | None = None
    explicit_nutrients: Mapping[str, float] = field(default_factory=dict)


def safe_amount(value: object) -> float:
    """Return a finite float for a numeric field, or zero."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def ensure_aware(moment: datetime) -> datetime:
    """Read a naive timestamp as UTC; aware timestamps are returned as is."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)
