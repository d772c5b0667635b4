"""Pydantic models for insight request payloads."""

from datetime import datetime

from pydantic import BaseModel, Field

from nutrition_insights.domain.food_log import (
    FoodLogEntry,
    MealSlot,
    ensure_aware,
    safe_amount,
)
from nutrition_insights.domain.profile import Gender, UserProfile


class FoodLogEntryPayload(BaseModel):
    """Food entry as sent by a client."""

    name: str
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    timestamp: datetime
    meal_slot: str = "snack"
    explicit_nutrients: dict[str, float | None] = Field(default_factory=dict)

    def to_entry(self) -> FoodLogEntry:
        return FoodLogEntry(
            name=self.name,
            calories=safe_amount(self.calories),
            protein=safe_amount(self.protein),
            carbs=safe_amount(self.carbs),
            fat=safe_amount(self.fat),
            fiber=self.fiber,
            timestamp=ensure_aware(self.timestamp),
            meal_slot=MealSlot.parse(self.meal_slot),
            explicit_nutrients={
                key: safe_amount(value)
                for key, value in self.explicit_nutrients.items()
                if value is not None
            },
        )


class ProfilePayload(BaseModel):
    """Optional profile override for ad-hoc analysis."""

    gender: Gender = Gender.FEMALE
    calorie_target: float = Field(gt=0, allow_inf_nan=False)
    protein_target: float = Field(gt=0, allow_inf_nan=False)
    carbs_target: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    fat_target: float | None = Field(default=None, ge=0, allow_inf_nan=False)

    def to_profile(self) -> UserProfile:
        return UserProfile(
            gender=self.gender,
            calorie_target=self.calorie_target,
            protein_target=self.protein_target,
            carbs_target=self.carbs_target,
            fat_target=self.fat_target,
        )


class DailyInsightsRequest(BaseModel):
    """Snapshot of a day's entries to analyze."""

    entries: list[FoodLogEntryPayload] = Field(default_factory=list)
    profile: ProfilePayload | None = None
