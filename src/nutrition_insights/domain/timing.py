"""Domain models for meal timing analytics."""

from dataclasses import dataclass
from datetime import datetime

from nutrition_insights.domain.food_log import MealSlot


@dataclass(frozen=True)
class MealTiming:
    """First and last logged time for a meal slot."""

    meal_slot: MealSlot
    first_food_time: datetime
    last_food_time: datetime
    total_calories: float


@dataclass(frozen=True)
class EatingWindow:
    """Span between the first and last food of the day."""

    start: datetime
    end: datetime
    duration_hours: float


@dataclass(frozen=True)
class CalorieDistribution:
    """Share of the day's calories per slot, in whole percent."""

    breakfast: int
    lunch: int
    dinner: int
    snack: int

    def get(self, slot: MealSlot) -> int:
        return getattr(self, slot.value)


@dataclass(frozen=True)
class DistributionComparison:
    """Actual distribution next to the ideal template."""

    actual: CalorieDistribution
    ideal: CalorieDistribution
    difference: dict[str, int]


@dataclass(frozen=True)
class TimingAnalysis:
    """Timing and distribution result for one day."""

    meal_timing: list[MealTiming]
    eating_window: EatingWindow | None
    distribution: CalorieDistribution
    comparison: DistributionComparison


@dataclass(frozen=True)
class AverageMealTime:
    """Average clock time for a slot across days."""

    meal_slot: MealSlot
    average_hour: float
    formatted: str
    samples: int


@dataclass(frozen=True)
class HourlyCalories:
    """Calories logged in one clock hour across several days."""

    hour: int
    total_calories: float
    average_calories: int
    entries: int


@dataclass(frozen=True)
class TimingHistory:
    """Timing statistics across several days."""

    average_times: list[AverageMealTime]
    regularity_score: int
    average_window_hours: float | None
    hourly_distribution: list[HourlyCalories]
    notes: list[str]
