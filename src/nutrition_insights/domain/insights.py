"""Aggregated insight results returned to callers."""

from dataclasses import dataclass
from datetime import date

from nutrition_insights.domain.nutrients import (
    DeficiencyAlert,
    IntakeEstimate,
    LimitWarning,
    NutrientIntakeResult,
)
from nutrition_insights.domain.scoring import ScoreResult
from nutrition_insights.domain.timing import (
    CalorieDistribution,
    DistributionComparison,
    EatingWindow,
    MealTiming,
    TimingHistory,
)


@dataclass(frozen=True)
class DailyInsights:
    """Everything derived from a single day's food log."""

    has_data: bool
    score: ScoreResult
    nutrients: list[NutrientIntakeResult]
    deficiency_alerts: list[DeficiencyAlert]
    limit_warnings: list[LimitWarning]
    vitamin_score: int
    mineral_score: int
    micronutrient_score: int
    micronutrient_grade: str
    top_deficiencies: list[NutrientIntakeResult]
    top_strengths: list[NutrientIntakeResult]
    meal_timing: list[MealTiming]
    eating_window: EatingWindow | None
    distribution: CalorieDistribution
    distribution_comparison: DistributionComparison
    intake_coverage: IntakeEstimate
    tips: list[str]
    timing_notes: list[str]


@dataclass(frozen=True)
class DailyTrendPoint:
    """Condensed per-day values for trend views."""

    day: date
    has_data: bool
    score: int
    grade: str
    calories: float
    protein: float
    eating_window_hours: float | None


@dataclass(frozen=True)
class TrendSummary:
    """Per-day points plus cross-day timing statistics."""

    days: list[DailyTrendPoint]
    average_score: float | None
    timing: TimingHistory
