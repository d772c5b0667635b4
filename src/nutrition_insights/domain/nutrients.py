"""Micronutrient domain models."""

from dataclasses import dataclass
from enum import Enum

from nutrition_insights.domain.profile import Gender


class NutrientCategory(Enum):
    """Grouping used for sub-scores."""

    VITAMIN = "vitamin"
    MINERAL = "mineral"
    OTHER = "other"


class NutrientStatus(Enum):
    """Adequacy band, best first."""

    EXCELLENT = "excellent"
    GOOD = "good"
    LOW = "low"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class NutrientDefinition:
    """Static reference data for a tracked nutrient."""

    id: str
    name: str
    unit: str
    daily_target: float
    category: NutrientCategory
    keywords: tuple[str, ...]
    serving_contribution: float
    suggested_foods: tuple[str, ...] = ()
    is_upper_limit: bool = False
    male_daily_target: float | None = None

    def target_for(self, gender: Gender) -> float:
        """Return the daily target for the given table variant."""
        if gender is Gender.MALE and self.male_daily_target is not None:
            return self.male_daily_target
        return self.daily_target


@dataclass(frozen=True)
class NutrientIntakeResult:
    """Estimated intake of one nutrient against its target."""

    nutrient_id: str
    name: str
    unit: str
    category: NutrientCategory
    amount: float
    target: float
    percent: float
    display_percent: float
    status: NutrientStatus
    is_upper_limit: bool
    over_limit: bool


@dataclass(frozen=True)
class DeficiencyAlert:
    """Alert for a floor nutrient well below target."""

    nutrient_id: str
    nutrient_name: str
    percent: float
    severity: NutrientStatus
    suggested_foods: tuple[str, ...]


@dataclass(frozen=True)
class LimitWarning:
    """Warning for a ceiling nutrient that went over its limit."""

    nutrient_id: str
    nutrient_name: str
    percent: float
    excess: float
    unit: str


@dataclass(frozen=True)
class IntakeEstimate:
    """Estimated intake with coverage information."""

    intake: dict[str, float]
    matched_entries: int
    total_entries: int
    is_estimated: bool
