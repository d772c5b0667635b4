"""User profile models used for targets."""

from dataclasses import dataclass
from enum import Enum

from nutrition_insights.domain.food_log import safe_amount


class Gender(Enum):
    """Selects the reference intake table variant."""

    FEMALE = "female"
    MALE = "male"

    @classmethod
    def parse(cls, raw: object, default: "Gender") -> "Gender":
        """Parse a stored gender value."""
        if isinstance(raw, str):
            cleaned = raw.strip().lower()
            for gender in cls:
                if gender.value == cleaned:
                    return gender
        return default


@dataclass(frozen=True)
class UserProfile:
    """Profile fields that drive scoring targets."""

    gender: Gender
    calorie_target: float
    protein_target: float
    carbs_target: float | None = None
    fat_target: float | None = None


@dataclass(frozen=True)
class ScoreTargets:
    """Daily macro targets for the score engine."""

    calorie_target: float
    protein_target: float
    carbs_target: float | None = None
    fat_target: float | None = None

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "ScoreTargets":
        """Copy the profile targets, reading non-finite values as zero."""
        return cls(
            calorie_target=safe_amount(profile.calorie_target),
            protein_target=safe_amount(profile.protein_target),
            carbs_target=_optional_amount(profile.carbs_target),
            fat_target=_optional_amount(profile.fat_target),
        )


def _optional_amount(value: float | None) -> float | None:
    if value is None:
        return None
    return safe_amount(value)
