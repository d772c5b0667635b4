"""Daily nutrition score (0-100) with a weighted category breakdown."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from nutrition_insights.domain.food_log import FoodLogEntry, round_half_up, safe_amount
from nutrition_insights.domain.profile import ScoreTargets
from nutrition_insights.domain.scoring import CategoryScore, ScoreBreakdown, ScoreResult

TOTAL_POINTS = 100

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

# Protein / carbs / fat share of calories when the profile has no macro targets.
DEFAULT_MACRO_SPLIT = (0.30, 0.40, 0.30)

GRADE_LADDER: tuple[tuple[int, str], ...] = (
    (90, "A+"),
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (50, "D"),
    (0, "F"),
)


@dataclass(frozen=True)
class CategoryWeights:
    """Max points per category; must add up to 100."""

    calories: int = 25
    protein: int = 25
    macros: int = 20
    consistency: int = 15
    variety: int = 15

    def __post_init__(self) -> None:
        total = (
            self.calories + self.protein + self.macros + self.consistency + self.variety
        )
        if total != TOTAL_POINTS:
            raise ValueError(
                f"Category weights must sum to {TOTAL_POINTS}, got {total}"
            )


@dataclass(frozen=True)
class ScoreThresholds:
    """Tunable curve parameters for the category scores."""

    calorie_deviation_ceiling: float = 1.0
    macro_deviation_ceiling: float = 1.0
    consistency_slot_ceiling: int = 3
    variety_plateau: int = 5

    def __post_init__(self) -> None:
        for name in (
            "calorie_deviation_ceiling",
            "macro_deviation_ceiling",
            "consistency_slot_ceiling",
            "variety_plateau",
        ):
            value = getattr(self, name)
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {value}")


def grade_for_score(score: float) -> str:
    """Map a 0-100 score to a letter grade."""
    for floor, grade in GRADE_LADDER:
        if score >= floor:
            return grade
    return GRADE_LADDER[-1][1]


@dataclass(frozen=True)
class DayTotals:
    """Macro totals for the day, with non-finite values read as zero."""

    calories: float
    protein: float
    carbs: float
    fat: float

    @classmethod
    def from_entries(cls, entries: Sequence[FoodLogEntry]) -> "DayTotals":
        return cls(
            calories=sum(safe_amount(entry.calories) for entry in entries),
            protein=sum(safe_amount(entry.protein) for entry in entries),
            carbs=sum(safe_amount(entry.carbs) for entry in entries),
            fat=sum(safe_amount(entry.fat) for entry in entries),
        )


@dataclass(frozen=True)
class ScoreEngine:
    """Computes the weighted daily score for a snapshot of entries."""

    weights: CategoryWeights = field(default_factory=CategoryWeights)
    thresholds: ScoreThresholds = field(default_factory=ScoreThresholds)

    def score(
        self, entries: Sequence[FoodLogEntry], targets: ScoreTargets
    ) -> ScoreResult:
        """Score a day's entries against the targets."""
        if not entries:
            breakdown = self._breakdown(0.0, 0.0, 0.0, 0.0, 0.0)
            return ScoreResult(
                total=0,
                breakdown=breakdown,
                grade=grade_for_score(0),
                has_data=False,
            )

        totals = DayTotals.from_entries(entries)
        breakdown = self._breakdown(
            calories=self._calorie_accuracy(totals.calories, targets.calorie_target),
            protein=self._protein_ratio(totals.protein, targets.protein_target),
            macros=self._macro_balance(totals, targets),
            consistency=self._consistency(entries),
            variety=self._variety(entries),
        )
        total = breakdown.total
        return ScoreResult(
            total=total,
            breakdown=breakdown,
            grade=grade_for_score(total),
            has_data=True,
        )

    def _breakdown(
        self,
        calories: float,
        protein: float,
        macros: float,
        consistency: float,
        variety: float,
    ) -> ScoreBreakdown:
        return ScoreBreakdown(
            calories=_category(calories, self.weights.calories),
            protein=_category(protein, self.weights.protein),
            macros=_category(macros, self.weights.macros),
            consistency=_category(consistency, self.weights.consistency),
            variety=_category(variety, self.weights.variety),
        )

    def _calorie_accuracy(self, consumed: float, target: float) -> float:
        target = safe_amount(target)
        if target <= 0:
            return 0.0
        deviation = abs(1 - consumed / target)
        ceiling = self.thresholds.calorie_deviation_ceiling
        return 1 - min(deviation / ceiling, 1.0)

    @staticmethod
    def _protein_ratio(consumed: float, target: float) -> float:
        target = safe_amount(target)
        if target <= 0:
            return 0.0
        return min(max(consumed, 0.0) / target, 1.0)

    def _macro_balance(self, totals: DayTotals, targets: ScoreTargets) -> float:
        actual = _calorie_split(
            totals.protein * PROTEIN_KCAL_PER_G,
            totals.carbs * CARBS_KCAL_PER_G,
            totals.fat * FAT_KCAL_PER_G,
        )
        if actual is None:
            return 0.0
        ideal = _reference_split(targets)
        deviation = sum(abs(a - b) for a, b in zip(actual, ideal, strict=True))
        return max(0.0, 1 - deviation / self.thresholds.macro_deviation_ceiling)

    def _consistency(self, entries: Sequence[FoodLogEntry]) -> float:
        ceiling = self.thresholds.consistency_slot_ceiling
        distinct = len({entry.meal_slot for entry in entries})
        if ceiling <= 1:
            return 1.0 if distinct >= 1 else 0.0
        return min((distinct - 1) / (ceiling - 1), 1.0)

    def _variety(self, entries: Sequence[FoodLogEntry]) -> float:
        names = {(entry.name or "").strip().lower() for entry in entries}
        names.discard("")
        plateau = self.thresholds.variety_plateau
        return min(len(names) / plateau, 1.0)


def _category(ratio: float, max_points: int) -> CategoryScore:
    bounded = min(max(ratio, 0.0), 1.0)
    return CategoryScore(
        points=round_half_up(bounded * max_points), max_points=max_points
    )


def _calorie_split(
    protein_kcal: float, carbs_kcal: float, fat_kcal: float
) -> tuple[float, float, float] | None:
    values = (max(protein_kcal, 0.0), max(carbs_kcal, 0.0), max(fat_kcal, 0.0))
    total = sum(values)
    if total <= 0:
        return None
    return (values[0] / total, values[1] / total, values[2] / total)


def _reference_split(targets: ScoreTargets) -> tuple[float, float, float]:
    """Use the profile's macro targets when complete, else the default split."""
    protein = safe_amount(targets.protein_target)
    carbs = safe_amount(targets.carbs_target)
    fat = safe_amount(targets.fat_target)
    if protein > 0 and carbs > 0 and fat > 0:
        split = _calorie_split(
            protein * PROTEIN_KCAL_PER_G,
            carbs * CARBS_KCAL_PER_G,
            fat * FAT_KCAL_PER_G,
        )
        if split is not None:
            return split
    return DEFAULT_MACRO_SPLIT
