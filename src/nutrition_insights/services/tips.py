"""Rule-based improvement tips for the weakest areas of a day."""

from collections.abc import Sequence
from dataclasses import dataclass

from nutrition_insights.domain.food_log import (
    FoodLogEntry,
    MealSlot,
    round_half_up,
    safe_amount,
)
from nutrition_insights.domain.nutrients import DeficiencyAlert
from nutrition_insights.domain.profile import ScoreTargets
from nutrition_insights.domain.scoring import ScoreResult
from nutrition_insights.services.scoring import DayTotals

DEFAULT_MAX_TIPS = 3
# Categories at or above this share of their budget do not get a tip.
CATEGORY_TIP_RATIO = 0.85

_MAIN_SLOTS = (MealSlot.BREAKFAST, MealSlot.LUNCH, MealSlot.DINNER)


@dataclass(frozen=True)
class _Candidate:
    adequacy: float
    order: int
    text: str


@dataclass(frozen=True)
class TipGenerator:
    """Builds a short, worst-first list of tips."""

    max_tips: int = DEFAULT_MAX_TIPS

    def generate(
        self,
        entries: Sequence[FoodLogEntry],
        targets: ScoreTargets,
        score: ScoreResult,
        alerts: Sequence[DeficiencyAlert],
    ) -> list[str]:
        """Return tips ordered by ascending adequacy percent."""
        if not score.has_data or not entries:
            return []
        candidates = [
            *self._category_tips(entries, targets, score),
            *self._nutrient_tips(alerts, offset=len(score.breakdown.items())),
        ]
        candidates.sort(key=lambda candidate: (candidate.adequacy, candidate.order))
        return [candidate.text for candidate in candidates[: max(self.max_tips, 0)]]

    def _category_tips(
        self,
        entries: Sequence[FoodLogEntry],
        targets: ScoreTargets,
        score: ScoreResult,
    ) -> list[_Candidate]:
        totals = DayTotals.from_entries(entries)
        candidates: list[_Candidate] = []
        for order, (category, category_score) in enumerate(score.breakdown.items()):
            ratio = category_score.ratio
            if ratio >= CATEGORY_TIP_RATIO:
                continue
            text = _category_text(category, entries, targets, totals)
            if text:
                candidates.append(
                    _Candidate(adequacy=ratio * 100, order=order, text=text)
                )
        return candidates

    @staticmethod
    def _nutrient_tips(
        alerts: Sequence[DeficiencyAlert], offset: int
    ) -> list[_Candidate]:
        return [
            _Candidate(
                adequacy=alert.percent,
                order=offset + index,
                text=(
                    f"You may be low on {alert.nutrient_name} "
                    f"({round_half_up(alert.percent)}% of target). "
                    f"Try {', '.join(alert.suggested_foods)}."
                ),
            )
            for index, alert in enumerate(alerts)
        ]


def _category_text(
    category: str,
    entries: Sequence[FoodLogEntry],
    targets: ScoreTargets,
    totals: DayTotals,
) -> str | None:
    if category == "calories":
        calorie_target = safe_amount(targets.calorie_target)
        if calorie_target <= 0:
            return None
        diff = round_half_up(totals.calories - calorie_target)
        if diff > 0:
            return (
                f"You're {diff} cal over target. "
                "Try swapping a snack for a lighter option."
            )
        return f"You're {abs(diff)} cal under target. Consider adding a healthy snack."
    if category == "protein":
        protein_target = safe_amount(targets.protein_target)
        if protein_target <= 0:
            return None
        remaining = round_half_up(protein_target - totals.protein)
        if remaining > 0:
            return (
                f"Add {remaining}g more protein. "
                "Try Greek yogurt, chicken, or a protein shake."
            )
        return None
    if category == "macros":
        return (
            "Your macro split is off-balance. "
            "Try adjusting your carb and fat portions."
        )
    if category == "consistency":
        logged = {entry.meal_slot for entry in entries}
        missing = [slot.value for slot in _MAIN_SLOTS if slot not in logged]
        if missing:
            return f"Log {' and '.join(missing)} to boost your meal consistency score."
        return "Spread your food across more meals to boost your consistency score."
    if category == "variety":
        return "Try adding more diverse foods. Aim for 5+ unique items per day."
    return None
