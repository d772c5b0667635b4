"""Per-nutrient adequacy classification, sub-scores and alerts."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from nutrition_insights.domain.food_log import round_half_up, safe_amount
from nutrition_insights.domain.nutrients import (
    DeficiencyAlert,
    LimitWarning,
    NutrientCategory,
    NutrientDefinition,
    NutrientIntakeResult,
    NutrientStatus,
)
from nutrition_insights.domain.profile import Gender
from nutrition_insights.services.catalog import DEFAULT_CATALOG, NutrientCatalog

MAX_PERCENT = 100.0
TOP_COUNT = 3

MICRONUTRIENT_GRADES: tuple[tuple[int, str], ...] = (
    (95, "A+"),
    (90, "A"),
    (85, "A-"),
    (80, "B+"),
    (75, "B"),
    (70, "B-"),
    (65, "C+"),
    (60, "C"),
    (55, "C-"),
    (50, "D+"),
    (45, "D"),
    (40, "D-"),
    (0, "F"),
)


@dataclass(frozen=True)
class StatusThresholds:
    """Percent-of-target bands for status classification."""

    excellent: float = 90.0
    good: float = 75.0
    low: float = 50.0
    warning: float = 25.0
    limit_excellent: float = 80.0
    limit_ceiling: float = 100.0


def classify_status(
    percent: float, is_upper_limit: bool, thresholds: StatusThresholds | None = None
) -> NutrientStatus:
    """Classify an unclamped adequacy percent into a status band."""
    bands = thresholds or StatusThresholds()
    if is_upper_limit:
        if percent > bands.limit_ceiling:
            return NutrientStatus.CRITICAL
        if percent > bands.limit_excellent:
            return NutrientStatus.GOOD
        return NutrientStatus.EXCELLENT
    if percent >= bands.excellent:
        return NutrientStatus.EXCELLENT
    if percent >= bands.good:
        return NutrientStatus.GOOD
    if percent >= bands.low:
        return NutrientStatus.LOW
    if percent >= bands.warning:
        return NutrientStatus.WARNING
    return NutrientStatus.CRITICAL


def micronutrient_grade(score: float) -> str:
    """Map a 0-100 adequacy score to a fine-grained letter grade."""
    for floor, grade in MICRONUTRIENT_GRADES:
        if score >= floor:
            return grade
    return MICRONUTRIENT_GRADES[-1][1]


@dataclass(frozen=True)
class MicronutrientReport:
    """Adequacy results for every catalog nutrient."""

    nutrients: list[NutrientIntakeResult]
    deficiency_alerts: list[DeficiencyAlert]
    limit_warnings: list[LimitWarning]
    vitamin_score: int
    mineral_score: int
    overall_score: int
    grade: str
    top_deficiencies: list[NutrientIntakeResult]
    top_strengths: list[NutrientIntakeResult]


@dataclass(frozen=True)
class MicronutrientAnalyzer:
    """Turns an intake map into classified per-nutrient results."""

    catalog: NutrientCatalog = DEFAULT_CATALOG
    thresholds: StatusThresholds = field(default_factory=StatusThresholds)

    def evaluate(
        self, intake: Mapping[str, float], gender: Gender
    ) -> list[NutrientIntakeResult]:
        """Return an intake result per catalog nutrient, in catalog order."""
        return [
            self._evaluate_one(nutrient, intake.get(nutrient.id, 0.0), gender)
            for nutrient in self.catalog.list_nutrients()
        ]

    def report(
        self, intake: Mapping[str, float], gender: Gender, has_data: bool = True
    ) -> MicronutrientReport:
        """Return results plus sub-scores and alerts.

        With ``has_data`` false the results are still listed, but no alerts
        or warnings are raised for the empty day.
        """
        results = self.evaluate(intake, gender)
        floor_results = [result for result in results if not result.is_upper_limit]
        overall = _mean_capped(floor_results)
        ranked = sorted(floor_results, key=lambda result: result.percent)
        return MicronutrientReport(
            nutrients=results,
            deficiency_alerts=self.deficiency_alerts(results) if has_data else [],
            limit_warnings=self.limit_warnings(results) if has_data else [],
            vitamin_score=_mean_capped(
                [r for r in floor_results if r.category is NutrientCategory.VITAMIN]
            ),
            mineral_score=_mean_capped(
                [r for r in floor_results if r.category is NutrientCategory.MINERAL]
            ),
            overall_score=overall,
            grade=micronutrient_grade(overall),
            top_deficiencies=ranked[:TOP_COUNT],
            top_strengths=list(reversed(ranked))[:TOP_COUNT],
        )

    def deficiency_alerts(
        self, results: Sequence[NutrientIntakeResult]
    ) -> list[DeficiencyAlert]:
        """Return alerts for floor nutrients below the low band, worst first."""
        alerts: list[DeficiencyAlert] = []
        for result in results:
            if result.is_upper_limit:
                continue
            if result.status not in {NutrientStatus.WARNING, NutrientStatus.CRITICAL}:
                continue
            nutrient = self.catalog.get(result.nutrient_id)
            if nutrient is None or not nutrient.suggested_foods:
                continue
            alerts.append(
                DeficiencyAlert(
                    nutrient_id=result.nutrient_id,
                    nutrient_name=result.name,
                    percent=result.percent,
                    severity=result.status,
                    suggested_foods=nutrient.suggested_foods,
                )
            )
        return sorted(alerts, key=lambda alert: alert.percent)

    def limit_warnings(
        self, results: Sequence[NutrientIntakeResult]
    ) -> list[LimitWarning]:
        """Return warnings for ceiling nutrients over their limit."""
        warnings = [
            LimitWarning(
                nutrient_id=result.nutrient_id,
                nutrient_name=result.name,
                percent=result.percent,
                excess=round(result.amount - result.target, 2),
                unit=result.unit,
            )
            for result in results
            if result.over_limit
        ]
        return sorted(warnings, key=lambda warning: warning.percent, reverse=True)

    def _evaluate_one(
        self, nutrient: NutrientDefinition, raw_amount: float, gender: Gender
    ) -> NutrientIntakeResult:
        amount = safe_amount(raw_amount)
        target = nutrient.target_for(gender)
        if target > 0:
            percent = round(amount / target * 100, 1)
        else:
            percent = 0.0 if nutrient.is_upper_limit else MAX_PERCENT
        over_limit = nutrient.is_upper_limit and percent > self.thresholds.limit_ceiling
        return NutrientIntakeResult(
            nutrient_id=nutrient.id,
            name=nutrient.name,
            unit=nutrient.unit,
            category=nutrient.category,
            amount=amount,
            target=target,
            percent=percent,
            display_percent=min(percent, MAX_PERCENT),
            status=classify_status(percent, nutrient.is_upper_limit, self.thresholds),
            is_upper_limit=nutrient.is_upper_limit,
            over_limit=over_limit,
        )


def _mean_capped(results: Sequence[NutrientIntakeResult]) -> int:
    if not results:
        return 0
    total = sum(min(result.percent, MAX_PERCENT) for result in results)
    return round_half_up(total / len(results))
