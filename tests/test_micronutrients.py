"""Tests for micronutrient adequacy analysis."""

import pytest

from nutrition_insights.domain.nutrients import NutrientStatus
from nutrition_insights.domain.profile import Gender
from nutrition_insights.services.catalog import DEFAULT_CATALOG
from nutrition_insights.services.micronutrients import (
    MicronutrientAnalyzer,
    classify_status,
    micronutrient_grade,
)

_RANK = {
    NutrientStatus.EXCELLENT: 0,
    NutrientStatus.GOOD: 1,
    NutrientStatus.LOW: 2,
    NutrientStatus.WARNING: 3,
    NutrientStatus.CRITICAL: 4,
}


def _full_intake(gender: Gender = Gender.FEMALE) -> dict[str, float]:
    return {
        nutrient.id: nutrient.target_for(gender)
        for nutrient in DEFAULT_CATALOG.list_nutrients()
    }


def _result(results, nutrient_id: str):
    return next(result for result in results if result.nutrient_id == nutrient_id)


@pytest.mark.parametrize(
    ("percent", "status"),
    [
        (120, NutrientStatus.EXCELLENT),
        (90, NutrientStatus.EXCELLENT),
        (80, NutrientStatus.GOOD),
        (74.9, NutrientStatus.LOW),
        (50, NutrientStatus.LOW),
        (49, NutrientStatus.WARNING),
        (25, NutrientStatus.WARNING),
        (10, NutrientStatus.CRITICAL),
    ],
)
def test_floor_nutrient_bands(percent: float, status: NutrientStatus) -> None:
    assert classify_status(percent, is_upper_limit=False) is status


def test_floor_classification_is_monotonic() -> None:
    ranks = [_RANK[classify_status(pct / 2, False)] for pct in range(0, 401)]

    assert ranks == sorted(ranks, reverse=True)


def test_limit_classification_is_monotonic() -> None:
    ranks = [_RANK[classify_status(pct / 2, True)] for pct in range(0, 401)]

    assert ranks == sorted(ranks)


def test_limit_nutrient_over_limit_is_worst_status() -> None:
    intake = {"sodium": 3450}

    results = MicronutrientAnalyzer().evaluate(intake, Gender.FEMALE)

    sodium = _result(results, "sodium")
    assert sodium.percent == 150
    assert sodium.display_percent == 100
    assert sodium.status is NutrientStatus.CRITICAL
    assert sodium.over_limit is True


def test_full_intake_scores_perfectly() -> None:
    report = MicronutrientAnalyzer().report(_full_intake(), Gender.FEMALE)

    assert report.vitamin_score == 100
    assert report.mineral_score == 100
    assert report.overall_score == 100
    assert report.grade == "A+"
    assert report.deficiency_alerts == []
    assert report.limit_warnings == []


def test_zero_intake_raises_critical_alerts_worst_first() -> None:
    report = MicronutrientAnalyzer().report({}, Gender.FEMALE)

    assert report.vitamin_score == 0
    assert report.grade == "F"
    assert report.deficiency_alerts
    assert all(
        alert.severity is NutrientStatus.CRITICAL for alert in report.deficiency_alerts
    )
    alert_ids = {alert.nutrient_id for alert in report.deficiency_alerts}
    assert "sodium" not in alert_ids
    assert "sugar" not in alert_ids


def test_no_data_report_has_no_alerts() -> None:
    report = MicronutrientAnalyzer().report({}, Gender.FEMALE, has_data=False)

    assert report.deficiency_alerts == []
    assert report.limit_warnings == []


def test_alerts_only_below_low_band() -> None:
    intake = _full_intake()
    intake["calcium"] = 400
    intake["iron"] = 12.6
    intake["zinc"] = 1

    report = MicronutrientAnalyzer().report(intake, Gender.FEMALE)

    alerts = report.deficiency_alerts
    assert [alert.nutrient_id for alert in alerts] == ["zinc", "calcium"]
    assert alerts[0].severity is NutrientStatus.CRITICAL
    assert alerts[1].severity is NutrientStatus.WARNING
    assert alerts[1].suggested_foods == ("yogurt", "cheese", "fortified milk")


def test_limit_warning_reports_excess() -> None:
    intake = _full_intake()
    intake["sugar"] = 80

    report = MicronutrientAnalyzer().report(intake, Gender.FEMALE)

    assert len(report.limit_warnings) == 1
    warning = report.limit_warnings[0]
    assert warning.nutrient_id == "sugar"
    assert warning.percent == 160
    assert warning.excess == 30
    assert all(alert.nutrient_id != "sugar" for alert in report.deficiency_alerts)


def test_sub_scores_cap_each_nutrient_at_100() -> None:
    intake = _full_intake()
    intake["vitamin_c"] = 75 * 5
    intake["vitamin_d"] = 0

    report = MicronutrientAnalyzer().report(intake, Gender.FEMALE)

    vitamins = [
        n for n in DEFAULT_CATALOG.list_nutrients() if n.category.value == "vitamin"
    ]
    expected = round((len(vitamins) - 1) * 100 / len(vitamins))
    assert report.vitamin_score == expected
    assert report.top_deficiencies[0].nutrient_id == "vitamin_d"
    assert report.top_strengths[0].nutrient_id == "vitamin_c"


def test_gender_selects_target_variant() -> None:
    intake = {"iron": 8}
    analyzer = MicronutrientAnalyzer()

    male = _result(analyzer.evaluate(intake, Gender.MALE), "iron")
    female = _result(analyzer.evaluate(intake, Gender.FEMALE), "iron")

    assert male.percent == 100
    assert female.percent == 44.4
    assert female.status is NutrientStatus.WARNING


@pytest.mark.parametrize(
    ("score", "grade"),
    [(97, "A+"), (86, "A-"), (72, "B-"), (41, "D-"), (12, "F")],
)
def test_micronutrient_grade(score: int, grade: str) -> None:
    assert micronutrient_grade(score) == grade
