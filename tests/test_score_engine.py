"""Tests for the daily score engine."""

import math

import pytest

from nutrition_insights.domain.food_log import MealSlot
from nutrition_insights.domain.profile import ScoreTargets
from nutrition_insights.services.scoring import (
    CategoryWeights,
    ScoreEngine,
    ScoreThresholds,
    grade_for_score,
)
from tests.conftest import balanced_day, make_entry

TARGETS = ScoreTargets(
    calorie_target=2000, protein_target=120, carbs_target=225, fat_target=65
)


def test_no_entries_returns_no_data() -> None:
    result = ScoreEngine().score([], TARGETS)

    assert result.has_data is False
    assert result.total == 0
    assert result.breakdown.max_total == 100
    assert all(score.points == 0 for _, score in result.breakdown.items())


def test_balanced_day_scores_high() -> None:
    result = ScoreEngine().score(balanced_day(), TARGETS)

    breakdown = result.breakdown
    assert result.has_data is True
    assert breakdown.calories.points == 25
    assert breakdown.protein.points == 25
    assert breakdown.macros.points == 20
    assert breakdown.consistency.points == 15
    assert breakdown.variety.points == 9
    assert result.total == 94
    assert result.grade == "A+"


def test_total_equals_sum_of_points_and_budget_is_100() -> None:
    entries = [
        make_entry("pizza", calories=1400, protein=50, carbs=160, fat=60, hour=20),
        make_entry("soda", calories=300, protein=0, carbs=75, fat=0, hour=21),
    ]

    result = ScoreEngine().score(entries, TARGETS)

    assert result.breakdown.max_total == 100
    assert result.total == sum(score.points for _, score in result.breakdown.items())
    assert 0 <= result.total <= 100


def test_calorie_points_drop_with_deviation_in_both_directions() -> None:
    engine = ScoreEngine()
    over = engine.score([make_entry("feast", calories=2500)], TARGETS)
    under = engine.score([make_entry("snack", calories=1500)], TARGETS)
    way_over = engine.score([make_entry("binge", calories=4500)], TARGETS)

    assert over.breakdown.calories.points == 19
    assert under.breakdown.calories.points == 19
    assert way_over.breakdown.calories.points == 0


def test_protein_is_capped_at_max() -> None:
    engine = ScoreEngine()
    half = engine.score([make_entry("shake", protein=60)], TARGETS)
    double = engine.score([make_entry("shake", protein=240)], TARGETS)

    assert half.breakdown.protein.points == 13
    assert double.breakdown.protein.points == 25


def test_single_slot_gets_minimum_consistency() -> None:
    entry = make_entry(
        "banana", calories=105, protein=1.3, carbs=27, fat=0.4, hour=8
    )

    result = ScoreEngine().score([entry], TARGETS)

    assert result.breakdown.consistency.points == 0


def test_consistency_scales_with_distinct_slots() -> None:
    engine = ScoreEngine()
    two_slots = [
        make_entry("eggs", slot=MealSlot.BREAKFAST),
        make_entry("soup", hour=13, slot=MealSlot.LUNCH),
    ]
    four_slots = [
        *two_slots,
        make_entry("steak", hour=19, slot=MealSlot.DINNER),
        make_entry("nuts", hour=16, slot=MealSlot.SNACK),
    ]

    assert engine.score(two_slots, TARGETS).breakdown.consistency.points == 8
    assert engine.score(four_slots, TARGETS).breakdown.consistency.points == 15


def test_variety_deduplicates_names_case_insensitively() -> None:
    entries = [
        make_entry("Apple"),
        make_entry("apple "),
        make_entry("APPLE"),
        make_entry("pear"),
    ]

    result = ScoreEngine().score(entries, TARGETS)

    assert result.breakdown.variety.points == 6


def test_variety_plateaus() -> None:
    entries = [make_entry(f"food {index}") for index in range(9)]

    result = ScoreEngine().score(entries, TARGETS)

    assert result.breakdown.variety.points == 15


def test_macro_balance_penalizes_skewed_split() -> None:
    all_fat = make_entry("butter", calories=700, protein=0, carbs=0, fat=78)

    result = ScoreEngine().score([all_fat], TARGETS)

    assert result.breakdown.macros.points == 0


def test_nan_fields_are_treated_as_zero() -> None:
    entry = make_entry("odd", calories=math.nan, protein=math.nan, carbs=10, fat=2)

    result = ScoreEngine().score([entry], TARGETS)

    assert result.breakdown.calories.points == 0
    assert result.breakdown.protein.points == 0
    assert not math.isnan(result.total)


def test_zero_targets_do_not_raise() -> None:
    targets = ScoreTargets(calorie_target=0, protein_target=0)

    result = ScoreEngine().score([make_entry("toast")], targets)

    assert result.breakdown.calories.points == 0
    assert result.breakdown.protein.points == 0


def test_weights_must_sum_to_100() -> None:
    with pytest.raises(ValueError, match="sum to 100"):
        CategoryWeights(calories=30)


def test_custom_weights_keep_budget() -> None:
    engine = ScoreEngine(
        weights=CategoryWeights(
            calories=30, protein=30, macros=20, consistency=10, variety=10
        )
    )

    result = engine.score(balanced_day(), TARGETS)

    assert result.breakdown.max_total == 100
    assert result.breakdown.calories.max_points == 30


@pytest.mark.parametrize(
    ("score", "grade"),
    [
        (100, "A+"),
        (90, "A+"),
        (89, "A"),
        (80, "A"),
        (70, "B"),
        (60, "C"),
        (50, "D"),
        (49, "F"),
        (0, "F"),
    ],
)
def test_grade_ladder(score: int, grade: str) -> None:
    assert grade_for_score(score) == grade


@pytest.mark.parametrize(
    "field_name",
    [
        "calorie_deviation_ceiling",
        "macro_deviation_ceiling",
        "consistency_slot_ceiling",
        "variety_plateau",
    ],
)
def test_thresholds_must_be_positive(field_name: str) -> None:
    with pytest.raises(ValueError, match=field_name):
        ScoreThresholds(**{field_name: 0})
