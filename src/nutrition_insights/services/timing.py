"""Meal timing, eating window and calorie distribution analytics."""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime

from nutrition_insights.domain.food_log import (
    MEAL_SLOT_ORDER,
    FoodLogEntry,
    MealSlot,
    ensure_aware,
    round_half_up,
    safe_amount,
)
from nutrition_insights.domain.timing import (
    AverageMealTime,
    CalorieDistribution,
    DistributionComparison,
    EatingWindow,
    HourlyCalories,
    MealTiming,
    TimingAnalysis,
    TimingHistory,
)

IDEAL_DISTRIBUTION = CalorieDistribution(breakfast=25, lunch=35, dinner=30, snack=10)

_MAIN_SLOTS = (MealSlot.BREAKFAST, MealSlot.LUNCH, MealSlot.DINNER)
_SECONDS_PER_HOUR = 3600
_MINUTES_PER_HOUR = 60
_NOON = 12
_MIN_WINDOW_ENTRIES = 2
_MIN_REGULARITY_SAMPLES = 3
_REGULARITY_PENALTY_PER_HOUR = 33


@dataclass(frozen=True)
class TimingRules:
    """Clock and score thresholds for timing notes."""

    late_breakfast_hour: float = 10.0
    late_dinner_hour: float = 21.0
    wide_window_hours: float = 14.0
    narrow_window_hours: float = 8.0
    consistent_score: int = 80
    inconsistent_score: int = 50


@dataclass(frozen=True)
class TimingAnalyzer:
    """Derives timing data from a snapshot of entries."""

    ideal: CalorieDistribution = IDEAL_DISTRIBUTION
    rules: TimingRules = field(default_factory=TimingRules)

    def analyze(self, entries: Sequence[FoodLogEntry]) -> TimingAnalysis:
        """Return per-slot timing, eating window and distribution."""
        distribution = calorie_distribution(entries)
        return TimingAnalysis(
            meal_timing=meal_timing(entries),
            eating_window=eating_window(entries),
            distribution=distribution,
            comparison=self.compare(distribution),
        )

    def compare(self, actual: CalorieDistribution) -> DistributionComparison:
        """Compare an actual distribution against the ideal template."""
        difference = {
            slot.value: actual.get(slot) - self.ideal.get(slot)
            for slot in MEAL_SLOT_ORDER
        }
        return DistributionComparison(
            actual=actual, ideal=self.ideal, difference=difference
        )

    def timing_notes(self, analysis: TimingAnalysis) -> list[str]:
        """Return short observations about meal timing for the day."""
        notes: list[str] = []
        firsts = {
            timing.meal_slot: timing.first_food_time for timing in analysis.meal_timing
        }

        breakfast = firsts.get(MealSlot.BREAKFAST)
        if breakfast and _clock_hours(breakfast) > self.rules.late_breakfast_hour:
            notes.append(
                "Your breakfast was late today. Earlier meals can help steady energy."
            )
        dinner = firsts.get(MealSlot.DINNER)
        if dinner and _clock_hours(dinner) >= self.rules.late_dinner_hour:
            notes.append(
                "Late dinner detected. Try eating before 8 PM for better sleep."
            )

        window = analysis.eating_window
        if window is not None:
            hours = window.duration_hours
            if hours > self.rules.wide_window_hours:
                notes.append(
                    f"Your eating window was {round_half_up(hours)}h. "
                    "Consider narrowing it for longer overnight fasting."
                )
            elif hours < self.rules.narrow_window_hours:
                notes.append(
                    f"Compact eating window of {round_half_up(hours)}h today. "
                    "Nice fasting discipline."
                )
        return notes

    def summarize_history(
        self, entries_by_day: Mapping[date, Sequence[FoodLogEntry]]
    ) -> TimingHistory:
        """Summarize meal times and regularity across several days."""
        samples: dict[MealSlot, list[float]] = {slot: [] for slot in MEAL_SLOT_ORDER}
        windows: list[float] = []
        for day in sorted(entries_by_day):
            entries = entries_by_day[day]
            for timing in meal_timing(entries):
                samples[timing.meal_slot].append(_clock_hours(timing.first_food_time))
            window = eating_window(entries)
            if window is not None:
                windows.append(window.duration_hours)

        average_times = [
            _average_time(slot, hours)
            for slot, hours in samples.items()
            if hours
        ]
        average_window = round(sum(windows) / len(windows), 2) if windows else None
        deviation = _regularity_deviation(samples)
        regularity = _regularity_score(deviation)
        notes = self._history_notes(average_times, average_window)
        if deviation is not None:
            notes.extend(self._regularity_notes(regularity))
        return TimingHistory(
            average_times=average_times,
            regularity_score=regularity,
            average_window_hours=average_window,
            hourly_distribution=hourly_distribution(entries_by_day),
            notes=notes,
        )

    def _history_notes(
        self, average_times: Sequence[AverageMealTime], average_window: float | None
    ) -> list[str]:
        notes: list[str] = []
        averages = {item.meal_slot: item.average_hour for item in average_times}
        breakfast = averages.get(MealSlot.BREAKFAST)
        if breakfast is not None and breakfast > self.rules.late_breakfast_hour:
            notes.append(
                "Your breakfast tends to be late. Earlier meals can help steady energy."
            )
        dinner = averages.get(MealSlot.DINNER)
        if dinner is not None and dinner > self.rules.late_dinner_hour:
            notes.append(
                "Late dinners are a pattern. Try eating before 8 PM for better sleep."
            )
        if average_window is not None:
            if average_window > self.rules.wide_window_hours:
                notes.append(
                    f"Your eating window averages {round_half_up(average_window)}h. "
                    "Consider narrowing it for longer overnight fasting."
                )
            elif average_window < self.rules.narrow_window_hours:
                notes.append(
                    f"Your eating window averages {round_half_up(average_window)}h. "
                    "Great fasting discipline."
                )
        return notes

    def _regularity_notes(self, regularity: int) -> list[str]:
        if regularity >= self.rules.consistent_score:
            return ["Excellent meal timing consistency. Keep your meals on schedule."]
        if regularity < self.rules.inconsistent_score:
            return ["Try to eat at more regular times for steadier energy."]
        return []


def hourly_distribution(
    entries_by_day: Mapping[date, Sequence[FoodLogEntry]],
) -> list[HourlyCalories]:
    """Return calories per clock hour, averaged over the days with entries.

    Hours with no entries are left out.
    """
    totals: dict[int, float] = {}
    counts: dict[int, int] = {}
    for entries in entries_by_day.values():
        for entry in entries:
            hour = entry.timestamp.hour
            totals[hour] = totals.get(hour, 0.0) + max(safe_amount(entry.calories), 0.0)
            counts[hour] = counts.get(hour, 0) + 1
    days = sum(1 for entries in entries_by_day.values() if entries) or 1
    return [
        HourlyCalories(
            hour=hour,
            total_calories=round(totals[hour], 2),
            average_calories=round_half_up(totals[hour] / days),
            entries=counts[hour],
        )
        for hour in sorted(totals)
    ]


def meal_timing(entries: Sequence[FoodLogEntry]) -> list[MealTiming]:
    """Return first/last times and calories for each slot present."""
    first: dict[MealSlot, datetime] = {}
    last: dict[MealSlot, datetime] = {}
    calories: dict[MealSlot, float] = {}
    for entry in entries:
        slot = entry.meal_slot
        # strict comparisons keep the earliest-listed entry on ties
        if slot not in first or _instant(entry) < ensure_aware(first[slot]):
            first[slot] = entry.timestamp
        if slot not in last or _instant(entry) > ensure_aware(last[slot]):
            last[slot] = entry.timestamp
        calories[slot] = calories.get(slot, 0.0) + safe_amount(entry.calories)

    return [
        MealTiming(
            meal_slot=slot,
            first_food_time=first[slot],
            last_food_time=last[slot],
            total_calories=calories[slot],
        )
        for slot in MEAL_SLOT_ORDER
        if slot in first
    ]


def eating_window(entries: Sequence[FoodLogEntry]) -> EatingWindow | None:
    """Return the span between the first and last entry, if meaningful."""
    if len(entries) < _MIN_WINDOW_ENTRIES:
        return None
    start = min(entries, key=_instant).timestamp
    end = max(entries, key=_instant).timestamp
    seconds = (ensure_aware(end) - ensure_aware(start)).total_seconds()
    if seconds <= 0:
        return None
    return EatingWindow(
        start=start,
        end=end,
        duration_hours=round(seconds / _SECONDS_PER_HOUR, 2),
    )


def calorie_distribution(entries: Sequence[FoodLogEntry]) -> CalorieDistribution:
    """Return each slot's share of calories, rounded independently.

    The four values are not normalized, so they may add up to 99 or 101.
    """
    per_slot = {slot: 0.0 for slot in MEAL_SLOT_ORDER}
    for entry in entries:
        per_slot[entry.meal_slot] += max(safe_amount(entry.calories), 0.0)
    total = sum(per_slot.values())
    if total <= 0:
        return CalorieDistribution(breakfast=0, lunch=0, dinner=0, snack=0)

    shares = {
        slot.value: round_half_up(per_slot[slot] / total * 100)
        for slot in MEAL_SLOT_ORDER
    }
    return CalorieDistribution(**shares)


def _instant(entry: FoodLogEntry) -> datetime:
    return ensure_aware(entry.timestamp)


def _clock_hours(moment: datetime) -> float:
    return (
        moment.hour
        + moment.minute / _MINUTES_PER_HOUR
        + moment.second / _SECONDS_PER_HOUR
    )


def _average_time(slot: MealSlot, hours: list[float]) -> AverageMealTime:
    average = round(sum(hours) / len(hours), 1)
    hour = math.floor(average)
    minute = round_half_up((average - hour) * _MINUTES_PER_HOUR)
    if minute == _MINUTES_PER_HOUR:
        hour, minute = hour + 1, 0
    display_hour = hour % _NOON or _NOON
    suffix = "PM" if hour % 24 >= _NOON else "AM"
    return AverageMealTime(
        meal_slot=slot,
        average_hour=average,
        formatted=f"{display_hour}:{minute:02d} {suffix}",
        samples=len(hours),
    )


def _regularity_deviation(samples: Mapping[MealSlot, list[float]]) -> float | None:
    """Mean standard deviation, in hours, of main-meal clock times.

    Only slots with enough samples count; None when no slot qualifies.
    """
    deviations: list[float] = []
    for slot in _MAIN_SLOTS:
        hours = samples.get(slot, [])
        if len(hours) < _MIN_REGULARITY_SAMPLES:
            continue
        mean = sum(hours) / len(hours)
        variance = sum((value - mean) ** 2 for value in hours) / len(hours)
        deviations.append(math.sqrt(variance))
    if not deviations:
        return None
    return sum(deviations) / len(deviations)


def _regularity_score(deviation: float | None) -> int:
    """Score 0-100 from the mean deviation; zero without enough samples."""
    if deviation is None:
        return 0
    return max(0, round_half_up(100 - deviation * _REGULARITY_PENALTY_PER_HOUR))
