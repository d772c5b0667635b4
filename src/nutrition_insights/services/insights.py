"""Orchestrates scoring, micronutrient and timing analysis for callers."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date

from nutrition_insights.domain.food_log import FoodLogEntry
from nutrition_insights.domain.insights import (
    DailyInsights,
    DailyTrendPoint,
    TrendSummary,
)
from nutrition_insights.domain.profile import ScoreTargets, UserProfile
from nutrition_insights.services.catalog import DEFAULT_CATALOG, NutrientCatalog
from nutrition_insights.services.intake import IntakeEstimator
from nutrition_insights.services.micronutrients import MicronutrientAnalyzer
from nutrition_insights.services.scoring import DayTotals, ScoreEngine
from nutrition_insights.services.timing import TimingAnalyzer
from nutrition_insights.services.tips import TipGenerator

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsightsService:
    """Single entry point that composes the analysis components.

    Every call works on the snapshot it is given and keeps no state between
    calls, so separate days can be analyzed in parallel.
    """

    catalog: NutrientCatalog = DEFAULT_CATALOG
    score_engine: ScoreEngine = field(default_factory=ScoreEngine)
    timing_analyzer: TimingAnalyzer = field(default_factory=TimingAnalyzer)
    tip_generator: TipGenerator = field(default_factory=TipGenerator)

    @property
    def estimator(self) -> IntakeEstimator:
        return IntakeEstimator(self.catalog)

    @property
    def micronutrient_analyzer(self) -> MicronutrientAnalyzer:
        return MicronutrientAnalyzer(self.catalog)

    def analyze_day(
        self, entries: Sequence[FoodLogEntry], profile: UserProfile
    ) -> DailyInsights:
        """Return the full insight result for one day's entries."""
        snapshot = tuple(entries)
        has_data = bool(snapshot)
        if not has_data:
            _logger.debug("No food logged; returning empty insights")

        targets = ScoreTargets.from_profile(profile)
        score = self.score_engine.score(snapshot, targets)
        coverage = self.estimator.estimate_with_coverage(snapshot)
        report = self.micronutrient_analyzer.report(
            coverage.intake, profile.gender, has_data=has_data
        )
        timing = self.timing_analyzer.analyze(snapshot)
        tips = self.tip_generator.generate(
            snapshot, targets, score, report.deficiency_alerts
        )
        return DailyInsights(
            has_data=has_data,
            score=score,
            nutrients=report.nutrients,
            deficiency_alerts=report.deficiency_alerts,
            limit_warnings=report.limit_warnings,
            vitamin_score=report.vitamin_score,
            mineral_score=report.mineral_score,
            micronutrient_score=report.overall_score,
            micronutrient_grade=report.grade,
            top_deficiencies=report.top_deficiencies if has_data else [],
            top_strengths=report.top_strengths if has_data else [],
            meal_timing=timing.meal_timing,
            eating_window=timing.eating_window,
            distribution=timing.distribution,
            distribution_comparison=timing.comparison,
            intake_coverage=coverage,
            tips=tips,
            timing_notes=self.timing_analyzer.timing_notes(timing) if has_data else [],
        )

    def analyze_range(
        self,
        entries_by_day: Mapping[date, Sequence[FoodLogEntry]],
        profile: UserProfile,
    ) -> TrendSummary:
        """Return per-day trend points and timing statistics for several days."""
        snapshots = {day: tuple(entries) for day, entries in entries_by_day.items()}
        points = [
            self._trend_point(day, snapshots[day], profile) for day in sorted(snapshots)
        ]
        scored = [point.score for point in points if point.has_data]
        average = round(sum(scored) / len(scored), 1) if scored else None
        return TrendSummary(
            days=points,
            average_score=average,
            timing=self.timing_analyzer.summarize_history(snapshots),
        )

    def _trend_point(
        self, day: date, entries: Sequence[FoodLogEntry], profile: UserProfile
    ) -> DailyTrendPoint:
        insights = self.analyze_day(entries, profile)
        totals = DayTotals.from_entries(entries)
        window = insights.eating_window
        return DailyTrendPoint(
            day=day,
            has_data=insights.has_data,
            score=insights.score.total,
            grade=insights.score.grade,
            calories=totals.calories,
            protein=totals.protein,
            eating_window_hours=window.duration_hours if window else None,
        )
