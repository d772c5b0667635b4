"""Daily micronutrient intake estimation from logged foods."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from nutrition_insights.domain.food_log import FoodLogEntry, safe_amount
from nutrition_insights.domain.nutrients import IntakeEstimate, NutrientDefinition
from nutrition_insights.services.catalog import DEFAULT_CATALOG, NutrientCatalog

_logger = logging.getLogger(__name__)

_FIBER_ID = "fiber"


@dataclass(frozen=True)
class IntakeEstimator:
    """Sum explicit nutrient values, falling back to keyword heuristics.

    Explicit values on an entry are the source of truth for that entry and
    nutrient. Only when an entry carries no value for a nutrient is its name
    matched against the nutrient's keywords; each matching entry adds the
    nutrient's fixed serving contribution, regardless of the entry's calories.
    """

    catalog: NutrientCatalog = DEFAULT_CATALOG

    def estimate(self, entries: Sequence[FoodLogEntry]) -> dict[str, float]:
        """Return estimated intake per nutrient id (zero map when empty)."""
        return self.estimate_with_coverage(entries).intake

    def estimate_with_coverage(self, entries: Sequence[FoodLogEntry]) -> IntakeEstimate:
        """Return estimated intake with counts of contributing entries."""
        nutrients = self.catalog.list_nutrients()
        known_ids = self.catalog.ids()
        totals: dict[str, float] = {nutrient.id: 0.0 for nutrient in nutrients}
        matched_entries = 0
        used_heuristic = False

        for entry in entries:
            explicit = _explicit_values(entry, known_ids)
            name = (entry.name or "").lower()
            contributed = False
            for nutrient in nutrients:
                if nutrient.id in explicit:
                    totals[nutrient.id] += explicit[nutrient.id]
                    contributed = True
                elif _matches(name, nutrient):
                    totals[nutrient.id] += nutrient.serving_contribution
                    contributed = True
                    used_heuristic = True
            if contributed:
                matched_entries += 1

        intake = {nutrient_id: round(value, 2) for nutrient_id, value in totals.items()}
        return IntakeEstimate(
            intake=intake,
            matched_entries=matched_entries,
            total_entries=len(entries),
            is_estimated=used_heuristic,
        )


def _matches(name: str, nutrient: NutrientDefinition) -> bool:
    if not name:
        return False
    return any(keyword in name for keyword in nutrient.keywords)


def _explicit_values(
    entry: FoodLogEntry, known_ids: frozenset[str]
) -> dict[str, float]:
    """Collect explicit values for known nutrients on an entry."""
    values: dict[str, float] = {}
    for nutrient_id, amount in (entry.explicit_nutrients or {}).items():
        if nutrient_id not in known_ids:
            _logger.debug(
                "Ignoring unknown nutrient id %s on entry %s", nutrient_id, entry.name
            )
            continue
        values[nutrient_id] = safe_amount(amount)
    if entry.fiber is not None and _FIBER_ID not in values:
        values[_FIBER_ID] = safe_amount(entry.fiber)
    return values
