"""Domain models for the daily nutrition score."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryScore:
    """Points earned in one scoring category."""

    points: int
    max_points: int

    @property
    def ratio(self) -> float:
        """Share of the category budget earned, from 0 to 1."""
        if self.max_points <= 0:
            return 0.0
        return self.points / self.max_points


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-category points for a day."""

    calories: CategoryScore
    protein: CategoryScore
    macros: CategoryScore
    consistency: CategoryScore
    variety: CategoryScore

    def items(self) -> list[tuple[str, CategoryScore]]:
        """Return (category, score) pairs in a fixed order."""
        return [
            ("calories", self.calories),
            ("protein", self.protein),
            ("macros", self.macros),
            ("consistency", self.consistency),
            ("variety", self.variety),
        ]

    @property
    def total(self) -> int:
        """Points earned across all categories."""
        return sum(score.points for _, score in self.items())

    @property
    def max_total(self) -> int:
        """Points available across all categories."""
        return sum(score.max_points for _, score in self.items())


@dataclass(frozen=True)
class ScoreResult:
    """Overall score, grade and breakdown for a day."""

    total: int
    breakdown: ScoreBreakdown
    grade: str
    has_data: bool
