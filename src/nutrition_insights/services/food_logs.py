"""Read-only access to a user's food log, day by day."""

from dataclasses import dataclass, replace
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from nutrition_insights.domain.food_log import FoodLogEntry, ensure_aware


class FoodLogRepository(Protocol):
    """Persistence interface for logged foods."""

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return entries logged within a time range, oldest first."""


@dataclass
class FoodLogService:
    """Fetches immutable snapshots of a user's food log."""

    repository: FoodLogRepository

    def get_day(
        self, user_id: UUID, day: date, timezone_name: str
    ) -> tuple[FoodLogEntry, ...]:
        """Return the entries for a calendar day in the user's timezone."""
        tz = ZoneInfo(timezone_name)
        start, end = _day_bounds(day, tz)
        entries = self.repository.list_entries(
            user_id, start.astimezone(UTC), end.astimezone(UTC)
        )
        return tuple(
            _localize(entry, tz) for entry in entries if _local_day(entry, tz) == day
        )

    def get_range(
        self, user_id: UUID, end_day: date, days: int, timezone_name: str
    ) -> dict[date, tuple[FoodLogEntry, ...]]:
        """Return entries for ``days`` calendar days ending at ``end_day``."""
        tz = ZoneInfo(timezone_name)
        count = max(days, 1)
        first_day = end_day - timedelta(days=count - 1)
        start, _ = _day_bounds(first_day, tz)
        _, end = _day_bounds(end_day, tz)
        entries = self.repository.list_entries(
            user_id, start.astimezone(UTC), end.astimezone(UTC)
        )
        grouped: dict[date, list[FoodLogEntry]] = {
            first_day + timedelta(days=offset): [] for offset in range(count)
        }
        for entry in entries:
            local_day = _local_day(entry, tz)
            if local_day in grouped:
                grouped[local_day].append(_localize(entry, tz))
        return {day: tuple(items) for day, items in grouped.items()}

    def today(self, timezone_name: str) -> date:
        """Return today's date in the given timezone."""
        return datetime.now(tz=ZoneInfo(timezone_name)).date()


def _day_bounds(day: date, tz: ZoneInfo) -> tuple[datetime, datetime]:
    start = datetime.combine(day, time.min, tzinfo=tz)
    return start, start + timedelta(days=1)


def _local_day(entry: FoodLogEntry, tz: ZoneInfo) -> date:
    return ensure_aware(entry.timestamp).astimezone(tz).date()


def _localize(entry: FoodLogEntry, tz: ZoneInfo) -> FoodLogEntry:
    return replace(entry, timestamp=ensure_aware(entry.timestamp).astimezone(tz))
