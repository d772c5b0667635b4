"""Tests for food log day and range retrieval."""

from dataclasses import dataclass, replace
from datetime import UTC, date, datetime, timedelta
from uuid import uuid4

from nutrition_insights.domain.food_log import FoodLogEntry
from nutrition_insights.services.food_logs import FoodLogService
from tests.conftest import DAY, InMemoryFoodLogRepository, make_entry


def test_get_day_uses_local_day_bounds(
    food_log_repository: InMemoryFoodLogRepository,
) -> None:
    user_id = uuid4()
    food_log_repository.entries = [
        make_entry("late snack", hour=2),
        make_entry("breakfast", hour=12),
        make_entry("dinner", hour=23),
    ]
    service = FoodLogService(food_log_repository)

    entries = service.get_day(user_id, date(2024, 5, 14), "America/New_York")

    assert [entry.name for entry in entries] == ["breakfast", "dinner"]
    assert entries[0].timestamp.hour == 8
    assert str(entries[0].timestamp.tzinfo) == "America/New_York"
    _, start, end = food_log_repository.calls[0]
    assert start == datetime(2024, 5, 14, 4, tzinfo=UTC)
    assert end == datetime(2024, 5, 15, 4, tzinfo=UTC)


def test_get_day_returns_immutable_snapshot(
    food_log_repository: InMemoryFoodLogRepository,
) -> None:
    food_log_repository.entries = [make_entry("toast")]
    service = FoodLogService(food_log_repository)

    entries = service.get_day(uuid4(), DAY.date(), "UTC")

    assert isinstance(entries, tuple)
    assert entries[0].name == "toast"


@dataclass
class RawFoodLogRepository:
    entries: list[FoodLogEntry]

    def list_entries(self, *_args: object) -> list[FoodLogEntry]:
        return self.entries


def test_naive_timestamps_are_read_as_utc() -> None:
    entry = make_entry("toast", hour=9)
    naive = replace(entry, timestamp=entry.timestamp.replace(tzinfo=None))
    service = FoodLogService(RawFoodLogRepository([naive]))

    entries = service.get_range(uuid4(), DAY.date(), 1, "Europe/Berlin")

    (localized,) = entries[DAY.date()]
    assert localized.timestamp.hour == 11


def test_get_range_includes_empty_days(
    food_log_repository: InMemoryFoodLogRepository,
) -> None:
    food_log_repository.entries = [
        make_entry("oats", day=DAY - timedelta(days=2)),
        make_entry("soup", hour=13, day=DAY),
        make_entry("too old", day=DAY - timedelta(days=5)),
    ]
    service = FoodLogService(food_log_repository)

    entries_by_day = service.get_range(uuid4(), DAY.date(), 3, "UTC")

    assert list(entries_by_day) == [
        date(2024, 5, 12),
        date(2024, 5, 13),
        date(2024, 5, 14),
    ]
    assert [e.name for e in entries_by_day[date(2024, 5, 12)]] == ["oats"]
    assert entries_by_day[date(2024, 5, 13)] == ()
    assert [e.name for e in entries_by_day[date(2024, 5, 14)]] == ["soup"]
    assert len(food_log_repository.calls) == 1


def test_get_range_with_zero_days_returns_end_day(
    food_log_repository: InMemoryFoodLogRepository,
) -> None:
    service = FoodLogService(food_log_repository)

    entries_by_day = service.get_range(uuid4(), DAY.date(), 0, "UTC")

    assert list(entries_by_day) == [DAY.date()]
