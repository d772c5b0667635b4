"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

import pytest

from nutrition_insights.config import Settings
from nutrition_insights.containers import AppContainer, build_insights_service
from nutrition_insights.domain.food_log import FoodLogEntry, MealSlot
from nutrition_insights.domain.profile import Gender, UserProfile
from nutrition_insights.services.catalog import DEFAULT_CATALOG
from nutrition_insights.services.food_logs import FoodLogRepository, FoodLogService
from nutrition_insights.services.profiles import ProfileRepository, ProfileService

DAY = datetime(2024, 5, 14, tzinfo=UTC)


def make_entry(  # noqa: PLR0913
    name: str,
    *,
    calories: float = 100,
    protein: float = 5,
    carbs: float = 10,
    fat: float = 3,
    hour: int = 8,
    minute: int = 0,
    slot: MealSlot = MealSlot.BREAKFAST,
    fiber: float | None = None,
    nutrients: dict[str, float] | None = None,
    day: datetime = DAY,
) -> FoodLogEntry:
    """Build a food log entry at a clock time on the test day."""
    return FoodLogEntry(
        name=name,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        timestamp=day.replace(hour=hour, minute=minute),
        meal_slot=slot,
        fiber=fiber,
        explicit_nutrients=nutrients or {},
    )


def balanced_day() -> list[FoodLogEntry]:
    """Three meals close to a 2000 kcal / 120 g protein target."""
    return [
        make_entry(
            "oatmeal with banana",
            calories=500,
            protein=30,
            carbs=65,
            fat=14,
            hour=8,
            slot=MealSlot.BREAKFAST,
        ),
        make_entry(
            "chicken salad",
            calories=700,
            protein=45,
            carbs=80,
            fat=22,
            hour=13,
            slot=MealSlot.LUNCH,
        ),
        make_entry(
            "salmon with rice",
            calories=800,
            protein=45,
            carbs=80,
            fat=29,
            hour=19,
            minute=30,
            slot=MealSlot.DINNER,
        ),
    ]


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(
        gender=Gender.FEMALE,
        calorie_target=2000,
        protein_target=120,
        carbs_target=225,
        fat_target=65,
    )


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    entries: list[FoodLogEntry] = field(default_factory=list)
    calls: list[tuple[UUID, datetime, datetime]] = field(default_factory=list)

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        self.calls.append((user_id, start, end))
        return sorted(
            (entry for entry in self.entries if start <= entry.timestamp < end),
            key=lambda entry: entry.timestamp,
        )


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)
    timezones: dict[UUID, str] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        return self.profiles.get(user_id)

    def get_timezone(self, user_id: UUID) -> str | None:
        return self.timezones.get(user_id)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="eyJhbGciOiJIUzI1NiJ9.eyJyb2xlIjoic2VydmljZSJ9.c2ln",
        admin_token="admin-token",
    )


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def container(
    settings: Settings,
    food_log_repository: InMemoryFoodLogRepository,
    profile_repository: InMemoryProfileRepository,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog=DEFAULT_CATALOG,
        insights_service=build_insights_service(settings),
        food_log_service=FoodLogService(food_log_repository),
        profile_service=ProfileService(
            repository=profile_repository,
            default_profile=settings.default_profile(),
            default_timezone=settings.default_timezone,
        ),
        close_resources=close_resources,
    )
