"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrition_insights.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from nutrition_insights.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from nutrition_insights.config import Settings
from nutrition_insights.services.catalog import DEFAULT_CATALOG, NutrientCatalog
from nutrition_insights.services.food_logs import FoodLogService
from nutrition_insights.services.insights import InsightsService
from nutrition_insights.services.profiles import ProfileService
from nutrition_insights.services.tips import TipGenerator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: NutrientCatalog
    insights_service: InsightsService
    food_log_service: FoodLogService
    profile_service: ProfileService
    close_resources: Callable[[], Awaitable[None]]


def build_insights_service(settings: Settings) -> InsightsService:
    """Create the analysis orchestrator from settings."""
    return InsightsService(
        catalog=DEFAULT_CATALOG,
        tip_generator=TipGenerator(max_tips=settings.max_tips),
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    default_profile = resolved_settings.default_profile()
    food_log_repository = SupabaseFoodLogRepository(supabase_client)
    profile_repository = SupabaseProfileRepository(
        supabase_client, default_gender=default_profile.gender
    )
    profile_service = ProfileService(
        repository=profile_repository,
        default_profile=default_profile,
        default_timezone=resolved_settings.default_timezone,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        catalog=DEFAULT_CATALOG,
        insights_service=build_insights_service(resolved_settings),
        food_log_service=FoodLogService(food_log_repository),
        profile_service=profile_service,
        close_resources=close_resources,
    )
