"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date
from uuid import UUID

from fastapi import FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder

from nutrition_insights.api.admin import router as admin_router
from nutrition_insights.api.models import DailyInsightsRequest
from nutrition_insights.app_logging import configure_logging
from nutrition_insights.containers import AppContainer

MAX_TREND_DAYS = 31


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/nutrients")
    async def list_nutrients(request: Request) -> dict[str, object]:
        """Return the tracked nutrient catalog."""
        state_container: AppContainer = request.app.state.container
        return {
            "nutrients": jsonable_encoder(state_container.catalog.list_nutrients())
        }

    @app.post("/insights/daily")
    async def daily_insights(
        payload: DailyInsightsRequest, request: Request
    ) -> dict[str, object]:
        """Analyze a snapshot of entries sent by the client."""
        state_container: AppContainer = request.app.state.container
        profile = (
            payload.profile.to_profile()
            if payload.profile
            else state_container.settings.default_profile()
        )
        entries = [entry.to_entry() for entry in payload.entries]
        insights = state_container.insights_service.analyze_day(entries, profile)
        return jsonable_encoder(insights)

    @app.get("/users/{user_id}/insights")
    async def user_insights(
        user_id: UUID, request: Request, day: date | None = None
    ) -> dict[str, object]:
        """Analyze a stored day of a user's food log."""
        state_container: AppContainer = request.app.state.container
        timezone = state_container.profile_service.get_timezone(user_id)
        profile = state_container.profile_service.get_profile(user_id)
        target_day = day or state_container.food_log_service.today(timezone)
        entries = state_container.food_log_service.get_day(
            user_id, target_day, timezone
        )
        insights = state_container.insights_service.analyze_day(entries, profile)
        logger.info(
            "Insights computed: user=%s day=%s entries=%s score=%s",
            user_id,
            target_day,
            len(entries),
            insights.score.total,
        )
        return {"day": target_day.isoformat(), **jsonable_encoder(insights)}

    @app.get("/users/{user_id}/trends")
    async def user_trends(
        user_id: UUID,
        request: Request,
        days: int | None = Query(default=None, ge=1, le=MAX_TREND_DAYS),
        end: date | None = None,
    ) -> dict[str, object]:
        """Return per-day scores and timing statistics for recent days."""
        state_container: AppContainer = request.app.state.container
        timezone = state_container.profile_service.get_timezone(user_id)
        profile = state_container.profile_service.get_profile(user_id)
        end_day = end or state_container.food_log_service.today(timezone)
        entries_by_day = state_container.food_log_service.get_range(
            user_id,
            end_day,
            days or state_container.settings.trend_days,
            timezone,
        )
        summary = state_container.insights_service.analyze_range(
            entries_by_day, profile
        )
        return jsonable_encoder(summary)

    return app
