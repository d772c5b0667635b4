"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder

if TYPE_CHECKING:
    from nutrition_insights.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/users/{user_id}/entries", dependencies=[Depends(require_admin)])
async def user_entries(
    user_id: UUID, request: Request, day: date | None = None
) -> dict[str, object]:
    """Return the raw food log snapshot used for a user's day."""
    container: AppContainer = request.app.state.container
    timezone = container.profile_service.get_timezone(user_id)
    target_day = day or container.food_log_service.today(timezone)
    entries = container.food_log_service.get_day(user_id, target_day, timezone)
    return {
        "day": target_day.isoformat(),
        "timezone": timezone,
        "entries": jsonable_encoder(entries),
    }


@router.get("/users/{user_id}/profile", dependencies=[Depends(require_admin)])
async def user_profile(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the profile the analysis would use for a user."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get_profile(user_id)
    return {"profile": jsonable_encoder(profile)}
