"""User profile lookup with configured fallbacks."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutrition_insights.domain.profile import UserProfile


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile for a user, if any."""

    def get_timezone(self, user_id: UUID) -> str | None:
        """Return the user's timezone if set."""


@dataclass
class ProfileService:
    """Service for profile and timezone lookups."""

    repository: ProfileRepository
    default_profile: UserProfile
    default_timezone: str = "UTC"

    def get_profile(self, user_id: UUID) -> UserProfile:
        """Return the user's profile or the configured default."""
        return self.repository.get_profile(user_id) or self.default_profile

    def get_timezone(self, user_id: UUID) -> str:
        """Return the user timezone or the default if unset."""
        return self.repository.get_timezone(user_id) or self.default_timezone
