"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_insights.domain.profile import Gender, UserProfile

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    environment: str = _ENVIRONMENT
    default_timezone: str = "UTC"
    default_gender: str = "female"
    default_calorie_target: float = 2000
    default_protein_target: float = 120
    default_carbs_target: float | None = 225
    default_fat_target: float | None = 65
    max_tips: int = 3
    trend_days: int = 7

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def default_profile(self) -> UserProfile:
        """Return the profile used when a user has none stored."""
        return UserProfile(
            gender=Gender.parse(self.default_gender, Gender.FEMALE),
            calorie_target=self.default_calorie_target,
            protein_target=self.default_protein_target,
            carbs_target=self.default_carbs_target,
            fat_target=self.default_fat_target,
        )
