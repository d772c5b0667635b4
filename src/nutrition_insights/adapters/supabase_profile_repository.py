"""Supabase repository for user profiles and settings."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrition_insights.domain.food_log import safe_amount
from nutrition_insights.domain.profile import Gender, UserProfile
from nutrition_insights.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile lookups."""

    client: Client
    default_gender: Gender = Gender.FEMALE

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile for a user."""
        response = (
            self.client.table("user_profiles")
            .select("gender, calorie_target, protein_target, carbs_target, fat_target")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserProfile(
            gender=Gender.parse(row.get("gender"), self.default_gender),
            calorie_target=safe_amount(row.get("calorie_target")),
            protein_target=safe_amount(row.get("protein_target")),
            carbs_target=_optional_amount(row.get("carbs_target")),
            fat_target=_optional_amount(row.get("fat_target")),
        )

    def get_timezone(self, user_id: UUID) -> str | None:
        """Return the stored timezone for a user."""
        response = (
            self.client.table("user_settings")
            .select("timezone")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("timezone")


def _optional_amount(value: object) -> float | None:
    if value is None:
        return None
    return safe_amount(value)
