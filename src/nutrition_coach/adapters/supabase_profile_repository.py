"""Supabase-backed profile and goal repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrition_coach.domain.nutrition import Gender, Goal, Profile, SportLevel
from nutrition_coach.services.profiles import ProfileRepository

_PROFILE_COLUMNS = (
    "height_cm, weight_kg, age, gender, sport_type, sport_level, "
    "training_frequency, activity_level, body_fat_percent, allergies, "
    "intolerances, medical_conditions, dietary_restrictions"
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile and goal persistence."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile row for a user, if present."""
        response = (
            self.client.table("profiles")
            .select(_PROFILE_COLUMNS)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def save_profile(self, user_id: UUID, profile: Profile) -> None:
        """Upsert the profile row for a user."""
        self.client.table("profiles").upsert(
            {
                "user_id": str(user_id),
                "height_cm": profile.height_cm,
                "weight_kg": profile.weight_kg,
                "age": profile.age,
                "gender": str(profile.gender),
                "sport_type": str(profile.sport_type),
                "sport_level": str(profile.sport_level),
                "training_frequency": profile.training_frequency,
                "activity_level": str(profile.activity_level),
                "body_fat_percent": profile.body_fat_percent,
                "allergies": list(profile.allergies),
                "intolerances": list(profile.intolerances),
                "medical_conditions": list(profile.medical_conditions),
                "dietary_restrictions": list(profile.dietary_restrictions),
            },
            on_conflict="user_id",
        ).execute()

    def get_goal(self, user_id: UUID) -> Goal | None:
        """Return the goal row for a user, if present."""
        response = (
            self.client.table("goals")
            .select("type, weekly_rate, target_weight_kg")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return Goal(
            type=str(row["type"]),
            weekly_rate=_optional_float(row.get("weekly_rate")),
            target_weight_kg=_optional_float(row.get("target_weight_kg")),
        )

    def save_goal(self, user_id: UUID, goal: Goal) -> None:
        """Upsert the goal row for a user."""
        self.client.table("goals").upsert(
            {
                "user_id": str(user_id),
                "type": str(goal.type),
                "weekly_rate": goal.weekly_rate,
                "target_weight_kg": goal.target_weight_kg,
            },
            on_conflict="user_id",
        ).execute()


def _parse_profile(row: dict[str, object]) -> Profile:
    return Profile(
        height_cm=float(row["height_cm"]),
        weight_kg=float(row["weight_kg"]),
        age=int(row["age"]),
        gender=Gender(row["gender"]),
        sport_type=str(row.get("sport_type") or "other"),
        sport_level=SportLevel(row.get("sport_level") or SportLevel.BEGINNER),
        training_frequency=int(row.get("training_frequency") or 0),
        activity_level=str(row.get("activity_level") or "moderate"),
        body_fat_percent=_optional_float(row.get("body_fat_percent")),
        allergies=tuple(row.get("allergies") or ()),
        intolerances=tuple(row.get("intolerances") or ()),
        medical_conditions=tuple(row.get("medical_conditions") or ()),
        dietary_restrictions=tuple(row.get("dietary_restrictions") or ()),
    )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
