"""Profile and goal management with plan computation."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from nutrition_coach.domain.nutrition import Goal, PlanAssessment, Profile
from nutrition_coach.domain.schemas import GoalInput, ProfileInput
from nutrition_coach.services.needs import compute_nutrition_needs
from nutrition_coach.services.validation import (
    validate_nutrition_plan,
    weekly_weight_change_for_goal,
)

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for profiles and goals keyed by user id."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the stored profile, if any."""

    def save_profile(self, user_id: UUID, profile: Profile) -> None:
        """Insert or replace the user's profile."""

    def get_goal(self, user_id: UUID) -> Goal | None:
        """Return the stored goal, if any."""

    def save_goal(self, user_id: UUID, goal: Goal) -> None:
        """Insert or replace the user's goal."""


def assess_plan(profile: Profile, goal: Goal) -> PlanAssessment:
    """Compute the plan for a profile and goal and validate it."""
    plan = compute_nutrition_needs(profile, goal.type, goal.weekly_rate)
    validation = validate_nutrition_plan(
        daily_calories=plan.daily_calories,
        protein_g=plan.protein_g,
        weight_kg=profile.weight_kg,
        weekly_weight_change=weekly_weight_change_for_goal(goal),
    )
    return PlanAssessment(plan=plan, validation=validation)


@dataclass
class ProfileService:
    """Application service for profile, goal and daily targets."""

    repository: ProfileRepository
    default_age: int = 30

    def update_profile(
        self, user_id: UUID, payload: ProfileInput, today: date | None = None
    ) -> Profile:
        """Persist a validated profile payload and return the stored profile."""
        resolved_today = today or datetime.now(tz=UTC).date()
        profile = payload.to_profile(resolved_today, default_age=self.default_age)
        self.repository.save_profile(user_id, profile)
        return profile

    def get_profile(self, user_id: UUID) -> Profile | None:
        return self.repository.get_profile(user_id)

    def set_goal(self, user_id: UUID, payload: GoalInput) -> Goal:
        goal = payload.to_goal()
        self.repository.save_goal(user_id, goal)
        return goal

    def get_goal(self, user_id: UUID) -> Goal | None:
        return self.repository.get_goal(user_id)

    def is_onboarding_complete(self, user_id: UUID) -> bool:
        """Return True when both profile and goal are stored."""
        return (
            self.repository.get_profile(user_id) is not None
            and self.repository.get_goal(user_id) is not None
        )

    def get_plan(self, user_id: UUID) -> PlanAssessment | None:
        """Return the validated plan, or None until onboarding is complete."""
        profile = self.repository.get_profile(user_id)
        goal = self.repository.get_goal(user_id)
        if profile is None or goal is None:
            return None

        assessment = assess_plan(profile, goal)
        if not assessment.validation.valid:
            _logger.warning(
                "Nutrition plan warnings: user_id=%s calories=%s warnings=%s",
                user_id,
                assessment.plan.daily_calories,
                "; ".join(assessment.validation.warnings),
            )
        return assessment
