"""Daily dashboard combining logged meals with plan targets."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from nutrition_coach.domain.meals import DailySummary
from nutrition_coach.services.meals import (
    MealLogService,
    calculate_adherence_breakdown,
    sum_meal_totals,
)
from nutrition_coach.services.profiles import ProfileService


@dataclass
class DashboardService:
    """Service for the per-day progress view."""

    profile_service: ProfileService
    meal_log_service: MealLogService

    def get_daily_summary(self, user_id: UUID, day: date) -> DailySummary:
        """Return totals for the day and adherence against the user's plan.

        Targets and adherence are None until the profile and goal exist.
        """
        meals = self.meal_log_service.list_meals(user_id, day)
        totals = sum_meal_totals(meals)
        assessment = self.profile_service.get_plan(user_id)
        if assessment is None:
            return DailySummary(
                day=day, meals=meals, totals=totals, targets=None, adherence=None
            )

        targets = assessment.plan.needs
        return DailySummary(
            day=day,
            meals=meals,
            totals=totals,
            targets=targets,
            adherence=calculate_adherence_breakdown(totals, targets),
        )
