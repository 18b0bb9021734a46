"""Daily metrics tracking: weigh-ins, weekly averages and hydration."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID

from nutrition_coach.domain.metrics import (
    DailyMetrics,
    HydrationStatus,
    WeeklySummary,
    WeightPoint,
    WeightProgress,
)
from nutrition_coach.domain.schemas import DailyMetricsInput
from nutrition_coach.services.meals import calculate_adherence
from nutrition_coach.services.needs import calculate_water_needs
from nutrition_coach.services.profiles import ProfileService
from nutrition_coach.services.rounding import round_half_up

MIN_PROGRESS_DAYS = 7
MAX_PROGRESS_DAYS = 365
WEEK_DAYS = 7


class MetricsRepository(Protocol):
    """Persistence interface for daily metrics keyed by user and day."""

    def save_metrics(self, user_id: UUID, metrics: DailyMetrics) -> None:
        """Insert or replace the metrics of a day."""

    def get_metrics(self, user_id: UUID, day: date) -> DailyMetrics | None:
        """Return the metrics of a day, if recorded."""

    def list_metrics(self, user_id: UUID, start: date, end: date) -> list[DailyMetrics]:
        """Return metrics with start <= day <= end, oldest first."""


@dataclass
class MetricsService:
    """Service for daily metrics and derived progress views."""

    repository: MetricsRepository
    profile_service: ProfileService

    def save_metrics(self, user_id: UUID, payload: DailyMetricsInput) -> DailyMetrics:
        metrics = payload.to_metrics()
        self.repository.save_metrics(user_id, metrics)
        return metrics

    def get_metrics(self, user_id: UUID, day: date) -> DailyMetrics | None:
        return self.repository.get_metrics(user_id, day)

    def get_range(self, user_id: UUID, start: date, end: date) -> list[DailyMetrics]:
        """Return recorded days in the inclusive range, oldest first."""
        return sorted(
            self.repository.list_metrics(user_id, start, end), key=lambda m: m.day
        )

    def get_weight_progress(
        self, user_id: UUID, days: int = 30, today: date | None = None
    ) -> WeightProgress:
        """Return weigh-ins of the last ``days`` days and the change over them."""
        if not MIN_PROGRESS_DAYS <= days <= MAX_PROGRESS_DAYS:
            raise ValueError(
                f"days must be between {MIN_PROGRESS_DAYS} and {MAX_PROGRESS_DAYS}"
            )
        end = today or _today()
        points = [
            WeightPoint(day=metrics.day, weight_kg=metrics.weight_kg)
            for metrics in self.get_range(user_id, end - timedelta(days=days), end)
            if metrics.weight_kg
        ]
        if not points:
            return WeightProgress(
                data=[],
                start_weight_kg=None,
                current_weight_kg=None,
                change_kg=0.0,
                change_percent=0.0,
            )

        start_weight = points[0].weight_kg
        current_weight = points[-1].weight_kg
        change = current_weight - start_weight
        return WeightProgress(
            data=points,
            start_weight_kg=start_weight,
            current_weight_kg=current_weight,
            change_kg=change,
            change_percent=change / start_weight * 100,
        )

    def get_weekly_summary(
        self, user_id: UUID, today: date | None = None
    ) -> WeeklySummary:
        """Summarize the last week; missing values count as zero."""
        end = today or _today()
        week = self.get_range(user_id, end - timedelta(days=WEEK_DAYS), end)
        tracked = len(week) or 1
        avg_energy = sum(m.energy_level or 0 for m in week) / tracked
        avg_sleep = sum(m.sleep_hours or 0 for m in week) / tracked
        avg_water = sum(m.water_ml or 0 for m in week) / tracked
        return WeeklySummary(
            days_tracked=len(week),
            training_days=sum(1 for m in week if m.training_completed),
            avg_energy=round_half_up(avg_energy * 10) / 10,
            avg_sleep_hours=round_half_up(avg_sleep * 10) / 10,
            avg_water_ml=round_half_up(avg_water),
        )

    def get_hydration(self, user_id: UUID, day: date) -> HydrationStatus | None:
        """Compare water drunk on a day to the profile's recommendation.

        Returns None until the user has a profile.
        """
        profile = self.profile_service.get_profile(user_id)
        if profile is None:
            return None
        metrics = self.repository.get_metrics(user_id, day)
        actual_ml = (metrics.water_ml or 0) if metrics else 0
        target_ml = calculate_water_needs(
            weight_kg=profile.weight_kg,
            activity_level=profile.activity_level,
            is_training_day=bool(metrics and metrics.training_completed),
        )
        return HydrationStatus(
            day=day,
            target_ml=target_ml,
            actual_ml=actual_ml,
            adherence=calculate_adherence(actual_ml, target_ml),
        )


def _today() -> date:
    return datetime.now(tz=UTC).date()
