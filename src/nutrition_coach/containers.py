"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrition_coach.adapters.supabase_food_repository import SupabaseFoodRepository
from nutrition_coach.adapters.supabase_meal_log_repository import (
    SupabaseMealLogRepository,
)
from nutrition_coach.adapters.supabase_metrics_repository import (
    SupabaseMetricsRepository,
)
from nutrition_coach.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from nutrition_coach.app_logging import configure_logging
from nutrition_coach.config import Settings
from nutrition_coach.services.dashboard import DashboardService
from nutrition_coach.services.meals import MealLogService
from nutrition_coach.services.metrics import MetricsService
from nutrition_coach.services.profiles import ProfileService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    meal_log_service: MealLogService
    dashboard_service: DashboardService
    metrics_service: MetricsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level, debug=resolved_settings.debug)
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_service = ProfileService(
        SupabaseProfileRepository(supabase_client),
        default_age=resolved_settings.default_age,
    )
    meal_log_service = MealLogService(
        food_repository=SupabaseFoodRepository(supabase_client),
        repository=SupabaseMealLogRepository(supabase_client),
        debug=resolved_settings.debug,
    )
    dashboard_service = DashboardService(
        profile_service=profile_service,
        meal_log_service=meal_log_service,
    )
    metrics_service = MetricsService(
        repository=SupabaseMetricsRepository(supabase_client),
        profile_service=profile_service,
    )
    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        meal_log_service=meal_log_service,
        dashboard_service=dashboard_service,
        metrics_service=metrics_service,
    )
