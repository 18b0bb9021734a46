"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

import pytest

from nutrition_coach.config import Settings
from nutrition_coach.domain.meals import MealLog
from nutrition_coach.domain.metrics import DailyMetrics
from nutrition_coach.domain.nutrition import (
    ActivityLevel,
    FoodRecord,
    Gender,
    Goal,
    Profile,
    SportLevel,
    SportType,
)
from nutrition_coach.services.dashboard import DashboardService
from nutrition_coach.services.meals import (
    FoodRepository,
    MealLogRepository,
    MealLogService,
)
from nutrition_coach.services.metrics import MetricsRepository, MetricsService
from nutrition_coach.services.profiles import ProfileRepository, ProfileService


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, Profile] = field(default_factory=dict)
    goals: dict[UUID, Goal] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> Profile | None:
        return self.profiles.get(user_id)

    def save_profile(self, user_id: UUID, profile: Profile) -> None:
        self.profiles[user_id] = profile

    def get_goal(self, user_id: UUID) -> Goal | None:
        return self.goals.get(user_id)

    def save_goal(self, user_id: UUID, goal: Goal) -> None:
        self.goals[user_id] = goal


@dataclass
class InMemoryMealLogRepository(MealLogRepository):
    """In-memory meal log repository keyed by (user_id, day)."""

    meals: dict[tuple[UUID, date], list[MealLog]] = field(default_factory=dict)

    def add_meal(self, meal: MealLog) -> None:
        self.meals.setdefault((meal.user_id, meal.day), []).append(meal)

    def get_meal(self, meal_id: UUID) -> MealLog | None:
        for logs in self.meals.values():
            for meal in logs:
                if meal.id == meal_id:
                    return meal
        return None

    def list_meals(self, user_id: UUID, day: date) -> list[MealLog]:
        return list(self.meals.get((user_id, day), []))

    def list_meals_between(
        self, user_id: UUID, start: date, end: date
    ) -> list[MealLog]:
        return [
            meal
            for (owner, day), logs in self.meals.items()
            if owner == user_id and start <= day <= end
            for meal in logs
        ]

    def replace_meal(self, meal: MealLog) -> None:
        logs = self.meals[(meal.user_id, meal.day)]
        self.meals[(meal.user_id, meal.day)] = [
            meal if existing.id == meal.id else existing for existing in logs
        ]

    def delete_meal(self, meal_id: UUID) -> None:
        for key, logs in self.meals.items():
            self.meals[key] = [meal for meal in logs if meal.id != meal_id]


@dataclass
class InMemoryMetricsRepository(MetricsRepository):
    """In-memory daily metrics repository keyed by (user_id, day)."""

    metrics: dict[tuple[UUID, date], DailyMetrics] = field(default_factory=dict)

    def save_metrics(self, user_id: UUID, metrics: DailyMetrics) -> None:
        self.metrics[(user_id, metrics.day)] = metrics

    def get_metrics(self, user_id: UUID, day: date) -> DailyMetrics | None:
        return self.metrics.get((user_id, day))

    def list_metrics(self, user_id: UUID, start: date, end: date) -> list[DailyMetrics]:
        return [
            metrics
            for (owner, day), metrics in self.metrics.items()
            if owner == user_id and start <= day <= end
        ]


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository seeded with common foods."""

    foods: dict[str, FoodRecord] = field(
        default_factory=lambda: {
            "oats": FoodRecord(
                id="oats",
                name="Rolled oats",
                calories=367,
                protein_g=14,
                carbs_g=58,
                fat_g=7,
                fiber_g=10,
            ),
            "chicken": FoodRecord(
                id="chicken",
                name="Chicken breast",
                calories=165,
                protein_g=31,
                carbs_g=0,
                fat_g=3.6,
                fiber_g=0,
            ),
            "rice": FoodRecord(
                id="rice",
                name="Cooked white rice",
                calories=130,
                protein_g=2.7,
                carbs_g=28,
                fat_g=0.3,
                fiber_g=0.4,
            ),
            "banana": FoodRecord(
                id="banana",
                name="Banana",
                calories=89,
                protein_g=1.1,
                carbs_g=23,
                fat_g=0.3,
            ),
        }
    )

    def get_food(self, food_id: str) -> FoodRecord | None:
        return self.foods.get(food_id)


def make_profile(**overrides: object) -> Profile:
    values: dict[str, object] = {
        "height_cm": 175,
        "weight_kg": 75,
        "age": 30,
        "gender": Gender.MALE,
        "sport_type": SportType.WEIGHTLIFTING,
        "sport_level": SportLevel.INTERMEDIATE,
        "training_frequency": 4,
        "activity_level": ActivityLevel.MODERATE,
    }
    values.update(overrides)
    return Profile(**values)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def meal_log_repository() -> InMemoryMealLogRepository:
    return InMemoryMealLogRepository()


@pytest.fixture
def profile_service(profile_repository: InMemoryProfileRepository) -> ProfileService:
    return ProfileService(profile_repository)


@pytest.fixture
def meal_log_service(meal_log_repository: InMemoryMealLogRepository) -> MealLogService:
    return MealLogService(
        food_repository=InMemoryFoodRepository(),
        repository=meal_log_repository,
    )


@pytest.fixture
def metrics_repository() -> InMemoryMetricsRepository:
    return InMemoryMetricsRepository()


@pytest.fixture
def metrics_service(
    metrics_repository: InMemoryMetricsRepository, profile_service: ProfileService
) -> MetricsService:
    return MetricsService(
        repository=metrics_repository,
        profile_service=profile_service,
    )


@pytest.fixture
def dashboard_service(
    profile_service: ProfileService, meal_log_service: MealLogService
) -> DashboardService:
    return DashboardService(
        profile_service=profile_service,
        meal_log_service=meal_log_service,
    )


@pytest.fixture(autouse=True)
def _reset_app_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("nutrition_coach")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
