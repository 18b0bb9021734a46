"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from uuid import UUID

from nutrition_coach.domain.nutrition import FoodRecord, NutritionNeeds


class MealType(StrEnum):
    """Slot of the day a meal belongs to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    PRE_WORKOUT = "pre_workout"
    POST_WORKOUT = "post_workout"


@dataclass(frozen=True)
class MealItem:
    """A logged quantity of a food."""

    quantity_g: float
    food: FoodRecord


@dataclass(frozen=True)
class MealLog:
    """Persisted meal with its computed totals."""

    id: UUID
    user_id: UUID
    day: date
    meal_type: MealType
    items: tuple[MealItem, ...]
    totals: NutritionNeeds
    notes: str | None = None


@dataclass(frozen=True)
class Adherence:
    """Per-macro adherence percentages, each capped at 100."""

    calories: int
    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class DailySummary:
    """Meals logged on a day with totals against the user's targets."""

    day: date
    meals: list[MealLog]
    totals: NutritionNeeds
    targets: NutritionNeeds | None
    adherence: Adherence | None

    @property
    def meal_count(self) -> int:
        return len(self.meals)
