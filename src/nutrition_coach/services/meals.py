"""Meal nutrition totals and meal logging service."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol
from uuid import UUID, uuid4

from nutrition_coach.domain.meals import Adherence, MealItem, MealLog
from nutrition_coach.domain.nutrition import FoodRecord, NutritionNeeds
from nutrition_coach.domain.schemas import MealCreateInput, MealItemInput
from nutrition_coach.services.rounding import round_half_up

_GRAMS_PER_BASIS = 100

_logger = logging.getLogger(__name__)


class FoodNotFoundError(LookupError):
    """Raised when a logged food id cannot be resolved."""


class MealNotFoundError(LookupError):
    """Raised when a meal id does not exist."""


def calculate_meal_nutrition(items: Iterable[MealItem]) -> NutritionNeeds:
    """Sum per-100g food values scaled by eaten grams, rounding once at the end."""
    calories = 0.0
    protein_g = 0.0
    carbs_g = 0.0
    fat_g = 0.0
    fiber_g = 0.0
    for item in items:
        factor = item.quantity_g / _GRAMS_PER_BASIS
        calories += item.food.calories * factor
        protein_g += item.food.protein_g * factor
        carbs_g += item.food.carbs_g * factor
        fat_g += item.food.fat_g * factor
        fiber_g += (item.food.fiber_g or 0) * factor

    return NutritionNeeds(
        daily_calories=round_half_up(calories),
        protein_g=round_half_up(protein_g),
        carbs_g=round_half_up(carbs_g),
        fat_g=round_half_up(fat_g),
        fiber_g=round_half_up(fiber_g),
    )


def calculate_adherence(actual: float, target: float) -> int:
    """Percentage of target reached, capped at 100; no target counts as 100."""
    if target <= 0:
        return 100
    return min(round_half_up(actual / target * 100), 100)


def calculate_adherence_breakdown(
    totals: NutritionNeeds, targets: NutritionNeeds
) -> Adherence:
    return Adherence(
        calories=calculate_adherence(totals.daily_calories, targets.daily_calories),
        protein=calculate_adherence(totals.protein_g, targets.protein_g),
        carbs=calculate_adherence(totals.carbs_g, targets.carbs_g),
        fat=calculate_adherence(totals.fat_g, targets.fat_g),
    )


def sum_meal_totals(meals: Iterable[MealLog]) -> NutritionNeeds:
    """Add up the stored totals of several meals."""
    total = NutritionNeeds(daily_calories=0, protein_g=0, carbs_g=0, fat_g=0, fiber_g=0)
    for meal in meals:
        total = NutritionNeeds(
            daily_calories=total.daily_calories + meal.totals.daily_calories,
            protein_g=total.protein_g + meal.totals.protein_g,
            carbs_g=total.carbs_g + meal.totals.carbs_g,
            fat_g=total.fat_g + meal.totals.fat_g,
            fiber_g=(total.fiber_g or 0) + (meal.totals.fiber_g or 0),
        )
    return total


class FoodRepository(Protocol):
    """Lookup interface for food records."""

    def get_food(self, food_id: str) -> FoodRecord | None:
        """Return the per-100g food record, if present."""


class MealLogRepository(Protocol):
    """Persistence interface for meal logs keyed by user and day."""

    def add_meal(self, meal: MealLog) -> None:
        """Store a new meal log."""

    def get_meal(self, meal_id: UUID) -> MealLog | None:
        """Return a meal log by id."""

    def list_meals(self, user_id: UUID, day: date) -> list[MealLog]:
        """Return meal logs of a user for one day."""

    def list_meals_between(
        self, user_id: UUID, start: date, end: date
    ) -> list[MealLog]:
        """Return meal logs of a user with start <= day <= end."""

    def replace_meal(self, meal: MealLog) -> None:
        """Overwrite an existing meal log."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Remove a meal log."""


@dataclass
class MealLogService:
    """Service that resolves foods, computes totals and persists meal logs."""

    food_repository: FoodRepository
    repository: MealLogRepository
    debug: bool = False

    def compute_totals(self, foods: list[MealItemInput]) -> NutritionNeeds:
        """Compute totals for foods without persisting."""
        return calculate_meal_nutrition(self._resolve_items(foods))

    def log_meal(self, user_id: UUID, payload: MealCreateInput) -> MealLog:
        """Compute totals for the payload and persist the meal log."""
        items = self._resolve_items(payload.foods)
        meal = MealLog(
            id=uuid4(),
            user_id=user_id,
            day=payload.day,
            meal_type=payload.meal_type,
            items=items,
            totals=calculate_meal_nutrition(items),
            notes=payload.notes,
        )
        self.repository.add_meal(meal)
        if self.debug:
            _logger.info(
                "Meal logged: user_id=%s day=%s calories=%s",
                user_id,
                payload.day,
                meal.totals.daily_calories,
            )
        return meal

    def update_meal(
        self,
        meal_id: UUID,
        foods: list[MealItemInput] | None = None,
        notes: str | None = None,
    ) -> MealLog:
        """Replace the foods and/or notes of a meal, recomputing totals."""
        meal = self.repository.get_meal(meal_id)
        if meal is None:
            raise MealNotFoundError(f"Meal not found: {meal_id}")

        if foods is not None:
            items = self._resolve_items(foods)
            meal = replace(meal, items=items, totals=calculate_meal_nutrition(items))
        if notes is not None:
            meal = replace(meal, notes=notes)

        self.repository.replace_meal(meal)
        return meal

    def delete_meal(self, meal_id: UUID) -> None:
        if self.repository.get_meal(meal_id) is None:
            raise MealNotFoundError(f"Meal not found: {meal_id}")
        self.repository.delete_meal(meal_id)

    def list_meals(self, user_id: UUID, day: date) -> list[MealLog]:
        return self.repository.list_meals(user_id, day)

    def list_meals_between(
        self, user_id: UUID, start: date, end: date
    ) -> list[MealLog]:
        """Return meals in the inclusive day range, newest day first."""
        if start > end:
            raise ValueError("start must not be after end")
        meals = self.repository.list_meals_between(user_id, start, end)
        return sorted(meals, key=lambda meal: meal.day, reverse=True)

    def get_day_totals(self, user_id: UUID, day: date) -> NutritionNeeds:
        """Return the summed totals of a user's meals for a day."""
        return sum_meal_totals(self.repository.list_meals(user_id, day))

    def _resolve_items(self, foods: list[MealItemInput]) -> tuple[MealItem, ...]:
        items = []
        for entry in foods:
            food = self.food_repository.get_food(entry.food_id)
            if food is None:
                raise FoodNotFoundError(f"Food not found: {entry.food_id}")
            items.append(MealItem(quantity_g=entry.quantity_g, food=food))
        return tuple(items)
