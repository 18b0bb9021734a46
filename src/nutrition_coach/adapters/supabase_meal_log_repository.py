"""Supabase repository for meal logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from nutrition_coach.adapters.supabase_food_repository import parse_food_row
from nutrition_coach.domain.meals import MealItem, MealLog, MealType
from nutrition_coach.domain.nutrition import NutritionNeeds
from nutrition_coach.services.meals import MealLogRepository

_COLUMNS = (
    "id, user_id, day, meal_type, notes, items, total_calories, "
    "total_protein_g, total_carbs_g, total_fat_g, total_fiber_g"
)


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase implementation for meal logs; items are stored as a snapshot."""

    client: Client

    def add_meal(self, meal: MealLog) -> None:
        """Insert a meal log row."""
        response = self.client.table("meal_logs").insert(_to_row(meal)).execute()
        if not response.data:
            raise RuntimeError("Failed to create meal log")

    def get_meal(self, meal_id: UUID) -> MealLog | None:
        """Return a meal log by id."""
        response = (
            self.client.table("meal_logs")
            .select(_COLUMNS)
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_meals(self, user_id: UUID, day: date) -> list[MealLog]:
        """Return a user's meal logs for a day."""
        response = (
            self.client.table("meal_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("day", day.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_meals_between(
        self, user_id: UUID, start: date, end: date
    ) -> list[MealLog]:
        """Return a user's meal logs between two days inclusive."""
        response = (
            self.client.table("meal_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("day", start.isoformat())
            .lte("day", end.isoformat())
            .order("day", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def replace_meal(self, meal: MealLog) -> None:
        """Overwrite items, totals and notes of a meal log."""
        row = _to_row(meal)
        for key in ("id", "user_id", "day"):
            row.pop(key)
        self.client.table("meal_logs").update(row).eq("id", str(meal.id)).execute()

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal log row."""
        self.client.table("meal_logs").delete().eq("id", str(meal_id)).execute()


def _to_row(meal: MealLog) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "user_id": str(meal.user_id),
        "day": meal.day.isoformat(),
        "meal_type": str(meal.meal_type),
        "notes": meal.notes,
        "items": [
            {
                "quantity_g": item.quantity_g,
                "food": {
                    "id": item.food.id,
                    "name": item.food.name,
                    "calories": item.food.calories,
                    "protein_g": item.food.protein_g,
                    "carbs_g": item.food.carbs_g,
                    "fat_g": item.food.fat_g,
                    "fiber_g": item.food.fiber_g,
                },
            }
            for item in meal.items
        ],
        "total_calories": meal.totals.daily_calories,
        "total_protein_g": meal.totals.protein_g,
        "total_carbs_g": meal.totals.carbs_g,
        "total_fat_g": meal.totals.fat_g,
        "total_fiber_g": meal.totals.fiber_g,
    }


def _parse_row(row: dict[str, object]) -> MealLog:
    items = tuple(
        MealItem(
            quantity_g=float(item["quantity_g"]),
            food=parse_food_row(item["food"]),
        )
        for item in row.get("items") or []
    )
    fiber = row.get("total_fiber_g")
    return MealLog(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        day=date.fromisoformat(row["day"]),
        meal_type=MealType(row["meal_type"]),
        items=items,
        totals=NutritionNeeds(
            daily_calories=int(row.get("total_calories", 0)),
            protein_g=int(row.get("total_protein_g", 0)),
            carbs_g=int(row.get("total_carbs_g", 0)),
            fat_g=int(row.get("total_fat_g", 0)),
            fiber_g=int(fiber) if fiber is not None else None,
        ),
        notes=row.get("notes"),
    )
